"""Shared fixtures: a fake Go distribution host."""

import asyncio
from typing import Dict, List, Optional

import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from rungo.releases import ClientSettings


def release_page(*labels: str) -> str:
    """Build a download page shaped like go.dev/dl.

    Every version block carries a collapsed and an expanded toggle button, so
    each label shows up twice in a row, as it does on the real page.
    """
    blocks = []
    for label in labels:
        blocks.append(f"""
<div class="toggle" id="{label}">
  <div class="collapsed">
    <h2 class="toggleButton" title="Click to show downloads for this version"><span>{label}</span> &#9656;</h2>
  </div>
  <div class="expanded">
    <h2 class="toggleButton" title="Click to hide downloads for this version"><span>{label}</span> &#9662;</h2>
    <table class="downloadtable"><tr><td class="filename"><a class="download" href="/dl/{label}.src.tar.gz">{label}.src.tar.gz</a></td></tr></table>
  </div>
</div>""")
    return f"""<!DOCTYPE html>
<html lang="en">
<head><title>All releases - The Go Programming Language</title></head>
<body>
<h2 id="stable">Stable versions</h2>
{''.join(blocks)}
</body>
</html>"""


class FakeDistribution:
    """In-memory stand-in for the distribution host."""

    def __init__(self):
        self.index_html = release_page("go1.21.0", "go1.20", "go1.15")
        self.index_status = 200
        self.files: Dict[str, bytes] = {}
        self.delay: float = 0
        # download behaviour: pause between chunks, or hang up after N bytes
        self.stream_chunk: int = 1024
        self.stream_interval: float = 0
        self.truncate_after: Optional[int] = None
        self.requests: List[str] = []
        self.server: Optional[TestServer] = None

    @property
    def base_url(self) -> str:
        return str(self.server.make_url(""))

    def settings(self, **overrides) -> ClientSettings:
        return ClientSettings(base_url=self.base_url, **overrides)

    async def index(self, request: web.Request) -> web.Response:
        self.requests.append(request.path)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.index_status != 200:
            return web.Response(status=self.index_status, text="unavailable")
        return web.Response(text=self.index_html, content_type="text/html")

    async def download(self, request: web.Request) -> web.Response:
        self.requests.append(request.path)
        if self.delay:
            await asyncio.sleep(self.delay)
        name = request.match_info["file"]
        if name not in self.files:
            return web.Response(status=404, text="404 page not found")
        body = self.files[name]
        if self.stream_interval or self.truncate_after is not None:
            return await self._stream(request, body)
        return web.Response(body=body, content_type="application/octet-stream")

    async def _stream(self, request: web.Request, body: bytes) -> web.StreamResponse:
        resp = web.StreamResponse()
        resp.content_type = "application/octet-stream"
        resp.content_length = len(body)
        await resp.prepare(request)
        if self.truncate_after is not None:
            await resp.write(body[:self.truncate_after])
            request.transport.close()
            return resp
        for start in range(0, len(body), self.stream_chunk):
            await resp.write(body[start:start + self.stream_chunk])
            await asyncio.sleep(self.stream_interval)
        await resp.write_eof()
        return resp


@pytest_asyncio.fixture
async def go_host():
    fake = FakeDistribution()
    app = web.Application()
    app.router.add_get("/dl", fake.index)
    app.router.add_get("/dl/{file}", fake.download)

    server = TestServer(app)
    await server.start_server()
    fake.server = server
    try:
        yield fake
    finally:
        await server.close()
