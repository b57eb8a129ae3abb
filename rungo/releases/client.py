"""Client for the Go distribution host: version listing and archive download."""

import asyncio
import contextlib
import hashlib
import logging
from pathlib import Path
from typing import AsyncIterator, Awaitable, Callable, List, Optional, Union

import aiofiles
import aiofiles.os
import aiohttp

from rungo.utils.async_http import open_session
from .errors import ChecksumMismatch, ParseFailure, RequestFailed, UnexpectedStatus
from .models import ClientSettings
from .versions import extract_version_labels, select_versions

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], Awaitable[None]]

# older aiohttp releases raise a bare asyncio.TimeoutError for read timeouts
TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError)


class GoReleaseClient:
    """Lists Go releases and downloads release archives.

    Use as an async context manager so the underlying session is closed:

        async with GoReleaseClient() as client:
            versions = await client.list_versions()
            await client.fetch_artifact(f"{versions[0]}.src.tar.gz", "/tmp")
    """

    def __init__(self, settings: Optional[ClientSettings] = None):
        self.settings = settings or ClientSettings()
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        self.session = self._open_session()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def close(self):
        if self.session:
            await self.session.close()
            self.session = None

    def _open_session(self) -> aiohttp.ClientSession:
        return open_session(self.settings.user_agent, self.settings.timeout_seconds)

    @contextlib.asynccontextmanager
    async def _get(self, url: str) -> AsyncIterator[aiohttp.ClientResponse]:
        """GET url and yield the response once its status is known to be 200."""
        if not self.session:
            self.session = self._open_session()

        logger.debug("GET %s", url)
        try:
            resp = await self.session.get(url)
        except TRANSPORT_ERRORS as e:
            logger.warning("GET %s failed: %r", url, e)
            raise RequestFailed(url, e) from e

        async with resp:
            if resp.status != 200:
                logger.warning("GET %s returned %s %s", url, resp.status, resp.reason)
                raise UnexpectedStatus(url, resp.status, resp.reason)
            yield resp

    async def list_versions(self) -> List[str]:
        """Fetch the download page and return supported versions, newest first."""
        url = self.settings.index_url
        async with self._get(url) as resp:
            try:
                html = await resp.text()
            except TRANSPORT_ERRORS as e:
                raise RequestFailed(url, e) from e
            except (UnicodeDecodeError, LookupError) as e:
                raise ParseFailure(f"cannot decode page: {e}", url) from e

        labels = extract_version_labels(html, url)
        versions = select_versions(labels)
        logger.info("Found %d Go versions (%d entries on page)", len(versions), len(labels))
        return versions

    async def fetch_artifact(self, file: str, dst: Union[str, Path],
                             progress_callback: Optional[ProgressCallback] = None,
                             expected_sha256: Optional[str] = None) -> Path:
        """Download a release archive to dst/file and return its path.

        The file is only created once the server has answered 200. A partial
        file is removed when the transfer fails. Local errors such as a
        missing destination directory propagate as OSError. file must be a
        bare file name; anything that could resolve outside dst is a ValueError.
        """
        if not file or file in (".", "..") or "/" in file or "\\" in file:
            raise ValueError(f"Release file must be a plain file name: {file!r}")

        url = self.settings.file_url(file)
        dest = Path(dst) / file

        async with self._get(url) as resp:
            total_size = resp.content_length or 0
            downloaded = 0
            created = False
            try:
                async with aiofiles.open(dest, "wb") as f:
                    created = True
                    async for chunk in resp.content.iter_chunked(self.settings.chunk_size):
                        await f.write(chunk)
                        downloaded += len(chunk)
                        if progress_callback:
                            await progress_callback(file, downloaded, total_size)
            except TRANSPORT_ERRORS as e:
                logger.warning("Download of %s interrupted after %d bytes: %r", url, downloaded, e)
                if created:
                    await self._discard(dest)
                raise RequestFailed(url, e) from e
            except BaseException:
                if created:
                    await self._discard(dest)
                raise

        if expected_sha256:
            actual = await self.sha256_of(dest)
            if actual != expected_sha256.lower():
                await self._discard(dest)
                raise ChecksumMismatch(dest, expected_sha256.lower(), actual)

        logger.info("Downloaded %s (%d bytes) -> %s", file, downloaded, dest)
        return dest

    @staticmethod
    async def sha256_of(file_path: Path) -> str:
        """Return the hex SHA-256 digest of a file."""
        hash_sha256 = hashlib.sha256()
        async with aiofiles.open(file_path, 'rb') as f:
            while chunk := await f.read(64 * 1024):
                hash_sha256.update(chunk)
        return hash_sha256.hexdigest()

    @staticmethod
    async def _discard(path: Path):
        with contextlib.suppress(FileNotFoundError):
            await aiofiles.os.remove(path)


def list_versions(settings: Optional[ClientSettings] = None) -> List[str]:
    """Blocking variant of GoReleaseClient.list_versions for worker threads."""
    async def _run():
        async with GoReleaseClient(settings) as client:
            return await client.list_versions()

    return asyncio.run(_run())


def fetch_artifact(file: str, dst: Union[str, Path], settings: Optional[ClientSettings] = None,
                   progress_callback: Optional[ProgressCallback] = None,
                   expected_sha256: Optional[str] = None) -> Path:
    """Blocking variant of GoReleaseClient.fetch_artifact for worker threads."""
    async def _run():
        async with GoReleaseClient(settings) as client:
            return await client.fetch_artifact(file, dst, progress_callback, expected_sha256)

    return asyncio.run(_run())
