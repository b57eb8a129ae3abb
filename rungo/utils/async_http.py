"""Async HTTP session utilities."""

import aiohttp


def open_session(user_agent: str, timeout_seconds: float) -> aiohttp.ClientSession:
    """Create a session carrying a User-Agent and stall timeouts.

    No total deadline is set: a large archive may take longer than
    timeout_seconds to arrive, as long as data keeps flowing.
    """
    return aiohttp.ClientSession(
        headers={"User-Agent": user_agent},
        timeout=aiohttp.ClientTimeout(
            total=None,
            sock_connect=timeout_seconds,
            sock_read=timeout_seconds,
        ),
    )
