"""Common utilities."""

from .async_http import open_session
from .logger import setup_logging

__all__ = ["open_session", "setup_logging"]
