"""Go release listing and download."""

from .archives import release_filename, source_filename
from .client import GoReleaseClient, fetch_artifact, list_versions
from .errors import ChecksumMismatch, GoReleaseError, ParseFailure, RequestFailed, UnexpectedStatus
from .models import ClientSettings

__all__ = [
    "GoReleaseClient",
    "ClientSettings",
    "list_versions",
    "fetch_artifact",
    "release_filename",
    "source_filename",
    "GoReleaseError",
    "RequestFailed",
    "UnexpectedStatus",
    "ParseFailure",
    "ChecksumMismatch",
]
