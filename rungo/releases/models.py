"""Settings model for the release client."""

from pydantic import BaseModel, Field, field_validator

from rungo import __version__

DEFAULT_BASE_URL = "https://go.dev"


class ClientSettings(BaseModel):
    base_url: str = Field(default=DEFAULT_BASE_URL, min_length=1)
    timeout_seconds: float = Field(default=60.0, gt=0)
    chunk_size: int = Field(default=64 * 1024, gt=0)
    user_agent: str = Field(default=f"rungo/{__version__}", min_length=1)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return value.rstrip("/")

    @property
    def index_url(self) -> str:
        """URL of the distribution index page."""
        return f"{self.base_url}/dl"

    def file_url(self, file: str) -> str:
        """URL of a single release archive."""
        return f"{self.base_url}/dl/{file}"
