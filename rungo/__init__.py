"""Go release listing and archive download client."""

__version__ = "0.1.0"

from rungo.utils.logger import setup_logging  # noqa: E402

__all__ = ["setup_logging", "__version__"]
