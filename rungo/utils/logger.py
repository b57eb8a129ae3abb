"""Logging setup for applications embedding rungo."""

import logging
from pathlib import Path
from typing import Optional

DEFAULT_LOG_DIR = Path.home() / ".cache" / "rungo"
PACKAGE_LOGGER = "rungo"


def setup_logging(log_dir: Optional[Path] = None, console_level: int = logging.INFO,
                  console: bool = True) -> Path:
    """Send rungo's records to a log file and, optionally, the console.

    Only the ``rungo`` logger is configured, so the host application keeps
    control of the root logger. Calling it again replaces the handlers
    installed by the previous call. Returns the path of the log file.
    """
    log_dir = log_dir or DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "rungo.log"

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG)
    for handler in [h for h in logger.handlers if getattr(h, "_rungo", False)]:
        logger.removeHandler(handler)
        handler.close()

    handlers = [logging.FileHandler(log_file)]
    handlers[0].setLevel(logging.DEBUG)
    handlers[0].setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_level)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        handlers.append(console_handler)

    for handler in handlers:
        handler._rungo = True
        logger.addHandler(handler)

    return log_file
