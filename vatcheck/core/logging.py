"""Logging setup for the API and CLI scripts."""
import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once; later calls only adjust the level."""
    if level is None:
        from vatcheck.core.config import settings

        level = settings.log_level

    root = logging.getLogger()
    root.setLevel(level.upper())

    if any(getattr(h, "_vatcheck", False) for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    handler._vatcheck = True  # type: ignore[attr-defined]
    root.addHandler(handler)

    # requests/urllib3 debug output would include full SOAP bodies
    logging.getLogger("urllib3").setLevel(logging.WARNING)
