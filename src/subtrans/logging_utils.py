"""Root logger setup shared by the command line entry points."""

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def setup_logging(level: str | None = None, force: bool = False) -> None:
    """Configure the root logger for subtrans runs.

    The level comes from ``level``, then ``LOG_LEVEL``, then INFO. Unknown level
    names fall back to INFO. Repeat calls are ignored unless ``force`` is set.
    """
    global _configured
    if _configured and not force:
        return

    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        force=force,
    )
    _configured = True
