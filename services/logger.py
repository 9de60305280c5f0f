# services/logger.py
import logging

from config import settings

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
_configured = False


def configure_logging(level: str | None = None) -> None:
    """Set root level + format once; later calls only adjust the level."""
    global _configured
    lvl = (level or settings.log_level).upper()
    if not _configured:
        logging.basicConfig(level=lvl, format=_FORMAT)
        _configured = True
    else:
        logging.getLogger().setLevel(lvl)
