import logging

from unravel.core.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging from settings unless a level is given."""
    level = level or get_settings().log_level
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("unravel").setLevel(level)
