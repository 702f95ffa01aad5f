"""Logging setup for the agent hub server."""

import logging

from server.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"

# main logger; component loggers are children of it
logger = logging.getLogger("AGENT_HUB")
api_logger = logging.getLogger("AGENT_HUB.API")
store_logger = logging.getLogger("AGENT_HUB.STORE")


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure console logging once for the whole process."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.setLevel(level)
