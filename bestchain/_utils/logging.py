import logging
import sys

from eth_utils import (
    setup_DEBUG2_logging,
)
from eth_utils.logging import (
    DEBUG2_LEVEL_NUM,
)

from bestchain._utils.env import (
    env_string,
)
from bestchain.constants import (
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV_VAR,
)

LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


def resolve_log_level(name: str) -> int:
    """
    Translate a level name such as ``INFO`` or ``DEBUG2`` into its number.
    """
    normalized = name.strip().upper()
    if normalized == "DEBUG2":
        return DEBUG2_LEVEL_NUM

    level = logging.getLevelName(normalized)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name!r}")
    return level


def setup_stderr_logging() -> int:
    """
    Send log records to stderr at the level named by ``BESTCHAIN_LOG_LEVEL``
    and return that level.
    """
    setup_DEBUG2_logging()
    level = resolve_log_level(env_string(LOG_LEVEL_ENV_VAR, default=DEFAULT_LOG_LEVEL))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    logger = logging.getLogger("bestchain")
    if not logger.handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    return level
