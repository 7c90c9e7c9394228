import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv

from field_mappings.config import get_config

# Load environment variables
load_dotenv()

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s (file: %(filename)s, line: %(lineno)d)'


def config_log_level() -> int:
    """Level named by AppConfig.log_level (LOGGER_LEVEL), INFO when unknown."""
    level = getattr(logging, get_config().log_level, None)
    return level if isinstance(level, int) else logging.INFO


# Generic logger creation function to be used by all modules
def create_logger(name: str, level: Optional[int] = None, propagate: bool = False) -> logging.Logger:
    _level = level if level is not None else config_log_level()
    # check if there is a specific log level for the module
    module_log_level = os.getenv(f'LOGGER_LEVEL.{name}')
    if module_log_level:
        _level = getattr(logging, module_log_level.upper(), _level)

    logger = logging.getLogger(name)
    logger.setLevel(_level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.propagate = propagate
    return logger
