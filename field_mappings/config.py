# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load configuration from environment variables / .env file
#   and hand a typed config object to the catalog loader, the CLI
#   and create_logger().
#
# CLASSES:
# --------
# - AppConfig (dataclass)
#     catalog_dir: str         (default: bundled field_mappings/data)
#     strict_validation: bool  (default True)
#     log_level: str           (default "INFO")
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same instance on repeated calls.
#
# - reset_config() -> None
#     Drop the cached instance (tests, reloading after env changes).
#
# USAGE:
# ------
#   from field_mappings.config import get_config
#   config = get_config()
#   print(config.catalog_dir)
#
# ==============================================

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_CATALOG_DIR = str(Path(__file__).parent / "data")

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class AppConfig:
    """Main application configuration."""
    catalog_dir: str = DEFAULT_CATALOG_DIR
    strict_validation: bool = True
    log_level: str = "INFO"


# Cached instance
_config_instance: Optional[AppConfig] = None


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUE_VALUES


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    load_dotenv()

    _config_instance = AppConfig(
        catalog_dir=os.getenv("FIELD_CATALOG_DIR") or DEFAULT_CATALOG_DIR,
        strict_validation=_env_flag("STRICT_CATALOG", True),
        log_level=os.getenv("LOGGER_LEVEL", "INFO").upper(),
    )

    return _config_instance


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() re-reads the environment."""
    global _config_instance
    _config_instance = None
