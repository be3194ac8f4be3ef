"""
Configuration management for HTTP Inspector.

Loads defaults from environment variables or a .env file.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Check common locations for .env
env_locations = [
    Path.home() / ".httpinspector" / ".env",
    Path.home() / ".config" / "httpinspector" / ".env",
    Path.cwd() / ".env",
]
for env_path in env_locations:
    if env_path.exists():
        load_dotenv(env_path)
        break


def _parse_timeout(value: str | None) -> float | None:
    """Empty or missing means wait indefinitely."""
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring invalid HTTPINSPECTOR_TIMEOUT value %r", value)
        return None


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class InspectorConfig:
    """Request and output defaults."""

    # Transport
    timeout: float | None = None
    verify_ssl: bool = True

    # Export
    default_format: str = "json"

    # Logging
    log_level: str = "WARNING"
    log_file: str | None = None

    @classmethod
    def from_env(cls) -> "InspectorConfig":
        """Load configuration from environment variables."""
        return cls(
            timeout=_parse_timeout(os.getenv("HTTPINSPECTOR_TIMEOUT")),
            verify_ssl=_parse_bool(os.getenv("HTTPINSPECTOR_VERIFY_SSL"), True),
            default_format=os.getenv("HTTPINSPECTOR_FORMAT", "json") or "json",
            log_level=os.getenv("HTTPINSPECTOR_LOG_LEVEL", "WARNING") or "WARNING",
            log_file=os.getenv("HTTPINSPECTOR_LOG_FILE") or None,
        )


# Global config instance
_config: InspectorConfig | None = None


def get_config() -> InspectorConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = InspectorConfig.from_env()
    return _config


def set_config(config: InspectorConfig | None) -> None:
    """Set the global configuration instance (None forces a reload)."""
    global _config
    _config = config
