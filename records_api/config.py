"""config.py — Environment configuration, route constants, logging.

Configuration is read once per process into an immutable ``ApiConfig`` and
passed explicitly to the store factory and router.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

__all__ = [
    "ApiConfig",
    "ConfigError",
    "RECORDS_PATH",
    "RECORD_PATH_PREFIX",
    "RECORD_KEY",
    "logger",
]

# ---------------------------------------------------------------------------
# Routing constants
# ---------------------------------------------------------------------------

RECORDS_PATH = "/records"
RECORD_PATH_PREFIX = "/records/"
RECORD_KEY = "id"

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logger = logging.getLogger()
logger.setLevel(logging.INFO)


class ConfigError(RuntimeError):
    """Raised when required configuration is missing from the environment."""


@dataclass(frozen=True)
class ApiConfig:
    region: str
    table_name: str
    cors_origin: str = ""
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ApiConfig":
        region = os.environ.get("AWS_REGION", "").strip()
        if not region:
            raise ConfigError("Missing AWS_REGION")
        table_name = os.environ.get("RECORDS_TABLE_NAME", "").strip()
        if not table_name:
            raise ConfigError("Missing RECORDS_TABLE_NAME")
        return cls(
            region=region,
            table_name=table_name,
            cors_origin=os.environ.get("CORS_ORIGIN", "").strip(),
            log_level=os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )

    def apply_logging(self) -> None:
        level = logging.getLevelName(self.log_level)
        if not isinstance(level, int):
            logger.warning("Unknown LOG_LEVEL %r; keeping INFO", self.log_level)
            level = logging.INFO
        logger.setLevel(level)
