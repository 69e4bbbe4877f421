"""
config – Environment-driven logging configuration for flagparse.

Recognised variables
--------------------
FLAGPARSE_LOG_JSON   : '1', 'true', 'yes' or 'on' switches to JSON log lines.
FLAGPARSE_LOG_LEVEL  : Level name (DEBUG, INFO, ...). Unknown names → INFO.
FLAGPARSE_TRACE      : '1' enables per-call debug traces, read at call time.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, TextIO

from flagparse.logging.helpers import setup_base_logger

_TRUTHY = {"1", "true", "yes", "on"}


def _parse_level(raw: Optional[str]) -> int:
    name = (raw or "").strip().upper()
    if not name:
        return logging.INFO
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


@dataclass(frozen=True)
class FlagParseConfig:
    json_logs: bool = False
    level: int = logging.INFO

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "FlagParseConfig":
        src = os.environ if env is None else env
        json_logs = (src.get("FLAGPARSE_LOG_JSON") or "").strip().lower() in _TRUTHY
        return cls(json_logs=json_logs, level=_parse_level(src.get("FLAGPARSE_LOG_LEVEL")))


def configure_logging(
    config: Optional[FlagParseConfig] = None, *, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Apply *config* (or the environment's) and return the base logger.

    Calling it again with a different config replaces the previous setup.
    """
    cfg = config or FlagParseConfig.from_env()
    return setup_base_logger(json_logs=cfg.json_logs, level=cfg.level, stream=stream)
