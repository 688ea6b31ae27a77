"""
civiltime.config
----------------
Process-wide settings, read from the environment.

  CIVILTIME_RANGE_MODE   'exact' (default) or 'strict'
  CIVILTIME_LOG_LEVEL    logging level name (default WARNING)
  CIVILTIME_LOG_JSON     render log lines as JSON (default off)

In 'exact' mode results outside the documented 64-bit range are returned
exactly, since Python ints never wrap. In 'strict' mode such results raise
CivilRangeError.

Value operations read only the range mode, through get_range_mode(), and
never fail on a bad environment. The full Settings (and its ConfigError on
bad input) belong to the command line, which configures logging.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal, Mapping, Optional

from .core.errors import ConfigError
from .core.log import get_logger

log = get_logger(__name__)

RangeMode = Literal["exact", "strict"]

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"", "0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    range_mode: RangeMode = "exact"
    log_level: int = logging.WARNING
    log_json: bool = False

    @property
    def strict(self) -> bool:
        return self.range_mode == "strict"


def _parse_bool(name: str, raw: str) -> bool:
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ConfigError(f"{name} must be a boolean flag, got '{raw}'")


def _parse_level(name: str, raw: str) -> int:
    v = raw.strip().upper()
    if not v:
        return logging.WARNING
    level = logging.getLevelName(v)
    if not isinstance(level, int):
        raise ConfigError(f"{name} must be a logging level name, got '{raw}'")
    return level


def _parse_range_mode(name: str, raw: str) -> RangeMode:
    mode = raw.strip().lower() or "exact"
    if mode not in ("exact", "strict"):
        raise ConfigError(f"{name} must be 'exact' or 'strict', got '{raw}'")
    return mode  # type: ignore[return-value]


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ

    return Settings(
        range_mode=_parse_range_mode("CIVILTIME_RANGE_MODE", env.get("CIVILTIME_RANGE_MODE", "")),
        log_level=_parse_level("CIVILTIME_LOG_LEVEL", env.get("CIVILTIME_LOG_LEVEL", "")),
        log_json=_parse_bool("CIVILTIME_LOG_JSON", env.get("CIVILTIME_LOG_JSON", "")),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


@lru_cache(maxsize=1)
def get_range_mode() -> RangeMode:
    """
    The range mode alone, as read by every value operation.

    Never raises: an unparsable CIVILTIME_RANGE_MODE logs a warning and
    falls back to 'exact', and the logging variables are not read here.
    """
    raw = os.environ.get("CIVILTIME_RANGE_MODE", "")
    try:
        return _parse_range_mode("CIVILTIME_RANGE_MODE", raw)
    except ConfigError as e:
        log.warning("invalid_range_mode", value=raw, fallback="exact", error=str(e))
        return "exact"


def is_strict() -> bool:
    return get_range_mode() == "strict"


def reset_settings() -> None:
    get_settings.cache_clear()
    get_range_mode.cache_clear()
