"""Typed runtime settings for the food screen window, its timers and logging."""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Mapping, Optional

_TICK_ENV_VAR = "FOODSCREEN_TICK_MS"
_LEVEL_ENV_VAR = "FOODSCREEN_LOG_LEVEL"
_DEBUG_ENV_VAR = "FOODSCREEN_DEBUG"
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ScreenSettings:
    """Window, refresh and logging configuration; no I/O here.

    ``debug_logging`` wins over ``log_level``: the effective level is DEBUG
    whenever it is set.
    """

    tick_interval_ms: int = 1000
    window_title: str = "Food Screen"
    window_geometry: str = "420x560"
    log_level: int = logging.INFO
    debug_logging: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ScreenSettings":
        """Build settings from defaults plus ``FOODSCREEN_*`` overrides.

        This is the only reader of those variables; the logging setup receives
        ``effective_log_level`` from here.
        """
        env = os.environ if environ is None else environ
        payload: dict = {}
        if env.get(_TICK_ENV_VAR):
            payload["tick_interval_ms"] = env[_TICK_ENV_VAR]
        if env.get(_LEVEL_ENV_VAR):
            payload["log_level"] = env[_LEVEL_ENV_VAR]
        if env.get(_DEBUG_ENV_VAR) is not None:
            payload["debug_logging"] = env[_DEBUG_ENV_VAR]
        return cls().apply_dict(payload) if payload else cls()

    @property
    def effective_log_level(self) -> int:
        return logging.DEBUG if self.debug_logging else self.log_level

    def apply_dict(self, payload: Mapping[str, Any]) -> "ScreenSettings":
        """Return a copy with the flat ``payload`` keys applied and validated."""
        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        allowed = {f.name for f in fields(self)}
        unknown = set(payload.keys()) - allowed
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates: dict = {}
        if "tick_interval_ms" in payload:
            updates["tick_interval_ms"] = _coerce_interval(payload["tick_interval_ms"])
        for key in ("window_title", "window_geometry"):
            if key in payload:
                updates[key] = _coerce_text(key, payload[key])
        if "log_level" in payload:
            updates["log_level"] = _coerce_level(payload["log_level"])
        if "debug_logging" in payload:
            updates["debug_logging"] = _coerce_bool(payload["debug_logging"])
        return replace(self, **updates)

    def to_dict(self) -> dict:
        return asdict(self)


def _coerce_interval(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError("tick_interval_ms must be an integer.")
    try:
        interval = int(str(value).strip())
    except ValueError as exc:
        raise ValueError(f"tick_interval_ms must be an integer, got {value!r}.") from exc
    if interval < 1:
        raise ValueError("tick_interval_ms must be at least 1.")
    return interval


def _coerce_text(key: str, value: Any) -> str:
    text = str(value).strip() if value is not None else ""
    if not text:
        raise ValueError(f"{key} must be a non-empty string.")
    return text


def _coerce_level(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError("log_level must be a level name or number.")
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    if not isinstance(level, int):
        raise ValueError(f"log_level must be a level name or number, got {value!r}.")
    return level


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


__all__ = ["ScreenSettings"]
