"""Debug configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

_LOG_FORMATS = frozenset({"text", "json"})


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _choice(name: str, default: str, allowed: frozenset[str]) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    return value if value in allowed else default


@dataclass(frozen=True, slots=True)
class DebugConfig:
    """Immutable runtime debug configuration."""

    union_trace_enabled: bool
    log_level: str
    log_format: str = "text"


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with package-prefixed override."""
    value = os.getenv("WINAREAS_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper() or default


def load_debug_config() -> DebugConfig:
    """Load immutable debug configuration from env vars."""
    return DebugConfig(
        union_trace_enabled=_flag("WINAREAS_DEBUG_UNION_TRACE", False),
        log_level=resolve_log_level_name(),
        log_format=_choice("WINAREAS_LOG_FORMAT", "text", _LOG_FORMATS),
    )


def enabled_union_trace() -> bool:
    return load_debug_config().union_trace_enabled
