"""Adaptation debug configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class DebugConfig:
    """Immutable adaptation debug configuration."""

    resize_trace_enabled: bool
    pass_trace_enabled: bool
    log_level: str


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with package-prefixed override."""
    value = os.getenv("SCREEN_ADAPT_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def resolve_log_file() -> str | None:
    """Return the JSONL log path from ``SCREEN_ADAPT_LOG_FILE``, if set."""
    value = os.getenv("SCREEN_ADAPT_LOG_FILE", "").strip()
    return value or None


def load_debug_config() -> DebugConfig:
    """Load immutable debug configuration from env vars."""
    return DebugConfig(
        resize_trace_enabled=_flag("SCREEN_ADAPT_DEBUG_RESIZE_TRACE", False),
        pass_trace_enabled=_flag("SCREEN_ADAPT_DEBUG_PASS_TRACE", False),
        log_level=resolve_log_level_name(),
    )
