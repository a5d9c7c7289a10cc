"""Adaptation configuration merging, validation and env loading."""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from dataclasses import fields, replace

from screen_adapt.api.config import (
    DEFAULT_CONFIG,
    SCALE_MODES,
    SCREEN_MODES,
    AdaptationConfig,
)
from screen_adapt.api.errors import ConfigurationError

_CONFIG_FIELDS = frozenset(item.name for item in fields(AdaptationConfig))


def resolve_config(
    config: AdaptationConfig | Mapping[str, object] | None = None,
    /,
    base: AdaptationConfig = DEFAULT_CONFIG,
    **overrides: object,
) -> AdaptationConfig:
    """Merge ``config`` and keyword overrides over ``base`` and validate the result."""
    merged = base
    if isinstance(config, AdaptationConfig):
        merged = config
    elif isinstance(config, Mapping):
        merged = _apply_overrides(merged, dict(config))
    elif config is not None:
        raise ConfigurationError(f"config must be AdaptationConfig or a mapping, got {config!r}")
    merged = _apply_overrides(merged, overrides)
    validate_config(merged)
    return merged


def validate_config(config: AdaptationConfig) -> None:
    """Raise ``ConfigurationError`` when ``config`` cannot produce finite geometry."""
    if config.scale_mode not in SCALE_MODES:
        raise ConfigurationError(f"unrecognized scale mode {config.scale_mode!r}")
    if config.screen_mode not in SCREEN_MODES:
        raise ConfigurationError(f"unrecognized screen mode {config.screen_mode!r}")
    for name in ("design_width", "design_height"):
        value = getattr(config, name)
        if value == "auto":
            continue
        if not _is_number(value) or not math.isfinite(value) or value <= 0:
            raise ConfigurationError(f"{name} must be 'auto' or a positive number, got {value!r}")
    for name in ("world_bounds_x", "world_bounds_y", "world_bounds_width", "world_bounds_height"):
        value = getattr(config, name)
        if not _is_number(value) or not math.isfinite(value):
            raise ConfigurationError(f"{name} must be a finite number, got {value!r}")
    if not callable(config.on_orientation_change):
        raise ConfigurationError("on_orientation_change must be callable")


def config_from_env(base: AdaptationConfig = DEFAULT_CONFIG) -> AdaptationConfig:
    """Overlay ``SCREEN_ADAPT_*`` environment settings on ``base``."""
    overrides: dict[str, object] = {}
    for name, env_name in (
        ("design_width", "SCREEN_ADAPT_DESIGN_WIDTH"),
        ("design_height", "SCREEN_ADAPT_DESIGN_HEIGHT"),
    ):
        raw = os.getenv(env_name)
        if raw is not None:
            overrides[name] = _parse_extent(env_name, raw)
    scale_mode = os.getenv("SCREEN_ADAPT_SCALE_MODE")
    if scale_mode is not None:
        overrides["scale_mode"] = scale_mode.strip().upper()
    screen_mode = os.getenv("SCREEN_ADAPT_SCREEN_MODE")
    if screen_mode is not None:
        overrides["screen_mode"] = screen_mode.strip().lower()
    for name, env_name in (("align_h", "SCREEN_ADAPT_ALIGN_H"), ("align_v", "SCREEN_ADAPT_ALIGN_V")):
        raw = os.getenv(env_name)
        if raw is not None:
            overrides[name] = raw.strip().lower() in {"1", "true", "yes", "on"}
    return resolve_config(base=base, **overrides)


def _apply_overrides(config: AdaptationConfig, overrides: Mapping[str, object]) -> AdaptationConfig:
    unknown = sorted(set(overrides) - _CONFIG_FIELDS)
    if unknown:
        raise ConfigurationError(f"unknown configuration keys: {', '.join(unknown)}")
    if not overrides:
        return config
    return replace(config, **overrides)


def _parse_extent(env_name: str, raw: str) -> float | str:
    value = raw.strip().lower()
    if value == "auto":
        return "auto"
    try:
        return float(value)
    except ValueError:
        raise ConfigurationError(f"{env_name} must be 'auto' or a number, got {raw!r}") from None


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
