"""Adaptation error taxonomy."""

from __future__ import annotations


class AdaptationError(RuntimeError):
    """Base class for screen adaptation failures."""


class ConfigurationError(AdaptationError, ValueError):
    """Configuration cannot produce usable geometry."""


class ViewportUnavailableError(AdaptationError):
    """Measured viewport has no area yet."""


class InvalidArgumentError(AdaptationError, TypeError):
    """Registration call received an argument it cannot use."""


__all__ = [
    "AdaptationError",
    "ConfigurationError",
    "InvalidArgumentError",
    "ViewportUnavailableError",
]
