"""Fixed-design 2D surface adaptation for arbitrary viewports."""

from screen_adapt.api.config import AdaptationConfig
from screen_adapt.api.errors import (
    AdaptationError,
    ConfigurationError,
    InvalidArgumentError,
    ViewportUnavailableError,
)
from screen_adapt.api.widgets import WidgetAnchor
from screen_adapt.runtime.adaptation_pass import AdaptationPass, run_adaptation_pass
from screen_adapt.runtime.controller import AdaptationController

__all__ = [
    "AdaptationConfig",
    "AdaptationController",
    "AdaptationError",
    "AdaptationPass",
    "ConfigurationError",
    "InvalidArgumentError",
    "ViewportUnavailableError",
    "WidgetAnchor",
    "run_adaptation_pass",
]
