"""Public screen adaptation API contracts."""

from screen_adapt.api.config import (
    DEFAULT_CONFIG,
    SCALE_MODES,
    SCREEN_MODES,
    AdaptationConfig,
    ScaleMode,
)
from screen_adapt.api.errors import (
    AdaptationError,
    ConfigurationError,
    InvalidArgumentError,
    ViewportUnavailableError,
)
from screen_adapt.api.geometry import (
    CanvasGeometry,
    DesignSize,
    LogicalSize,
    Margins,
    Orientation,
    Rect,
    ScaleRatio,
    ViewSize,
)
from screen_adapt.api.host import (
    FitShape,
    Positionable,
    Registration,
    StagePort,
    ViewportProvider,
)
from screen_adapt.api.logging import LoggingConfig
from screen_adapt.api.widgets import WidgetAnchor, coerce_widget_anchor

__all__ = [
    "AdaptationConfig",
    "AdaptationError",
    "CanvasGeometry",
    "ConfigurationError",
    "DEFAULT_CONFIG",
    "DesignSize",
    "FitShape",
    "InvalidArgumentError",
    "LoggingConfig",
    "LogicalSize",
    "Margins",
    "Orientation",
    "Positionable",
    "Rect",
    "Registration",
    "SCALE_MODES",
    "SCREEN_MODES",
    "ScaleMode",
    "ScaleRatio",
    "StagePort",
    "ViewSize",
    "ViewportProvider",
    "ViewportUnavailableError",
    "WidgetAnchor",
    "coerce_widget_anchor",
]
