"""Public adaptation configuration contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal, TypeAlias

from screen_adapt.api.geometry import Orientation

ScaleMode: TypeAlias = Literal["SHOW_ALL", "EXACT_FIT", "NO_BORDER", "FIXED_WIDTH", "FIXED_HEIGHT"]
DesignExtent: TypeAlias = float | Literal["auto"]
OrientationCallback: TypeAlias = Callable[[Orientation], None]

SCALE_MODES: tuple[ScaleMode, ...] = (
    "SHOW_ALL",
    "EXACT_FIT",
    "NO_BORDER",
    "FIXED_WIDTH",
    "FIXED_HEIGHT",
)
SCREEN_MODES: tuple[Orientation, ...] = ("portrait", "landscape")


def _ignore_orientation(orientation: Orientation) -> None:
    _ = orientation


@dataclass(frozen=True, slots=True)
class AdaptationConfig:
    """Immutable adaptation settings; ``screen_mode`` is the desired presentation."""

    design_width: DesignExtent = "auto"
    design_height: DesignExtent = "auto"
    world_bounds_x: float = 0.0
    world_bounds_y: float = 0.0
    world_bounds_width: float = 0.0
    world_bounds_height: float = 0.0
    scale_mode: ScaleMode = "SHOW_ALL"
    screen_mode: Orientation = "portrait"
    align_h: bool = False
    align_v: bool = False
    on_orientation_change: OrientationCallback = _ignore_orientation


DEFAULT_CONFIG = AdaptationConfig()


__all__ = [
    "AdaptationConfig",
    "DEFAULT_CONFIG",
    "DesignExtent",
    "OrientationCallback",
    "SCALE_MODES",
    "SCREEN_MODES",
    "ScaleMode",
]
