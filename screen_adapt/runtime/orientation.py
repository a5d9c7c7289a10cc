"""Device orientation and viewport extent detection."""

from __future__ import annotations

from dataclasses import dataclass

from screen_adapt.api.geometry import Orientation, ViewSize


@dataclass(frozen=True, slots=True)
class OrientationState:
    """Measured orientation and the viewport extents assigned to its axes."""

    is_portrait: bool
    view: ViewSize

    @property
    def orientation(self) -> Orientation:
        return "portrait" if self.is_portrait else "landscape"


def detect_orientation(width: float, height: float) -> OrientationState:
    """Classify measured extents; a square viewport counts as landscape.

    Zero-size extents pass through unchanged.
    """
    is_portrait = float(width) < float(height)
    longer = max(float(width), float(height))
    shorter = min(float(width), float(height))
    if is_portrait:
        return OrientationState(is_portrait=True, view=ViewSize(x=shorter, y=longer))
    return OrientationState(is_portrait=False, view=ViewSize(x=longer, y=shorter))


def is_force_rotated(orientation: Orientation, screen_mode: Orientation) -> bool:
    """Return whether content must be rotated to present in ``screen_mode``."""
    return orientation != screen_mode
