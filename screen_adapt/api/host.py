"""Host collaborator ports consumed by the adaptation engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from screen_adapt.api.geometry import Rect


class ViewportProvider(Protocol):
    """Physical viewport/screen size query."""

    def viewport_size(self) -> tuple[float, float]:
        """Return measured (width, height) in physical pixels."""


class StagePort(Protocol):
    """Rendering surface, content layer and camera owned by the host."""

    def set_game_size(self, width: float, height: float) -> None:
        """Resize the backing buffer."""

    def set_user_scale(self, scale_x: float, scale_y: float) -> None:
        """Set the backing-buffer to display scale."""

    def set_world_bounds(self, bounds: Rect) -> None:
        """Set renderable content bounds."""

    def set_world_rotation(self, angle: float, pivot_x: float, pivot_y: float) -> None:
        """Rotate the content layer by ``angle`` degrees around the pivot."""

    def set_camera_bounds(self, bounds: Rect) -> None:
        """Set the camera/viewport bounds rectangle."""

    def set_surface_offset(self, left: int, top: int) -> None:
        """Displace the displayed surface inside the viewport."""

    def set_page_alignment(self, horizontal: bool, vertical: bool) -> None:
        """Toggle host-native centering of a surface smaller than the viewport."""


@runtime_checkable
class Positionable(Protocol):
    """Renderable that can be re-anchored by the widget positioner."""

    x: float
    y: float

    def set_anchor(self, *, x: float | None = None, y: float | None = None) -> None:
        """Move the element's origin to a fraction of its own size."""

    def get_bounds(self) -> Rect:
        """Return the element's bounding box in design space."""


@runtime_checkable
class FitShape(Protocol):
    """Shape that can be redrawn to a rectangle."""

    def draw_rect(self, x: float, y: float, width: float, height: float) -> None:
        """Replace the shape's rectangle."""


@dataclass(frozen=True, slots=True)
class Registration:
    """Opaque handle returned by registration calls."""

    id: int
    kind: str


__all__ = [
    "FitShape",
    "Positionable",
    "Registration",
    "StagePort",
    "ViewportProvider",
]
