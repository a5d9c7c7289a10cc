"""Screen-space placement for elements pinned to the camera view."""

from __future__ import annotations

from typing import Protocol


class ScreenPinTransform(Protocol):
    """Map a camera view origin plus pin offset to a screen position."""

    def __call__(
        self,
        view_x: float,
        view_y: float,
        offset_x: float,
        offset_y: float,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
    ) -> tuple[float, float]: ...


def upright_pin_position(
    view_x: float,
    view_y: float,
    offset_x: float,
    offset_y: float,
    scale_x: float = 1.0,
    scale_y: float = 1.0,
) -> tuple[float, float]:
    """Pinned position when content is presented unrotated."""
    return (view_x + offset_x) / scale_x, (view_y + offset_y) / scale_y


def rotated_pin_position(
    view_x: float,
    view_y: float,
    offset_x: float,
    offset_y: float,
    scale_x: float = 1.0,
    scale_y: float = 1.0,
) -> tuple[float, float]:
    """Pinned position under forced rotation; the camera axes are inverse-rotated."""
    return (-view_y + offset_x) / scale_x, (view_x + offset_y) / scale_y


def resolve_screen_pin_transform(force_rotate: bool) -> ScreenPinTransform:
    """Return the shared transform every pinned element uses this pass."""
    return rotated_pin_position if force_rotate else upright_pin_position
