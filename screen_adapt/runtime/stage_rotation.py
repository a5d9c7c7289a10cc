"""Content rotation and camera bounds remap for forced rotation."""

from __future__ import annotations

from dataclasses import dataclass

from screen_adapt.api.geometry import CanvasGeometry, Rect
from screen_adapt.api.host import StagePort

FORCED_ROTATION_ANGLE = -90.0


@dataclass(frozen=True, slots=True)
class StageRotation:
    """Content layer transform and bounds for one pass."""

    angle: float
    pivot_x: float
    pivot_y: float
    world_bounds: Rect
    camera_bounds: Rect


def compute_stage_rotation(
    *,
    world_bounds: Rect,
    canvas: CanvasGeometry,
    force_rotate: bool,
) -> StageRotation:
    """Return the content rotation that keeps rotated content on-screen.

    Under forced rotation the content turns -90 degrees around
    ``(actual_height, 0)`` and the camera window swaps its extents, shifting
    its origin by the size delta so it keeps tracking the rotated content.
    """
    if not force_rotate:
        return StageRotation(
            angle=0.0,
            pivot_x=0.0,
            pivot_y=0.0,
            world_bounds=world_bounds,
            camera_bounds=world_bounds,
        )
    camera_bounds = Rect(
        x=world_bounds.x,
        y=world_bounds.y - world_bounds.w + canvas.actual_height,
        w=world_bounds.h,
        h=world_bounds.w,
    )
    return StageRotation(
        angle=FORCED_ROTATION_ANGLE,
        pivot_x=canvas.actual_height,
        pivot_y=0.0,
        world_bounds=world_bounds,
        camera_bounds=camera_bounds,
    )


def apply_stage_rotation(stage: StagePort, rotation: StageRotation) -> None:
    """Write the full rotation state to ``stage``."""
    stage.set_world_bounds(rotation.world_bounds)
    stage.set_world_rotation(rotation.angle, rotation.pivot_x, rotation.pivot_y)
    stage.set_camera_bounds(rotation.camera_bounds)
