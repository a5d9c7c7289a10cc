from __future__ import annotations

from screen_adapt.api.geometry import CanvasGeometry, Rect
from screen_adapt.runtime.stage_rotation import apply_stage_rotation, compute_stage_rotation
from tests.screen_adapt.conftest import FakeStage

_CANVAS = CanvasGeometry(actual_width=1600.0, actual_height=800.0, style_width=800, style_height=400)
_BOUNDS = Rect(0.0, 0.0, 800.0, 1600.0)


def test_unrotated_stage_keeps_bounds_and_resets_pivot() -> None:
    rotation = compute_stage_rotation(world_bounds=_BOUNDS, canvas=_CANVAS, force_rotate=False)

    assert rotation.angle == 0.0
    assert (rotation.pivot_x, rotation.pivot_y) == (0.0, 0.0)
    assert rotation.world_bounds == _BOUNDS
    assert rotation.camera_bounds == _BOUNDS


def test_forced_rotation_turns_content_and_swaps_camera_bounds() -> None:
    rotation = compute_stage_rotation(world_bounds=_BOUNDS, canvas=_CANVAS, force_rotate=True)

    assert rotation.angle == -90.0
    assert (rotation.pivot_x, rotation.pivot_y) == (800.0, 0.0)
    assert rotation.world_bounds == _BOUNDS
    assert rotation.camera_bounds == Rect(0.0, 0.0, 1600.0, 800.0)


def test_camera_origin_shifts_by_bounds_delta() -> None:
    bounds = Rect(10.0, 20.0, 1000.0, 3000.0)
    rotation = compute_stage_rotation(world_bounds=bounds, canvas=_CANVAS, force_rotate=True)

    assert rotation.camera_bounds == Rect(10.0, 20.0 - 1000.0 + 800.0, 3000.0, 1000.0)


def test_recomputing_is_idempotent_and_reversible() -> None:
    stage = FakeStage()
    rotated = compute_stage_rotation(world_bounds=_BOUNDS, canvas=_CANVAS, force_rotate=True)
    upright = compute_stage_rotation(world_bounds=_BOUNDS, canvas=_CANVAS, force_rotate=False)

    apply_stage_rotation(stage, rotated)
    apply_stage_rotation(stage, rotated)
    assert stage.world_rotation == (-90.0, 800.0, 0.0)

    apply_stage_rotation(stage, upright)
    assert stage.world_rotation == (0.0, 0.0, 0.0)
    assert stage.camera_bounds == _BOUNDS
