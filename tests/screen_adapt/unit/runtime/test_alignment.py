from __future__ import annotations

from screen_adapt.api.geometry import CanvasGeometry, ViewSize
from screen_adapt.runtime.alignment import (
    SurfaceAlignment,
    apply_surface_alignment,
    centering_offset,
    compute_surface_alignment,
)
from tests.screen_adapt.conftest import FakeStage


def test_centering_offset_floors_half_gap() -> None:
    assert centering_offset(500, 1000, 400, 1000) == (-50, 0)
    assert centering_offset(400, 801, 400, 1000) == (0, 99)


def test_overscan_is_displaced_when_alignment_enabled() -> None:
    alignment = compute_surface_alignment(
        canvas=CanvasGeometry(800.0, 1600.0, 500, 1000),
        view=ViewSize(400, 1000),
        align_h=True,
        align_v=True,
    )
    assert alignment == SurfaceAlignment(left=-50, top=0, page_align_h=True, page_align_v=True)


def test_overscan_is_left_alone_when_alignment_disabled() -> None:
    alignment = compute_surface_alignment(
        canvas=CanvasGeometry(800.0, 1600.0, 500, 1100),
        view=ViewSize(400, 1000),
        align_h=False,
        align_v=True,
    )
    assert (alignment.left, alignment.top) == (0, -50)


def test_letterbox_is_delegated_to_page_alignment() -> None:
    alignment = compute_surface_alignment(
        canvas=CanvasGeometry(800.0, 1600.0, 400, 800),
        view=ViewSize(400, 1000),
        align_h=True,
        align_v=True,
    )
    assert (alignment.left, alignment.top) == (0, 0)
    assert (alignment.page_align_h, alignment.page_align_v) == (True, True)


def test_apply_surface_alignment_resets_previous_offset() -> None:
    stage = FakeStage()
    apply_surface_alignment(stage, SurfaceAlignment(-50, -20, True, True))
    apply_surface_alignment(stage, SurfaceAlignment(0, 0, False, False))
    assert stage.surface_offset == (0, 0)
    assert stage.page_alignment == (False, False)
