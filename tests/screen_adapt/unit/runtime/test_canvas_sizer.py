from __future__ import annotations

import pytest

from screen_adapt.api.geometry import CanvasGeometry, DesignSize, LogicalSize, ScaleRatio, ViewSize
from screen_adapt.runtime.canvas_sizer import resolve_logical_size, size_canvas

_UPRIGHT = DesignSize(width=800, height=1600, x=800, y=1600)
_ROTATED = DesignSize(width=800, height=1600, x=1600, y=800)


def test_direct_modes_keep_design_size_as_backing_buffer() -> None:
    canvas = size_canvas(
        ratio=ScaleRatio(0.625, 0.625),
        design=_UPRIGHT,
        view=ViewSize(400, 1000),
        force_rotate=False,
        scale_mode="NO_BORDER",
    )
    assert canvas == CanvasGeometry(800.0, 1600.0, 500, 1000)


def test_fixed_width_grows_height_to_fill_viewport() -> None:
    canvas = size_canvas(
        ratio=ScaleRatio(0.5, 0.5),
        design=_UPRIGHT,
        view=ViewSize(400, 1000),
        force_rotate=False,
        scale_mode="FIXED_WIDTH",
    )
    assert canvas == CanvasGeometry(800.0, 2000.0, 400, 1000)


def test_fixed_height_grows_width_to_fill_viewport() -> None:
    canvas = size_canvas(
        ratio=ScaleRatio(0.625, 0.625),
        design=_UPRIGHT,
        view=ViewSize(400, 1000),
        force_rotate=False,
        scale_mode="FIXED_HEIGHT",
    )
    assert canvas == CanvasGeometry(640.0, 1600.0, 400, 1000)


def test_fixed_width_under_rotation_locks_backing_height() -> None:
    canvas = size_canvas(
        ratio=ScaleRatio(0.5, 0.5),
        design=_ROTATED,
        view=ViewSize(1000, 400),
        force_rotate=True,
        scale_mode="FIXED_WIDTH",
    )
    assert canvas == CanvasGeometry(2000.0, 800.0, 1000, 400)
    assert resolve_logical_size(canvas, force_rotate=True) == LogicalSize(800.0, 2000.0)


def test_fixed_height_under_rotation_locks_backing_width() -> None:
    canvas = size_canvas(
        ratio=ScaleRatio(0.625, 0.625),
        design=_ROTATED,
        view=ViewSize(1000, 400),
        force_rotate=True,
        scale_mode="FIXED_HEIGHT",
    )
    assert canvas == CanvasGeometry(1600.0, 640.0, 1000, 400)
    assert resolve_logical_size(canvas, force_rotate=True) == LogicalSize(640.0, 1600.0)


@pytest.mark.parametrize("force_rotate", [False, True])
def test_style_size_is_floored_product_of_actual_and_ratio(force_rotate: bool) -> None:
    canvas = size_canvas(
        ratio=ScaleRatio(0.3, 0.7),
        design=_ROTATED if force_rotate else _UPRIGHT,
        view=ViewSize(333, 777),
        force_rotate=force_rotate,
        scale_mode="EXACT_FIT",
    )
    assert canvas.style_width == int(canvas.actual_width * 0.3)
    assert canvas.style_height == int(canvas.actual_height * 0.7)
