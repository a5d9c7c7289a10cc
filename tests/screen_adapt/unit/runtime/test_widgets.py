from __future__ import annotations

import math

import pytest

from screen_adapt.api.config import AdaptationConfig
from screen_adapt.api.geometry import CanvasGeometry, LogicalSize, Margins, ScaleRatio, ViewSize
from screen_adapt.api.widgets import WidgetAnchor
from screen_adapt.runtime.adaptation_pass import run_adaptation_pass
from screen_adapt.runtime.widgets import compute_widget_margins, position_widget
from tests.screen_adapt.conftest import FakeWidget

_OVERSCAN = CanvasGeometry(actual_width=800.0, actual_height=1600.0, style_width=500, style_height=1000)


def test_margins_split_horizontal_overflow_between_edges() -> None:
    margins = compute_widget_margins(
        canvas=_OVERSCAN,
        view=ViewSize(400, 1000),
        ratio=ScaleRatio(0.625, 0.625),
        force_rotate=False,
        align_h=True,
        align_v=True,
    )
    assert margins == Margins(left=80, right=80, top=0, bottom=0)


def test_margins_go_to_left_edge_when_horizontal_alignment_off() -> None:
    margins = compute_widget_margins(
        canvas=_OVERSCAN,
        view=ViewSize(400, 1000),
        ratio=ScaleRatio(0.625, 0.625),
        force_rotate=False,
        align_h=False,
        align_v=False,
    )
    assert margins == Margins(left=160, right=0, top=0, bottom=0)


def test_rotation_moves_vertical_overflow_to_horizontal_edges() -> None:
    margins = compute_widget_margins(
        canvas=CanvasGeometry(1600.0, 800.0, 1000, 500),
        view=ViewSize(1000, 400),
        ratio=ScaleRatio(0.625, 0.625),
        force_rotate=True,
        align_h=True,
        align_v=True,
    )
    assert margins == Margins(left=80, right=80, top=0, bottom=0)


def test_letterbox_gap_produces_no_margins() -> None:
    margins = compute_widget_margins(
        canvas=CanvasGeometry(800.0, 1600.0, 400, 800),
        view=ViewSize(400, 1000),
        ratio=ScaleRatio(0.5, 0.5),
        force_rotate=False,
        align_h=True,
        align_v=True,
    )
    assert margins == Margins(0, 0, 0, 0)


def test_edge_anchors_resolve_against_logical_size() -> None:
    widget = FakeWidget(width=40, height=50)
    position_widget(
        widget,
        WidgetAnchor(right=30, bottom=20),
        margins=Margins(left=80, right=80, top=5, bottom=5),
        logical_size=LogicalSize(800.0, 1600.0),
    )
    assert (widget.x, widget.y) == (650.0, 1525.0)

    position_widget(
        widget,
        WidgetAnchor(left=10, top=12),
        margins=Margins(left=80, right=80, top=5, bottom=5),
        logical_size=LogicalSize(800.0, 1600.0),
    )
    assert (widget.x, widget.y) == (90.0, 17.0)


def test_left_overrides_right_when_both_given() -> None:
    widget = FakeWidget()
    position_widget(
        widget,
        WidgetAnchor(left=10, right=30),
        margins=Margins(0, 0, 0, 0),
        logical_size=LogicalSize(800.0, 1600.0),
    )
    assert widget.x == 10.0


def test_center_flags_move_pivot_and_center_widget() -> None:
    widget = FakeWidget()
    position_widget(
        widget,
        WidgetAnchor(horizontal_center=True, vertical_center=True),
        margins=Margins(0, 0, 0, 0),
        logical_size=LogicalSize(801.0, 1601.0),
    )
    assert (widget.anchor_x, widget.anchor_y) == (0.5, 0.5)
    assert (widget.x, widget.y) == (400, 800)


@pytest.mark.parametrize("scale_mode", ("SHOW_ALL", "EXACT_FIT", "NO_BORDER", "FIXED_WIDTH", "FIXED_HEIGHT"))
@pytest.mark.parametrize(("width", "height"), ((400.0, 1000.0), (1000.0, 400.0), (375.0, 812.0)))
@pytest.mark.parametrize("align_h", (True, False))
def test_right_anchor_keeps_distance_plus_margin(
    scale_mode: str, width: float, height: float, align_h: bool
) -> None:
    result = run_adaptation_pass(
        AdaptationConfig(design_width=800, design_height=1600, scale_mode=scale_mode, align_h=align_h),
        width,
        height,
    )
    widget = FakeWidget(width=40, height=20)

    position_widget(
        widget,
        WidgetAnchor(right=30),
        margins=result.margins,
        logical_size=result.logical_size,
    )

    gap = result.logical_size.width - widget.x - widget.get_bounds().w
    assert math.isclose(gap, 30 + result.margins.right, abs_tol=1.0)
