"""Centering of the displayed surface inside the viewport."""

from __future__ import annotations

import math
from dataclasses import dataclass

from screen_adapt.api.geometry import CanvasGeometry, ViewSize
from screen_adapt.api.host import StagePort


@dataclass(frozen=True, slots=True)
class SurfaceAlignment:
    """Surface displacement plus the host-native alignment flags."""

    left: int
    top: int
    page_align_h: bool
    page_align_v: bool


def centering_offset(
    content_width: float,
    content_height: float,
    container_width: float,
    container_height: float,
) -> tuple[int, int]:
    """Return floor-halved (x, y) gaps between container and content."""
    return (
        math.floor((container_width - content_width) / 2),
        math.floor((container_height - content_height) / 2),
    )


def compute_surface_alignment(
    *,
    canvas: CanvasGeometry,
    view: ViewSize,
    align_h: bool,
    align_v: bool,
) -> SurfaceAlignment:
    """Resolve how the displayed surface is centered in the viewport.

    Only overscan (a non-positive gap) is displaced here; a surface smaller
    than the viewport is centered by the host through the page flags.
    """
    offset_x, offset_y = centering_offset(canvas.style_width, canvas.style_height, view.x, view.y)
    return SurfaceAlignment(
        left=offset_x if align_h and offset_x <= 0 else 0,
        top=offset_y if align_v and offset_y <= 0 else 0,
        page_align_h=align_h,
        page_align_v=align_v,
    )


def apply_surface_alignment(stage: StagePort, alignment: SurfaceAlignment) -> None:
    stage.set_page_alignment(alignment.page_align_h, alignment.page_align_v)
    stage.set_surface_offset(alignment.left, alignment.top)
