"""Backing-buffer and displayed size derivation."""

from __future__ import annotations

import math

from screen_adapt.api.config import ScaleMode
from screen_adapt.api.geometry import CanvasGeometry, DesignSize, LogicalSize, ScaleRatio, ViewSize


def size_canvas(
    *,
    ratio: ScaleRatio,
    design: DesignSize,
    view: ViewSize,
    force_rotate: bool,
    scale_mode: ScaleMode,
) -> CanvasGeometry:
    """Return backing-buffer size and its displayed size for one pass.

    Fixed modes keep the locked design axis and grow the other one until the
    displayed surface fills the viewport along it. Other modes keep the design
    size and leave all fitting to the display ratio.
    """
    if scale_mode == "FIXED_WIDTH":
        if force_rotate:
            actual_width = float(math.floor(view.x / ratio.x))
            actual_height = float(design.y)
        else:
            actual_width = float(design.x)
            actual_height = float(math.floor(view.y / ratio.x))
    elif scale_mode == "FIXED_HEIGHT":
        if force_rotate:
            actual_width = float(design.x)
            actual_height = float(math.floor(view.y / ratio.y))
        else:
            actual_width = float(math.floor(view.x / ratio.y))
            actual_height = float(design.y)
    else:
        actual_width = float(design.x)
        actual_height = float(design.y)
    return CanvasGeometry(
        actual_width=actual_width,
        actual_height=actual_height,
        style_width=math.floor(actual_width * ratio.x),
        style_height=math.floor(actual_height * ratio.y),
    )


def resolve_logical_size(canvas: CanvasGeometry, *, force_rotate: bool) -> LogicalSize:
    """Undo the rotation axis swap so callers see the authored orientation."""
    if force_rotate:
        return LogicalSize(width=canvas.actual_height, height=canvas.actual_width)
    return LogicalSize(width=canvas.actual_width, height=canvas.actual_height)
