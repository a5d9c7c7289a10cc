"""Re-anchoring of registered widgets after each adaptation pass."""

from __future__ import annotations

import math

from screen_adapt.api.geometry import CanvasGeometry, LogicalSize, Margins, ScaleRatio, ViewSize
from screen_adapt.api.host import Positionable
from screen_adapt.api.widgets import WidgetAnchor


def compute_widget_margins(
    *,
    canvas: CanvasGeometry,
    view: ViewSize,
    ratio: ScaleRatio,
    force_rotate: bool,
    align_h: bool,
    align_v: bool,
) -> Margins:
    """Distribute displayed overflow, in design pixels, to the widget edges.

    Only overflow counts; a letterbox gap yields zero margins. Rotation swaps
    which overflow lands on the horizontal edges. With an alignment flag off,
    the whole margin goes to the left/top edge.
    """
    overflow_x = max(0, math.floor((canvas.style_width - view.x) / ratio.x))
    overflow_y = max(0, math.floor((canvas.style_height - view.y) / ratio.y))
    if force_rotate:
        horizontal, vertical = overflow_y, overflow_x
    else:
        horizontal, vertical = overflow_x, overflow_y

    left = right = math.floor(horizontal / 2)
    top = bottom = math.floor(vertical / 2)
    if not align_h:
        left *= 2
        right = 0
    if not align_v:
        top *= 2
        bottom = 0
    return Margins(left=left, right=right, top=top, bottom=bottom)


def position_widget(
    target: Positionable,
    anchor: WidgetAnchor,
    *,
    margins: Margins,
    logical_size: LogicalSize,
) -> None:
    """Apply every anchor key to ``target``; later keys override earlier ones."""
    if anchor.right is not None:
        target.x = logical_size.width - (margins.right + anchor.right + target.get_bounds().w)
    if anchor.bottom is not None:
        target.y = logical_size.height - (margins.bottom + anchor.bottom + target.get_bounds().h)
    if anchor.left is not None:
        target.x = margins.left + anchor.left
    if anchor.top is not None:
        target.y = margins.top + anchor.top
    if anchor.horizontal_center:
        target.set_anchor(x=0.5)
        target.x = math.floor(logical_size.width / 2)
    if anchor.vertical_center:
        target.set_anchor(y=0.5)
        target.y = math.floor(logical_size.height / 2)
