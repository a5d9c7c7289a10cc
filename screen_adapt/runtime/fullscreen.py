"""Full-bleed shape fitting."""

from __future__ import annotations

from screen_adapt.api.geometry import CanvasGeometry
from screen_adapt.api.host import FitShape


def fit_shape(shape: FitShape, canvas: CanvasGeometry) -> None:
    """Redraw ``shape`` over the whole backing buffer, in design pixels."""
    shape.draw_rect(0.0, 0.0, canvas.actual_width, canvas.actual_height)
