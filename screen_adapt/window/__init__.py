"""Window subsystem adapters."""

from screen_adapt.window.rendercanvas_viewport import (
    RenderCanvasViewport,
    create_rendercanvas_viewport,
    extract_resize_dimensions,
    get_canvas_logical_size,
)

__all__ = [
    "RenderCanvasViewport",
    "create_rendercanvas_viewport",
    "extract_resize_dimensions",
    "get_canvas_logical_size",
]
