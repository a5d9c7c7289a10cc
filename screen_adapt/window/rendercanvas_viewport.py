"""Rendercanvas-backed viewport measurement and resize forwarding."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

_LOG = logging.getLogger("screen_adapt.window")


class ResizeSink(Protocol):
    def notify_resize(self, width: float, height: float) -> bool: ...


def get_canvas_logical_size(canvas: Any) -> tuple[float, float] | None:
    """Read logical canvas size from backend in a tolerant way."""
    get_logical_size = getattr(canvas, "get_logical_size", None)
    if not callable(get_logical_size):
        return None
    try:
        size = get_logical_size()
    except Exception:
        _LOG.debug("canvas_logical_size_failed", exc_info=True)
        return None
    if not (isinstance(size, (tuple, list)) and len(size) >= 2):
        return None
    width, height = size[0], size[1]
    if not isinstance(width, (int, float)) or not isinstance(height, (int, float)):
        return None
    return float(width), float(height)


def extract_resize_dimensions(event: object) -> tuple[float | None, float | None]:
    """Extract width/height from heterogeneous resize payloads."""
    width = _event_value(event, "width")
    height = _event_value(event, "height")
    if isinstance(width, (int, float)) and isinstance(height, (int, float)):
        return float(width), float(height)
    for key in ("size", "logical_size"):
        size = _event_value(event, key)
        if isinstance(size, (tuple, list)) and len(size) >= 2:
            w, h = size[0], size[1]
            if isinstance(w, (int, float)) and isinstance(h, (int, float)):
                return float(w), float(h)
    return None, None


@dataclass(slots=True)
class RenderCanvasViewport:
    """Viewport provider over a rendercanvas canvas."""

    canvas: Any
    _sinks: list[ResizeSink] = field(default_factory=list)
    _last_size: tuple[float, float] = field(default=(0.0, 0.0), repr=False)

    def __post_init__(self) -> None:
        add_handler = getattr(self.canvas, "add_event_handler", None)
        if not callable(add_handler):
            return
        try:
            add_handler(self._on_resize, "resize")
        except Exception:
            _LOG.debug("resize_event_binding_failed", exc_info=True)

    def viewport_size(self) -> tuple[float, float]:
        size = get_canvas_logical_size(self.canvas)
        if size is None:
            return self._last_size
        return size

    def bind(self, sink: ResizeSink) -> None:
        """Forward every resize event to ``sink.notify_resize``."""
        self._sinks.append(sink)

    def _on_resize(self, event: object) -> None:
        width, height = extract_resize_dimensions(event)
        if width is None or height is None:
            polled = get_canvas_logical_size(self.canvas)
            if polled is None:
                return
            width, height = polled
        self._last_size = (width, height)
        for sink in tuple(self._sinks):
            sink.notify_resize(width, height)
        request_draw = getattr(self.canvas, "request_draw", None)
        if callable(request_draw):
            try:
                request_draw()
            except TypeError:
                return


def create_rendercanvas_viewport(
    canvas: Any | None = None,
    *,
    width: int = 750,
    height: int = 1334,
    title: str = "Screen Adaptation",
) -> RenderCanvasViewport:
    """Create a viewport over an existing or newly created rendercanvas canvas."""
    if canvas is not None:
        return RenderCanvasViewport(canvas=canvas)
    try:
        import rendercanvas.auto as rc_auto
    except Exception as exc:
        raise RuntimeError(
            "Render canvas backend unavailable. Install a desktop backend such as glfw or pyside6."
        ) from exc
    canvas_cls = getattr(rc_auto, "RenderCanvas", None)
    if canvas_cls is None:
        raise RuntimeError("rendercanvas.auto did not expose RenderCanvas.")
    return RenderCanvasViewport(canvas=canvas_cls(size=(int(width), int(height)), title=title))


def _event_value(event: object, key: str, default: object | None = None) -> object | None:
    if isinstance(event, dict):
        return event.get(key, default)
    return getattr(event, key, default)
