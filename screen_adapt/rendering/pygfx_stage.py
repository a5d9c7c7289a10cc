"""pygfx-backed stage, widget and full-bleed shape adapters."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any

from screen_adapt.api.geometry import Rect
from screen_adapt.window.rendercanvas_viewport import get_canvas_logical_size

_gfx_import_error: Exception | None
try:
    import pygfx as gfx
except Exception as exc:  # pragma: no cover - import guard for environments without graphics deps
    gfx = None
    _gfx_import_error = exc
else:
    _gfx_import_error = None

logger = logging.getLogger(__name__)

_EMPTY_RECT = Rect(0.0, 0.0, 0.0, 0.0)


def _require_gfx() -> Any:
    if gfx is None:
        raise RuntimeError(
            f"pygfx dependency unavailable: {_gfx_import_error!r}. Install 'pygfx' and 'wgpu'."
        )
    return gfx


@dataclass(slots=True)
class PygfxStage:
    """Stage port over a pygfx scene.

    Content nodes live in ``content``, nested in the rotatable ``world`` group
    and offset by the rotation pivot. The camera always spans the backing
    buffer with y pointing down and does not keep its aspect, so a
    non-uniform display scale stretches the content. World and camera bounds
    are recorded for callers but do not move the camera. Display scale and
    surface offset are applied at render time through the renderer's
    viewport rect.
    """

    renderer: Any = None
    canvas: Any = None
    game_width: float = 0.0
    game_height: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0
    world_angle: float = 0.0
    world_pivot: tuple[float, float] = (0.0, 0.0)
    world_bounds: Rect = _EMPTY_RECT
    camera_bounds: Rect = _EMPTY_RECT
    surface_offset: tuple[int, int] = (0, 0)
    page_align: tuple[bool, bool] = (False, False)
    scene: Any = field(init=False)
    world: Any = field(init=False)
    content: Any = field(init=False)
    camera: Any = field(init=False)

    def __post_init__(self) -> None:
        module = _require_gfx()
        self.scene = module.Scene()
        self.world = module.Group()
        self.content = module.Group()
        self.world.add(self.content)
        self.scene.add(self.world)
        self.camera = module.OrthographicCamera(1, 1, maintain_aspect=False)
        self._update_camera_projection()

    def add(self, node: Any) -> None:
        """Attach ``node`` to the rotatable content layer."""
        self.content.add(node)

    def set_game_size(self, width: float, height: float) -> None:
        self.game_width = float(width)
        self.game_height = float(height)
        self._update_camera_projection()

    def set_user_scale(self, scale_x: float, scale_y: float) -> None:
        self.scale_x = float(scale_x)
        self.scale_y = float(scale_y)

    def set_world_bounds(self, bounds: Rect) -> None:
        self.world_bounds = bounds

    def set_world_rotation(self, angle: float, pivot_x: float, pivot_y: float) -> None:
        self.world_angle = float(angle)
        self.world_pivot = (float(pivot_x), float(pivot_y))
        self.world.local.euler_z = math.radians(self.world_angle)
        self.content.local.position = (-self.world_pivot[0], -self.world_pivot[1], 0.0)

    def set_camera_bounds(self, bounds: Rect) -> None:
        self.camera_bounds = bounds

    def set_surface_offset(self, left: int, top: int) -> None:
        self.surface_offset = (int(left), int(top))

    def set_page_alignment(self, horizontal: bool, vertical: bool) -> None:
        self.page_align = (bool(horizontal), bool(vertical))

    def display_size(self) -> tuple[int, int]:
        return (
            math.floor(self.game_width * self.scale_x),
            math.floor(self.game_height * self.scale_y),
        )

    def viewport_rect(self, viewport_width: float, viewport_height: float) -> Rect:
        """Return where the displayed surface lands inside the viewport."""
        width, height = self.display_size()
        left, top = self.surface_offset
        if self.page_align[0] and viewport_width > width:
            left = math.floor((viewport_width - width) / 2)
        if self.page_align[1] and viewport_height > height:
            top = math.floor((viewport_height - height) / 2)
        return Rect(x=float(left), y=float(top), w=float(width), h=float(height))

    def render(self) -> None:
        """Render the scene into the displayed surface rect."""
        if self.renderer is None:
            raise RuntimeError("PygfxStage.render requires a renderer.")
        viewport = get_canvas_logical_size(self.canvas)
        if viewport is None:
            width, height = self.display_size()
            viewport = (float(width), float(height))
        rect = self.viewport_rect(*viewport)
        self.renderer.render(self.scene, self.camera, rect=(rect.x, rect.y, rect.w, rect.h))

    def _update_camera_projection(self) -> None:
        width = max(1.0, self.game_width)
        height = max(1.0, self.game_height)
        if hasattr(self.camera, "width"):
            self.camera.width = width
        if hasattr(self.camera, "height"):
            self.camera.height = height
        self.camera.local.position = (width / 2.0, height / 2.0, 0.0)
        self.camera.local.scale_y = -1.0


class PygfxRect:
    """Filled rectangle that can be redrawn to any extent."""

    def __init__(self, color: str = "#000000", z: float = -100.0) -> None:
        module = _require_gfx()
        self.z = float(z)
        self.rect = _EMPTY_RECT
        self.node = module.Mesh(
            module.plane_geometry(1, 1),
            module.MeshBasicMaterial(color=color),
        )

    def draw_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.rect = Rect(x=float(x), y=float(y), w=float(width), h=float(height))
        self.node.local.scale = (max(self.rect.w, 1e-6), max(self.rect.h, 1e-6), 1.0)
        self.node.local.position = (
            self.rect.x + self.rect.w / 2.0,
            self.rect.y + self.rect.h / 2.0,
            self.z,
        )


class PygfxWidget:
    """Positionable wrapper over a pygfx node whose geometry starts at its top-left."""

    def __init__(self, node: Any, width: float, height: float, z: float = 0.0) -> None:
        self.node = node
        self.width = float(width)
        self.height = float(height)
        self.z = float(z)
        self.anchor_x = 0.0
        self.anchor_y = 0.0
        self._x = 0.0
        self._y = 0.0
        self._sync()

    @property
    def x(self) -> float:
        return self._x

    @x.setter
    def x(self, value: float) -> None:
        self._x = float(value)
        self._sync()

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, value: float) -> None:
        self._y = float(value)
        self._sync()

    def set_anchor(self, *, x: float | None = None, y: float | None = None) -> None:
        if x is not None:
            self.anchor_x = float(x)
        if y is not None:
            self.anchor_y = float(y)
        self._sync()

    def get_bounds(self) -> Rect:
        return Rect(
            x=self._x - self.anchor_x * self.width,
            y=self._y - self.anchor_y * self.height,
            w=self.width,
            h=self.height,
        )

    def _sync(self) -> None:
        bounds = self.get_bounds()
        self.node.local.position = (bounds.x, bounds.y, self.z)
