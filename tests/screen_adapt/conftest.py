from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from screen_adapt.api.geometry import Rect


@dataclass(slots=True)
class FakeViewport:
    width: float
    height: float
    queries: int = 0

    def viewport_size(self) -> tuple[float, float]:
        self.queries += 1
        return (self.width, self.height)

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height


@dataclass(slots=True)
class FakeStage:
    calls: list[tuple[str, tuple[object, ...]]] = field(default_factory=list)
    game_size: tuple[float, float] | None = None
    user_scale: tuple[float, float] | None = None
    world_bounds: Rect | None = None
    world_rotation: tuple[float, float, float] | None = None
    camera_bounds: Rect | None = None
    surface_offset: tuple[int, int] | None = None
    page_alignment: tuple[bool, bool] | None = None

    def set_game_size(self, width: float, height: float) -> None:
        self.calls.append(("set_game_size", (width, height)))
        self.game_size = (width, height)

    def set_user_scale(self, scale_x: float, scale_y: float) -> None:
        self.calls.append(("set_user_scale", (scale_x, scale_y)))
        self.user_scale = (scale_x, scale_y)

    def set_world_bounds(self, bounds: Rect) -> None:
        self.calls.append(("set_world_bounds", (bounds,)))
        self.world_bounds = bounds

    def set_world_rotation(self, angle: float, pivot_x: float, pivot_y: float) -> None:
        self.calls.append(("set_world_rotation", (angle, pivot_x, pivot_y)))
        self.world_rotation = (angle, pivot_x, pivot_y)

    def set_camera_bounds(self, bounds: Rect) -> None:
        self.calls.append(("set_camera_bounds", (bounds,)))
        self.camera_bounds = bounds

    def set_surface_offset(self, left: int, top: int) -> None:
        self.calls.append(("set_surface_offset", (left, top)))
        self.surface_offset = (left, top)

    def set_page_alignment(self, horizontal: bool, vertical: bool) -> None:
        self.calls.append(("set_page_alignment", (horizontal, vertical)))
        self.page_alignment = (horizontal, vertical)


class FakeWidget:
    def __init__(self, width: float = 40.0, height: float = 20.0) -> None:
        self.x = 0.0
        self.y = 0.0
        self.width = width
        self.height = height
        self.anchor_x = 0.0
        self.anchor_y = 0.0

    def set_anchor(self, *, x: float | None = None, y: float | None = None) -> None:
        if x is not None:
            self.anchor_x = x
        if y is not None:
            self.anchor_y = y

    def get_bounds(self) -> Rect:
        return Rect(
            self.x - self.anchor_x * self.width,
            self.y - self.anchor_y * self.height,
            self.width,
            self.height,
        )


class FakeShape:
    def __init__(self) -> None:
        self.rects: list[tuple[float, float, float, float]] = []

    def draw_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.rects.append((x, y, width, height))


@pytest.fixture
def stage() -> FakeStage:
    return FakeStage()


@pytest.fixture
def viewport() -> FakeViewport:
    return FakeViewport(width=400.0, height=1000.0)
