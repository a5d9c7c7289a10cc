"""Geometry value types shared by every adaptation stage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

Orientation: TypeAlias = Literal["portrait", "landscape"]


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle."""

    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True, slots=True)
class ViewSize:
    """Physical viewport extents, already assigned to orientation axes."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class DesignSize:
    """Configured design size plus its rotation-aligned axes.

    ``width``/``height`` are the authored dimensions. ``x``/``y`` are the same
    values swapped when forced rotation is active, so ``x`` always runs along
    the viewport's ``x`` axis.
    """

    width: float
    height: float
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class ScaleRatio:
    """Backing-buffer pixel to displayed pixel factor, per axis."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class CanvasGeometry:
    """Backing-buffer resolution and the displayed size derived from it."""

    actual_width: float
    actual_height: float
    style_width: int
    style_height: int


@dataclass(frozen=True, slots=True)
class LogicalSize:
    """Surface size as application code should see it, rotation removed."""

    width: float
    height: float


@dataclass(frozen=True, slots=True)
class Margins:
    """Design-space overflow distributed to each edge."""

    left: int
    right: int
    top: int
    bottom: int


__all__ = [
    "CanvasGeometry",
    "DesignSize",
    "LogicalSize",
    "Margins",
    "Orientation",
    "Rect",
    "ScaleRatio",
    "ViewSize",
]
