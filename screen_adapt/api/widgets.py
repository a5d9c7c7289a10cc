"""Widget anchor specification."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from screen_adapt.api.errors import InvalidArgumentError

_EDGE_KEYS = ("top", "left", "right", "bottom")
_CENTER_KEYS = {
    "horizontal_center": "horizontal_center",
    "horizontalCenter": "horizontal_center",
    "vertical_center": "vertical_center",
    "verticalCenter": "vertical_center",
}


@dataclass(frozen=True, slots=True)
class WidgetAnchor:
    """Edge offsets in design-space pixels and center flags for one widget."""

    top: float | None = None
    left: float | None = None
    right: float | None = None
    bottom: float | None = None
    horizontal_center: bool = False
    vertical_center: bool = False

    @classmethod
    def from_mapping(cls, spec: Mapping[str, object]) -> WidgetAnchor:
        """Build an anchor from a position mapping, rejecting malformed keys."""
        values: dict[str, Any] = {}
        for key, value in spec.items():
            if key in _EDGE_KEYS:
                if value is None:
                    continue
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise InvalidArgumentError(f"anchor edge {key!r} must be a number, got {value!r}")
                values[key] = float(value)
                continue
            field_name = _CENTER_KEYS.get(key)
            if field_name is None:
                raise InvalidArgumentError(f"unknown anchor key {key!r}")
            if not isinstance(value, bool):
                raise InvalidArgumentError(f"anchor flag {key!r} must be a bool, got {value!r}")
            values[field_name] = value
        return cls(**values)


def coerce_widget_anchor(spec: WidgetAnchor | Mapping[str, object]) -> WidgetAnchor:
    """Return ``spec`` as a ``WidgetAnchor``."""
    if isinstance(spec, WidgetAnchor):
        return spec
    if isinstance(spec, Mapping):
        return WidgetAnchor.from_mapping(spec)
    raise InvalidArgumentError(f"anchor spec must be a mapping or WidgetAnchor, got {spec!r}")


__all__ = ["WidgetAnchor", "coerce_widget_anchor"]
