"""Per-policy scale ratio resolution."""

from __future__ import annotations

import math

from screen_adapt.api.config import ScaleMode
from screen_adapt.api.errors import ConfigurationError
from screen_adapt.api.geometry import DesignSize, ScaleRatio, ViewSize


def resolve_scale_ratio(
    *,
    force_rotate: bool,
    scale_mode: ScaleMode | str,
    content: DesignSize,
    container: ViewSize,
) -> ScaleRatio:
    """Return the ratio mapping ``content`` onto ``container`` for ``scale_mode``.

    Both sizes must already be axis-aligned for ``force_rotate``. The fixed
    modes lock the axis carrying the authored width (or height), which is
    ``y`` (or ``x``) while content is rotated.
    """
    if not (_is_positive(content.x) and _is_positive(content.y)):
        raise ConfigurationError(
            f"content extents must be positive and finite, got ({content.x!r}, {content.y!r})"
        )
    radio_x = float(container.x) / float(content.x)
    radio_y = float(container.y) / float(content.y)
    if scale_mode == "SHOW_ALL":
        smallest = min(radio_x, radio_y)
        return ScaleRatio(x=smallest, y=smallest)
    if scale_mode == "EXACT_FIT":
        return ScaleRatio(x=radio_x, y=radio_y)
    if scale_mode == "NO_BORDER":
        largest = max(radio_x, radio_y)
        return ScaleRatio(x=largest, y=largest)
    if scale_mode == "FIXED_WIDTH":
        locked = radio_y if force_rotate else radio_x
        return ScaleRatio(x=locked, y=locked)
    if scale_mode == "FIXED_HEIGHT":
        locked = radio_x if force_rotate else radio_y
        return ScaleRatio(x=locked, y=locked)
    raise ConfigurationError(f"unrecognized scale mode {scale_mode!r}")


def _is_positive(value: float) -> bool:
    return math.isfinite(value) and value > 0
