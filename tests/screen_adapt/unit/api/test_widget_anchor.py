from __future__ import annotations

import pytest

from screen_adapt.api.errors import InvalidArgumentError
from screen_adapt.api.widgets import WidgetAnchor, coerce_widget_anchor


def test_from_mapping_accepts_edges_and_camel_case_centers() -> None:
    anchor = WidgetAnchor.from_mapping(
        {"top": 30, "right": 12.5, "horizontalCenter": True, "vertical_center": False}
    )
    assert anchor == WidgetAnchor(top=30.0, right=12.5, horizontal_center=True)


def test_none_edges_are_ignored() -> None:
    assert WidgetAnchor.from_mapping({"left": None}) == WidgetAnchor()


@pytest.mark.parametrize(
    "spec",
    [
        {"middle": 3},
        {"top": "30"},
        {"left": True},
        {"horizontalCenter": 1},
    ],
)
def test_malformed_specs_raise(spec: dict[str, object]) -> None:
    with pytest.raises(InvalidArgumentError):
        WidgetAnchor.from_mapping(spec)


def test_coerce_passes_anchor_through_and_rejects_other_types() -> None:
    anchor = WidgetAnchor(bottom=4.0)
    assert coerce_widget_anchor(anchor) is anchor
    assert coerce_widget_anchor({"bottom": 4}) == anchor
    with pytest.raises(InvalidArgumentError):
        coerce_widget_anchor([("top", 1)])  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        coerce_widget_anchor(None)  # type: ignore[arg-type]
