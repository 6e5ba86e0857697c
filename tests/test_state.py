"""Tests for aclayout/state.py: dict form of marker lists."""
import logging

from aclayout import LayoutItem, LayoutState


def test_serialize_shape(two_items):
    assert LayoutState.serialize(two_items)[1] == {
        "id": 2, "kind": "outdoor", "x": 91.0, "y": 40.0, "side": "right"}


def test_clone_preserves_order_and_values(two_items):
    assert LayoutState.clone(reversed(two_items)) == list(reversed(two_items))


def test_unknown_side_falls_back_to_kind_default():
    items = LayoutState.deserialize([
        {"id": 1, "kind": "indoor", "x": 50, "y": 19, "side": "diagonal"},
        {"id": 2, "kind": "outdoor", "x": 50, "y": 89},
    ])
    assert [it.side for it in items] == ["top", "bottom"]


def test_coordinates_clamped(caplog):
    with caplog.at_level(logging.WARNING, logger="aclayout.state"):
        items = LayoutState.deserialize([{"id": 4, "kind": "outdoor", "x": 101.5, "y": -3, "side": "left"}])
    assert items == [LayoutItem(4, "outdoor", 100.0, 0.0, "left")]
    assert "clamped" in caplog.text


def test_malformed_entries_skipped(caplog):
    with caplog.at_level(logging.WARNING, logger="aclayout.state"):
        items = LayoutState.deserialize([
            {"id": 1, "kind": "ceiling", "x": 1, "y": 1, "side": "top"},
            {"id": 2, "kind": "indoor", "x": "abc", "y": 1, "side": "top"},
            {"kind": "indoor", "x": 1, "y": 1, "side": "top"},
            {"id": "3", "kind": "indoor", "x": "20.5", "y": 19, "side": "top"},
        ])
    assert items == [LayoutItem(3, "indoor", 20.5, 19.0, "top")]
    assert caplog.text.count("skipping") == 3


def test_duplicate_ids_renumbered(caplog):
    with caplog.at_level(logging.WARNING, logger="aclayout.state"):
        items = LayoutState.deserialize([
            {"id": 1, "kind": "indoor", "x": 50, "y": 19, "side": "top"},
            {"id": 1, "kind": "outdoor", "x": 91, "y": 40, "side": "right"},
            {"id": 3, "kind": "indoor", "x": 21, "y": 50, "side": "left"},
        ])
    assert [it.id for it in items] == [1, 4, 3]
    assert items[1] == LayoutItem(4, "outdoor", 91.0, 40.0, "right")
    assert "renumbered" in caplog.text
