"""Tests for aclayout/drag.py: pointer state machine."""
import pytest

import aclayout.drag as drag_mod
from aclayout import DragController, Dragging, Idle, ItemCollection, LayoutItem

CANVAS = 600.0


@pytest.fixture
def items():
    return ItemCollection([LayoutItem(1, "indoor", 50, 35, "top"),
                           LayoutItem(2, "outdoor", 50, 85, "bottom")])


@pytest.fixture
def ctl(items):
    return DragController(items)


class TestStates:
    def test_starts_idle(self, ctl):
        assert ctl.state == Idle()
        assert not ctl.is_dragging

    def test_pointer_down_enters_dragging(self, ctl):
        assert ctl.pointer_down(0, 1, 300, 210)
        assert isinstance(ctl.state, Dragging)
        assert ctl.state.pointer_id == 0
        assert (ctl.state.origin_x, ctl.state.origin_y) == (300, 210)
        assert ctl.state.origin_item == LayoutItem(1, "indoor", 50, 35, "top")

    def test_unknown_item_is_ignored(self, ctl):
        assert not ctl.pointer_down(0, 99, 0, 0)
        assert ctl.state == Idle()

    def test_second_drag_refused(self, ctl):
        ctl.pointer_down(0, 1, 300, 210)
        assert not ctl.pointer_down(0, 2, 300, 510)
        assert not ctl.pointer_down(1, 2, 300, 510)
        assert ctl.dragging_id == 1

    def test_pointer_up_returns_to_idle(self, ctl):
        ctl.pointer_down(0, 1, 300, 210)
        assert ctl.pointer_up(0)
        assert ctl.state == Idle()

    def test_pointer_up_from_other_pointer_ignored(self, ctl):
        ctl.pointer_down(0, 1, 300, 210)
        assert not ctl.pointer_up(5)
        assert ctl.is_dragging

    def test_canvas_leave_ends_any_drag(self, ctl):
        ctl.pointer_down(3, 1, 300, 210)
        assert ctl.pointer_leave(None)
        assert ctl.state == Idle()


class TestMove:
    def test_move_snaps_to_top(self, ctl, items):
        ctl.pointer_down(0, 1, 300, 210)
        # 18% up -> proposed (50, 17)
        moved = ctl.pointer_move(0, 300, 210 - 0.18 * CANVAS, CANVAS, CANVAS)
        assert (moved.x, moved.y, moved.side) == (50, 19, "top")
        assert items.get(1) == moved

    def test_move_snaps_to_right_wall(self, ctl, items):
        ctl.pointer_down(0, 1, 300, 210)
        moved = ctl.pointer_move(0, 300 + 180, 210 + 90, CANVAS, CANVAS)
        assert moved.side == "right"
        assert moved.x == 79
        assert moved.y == pytest.approx(50)

    def test_delta_is_relative_to_drag_origin(self, ctl):
        ctl.pointer_down(0, 1, 300, 210)
        ctl.pointer_move(0, 480, 300, CANVAS, CANVAS)
        # back to the origin pointer: proposed is the pre-drag position again
        moved = ctl.pointer_move(0, 300, 210, CANVAS, CANVAS)
        assert (moved.x, moved.y, moved.side) == (50, 19, "top")

    def test_delta_uses_each_canvas_axis(self, ctl):
        ctl.pointer_down(0, 1, 0, 0)
        moved = ctl.pointer_move(0, 300, 0, 1000, 500)
        # 30% to the right of x=50
        assert moved.side == "right"
        assert moved.x == 79
        assert moved.y == 35

    def test_move_from_other_pointer_ignored(self, ctl, items):
        ctl.pointer_down(0, 1, 300, 210)
        assert ctl.pointer_move(1, 0, 0, CANVAS, CANVAS) is None
        assert items.get(1).y == 35

    def test_move_while_idle_ignored(self, ctl):
        assert ctl.pointer_move(0, 10, 10, CANVAS, CANVAS) is None

    def test_zero_canvas_ignored(self, ctl):
        ctl.pointer_down(0, 1, 300, 210)
        assert ctl.pointer_move(0, 10, 10, 0, CANVAS) is None

    def test_proposed_is_clamped_before_snapping(self, ctl, monkeypatch):
        seen = []
        real = drag_mod.snap_to_wall

        def spy(x, y, *args, **kwargs):
            seen.append((x, y))
            return real(x, y, *args, **kwargs)

        monkeypatch.setattr(drag_mod, "snap_to_wall", spy)
        ctl.pointer_down(0, 1, 0, 0)
        # +100% / +115% from (50, 35) -> (150, 150)
        ctl.pointer_move(0, CANVAS, 1.15 * CANVAS, CANVAS, CANVAS)
        assert seen == [(98, pytest.approx(98))]

    def test_release_keeps_last_snapped_position(self, ctl, items):
        ctl.pointer_down(0, 2, 300, 510)
        last = ctl.pointer_move(0, 300 + 200, 510 - 150, CANVAS, CANVAS)
        ctl.pointer_up(0)
        assert items.get(2) == last
        assert last.side == "right"

    def test_kind_unchanged_by_drag(self, ctl, items):
        ctl.pointer_down(0, 2, 300, 510)
        ctl.pointer_move(0, 0, 0, CANVAS, CANVAS)
        assert items.get(2).kind == "outdoor"

    def test_marker_removed_mid_drag(self, ctl, items):
        ctl.pointer_down(0, 1, 300, 210)
        items.remove(1)
        assert ctl.pointer_move(0, 320, 210, CANVAS, CANVAS) is None
        assert ctl.state == Idle()
