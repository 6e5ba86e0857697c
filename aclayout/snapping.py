from __future__ import annotations
import logging
from typing import NamedTuple, Tuple

from .models import Kind, RoomRect, Side
from .utils import DRAG_MIN, DRAG_MAX, WALL_OFFSET_X, WALL_OFFSET_Y, clamp

logger = logging.getLogger(__name__)


class SnapResult(NamedTuple):
    x: float
    y: float
    side: str


def wall_targets(kind: str, room: RoomRect,
                 w_offset_x: float = WALL_OFFSET_X,
                 w_offset_y: float = WALL_OFFSET_Y) -> Tuple[float, float, float, float]:
    """
    Lines a marker centre snaps to: (top, bottom, left, right).
    Indoor units sit inside the room, outdoor units outside it.
    """
    if kind == Kind.INDOOR:
        return (room.top + w_offset_y, room.bottom - w_offset_y,
                room.left + w_offset_x, room.right - w_offset_x)
    return (room.top - w_offset_y, room.bottom + w_offset_y,
            room.left - w_offset_x, room.right + w_offset_x)


def snap_to_wall(x: float, y: float, kind: str, room: RoomRect, previous_side: str,
                 w_offset_x: float = WALL_OFFSET_X,
                 w_offset_y: float = WALL_OFFSET_Y) -> SnapResult:
    """
    Replace a freely proposed position with the nearest wall-aligned one.

    The snapped axis takes the wall's target line; the other axis keeps the
    proposed value clamped to the room span, so markers slide along a wall
    but never past its corners. Ties go to top, bottom, left, right in that
    order. A zero-width or zero-height room disables snapping: the proposed
    position comes back clamped and ``previous_side`` is kept.
    """
    if room.is_degenerate:
        logger.debug("degenerate room %r, snapping skipped", room)
        return SnapResult(clamp(x, DRAG_MIN, DRAG_MAX), clamp(y, DRAG_MIN, DRAG_MAX), previous_side)

    t_top, t_bottom, t_left, t_right = wall_targets(kind, room, w_offset_x, w_offset_y)
    dists = (
        (Side.TOP, abs(y - t_top)),
        (Side.BOTTOM, abs(y - t_bottom)),
        (Side.LEFT, abs(x - t_left)),
        (Side.RIGHT, abs(x - t_right)),
    )
    # min() keeps the first of equal keys, which gives the fixed tie-break
    side, _ = min(dists, key=lambda d: d[1])

    if side == Side.TOP:
        return SnapResult(clamp(x, room.left, room.right), t_top, side)
    if side == Side.BOTTOM:
        return SnapResult(clamp(x, room.left, room.right), t_bottom, side)
    if side == Side.LEFT:
        return SnapResult(t_left, clamp(y, room.top, room.bottom), side)
    return SnapResult(t_right, clamp(y, room.top, room.bottom), side)
