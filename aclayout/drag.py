from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Union

from .collection import ItemCollection
from .models import LayoutItem, RoomRect
from .snapping import snap_to_wall
from .utils import DRAG_MIN, DRAG_MAX, ROOM, WALL_OFFSET_X, WALL_OFFSET_Y, clamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Dragging:
    pointer_id: int
    origin_x: float
    origin_y: float
    origin_item: LayoutItem


DragState = Union[Idle, Dragging]


class DragController:
    """
    Turns pointer events into snapped marker moves.

    Idle -> Dragging on pointer_down over a marker; Dragging -> Idle on
    pointer_up or pointer_leave. While dragging, each move proposes
    origin position + pointer delta (in percent of the canvas), clamps it
    to the drag bounds and writes the snapped result back into the
    collection. Ending a drag leaves the marker where it last snapped.
    """

    def __init__(self, items: ItemCollection, room: RoomRect = ROOM,
                 w_offset_x: float = WALL_OFFSET_X, w_offset_y: float = WALL_OFFSET_Y):
        self.items = items
        self.room = room
        self.w_offset_x = w_offset_x
        self.w_offset_y = w_offset_y
        self.state: DragState = Idle()

    @property
    def is_dragging(self) -> bool:
        return isinstance(self.state, Dragging)

    @property
    def dragging_id(self) -> Optional[int]:
        return self.state.origin_item.id if isinstance(self.state, Dragging) else None

    def reset(self, items: Optional[ItemCollection] = None):
        if items is not None:
            self.items = items
        self.state = Idle()

    def pointer_down(self, pointer_id: int, item_id: int, x_px: float, y_px: float) -> bool:
        if isinstance(self.state, Dragging):
            logger.debug("pointer %s ignored, marker %d already dragging",
                         pointer_id, self.state.origin_item.id)
            return False
        item = self.items.get(item_id)
        if item is None:
            return False
        self.state = Dragging(pointer_id, float(x_px), float(y_px), item.copy())
        logger.debug("drag start id=%d pointer=%s", item_id, pointer_id)
        return True

    def pointer_move(self, pointer_id: int, x_px: float, y_px: float,
                     canvas_w_px: float, canvas_h_px: float) -> Optional[LayoutItem]:
        st = self.state
        if not isinstance(st, Dragging) or st.pointer_id != pointer_id:
            return None
        if canvas_w_px <= 0 or canvas_h_px <= 0:
            return None

        dx = (x_px - st.origin_x) / canvas_w_px * 100.0
        dy = (y_px - st.origin_y) / canvas_h_px * 100.0
        origin = st.origin_item
        raw_x = clamp(origin.x + dx, DRAG_MIN, DRAG_MAX)
        raw_y = clamp(origin.y + dy, DRAG_MIN, DRAG_MAX)

        current = self.items.get(origin.id)
        if current is None:
            # removed mid-drag
            self.state = Idle()
            return None
        snapped = snap_to_wall(raw_x, raw_y, origin.kind, self.room, current.side,
                               self.w_offset_x, self.w_offset_y)
        moved = current.moved_to(snapped.x, snapped.y, snapped.side)
        self.items.replace(moved)
        return moved

    def pointer_up(self, pointer_id: Optional[int] = None) -> bool:
        st = self.state
        if not isinstance(st, Dragging):
            return False
        if pointer_id is not None and st.pointer_id != pointer_id:
            return False
        logger.debug("drag end id=%d", st.origin_item.id)
        self.state = Idle()
        return True

    def pointer_leave(self, pointer_id: Optional[int] = None) -> bool:
        return self.pointer_up(pointer_id)
