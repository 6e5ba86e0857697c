from __future__ import annotations
import logging
from typing import Callable, Iterable, List, Optional

from .collection import ItemCollection
from .drag import DragController
from .models import LayoutItem, RoomRect, RoomType
from .state import LayoutState
from .utils import ROOM

logger = logging.getLogger(__name__)


class SessionState:
    CLOSED = "closed"
    OPEN = "open"
    SAVING = "saving"
    CANCELLING = "cancelling"


class EditorSession:
    """
    Owns the working copy of one room's markers while the editor is open.

    The host's list is cloned on open and never touched afterwards; the
    working list is handed to ``on_save`` only on save, cancel drops it.
    """

    def __init__(self, on_save: Optional[Callable[[List[LayoutItem]], None]] = None,
                 room: RoomRect = ROOM):
        self.on_save = on_save
        self.room = room
        self.state = SessionState.CLOSED
        self.room_type: str = RoomType.OTHER
        self.items = ItemCollection()
        self.drag = DragController(self.items, room)

    @property
    def is_open(self) -> bool:
        return self.state == SessionState.OPEN

    def open(self, room_type: str, initial_items: Iterable[LayoutItem]):
        if self.state != SessionState.CLOSED:
            logger.warning("open() on a %s session, previous working copy discarded", self.state)
        self.room_type = room_type
        # clone through the dict form so load-time clamping applies
        self.items = ItemCollection(LayoutState.clone(initial_items))
        self.drag.reset(self.items)
        self.state = SessionState.OPEN
        logger.info("layout session opened: %s, %d markers", room_type, len(self.items))

    def _check_open(self, op: str) -> bool:
        if self.state != SessionState.OPEN:
            logger.warning("%s() ignored, session is %s", op, self.state)
            return False
        return True

    # ---- collection ops ----
    def add(self, kind: str) -> ItemCollection:
        if self._check_open("add"):
            self.items.add(kind)
        return self.items

    def remove(self, item_id: int) -> ItemCollection:
        if self._check_open("remove"):
            if self.drag.dragging_id == item_id:
                self.drag.reset()
            self.items.remove(item_id)
        return self.items

    def clear(self) -> ItemCollection:
        if self._check_open("clear"):
            self.drag.reset()
            self.items.clear()
        return self.items

    # ---- lifecycle ----
    def save(self) -> Optional[List[LayoutItem]]:
        if not self._check_open("save"):
            return None
        self.state = SessionState.SAVING
        self.drag.reset()
        result = self.items.snapshot()
        try:
            if self.on_save:
                self.on_save(result)
        finally:
            self.state = SessionState.CLOSED
        logger.info("layout session saved: %d markers", len(result))
        return result

    def cancel(self):
        if not self._check_open("cancel"):
            return
        self.state = SessionState.CANCELLING
        self.drag.reset()
        self.items = ItemCollection()
        self.drag.reset(self.items)
        self.state = SessionState.CLOSED
        logger.info("layout session cancelled")
