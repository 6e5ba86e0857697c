from __future__ import annotations
import logging
from typing import Iterable, Iterator, List, Optional

from .models import DEFAULT_PLACEMENT, Kind, LayoutItem

logger = logging.getLogger(__name__)


class ItemCollection:
    """Ordered working set of markers owned by one editor session."""

    def __init__(self, items: Optional[Iterable[LayoutItem]] = None):
        self._items: List[LayoutItem] = [it.copy() for it in (items or [])]

    def __iter__(self) -> Iterator[LayoutItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: int) -> bool:
        return self.get(item_id) is not None

    def next_id(self) -> int:
        return max((it.id for it in self._items), default=0) + 1

    def add(self, kind: str) -> "ItemCollection":
        if kind not in Kind.ALL:
            raise ValueError(f"unknown marker kind: {kind!r}")
        x, y, side = DEFAULT_PLACEMENT[kind]
        item = LayoutItem(id=self.next_id(), kind=kind, x=x, y=y, side=side)
        self._items.append(item)
        logger.debug("added %s marker id=%d", kind, item.id)
        return self

    def remove(self, item_id: int) -> "ItemCollection":
        before = len(self._items)
        self._items = [it for it in self._items if it.id != item_id]
        if len(self._items) == before:
            logger.debug("remove: no marker with id=%s", item_id)
        return self

    def clear(self) -> "ItemCollection":
        self._items = []
        return self

    def get(self, item_id: int) -> Optional[LayoutItem]:
        for it in self._items:
            if it.id == item_id:
                return it
        return None

    def replace(self, item: LayoutItem) -> None:
        self._items = [item if it.id == item.id else it for it in self._items]

    def snapshot(self) -> List[LayoutItem]:
        return [it.copy() for it in self._items]
