from __future__ import annotations
import logging
from typing import Dict, Iterable, List

from .models import DEFAULT_PLACEMENT, Kind, LayoutItem, Side
from .utils import CANVAS_MIN, CANVAS_MAX, clamp

logger = logging.getLogger(__name__)


class LayoutState:
    """Plain-dict form of a marker list, as stored on the host room record."""

    @staticmethod
    def serialize(items: Iterable[LayoutItem]) -> List[Dict]:
        return [{"id": it.id, "kind": it.kind, "x": it.x, "y": it.y, "side": it.side}
                for it in items]

    @staticmethod
    def deserialize(data: Iterable[Dict]) -> List[LayoutItem]:
        """
        Rebuild markers from dicts. Coordinates outside the canvas are
        clamped, an unknown side falls back to the kind's default, and
        entries without a known kind or numeric id/coordinates are skipped.
        A repeated id is given the next free id so every marker stays
        addressable on its own.
        """
        out: List[LayoutItem] = []
        for d in data:
            kind = d.get("kind")
            if kind not in Kind.ALL:
                logger.warning("skipping marker with unknown kind %r", kind)
                continue
            try:
                item_id = int(d["id"])
                x = float(d["x"]); y = float(d["y"])
            except (KeyError, TypeError, ValueError):
                logger.warning("skipping malformed marker %r", d)
                continue
            side = d.get("side")
            if side not in Side.ALL:
                side = DEFAULT_PLACEMENT[kind][2]
            cx = clamp(x, CANVAS_MIN, CANVAS_MAX)
            cy = clamp(y, CANVAS_MIN, CANVAS_MAX)
            if (cx, cy) != (x, y):
                logger.warning("marker id=%d clamped from (%s, %s) to (%s, %s)", item_id, x, y, cx, cy)
            out.append(LayoutItem(id=item_id, kind=kind, x=cx, y=cy, side=side))

        seen = set()
        next_free = max((it.id for it in out), default=0) + 1
        for it in out:
            if it.id in seen:
                logger.warning("duplicate marker id=%d renumbered to %d", it.id, next_free)
                it.id = next_free
                next_free += 1
            seen.add(it.id)
        return out

    @classmethod
    def clone(cls, items: Iterable[LayoutItem]) -> List[LayoutItem]:
        return cls.deserialize(cls.serialize(items))
