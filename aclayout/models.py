from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import List


class Kind:
    INDOOR = "indoor"
    OUTDOOR = "outdoor"
    ALL = (INDOOR, OUTDOOR)


class Side:
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    # order matters: nearest-wall ties resolve in this order
    ALL = (TOP, BOTTOM, LEFT, RIGHT)


class RoomType:
    LDK = "LDK"
    JAPANESE = "Japanese"
    BEDROOM = "Bedroom"
    KIDS = "Kids"
    GUEST = "Guest"
    OFFICE = "Office"
    OTHER = "Other"
    ALL = (LDK, JAPANESE, BEDROOM, KIDS, GUEST, OFFICE, OTHER)


# default position/side of a freshly added marker, per kind
DEFAULT_PLACEMENT = {
    Kind.INDOOR: (50.0, 35.0, Side.TOP),
    Kind.OUTDOOR: (50.0, 85.0, Side.BOTTOM),
}


@dataclass
class LayoutItem:
    """Indoor or outdoor unit marker, positioned in percent of the canvas."""
    id: int
    kind: str
    x: float
    y: float
    side: str

    def moved_to(self, x: float, y: float, side: str) -> "LayoutItem":
        # kind and id never change after creation
        return replace(self, x=float(x), y=float(y), side=side)

    def copy(self) -> "LayoutItem":
        return replace(self)


@dataclass(frozen=True)
class RoomRect:
    top: float
    bottom: float
    left: float
    right: float

    @classmethod
    def from_inset(cls, inset: float) -> "RoomRect":
        return cls(top=inset, bottom=100.0 - inset, left=inset, right=100.0 - inset)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def is_degenerate(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass
class RoomRecord:
    """Host-side room record; layout_items is replaced only on editor save."""
    id: str
    name: str
    room_type: str = RoomType.LDK
    layout_items: List[LayoutItem] = field(default_factory=list)

    @property
    def display_label(self) -> str:
        return "リビング" if self.room_type == RoomType.LDK else self.room_type

    @property
    def has_layout(self) -> bool:
        return bool(self.layout_items)
