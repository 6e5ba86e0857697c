from .models import Kind, Side, RoomType, LayoutItem, RoomRect, RoomRecord
from .collection import ItemCollection
from .snapping import SnapResult, snap_to_wall, wall_targets
from .drag import DragController, Idle, Dragging
from .state import LayoutState
from .session import EditorSession, SessionState
from .utils import ROOM, ROOM_INSET_PCT, side_rotation
from .items import MarkerItem, RoomItem
from .scene import LayoutScene, LayoutView
from .preview import MiniPreview, paint_layout
from .dialog import LayoutDialog

__all__ = [
    "Kind", "Side", "RoomType", "LayoutItem", "RoomRect", "RoomRecord",
    "ItemCollection", "SnapResult", "snap_to_wall", "wall_targets",
    "DragController", "Idle", "Dragging", "LayoutState",
    "EditorSession", "SessionState", "ROOM", "ROOM_INSET_PCT", "side_rotation",
    "MarkerItem", "RoomItem", "LayoutScene", "LayoutView",
    "MiniPreview", "paint_layout", "LayoutDialog",
]
