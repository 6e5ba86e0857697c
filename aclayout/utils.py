from __future__ import annotations
from PySide6.QtGui import QColor

from .models import RoomRect, RoomType, Side

# ===== Canvas (percent space) =====
CANVAS_MIN = 0.0
CANVAS_MAX = 100.0
ROOM_INSET_PCT = 15.0
ROOM = RoomRect.from_inset(ROOM_INSET_PCT)

# half of a marker footprint, so the marker edge sits on the wall
WALL_OFFSET_X = 6.0
WALL_OFFSET_Y = 4.0

# dragged markers stay fully visible inside the canvas
DRAG_MIN = 2.0
DRAG_MAX = 98.0

# ===== Stage (pixels) =====
STAGE_PX = 600.0
MARKER_W_PX = 70.0
INDOOR_H_PX = 30.0
OUTDOOR_H_PX = 34.0
ROOM_BORDER_W = 4

# ===== Colors =====
STAGE_BG = QColor("#FFFFFF")
STAGE_BORDER = QColor("#E2E8F0")
DOT_COLOR = QColor("#94A3B8")
WATERMARK = QColor(148, 163, 184, 128)

INDOOR_FILL = QColor("#EFF6FF")
INDOOR_BORDER = QColor("#3B82F6")
INDOOR_TEXT = QColor("#1D4ED8")
OUTDOOR_FILL = QColor("#FEF2F2")
OUTDOOR_BORDER = QColor("#EF4444")
OUTDOOR_TEXT = QColor("#B91C1C")

# room fill / border per room type
ROOM_STYLES = {
    RoomType.JAPANESE: (QColor("#F0FDF4"), QColor("#15803D")),
    RoomType.BEDROOM:  (QColor("#FFF7ED"), QColor("#9A3412")),
    RoomType.KIDS:     (QColor("#FEFCE8"), QColor("#CA8A04")),
}
ROOM_STYLE_DEFAULT = (QColor("#FFFBEB"), QColor("#92400E"))

MARKER_LABELS = {"indoor": "室内機", "outdoor": "室外機"}


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def pct_to_px(v: float, extent: float) -> float:
    return v / 100.0 * extent


def px_to_pct(v: float, extent: float) -> float:
    return v / extent * 100.0


def side_rotation(side: str) -> float:
    """Rotation (degrees) a marker is drawn with on the given wall."""
    return 90.0 if side in (Side.LEFT, Side.RIGHT) else 0.0


def room_style(room_type: str):
    return ROOM_STYLES.get(room_type, ROOM_STYLE_DEFAULT)
