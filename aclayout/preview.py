from __future__ import annotations
from typing import Iterable, List

from PySide6.QtCore import Qt, QRectF, QPointF, QSize
from PySide6.QtGui import QPainter, QPen, QColor, QFont, QBrush
from PySide6.QtWidgets import QWidget, QSizePolicy

from .models import Kind, LayoutItem, RoomType
from .utils import (ROOM, INDOOR_BORDER, OUTDOOR_BORDER, MARKER_W_PX, INDOOR_H_PX, OUTDOOR_H_PX,
                    STAGE_PX, pct_to_px, side_rotation, room_style)


def paint_layout(painter: QPainter, target: QRectF, room_type: str, items: Iterable[LayoutItem]):
    """
    Draw a room and its markers into ``target`` (treated as the square
    percent canvas). Same coordinates and side rotation as the editor
    stage, with markers scaled down to the target size.
    """
    side = min(target.width(), target.height())
    canvas = QRectF(target.center().x() - side / 2, target.center().y() - side / 2, side, side)
    k = side / STAGE_PX

    painter.save()
    painter.setRenderHint(QPainter.Antialiasing, True)
    fill, border = room_style(room_type)
    room = QRectF(canvas.left() + pct_to_px(ROOM.left, side), canvas.top() + pct_to_px(ROOM.top, side),
                  pct_to_px(ROOM.width, side), pct_to_px(ROOM.height, side))
    painter.setPen(QPen(border, max(1.0, 4 * k)))
    painter.setBrush(QBrush(fill))
    painter.drawRoundedRect(room, 16 * k, 16 * k)

    painter.setPen(QColor(148, 163, 184))
    painter.setFont(QFont("", max(6, int(28 * k)), QFont.Bold))
    painter.drawText(room, Qt.AlignCenter, room_type)

    for it in items:
        h = INDOOR_H_PX if it.kind == Kind.INDOOR else OUTDOOR_H_PX
        w, h = MARKER_W_PX * k, h * k
        painter.save()
        painter.translate(QPointF(canvas.left() + pct_to_px(it.x, side), canvas.top() + pct_to_px(it.y, side)))
        painter.rotate(side_rotation(it.side))
        color = INDOOR_BORDER if it.kind == Kind.INDOOR else OUTDOOR_BORDER
        painter.setPen(Qt.NoPen)
        painter.setBrush(color)
        r = QRectF(-w / 2, -h / 2, w, h)
        radius = h / 2 if it.kind == Kind.INDOOR else 2.0
        painter.drawRoundedRect(r, radius, radius)
        painter.restore()
    painter.restore()


class MiniPreview(QWidget):
    """Read-only thumbnail of a room's saved layout."""
    EMPTY_TEXT = "まだ配置されていません。\n下のボタンから配置を作成できます。"

    def __init__(self, parent=None):
        super().__init__(parent)
        self.room_type = RoomType.LDK
        self.items: List[LayoutItem] = []
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumSize(160, 160)

    def sizeHint(self) -> QSize:
        return QSize(220, 220)

    def set_layout(self, room_type: str, items: Iterable[LayoutItem]):
        self.room_type = room_type
        self.items = [it.copy() for it in items]
        self.update()

    def paintEvent(self, ev):
        p = QPainter(self)
        r = QRectF(self.rect()).adjusted(8, 8, -8, -8)
        p.setPen(QPen(QColor("#CBD5E1"), 1, Qt.DashLine))
        p.setBrush(Qt.NoBrush)
        p.drawRoundedRect(r, 8, 8)
        if self.items:
            paint_layout(p, r.adjusted(8, 8, -8, -8), self.room_type, self.items)
        else:
            p.setPen(QColor("#94A3B8"))
            p.drawText(r, Qt.AlignCenter, self.EMPTY_TEXT)
        p.end()
