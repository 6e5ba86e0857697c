from __future__ import annotations
from PySide6.QtCore import Qt, QRectF, QPointF, QTimer
from PySide6.QtGui import QBrush, QColor, QPainter, QPen, QFont
from PySide6.QtWidgets import QGraphicsRectItem, QGraphicsEllipseItem, QGraphicsItem

from .models import Kind, LayoutItem
from .utils import (INDOOR_FILL, INDOOR_BORDER, INDOOR_TEXT, OUTDOOR_FILL, OUTDOOR_BORDER,
                    OUTDOOR_TEXT, MARKER_W_PX, INDOOR_H_PX, OUTDOOR_H_PX, MARKER_LABELS,
                    ROOM_BORDER_W, WATERMARK, pct_to_px, side_rotation, room_style)

# the scene owns the drag controller; items only forward mouse events to it
MOUSE_POINTER_ID = 0


class RoomItem(QGraphicsRectItem):
    """Fixed room boundary with the room type as a watermark."""
    def __init__(self, rect: QRectF, room_type: str):
        super().__init__(rect)
        self.room_type = room_type
        self._rounded = 16.0
        self.setZValue(0)
        self.setAcceptedMouseButtons(Qt.NoButton)
        self.set_room_type(room_type)

    def set_room_type(self, room_type: str):
        self.room_type = room_type
        fill, border = room_style(room_type)
        self.setBrush(QBrush(fill))
        self.setPen(QPen(border, ROOM_BORDER_W, Qt.SolidLine))
        self.update()

    def paint(self, painter: QPainter, option, widget=None):
        painter.setRenderHint(QPainter.Antialiasing, True)
        r = self.rect()
        painter.setPen(self.pen())
        painter.setBrush(self.brush())
        painter.drawRoundedRect(r, self._rounded, self._rounded)
        painter.setPen(WATERMARK)
        painter.setFont(QFont("", 28, QFont.Bold))
        painter.drawText(r, Qt.AlignCenter, self.room_type)


class RemoveButton(QGraphicsEllipseItem):
    SIZE = 20.0

    def __init__(self, owner: "MarkerItem"):
        super().__init__(0, 0, self.SIZE, self.SIZE, owner)
        self.owner = owner
        self.setBrush(QColor("#1E293B"))
        self.setPen(Qt.NoPen)
        self.setZValue(1)
        self.setCursor(Qt.PointingHandCursor)
        self.setVisible(False)

    def paint(self, painter: QPainter, option, widget=None):
        super().paint(painter, option, widget)
        painter.setPen(QPen(QColor("#FFFFFF"), 1.5))
        painter.setFont(QFont("", 8, QFont.Bold))
        painter.drawText(self.rect(), Qt.AlignCenter, "×")

    def mousePressEvent(self, e):
        if e.button() == Qt.LeftButton:
            scene = self.scene()
            if scene is not None:
                # remove_marker deletes the owner, run it after this handler returns
                item_id = self.owner.item_id
                QTimer.singleShot(0, lambda: scene.remove_marker(item_id))
            e.accept()
            return
        super().mousePressEvent(e)


class MarkerItem(QGraphicsRectItem):
    """Indoor/outdoor unit glyph. Position comes from percent coordinates."""
    def __init__(self, item: LayoutItem, canvas_px: float):
        h = INDOOR_H_PX if item.kind == Kind.INDOOR else OUTDOOR_H_PX
        super().__init__(QRectF(-MARKER_W_PX / 2, -h / 2, MARKER_W_PX, h))
        self.item_id = item.id
        self.kind = item.kind
        self.canvas_px = canvas_px
        self.setZValue(20)
        self.setAcceptHoverEvents(True)
        self.setCursor(Qt.OpenHandCursor)
        self.setFlag(QGraphicsItem.ItemIsSelectable, False)

        if self.kind == Kind.INDOOR:
            self.brush_normal = QBrush(INDOOR_FILL)
            self.pen_normal = QPen(INDOOR_BORDER, 1.5)
            self.text_color = INDOOR_TEXT
            self._rounded = h / 2
        else:
            self.brush_normal = QBrush(OUTDOOR_FILL)
            self.pen_normal = QPen(OUTDOOR_BORDER, 1.5)
            self.text_color = OUTDOOR_TEXT
            self._rounded = 6.0
        self.setBrush(self.brush_normal)
        self.setPen(self.pen_normal)

        self.remove_btn = RemoveButton(self)
        r = self.rect()
        self.remove_btn.setPos(r.right() - RemoveButton.SIZE / 2, r.top() - RemoveButton.SIZE / 2)
        self.apply(item)

    def apply(self, item: LayoutItem):
        self.setPos(QPointF(pct_to_px(item.x, self.canvas_px), pct_to_px(item.y, self.canvas_px)))
        self.setRotation(side_rotation(item.side))
        self.setToolTip(f"{MARKER_LABELS[self.kind]} #{item.id} ({item.side})")

    def paint(self, painter: QPainter, option, widget=None):
        painter.setRenderHint(QPainter.Antialiasing, True)
        r = self.rect()
        painter.setPen(self.pen())
        painter.setBrush(self.brush())
        painter.drawRoundedRect(r, self._rounded, self._rounded)
        painter.setPen(self.text_color)
        painter.setFont(QFont("", 8, QFont.Bold))
        painter.drawText(r, Qt.AlignCenter, MARKER_LABELS[self.kind])

    def hoverEnterEvent(self, e):
        self.remove_btn.setVisible(True)
        super().hoverEnterEvent(e)

    def hoverLeaveEvent(self, e):
        self.remove_btn.setVisible(False)
        super().hoverLeaveEvent(e)

    # ---- pointer -> scene drag controller ----
    def mousePressEvent(self, e):
        if e.button() != Qt.LeftButton:
            e.ignore()
            return
        scene = self.scene()
        if scene is not None and scene.begin_drag(self.item_id, e.scenePos()):
            self.setCursor(Qt.ClosedHandCursor)
            # accepting makes this item the mouse grabber for the rest of the drag
            e.accept()
        else:
            e.ignore()

    def mouseMoveEvent(self, e):
        scene = self.scene()
        if scene is not None:
            scene.move_drag(e.scenePos())
        e.accept()

    def mouseReleaseEvent(self, e):
        scene = self.scene()
        if scene is not None:
            scene.end_drag()
        self.setCursor(Qt.OpenHandCursor)
        e.accept()