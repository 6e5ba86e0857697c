from __future__ import annotations
import math
from typing import Callable, Dict, Optional

from PySide6.QtCore import Qt, QRectF, QPointF, Signal
from PySide6.QtGui import QPainter, QPen
from PySide6.QtWidgets import QGraphicsScene, QGraphicsView

from .items import MarkerItem, RoomItem, MOUSE_POINTER_ID
from .session import EditorSession
from .utils import STAGE_PX, STAGE_BG, STAGE_BORDER, DOT_COLOR, MARKER_LABELS, pct_to_px

DOT_STEP = 20.0


class LayoutScene(QGraphicsScene):
    """
    Square stage that renders an EditorSession. Scene units are pixels of
    a STAGE_PX x STAGE_PX square; the session works in percent of it.
    """
    itemsChanged = Signal()

    def __init__(self, session: EditorSession, status_cb: Optional[Callable[[str], None]] = None,
                 *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.session = session
        self._status_cb = status_cb
        self.setItemIndexMethod(QGraphicsScene.NoIndex)
        self.setSceneRect(0, 0, STAGE_PX, STAGE_PX)
        self._markers: Dict[int, MarkerItem] = {}

        room = session.room
        self.room_item = RoomItem(QRectF(pct_to_px(room.left, STAGE_PX), pct_to_px(room.top, STAGE_PX),
                                         pct_to_px(room.width, STAGE_PX), pct_to_px(room.height, STAGE_PX)),
                                  session.room_type)
        self.addItem(self.room_item)
        self.sync_items()

    @property
    def canvas_px(self) -> float:
        return self.sceneRect().width()

    def markers(self) -> Dict[int, MarkerItem]:
        return dict(self._markers)

    def sync_items(self):
        """Bring marker graphics in line with the session's working set."""
        self.room_item.set_room_type(self.session.room_type)
        live = {it.id: it for it in self.session.items}
        for item_id in list(self._markers):
            if item_id not in live:
                self.removeItem(self._markers.pop(item_id))
        for item_id, it in live.items():
            marker = self._markers.get(item_id)
            if marker is None:
                marker = MarkerItem(it, self.canvas_px)
                self.addItem(marker)
                self._markers[item_id] = marker
            else:
                marker.apply(it)
        self.itemsChanged.emit()

    def _status(self, text: str):
        if self._status_cb:
            self._status_cb(text)

    # ---- collection actions ----
    def add_marker(self, kind: str):
        self.session.add(kind)
        self.sync_items()
        self._status(f"{MARKER_LABELS[kind]}を追加しました")

    def remove_marker(self, item_id: int):
        self.session.remove(item_id)
        self.sync_items()

    def clear_markers(self):
        self.session.clear()
        self.sync_items()

    # ---- drag (called by MarkerItem while it holds the mouse grab) ----
    def begin_drag(self, item_id: int, scene_pos: QPointF) -> bool:
        return self.session.drag.pointer_down(MOUSE_POINTER_ID, item_id, scene_pos.x(), scene_pos.y())

    def move_drag(self, scene_pos: QPointF):
        moved = self.session.drag.pointer_move(MOUSE_POINTER_ID, scene_pos.x(), scene_pos.y(),
                                               self.sceneRect().width(), self.sceneRect().height())
        if moved is None:
            return
        marker = self._markers.get(moved.id)
        if marker is not None:
            marker.apply(moved)
        self.itemsChanged.emit()

    def end_drag(self):
        self.session.drag.pointer_up(MOUSE_POINTER_ID)

    def pointer_left(self):
        if self.session.drag.pointer_leave(MOUSE_POINTER_ID):
            grabber = self.mouseGrabberItem()
            if grabber is not None:
                grabber.ungrabMouse()

    def drawBackground(self, painter: QPainter, rect: QRectF):
        painter.fillRect(rect, self.palette().window())
        stage = self.sceneRect()
        painter.setRenderHint(QPainter.Antialiasing, True)
        painter.setPen(QPen(STAGE_BORDER, 1))
        painter.setBrush(STAGE_BG)
        painter.drawRoundedRect(stage, 12, 12)
        painter.setPen(QPen(DOT_COLOR, 1.5, Qt.SolidLine, Qt.RoundCap))
        step = DOT_STEP
        x = math.floor(stage.left() / step) * step + step
        while x < stage.right():
            y = math.floor(stage.top() / step) * step + step
            while y < stage.bottom():
                painter.drawPoint(QPointF(x, y))
                y += step
            x += step


class LayoutView(QGraphicsView):
    def __init__(self, scene: LayoutScene):
        super().__init__(scene)
        self.setRenderHint(QPainter.Antialiasing, True)
        self.setViewportUpdateMode(QGraphicsView.BoundingRectViewportUpdate)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setMouseTracking(True)
        self.setMinimumSize(320, 320)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        # percent space is independent of pixels: just keep the whole stage in view
        self.fitInView(self.sceneRect(), Qt.KeepAspectRatio)

    def showEvent(self, event):
        super().showEvent(event)
        self.fitInView(self.sceneRect(), Qt.KeepAspectRatio)

    def leaveEvent(self, event):
        scene = self.scene()
        if isinstance(scene, LayoutScene):
            scene.pointer_left()
        super().leaveEvent(event)
