#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations
import sys, os, logging
from typing import List, Optional
from PySide6.QtCore import Qt, QSettings, QByteArray
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QApplication, QMainWindow, QToolBar, QStatusBar, QMessageBox, QDockWidget,
    QStyle, QLabel, QWidget, QVBoxLayout, QFormLayout, QLineEdit, QComboBox,
    QPushButton, QListWidget, QListWidgetItem
)
from aclayout import LayoutDialog, LayoutItem, MiniPreview, RoomRecord, RoomType
from aclayout.dialog import SETTINGS_ORG, SETTINGS_APP

logger = logging.getLogger("aircon_intake")


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("エアコン販売エージェント")
        self.resize(1100, 760)

        self.rooms: List[RoomRecord] = [RoomRecord(id="1", name="お部屋 1", room_type=RoomType.LDK)]
        self.active_id = "1"

        # 1) centre: active room form + preview
        central = QWidget(self)
        root = QVBoxLayout(central); root.setContentsMargins(16, 16, 16, 16); root.setSpacing(12)
        form = QFormLayout(); form.setLabelAlignment(Qt.AlignRight)
        self.ed_name = QLineEdit()
        self.cmb_type = QComboBox(); self.cmb_type.addItems(list(RoomType.ALL))
        form.addRow("部屋名:", self.ed_name)
        form.addRow("部屋タイプ:", self.cmb_type)
        root.addLayout(form)

        self.lbl_layout = QLabel("間取り・設置イメージ")
        self.lbl_layout.setStyleSheet("font-weight: 700; color:#334155;")
        root.addWidget(self.lbl_layout)
        self.preview = MiniPreview()
        root.addWidget(self.preview, 1)
        self.btn_layout = QPushButton()
        self.btn_layout.setMinimumHeight(36)
        root.addWidget(self.btn_layout)
        self.setCentralWidget(central)

        self.ed_name.textEdited.connect(self._apply_name)
        self.cmb_type.currentTextChanged.connect(self._apply_type)
        self.btn_layout.clicked.connect(self.open_layout_editor)

        # 2) room summary
        self.list_rooms = QListWidget()
        self.list_rooms.currentItemChanged.connect(self._on_room_selected)
        self.summary_dock = QDockWidget("見積り構成案", self)
        self.summary_dock.setWidget(self.list_rooms)
        self.summary_dock.setMinimumWidth(260)
        self.summary_dock.setAllowedAreas(Qt.LeftDockWidgetArea | Qt.RightDockWidgetArea)
        self.addDockWidget(Qt.RightDockWidgetArea, self.summary_dock)

        # 3) toolbar/status
        self._build_toolbar()
        self.setStatusBar(QStatusBar(self))

        self._restore_geometry()
        self._refresh()

    # ---- model helpers ----
    def active_room(self) -> RoomRecord:
        for r in self.rooms:
            if r.id == self.active_id:
                return r
        return self.rooms[0]

    def add_room(self) -> RoomRecord:
        new_id = str(max(int(r.id) for r in self.rooms) + 1)
        room = RoomRecord(id=new_id, name=f"お部屋 {len(self.rooms) + 1}", room_type=RoomType.BEDROOM)
        self.rooms.append(room)
        self.active_id = new_id
        self._refresh()
        return room

    def remove_room(self, room_id: Optional[str] = None) -> bool:
        room_id = room_id or self.active_id
        if len(self.rooms) <= 1:
            self._status("最後のお部屋は削除できません")
            return False
        self.rooms = [r for r in self.rooms if r.id != room_id]
        if self.active_id == room_id:
            self.active_id = self.rooms[-1].id
        self._refresh()
        return True

    def set_layout_items(self, room_id: str, items: List[LayoutItem]):
        # the record's list is swapped as a whole, never edited in place
        for r in self.rooms:
            if r.id == room_id:
                r.layout_items = list(items)
        self._refresh()
        self._status(f"配置を保存しました（{len(items)} 台）")

    # ---- toolbar ----
    def _build_toolbar(self):
        tb = QToolBar("Toolbar", self)
        tb.setMovable(False)
        tb.setToolButtonStyle(Qt.ToolButtonTextBesideIcon)
        self.addToolBar(Qt.TopToolBarArea, tb)
        style = self.style()

        self.act_add_room = QAction(style.standardIcon(QStyle.SP_FileIcon), "お部屋を追加", self)
        self.act_add_room.setShortcut(QKeySequence("Ctrl+N"))
        self.act_add_room.triggered.connect(self.add_room)

        self.act_remove_room = QAction(style.standardIcon(QStyle.SP_TrashIcon), "お部屋を削除", self)
        self.act_remove_room.setShortcut(QKeySequence("Ctrl+W"))
        self.act_remove_room.triggered.connect(lambda: self.remove_room())

        self.act_layout = QAction(style.standardIcon(QStyle.SP_FileDialogDetailedView), "間取りシミュレータ", self)
        self.act_layout.setShortcut(QKeySequence("Ctrl+L"))
        self.act_layout.triggered.connect(self.open_layout_editor)

        self.act_toggle_summary = self.summary_dock.toggleViewAction()

        tb.addAction(self.act_add_room)
        tb.addAction(self.act_remove_room)
        tb.addSeparator()
        tb.addAction(self.act_layout)
        tb.addAction(self.act_toggle_summary)

    # ---- editor ----
    def open_layout_editor(self):
        room = self.active_room()
        try:
            dlg = LayoutDialog(room.room_type, room.layout_items, self)
        except Exception as e:
            logger.exception("layout editor failed to open")
            QMessageBox.critical(self, "エラー", str(e))
            return
        dlg.saved.connect(lambda items, rid=room.id: self.set_layout_items(rid, items))
        try:
            dlg.exec()
        finally:
            dlg.deleteLater()

    # ---- form handlers ----
    def _apply_name(self, text: str):
        self.active_room().name = text.strip()
        self._refresh_summary()

    def _apply_type(self, text: str):
        room = self.active_room()
        if room.room_type == text:
            return
        room.room_type = text
        self._refresh()

    def _on_room_selected(self, cur: Optional[QListWidgetItem], _prev=None):
        if cur is None:
            return
        rid = cur.data(Qt.UserRole)
        if rid and rid != self.active_id:
            self.active_id = rid
            self._refresh()

    # ---- view sync ----
    def _refresh(self):
        room = self.active_room()
        self.ed_name.blockSignals(True); self.cmb_type.blockSignals(True)
        self.ed_name.setText(room.name)
        self.cmb_type.setCurrentText(room.room_type)
        self.ed_name.blockSignals(False); self.cmb_type.blockSignals(False)
        self.preview.set_layout(room.room_type, room.layout_items)
        placed = room.has_layout
        self.lbl_layout.setText("間取り・設置イメージ" + ("  ✔ 配置済み" if placed else ""))
        self.btn_layout.setText("配置を調整する" if placed else "室内機・室外機の位置をメモする")
        self.act_remove_room.setEnabled(len(self.rooms) > 1)
        self._refresh_summary()

    def _refresh_summary(self):
        self.list_rooms.blockSignals(True)
        self.list_rooms.clear()
        for i, r in enumerate(self.rooms, start=1):
            mark = "  ▣" if r.has_layout else ""
            li = QListWidgetItem(f"{i}. {r.display_label} / {r.name}{mark}")
            li.setData(Qt.UserRole, r.id)
            self.list_rooms.addItem(li)
            if r.id == self.active_id:
                self.list_rooms.setCurrentItem(li)
        self.list_rooms.blockSignals(False)

    def _status(self, text: str):
        self.statusBar().showMessage(text, 3000)

    # ---- settings ----
    def _restore_geometry(self):
        geo = QSettings(SETTINGS_ORG, SETTINGS_APP).value("main/geometry")
        if isinstance(geo, QByteArray):
            self.restoreGeometry(geo)

    def closeEvent(self, event):
        QSettings(SETTINGS_ORG, SETTINGS_APP).setValue("main/geometry", self.saveGeometry())
        super().closeEvent(event)


def main():
    logging.basicConfig(
        level=os.environ.get("ACLAYOUT_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(sys.argv)
    win = MainWindow()
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
