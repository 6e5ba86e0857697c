from __future__ import annotations
from typing import Iterable, List

from PySide6.QtCore import Qt, Signal, QSettings, QByteArray
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame
)

from .models import Kind, LayoutItem
from .scene import LayoutScene, LayoutView
from .session import EditorSession

SETTINGS_ORG = "AirconIntake"
SETTINGS_APP = "LayoutEditor"


class LayoutDialog(QDialog):
    """
    Modal layout editor for one room. ``saved`` carries the working marker
    list on confirm; cancelling (button, Esc or window close) emits nothing.
    """
    saved = Signal(list)

    def __init__(self, room_type: str, initial_items: Iterable[LayoutItem], parent=None):
        super().__init__(parent)
        self.setObjectName("LayoutDialog")
        self.setWindowTitle("間取りシミュレーション")
        self.resize(960, 720)

        self.session = EditorSession(on_save=self._emit_saved)
        self.session.open(room_type, initial_items)
        self.scene = LayoutScene(self.session, status_cb=self._status)
        self.view = LayoutView(self.scene)

        root = QVBoxLayout(self); root.setContentsMargins(0, 0, 0, 0); root.setSpacing(0)

        # header
        header = QFrame(self); header.setObjectName("Header")
        hl = QVBoxLayout(header); hl.setContentsMargins(24, 16, 24, 16); hl.setSpacing(4)
        title = QLabel(f"間取りシミュレーション  <span style='color:#4338CA'>{room_type}</span>")
        title.setObjectName("Title")
        hint = QLabel("アイコンをドラッグして、壁の位置に合わせてください。")
        hint.setObjectName("Sub")
        hl.addWidget(title); hl.addWidget(hint)
        root.addWidget(header)

        # body: sidebar + stage
        body = QHBoxLayout(); body.setContentsMargins(0, 0, 0, 0); body.setSpacing(0)
        side = QFrame(self); side.setObjectName("Sidebar"); side.setFixedWidth(240)
        sl = QVBoxLayout(side); sl.setContentsMargins(16, 16, 16, 16); sl.setSpacing(12)

        self.btn_add_indoor = QPushButton("＋ 室内機を追加")
        self.btn_add_indoor.setObjectName("AddIndoor")
        self.btn_add_outdoor = QPushButton("＋ 室外機を追加")
        self.btn_add_outdoor.setObjectName("AddOutdoor")
        self.btn_clear = QPushButton("全てクリア")
        self.btn_clear.setObjectName("Clear")
        for b in (self.btn_add_indoor, self.btn_add_outdoor, self.btn_clear):
            b.setCursor(Qt.PointingHandCursor); b.setMinimumHeight(40)
        sl.addWidget(self.btn_add_indoor); sl.addWidget(self.btn_add_outdoor)
        sl.addStretch(1)
        sl.addWidget(self.btn_clear)
        tip = QLabel("<b>ヒント</b><br>壁に近づけると自動的に向きが調整されます。")
        tip.setWordWrap(True); tip.setObjectName("Tip")
        sl.addWidget(tip)

        body.addWidget(side)
        body.addWidget(self.view, 1)
        root.addLayout(body, 1)

        # footer
        footer = QFrame(self); footer.setObjectName("Footer")
        fl = QHBoxLayout(footer); fl.setContentsMargins(24, 12, 24, 12); fl.setSpacing(12)
        self.lbl_status = QLabel(""); self.lbl_status.setObjectName("Sub")
        self.btn_cancel = QPushButton("キャンセル")
        self.btn_save = QPushButton("配置を保存する")
        self.btn_save.setObjectName("Save"); self.btn_save.setDefault(True)
        fl.addWidget(self.lbl_status, 1); fl.addWidget(self.btn_cancel); fl.addWidget(self.btn_save)
        root.addWidget(footer)

        self.btn_add_indoor.clicked.connect(lambda: self.scene.add_marker(Kind.INDOOR))
        self.btn_add_outdoor.clicked.connect(lambda: self.scene.add_marker(Kind.OUTDOOR))
        self.btn_clear.clicked.connect(self.scene.clear_markers)
        self.btn_cancel.clicked.connect(self.reject)
        self.btn_save.clicked.connect(self.accept)

        self._apply_qss()
        self._restore_geometry()

    def _apply_qss(self):
        self.setStyleSheet("""
            QDialog#LayoutDialog { background: #F8FAFC; }
            #Header, #Footer, #Sidebar { background: #FFFFFF; }
            #Header { border-bottom: 1px solid #F1F5F9; }
            #Footer { border-top: 1px solid #F1F5F9; }
            #Sidebar { border-right: 1px solid #E2E8F0; }
            #Title { font-size: 17px; font-weight: 700; color: #1E293B; }
            #Sub { color: #64748B; }
            #Tip { color: #94A3B8; background: #F8FAFC; border-radius: 8px; padding: 10px; }
            QPushButton { border-radius: 12px; padding: 8px 16px; border: 1px solid #CBD5E1; background: #FFFFFF; }
            QPushButton#AddIndoor { background: #EFF6FF; color: #1D4ED8; border-color: #BFDBFE; font-weight: 600; }
            QPushButton#AddOutdoor { background: #FEF2F2; color: #B91C1C; border-color: #FECACA; font-weight: 600; }
            QPushButton#Clear { border: none; color: #64748B; }
            QPushButton#Clear:hover { color: #DC2626; background: #FEF2F2; }
            QPushButton#Save { background: #2563EB; color: #FFFFFF; border: none; font-weight: 700; }
            QPushButton#Save:hover { background: #1D4ED8; }
        """)

    def _status(self, text: str):
        self.lbl_status.setText(text)

    # ---- settings ----
    def _restore_geometry(self):
        st = QSettings(SETTINGS_ORG, SETTINGS_APP)
        geo = st.value("dialog/geometry")
        if isinstance(geo, QByteArray):
            self.restoreGeometry(geo)

    def _store_geometry(self):
        st = QSettings(SETTINGS_ORG, SETTINGS_APP)
        st.setValue("dialog/geometry", self.saveGeometry())

    # ---- session lifecycle ----
    def _emit_saved(self, items: List[LayoutItem]):
        self.saved.emit(items)

    def accept(self):
        self._store_geometry()
        self.session.save()
        super().accept()

    def reject(self):
        self._store_geometry()
        self.session.cancel()
        super().reject()
