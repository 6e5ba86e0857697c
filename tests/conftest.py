import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from aclayout import LayoutItem


@pytest.fixture(scope="session")
def qapp(tmp_path_factory):
    from PySide6.QtCore import QSettings
    from PySide6.QtWidgets import QApplication

    settings_dir = tmp_path_factory.mktemp("settings")
    for fmt in (QSettings.NativeFormat, QSettings.IniFormat):
        QSettings.setPath(fmt, QSettings.UserScope, str(settings_dir))
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def two_items():
    return [
        LayoutItem(id=1, kind="indoor", x=50.0, y=19.0, side="top"),
        LayoutItem(id=2, kind="outdoor", x=91.0, y=40.0, side="right"),
    ]
