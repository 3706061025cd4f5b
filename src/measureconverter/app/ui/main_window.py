from __future__ import annotations

from datetime import datetime

from PySide6.QtCore import QSettings, Slot
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QStatusBar, QWidget

from measureconverter.app.application import save_converter_state
from measureconverter.app.state import Store
from measureconverter.app.ui.panels.converter import ConverterPanel
from measureconverter.config import VISIBLE_APP_NAME


class MainWindow(QMainWindow):
    def __init__(self, store: Store, settings: QSettings | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(480, 280)

        self.store = store
        self.settings = settings

        self.panel = ConverterPanel(self.store, parent=self)
        self.setCentralWidget(self.panel)

        self.setStatusBar(QStatusBar(self))
        self.panel.status_message.connect(self._show_status)

    @Slot(str)
    def _show_status(self, message: str) -> None:
        self.statusBar().showMessage(f"{datetime.now().strftime('%H:%M:%S')} {message}", 5000)

    def closeEvent(self, event: QCloseEvent) -> None:
        if self.settings is not None:
            save_converter_state(self.store.converter, self.settings)
        super().closeEvent(event)
