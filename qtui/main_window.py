# qtui/main_window.py
from __future__ import annotations

import logging
from typing import Callable, List

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent, QFont
from PySide6.QtWidgets import (
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from stylecore.models import TextStyle
from stylecore.style_state import Attribute, StyleState
from qtui.pick.presenter import QtPickerPresenter
from qtui.status_bar import StatusController

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Font Picker main window:

    - preview label rendered with the selected font / size / color
    - sample text editor
    - three buttons, each opening a modal picker
    - summary labels for the current font / size / color
    """

    def __init__(self, *, state: StyleState) -> None:
        super().__init__()
        self._state = state
        self._unsubs: List[Callable[[], None]] = []

        self.setWindowTitle("Font Picker")
        self.resize(480, 560)

        self.status = StatusController(self)
        self.presenter = QtPickerPresenter(parent=self, state=state, status=self.status)

        self._setup_central_widget()

        # subscribe before any picker can be shown
        self._unsubs.append(state.subscribe(self._apply_style))
        self._apply_style(state.snapshot())

    # ---------- layout ----------

    def _setup_central_widget(self) -> None:
        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(10)

        self.preview = QLabel(central)
        self.preview.setAlignment(Qt.AlignCenter)
        self.preview.setMinimumHeight(100)
        layout.addWidget(self.preview)

        self.text_edit = QLineEdit(central)
        self.text_edit.setPlaceholderText("Enter Sample Text")
        self.text_edit.setText(self._state.sample_text)
        self.text_edit.textChanged.connect(self._state.set_sample_text)
        layout.addWidget(self.text_edit)

        self.btn_font = self._make_button("Pick a Font Style", "#007AFF", central)
        self.btn_font.clicked.connect(lambda: self.open_picker("font"))
        layout.addWidget(self.btn_font)

        self.btn_size = self._make_button("Pick Font Size", "#34C759", central)
        self.btn_size.clicked.connect(lambda: self.open_picker("size"))
        layout.addWidget(self.btn_size)

        self.btn_color = self._make_button("Pick a Color", "#FF3B30", central)
        self.btn_color.clicked.connect(lambda: self.open_picker("color"))
        layout.addWidget(self.btn_color)

        self.lbl_font = self._make_headline(central)
        self.lbl_size = self._make_headline(central)
        self.lbl_color = self._make_headline(central)
        layout.addWidget(self.lbl_font)
        layout.addWidget(self.lbl_size)
        layout.addWidget(self.lbl_color)

        layout.addStretch(1)
        self.setCentralWidget(central)

    @staticmethod
    def _make_button(text: str, bg: str, parent: QWidget) -> QPushButton:
        btn = QPushButton(text, parent)
        btn.setStyleSheet(
            f"QPushButton {{ background-color: {bg}; color: white; border-radius: 10px; padding: 10px; }}"
        )
        return btn

    @staticmethod
    def _make_headline(parent: QWidget) -> QLabel:
        lbl = QLabel(parent)
        f = lbl.font()
        f.setBold(True)
        lbl.setFont(f)
        return lbl

    # ---------- actions ----------

    def open_picker(self, attribute: Attribute) -> None:
        self.presenter.request_pick(attribute)

    # ---------- refresh ----------

    def _apply_style(self, style: TextStyle) -> None:
        self.preview.setText(style.text)
        self.preview.setFont(QFont(style.font, style.point_size))
        self.preview.setStyleSheet(f"color: {style.color.hex};")

        font_line, size_line, color_line = style.summary_lines()
        self.lbl_font.setText(font_line)
        self.lbl_size.setText(size_line)
        self.lbl_color.setText(color_line)

        self.status.set_style_summary(f"{style.font} / {style.size_key} pt / {style.color_name}")

    # ---------- teardown ----------

    def closeEvent(self, event: QCloseEvent) -> None:
        for fn in self._unsubs:
            fn()
        self._unsubs.clear()
        self._state.close()
        log.info("main window closed")
        super().closeEvent(event)
