# qtui/pick/picker_dialog.py
from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from stylecore.common import parse_int
from stylecore.errors import SelectionError
from stylecore.models import NamedColor
from stylecore.session import PickerSession
from qtui.widgets.color_swatch import ColorSwatch

log = logging.getLogger(__name__)

# (key, value, parent) -> row button
RowFactory = Callable[[str, Any, QWidget], QPushButton]


def font_row(key: str, value: Any, parent: QWidget) -> QPushButton:
    btn = QPushButton(key, parent)
    btn.setFont(QFont(str(value), 18))
    btn.setFlat(True)
    return btn


def size_row(key: str, value: Any, parent: QWidget) -> QPushButton:
    btn = QPushButton(key, parent)
    f = btn.font()
    f.setPointSize(parse_int(key) or 16)
    btn.setFont(f)
    btn.setFlat(True)
    return btn


def color_row(key: str, value: Any, parent: QWidget) -> QPushButton:
    btn = QPushButton(parent)
    btn.setFlat(True)
    btn.setToolTip(key)
    btn.setMinimumHeight(44)

    lay = QHBoxLayout(btn)
    lay.setContentsMargins(4, 0, 4, 0)
    color = value if isinstance(value, NamedColor) else NamedColor(key)
    swatch = ColorSwatch(color, btn, diameter=30, show_name=True)
    # clicks land on the button, not the swatch
    swatch.setAttribute(Qt.WA_TransparentForMouseEvents, True)
    lay.addWidget(swatch)
    lay.addStretch(1)
    return btn


class PickerDialog(QDialog):
    """
    Modal picker driven by session.catalog.entries():

    - clicking a row -> session.choose(key) -> accept()
    - Esc / close / "Cancel" -> session.cancel() (only if still open)
    """

    def __init__(
        self,
        session: PickerSession[Any],
        *,
        title: str,
        row_factory: RowFactory,
        header: str = "",
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._session = session
        self._error: Optional[SelectionError] = None

        self.setWindowTitle(title)
        self.setModal(True)
        self.resize(320, 420)

        root = QVBoxLayout(self)
        root.setContentsMargins(10, 10, 10, 10)
        root.setSpacing(6)

        if header:
            lbl = QLabel(header, self)
            f = lbl.font()
            f.setBold(True)
            lbl.setFont(f)
            lbl.setAlignment(Qt.AlignCenter)
            root.addWidget(lbl)

        scroll = QScrollArea(self)
        scroll.setWidgetResizable(True)
        body = QWidget(scroll)
        rows = QVBoxLayout(body)
        rows.setContentsMargins(0, 0, 0, 0)
        rows.setSpacing(2)

        for key, value in session.catalog.entries():
            btn = row_factory(key, value, body)
            btn.setObjectName(f"pick_{key}")
            btn.clicked.connect(lambda _checked=False, k=key: self.pick(k))
            rows.addWidget(btn)
        rows.addStretch(1)
        scroll.setWidget(body)
        root.addWidget(scroll, 1)

        btn_cancel = QPushButton("Cancel", self)
        btn_cancel.clicked.connect(self.reject)
        bar = QHBoxLayout()
        bar.addStretch(1)
        bar.addWidget(btn_cancel)
        root.addLayout(bar)

    @property
    def session(self) -> PickerSession[Any]:
        return self._session

    @property
    def error(self) -> Optional[SelectionError]:
        return self._error

    def pick(self, key: str) -> None:
        try:
            self._session.choose(key)
        except SelectionError as e:
            log.error("pick failed: %s", e)
            self._error = e
            if not self._session.is_open:
                self.reject()
            return
        self.accept()

    def done(self, result: int) -> None:
        if self._session.is_open:
            self._session.cancel()
        super().done(result)
