# qtui/status_bar.py
from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QMainWindow, QStatusBar, QLabel
from PySide6.QtCore import QTimer


class StatusController:
    """
    Wraps QStatusBar:
    - left: current style summary (font / size / color)
    - right: transient status text, resets to "ready" after ttl_ms
    """

    def __init__(self, main_window: QMainWindow) -> None:
        self._bar: QStatusBar = main_window.statusBar()

        self._lbl_style = QLabel("style: -")
        self._lbl_status = QLabel("ready")

        self._bar.addWidget(self._lbl_style)
        self._bar.addPermanentWidget(self._lbl_status, 1)

        self._timer = QTimer()
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._reset_status)

    def set_style_summary(self, text: str) -> None:
        self._lbl_style.setText(f"style: {text}")

    def set_status(self, text: str, *, ttl_ms: Optional[int] = None) -> None:
        self._lbl_status.setText(text)
        self._timer.stop()
        if ttl_ms is not None and ttl_ms > 0:
            self._timer.start(ttl_ms)

    def info(self, msg: str, ttl_ms: int = 3000) -> None:
        s = (msg or "").strip()
        if not s:
            return
        self.set_status(f"INFO: {s}", ttl_ms=ttl_ms)

    def error(self, msg: str, ttl_ms: int = 6000) -> None:
        s = (msg or "").strip()
        if not s:
            return
        self.set_status(f"ERROR: {s}", ttl_ms=ttl_ms)

    def status_msg(self, msg: str, ttl_ms: int = 2000) -> None:
        s = (msg or "").strip()
        if not s:
            return
        self.set_status(s, ttl_ms=ttl_ms)

    def _reset_status(self) -> None:
        self._lbl_status.setText("ready")
