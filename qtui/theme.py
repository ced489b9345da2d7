# qtui/theme.py
from __future__ import annotations

from PySide6.QtWidgets import QApplication
from PySide6.QtGui import QPalette, QColor


DARK_THEMES = ["dark"]


def _apply_dark_palette(app: QApplication) -> None:
    palette = QPalette()

    palette.setColor(QPalette.Window, QColor(53, 53, 53))
    palette.setColor(QPalette.WindowText, QColor(220, 220, 220))
    palette.setColor(QPalette.Base, QColor(42, 42, 42))
    palette.setColor(QPalette.AlternateBase, QColor(66, 66, 66))
    palette.setColor(QPalette.Text, QColor(220, 220, 220))
    palette.setColor(QPalette.Button, QColor(53, 53, 53))
    palette.setColor(QPalette.ButtonText, QColor(220, 220, 220))
    palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
    palette.setColor(QPalette.HighlightedText, QColor(255, 255, 255))

    app.setPalette(palette)


def is_dark_theme(theme_name: str) -> bool:
    return (theme_name or "").strip().lower() in DARK_THEMES


def apply_theme(app: QApplication, theme_name: str) -> None:
    """
    Names in DARK_THEMES get the dark palette; anything else is light.
    """
    app.setStyle("Fusion")

    if is_dark_theme(theme_name):
        _apply_dark_palette(app)
    else:
        app.setPalette(app.style().standardPalette())
