# qtui/widgets/color_swatch.py
from __future__ import annotations

from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel, QFrame
from PySide6.QtCore import Qt

from stylecore.models import NamedColor


class ColorSwatch(QWidget):
    """
    Round color swatch, optionally followed by the color name.
    Used as the row content of the color picker.
    """

    def __init__(
        self,
        color: NamedColor,
        parent: QWidget | None = None,
        *,
        diameter: int = 30,
        show_name: bool = False,
    ) -> None:
        super().__init__(parent)
        self._color = color
        self._diameter = int(diameter)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(5, 5, 5, 5)
        layout.setSpacing(8)

        self._dot = QFrame(self)
        self._dot.setFixedSize(self._diameter, self._diameter)
        layout.addWidget(self._dot)

        self._label = QLabel(color.name, self)
        self._label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self._label.setVisible(bool(show_name))
        layout.addWidget(self._label)

        self.set_color(color)

    @property
    def color(self) -> NamedColor:
        return self._color

    def set_color(self, color: NamedColor) -> None:
        self._color = color
        radius = self._diameter // 2
        self._dot.setStyleSheet(
            f"background-color: {color.hex}; border-radius: {radius}px; border: 1px solid #808080;"
        )
        self._dot.setToolTip(color.name)
        self._label.setText(color.name)
