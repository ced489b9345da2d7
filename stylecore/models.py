# File: stylecore/models.py
from __future__ import annotations

from dataclasses import dataclass

from stylecore.common import clamp_int


@dataclass(frozen=True)
class NamedColor:
    name: str
    r: int = 0
    g: int = 0
    b: int = 0

    @property
    def hex(self) -> str:
        r = clamp_int(int(self.r), 0, 255)
        g = clamp_int(int(self.g), 0, 255)
        b = clamp_int(int(self.b), 0, 255)
        return f"#{r:02X}{g:02X}{b:02X}"

    def rgb(self) -> tuple[int, int, int]:
        return int(self.r), int(self.g), int(self.b)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class TextStyle:
    """
    Snapshot of everything the preview label needs.
    size_key is what the user picked; point_size is the parsed number.
    """
    text: str
    font: str
    size_key: str
    point_size: int
    color: NamedColor
    color_name: str

    def summary_lines(self) -> list[str]:
        return [
            f"Selected Font: {self.font}",
            f"Selected Size: {self.size_key} pt",
            f"Selected Color: {self.color_name}",
        ]
