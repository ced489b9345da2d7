# File: stylecore/catalogs.py
from __future__ import annotations

from dataclasses import dataclass

from stylecore.catalog import OptionCatalog
from stylecore.models import NamedColor

FONT_NAMES: list[str] = [
    "Helvetica", "Courier", "Times New Roman", "Verdana", "Georgia",
    "Arial", "Chalkboard SE", "Futura", "Avenir", "Gill Sans",
]

SIZE_KEYS: list[str] = ["12", "14", "16", "18", "20", "24", "30", "36", "48", "60"]

RED = NamedColor("Red", 255, 59, 48)
BLUE = NamedColor("Blue", 0, 122, 255)
YELLOW = NamedColor("Yellow", 255, 204, 0)
BLACK = NamedColor("Black", 0, 0, 0)

COLORS: list[NamedColor] = [RED, BLUE, YELLOW, BLACK]

DEFAULT_FONT = "Helvetica"
DEFAULT_SIZE = "24"
DEFAULT_POINT_SIZE = 24
DEFAULT_COLOR = BLUE


def font_catalog() -> OptionCatalog[str]:
    return OptionCatalog.from_values(FONT_NAMES, name="font")


def size_catalog() -> OptionCatalog[str]:
    return OptionCatalog.from_values(SIZE_KEYS, name="size")


def color_catalog() -> OptionCatalog[NamedColor]:
    return OptionCatalog(((c.name, c) for c in COLORS), name="color")


@dataclass(frozen=True)
class StyleCatalogs:
    fonts: OptionCatalog[str]
    sizes: OptionCatalog[str]
    colors: OptionCatalog[NamedColor]


def build_catalogs() -> StyleCatalogs:
    return StyleCatalogs(fonts=font_catalog(), sizes=size_catalog(), colors=color_catalog())
