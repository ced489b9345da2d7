# tests/conftest.py
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# repo root = one level above tests/
ROOT = Path(__file__).resolve().parents[1]

# make `import stylecore` work without installing the project
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from stylecore.catalog import OptionCatalog  # noqa: E402
from stylecore.catalogs import build_catalogs, StyleCatalogs  # noqa: E402
from stylecore.coordinator import SelectionCoordinator  # noqa: E402


@pytest.fixture
def cats() -> StyleCatalogs:
    return build_catalogs()


@pytest.fixture
def two_fonts() -> OptionCatalog[str]:
    return OptionCatalog([("Helvetica", "Helvetica"), ("Courier", "Courier")], name="font")


@pytest.fixture
def font_coord() -> SelectionCoordinator[str]:
    return SelectionCoordinator("Helvetica", "Helvetica", attribute="font")


class Recorder:
    """Subscriber double: remembers every (value, key) it was called with."""

    def __init__(self, name: str = "", log: list | None = None) -> None:
        self.name = name
        self.calls: list[tuple] = []
        self._log = log

    def __call__(self, value, key: str) -> None:
        self.calls.append((value, key))
        if self._log is not None:
            self._log.append(self.name)


@pytest.fixture
def recorder_cls():
    return Recorder
