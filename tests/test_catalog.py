# tests/test_catalog.py
from __future__ import annotations

import pytest

from stylecore.catalog import OptionCatalog
from stylecore.catalogs import FONT_NAMES, SIZE_KEYS, BLUE, RED


def test_lookup_present_and_absent(cats) -> None:
    """
    present keys return the exact paired value; absent keys return None.
    """
    for key, value in cats.colors.entries():
        assert cats.colors.lookup(key) is value
    for key in FONT_NAMES:
        assert cats.fonts.lookup(key) == key

    assert cats.fonts.lookup("Comic Sans") is None
    assert cats.sizes.lookup("99") is None
    assert cats.colors.lookup("red") is None  # keys are case-sensitive
    assert cats.colors.lookup("") is None


def test_entries_preserve_order_and_restart(cats) -> None:
    first = cats.sizes.entries()
    second = cats.sizes.entries()
    assert [k for k, _ in first] == SIZE_KEYS
    assert first == second

    # callers cannot mutate the catalog through the returned list
    first.clear()
    assert len(cats.sizes) == len(SIZE_KEYS)
    assert list(cats.sizes)[0] == ("12", "12")


def test_duplicate_keys_rejected() -> None:
    with pytest.raises(ValueError):
        OptionCatalog([("a", 1), ("b", 2), ("a", 3)])


def test_non_string_key_rejected() -> None:
    with pytest.raises(TypeError):
        OptionCatalog([(1, "one")])  # type: ignore[list-item]


def test_contains_keys_and_name(cats) -> None:
    assert "Courier" in cats.fonts
    assert "Wingdings" not in cats.fonts
    assert cats.colors.keys() == ["Red", "Blue", "Yellow", "Black"]
    assert cats.colors.name == "color"
    assert cats.colors.lookup("Red") == RED
    assert BLUE.hex == "#007AFF"


def test_empty_catalog() -> None:
    c: OptionCatalog[int] = OptionCatalog([])
    assert len(c) == 0
    assert c.entries() == []
    assert c.lookup("x") is None
