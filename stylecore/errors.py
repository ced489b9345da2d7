# File: stylecore/errors.py
from __future__ import annotations

from typing import Optional


class SelectionError(Exception):
    """Base class for selection/picker errors."""


class UnknownOptionKey(SelectionError, LookupError):
    """
    choose()/apply_selection() got a key that is not in the catalog.

    The session stays open; the caller may retry with a valid key.
    """

    def __init__(self, key: str, catalog_name: str = "") -> None:
        self.key = key
        self.catalog_name = catalog_name
        where = f" in catalog {catalog_name!r}" if catalog_name else ""
        super().__init__(f"unknown option key {key!r}{where}")


class SessionAlreadyClosed(SelectionError, RuntimeError):
    def __init__(self, state: str, action: str = "") -> None:
        self.state = state
        self.action = action
        verb = f"{action}() " if action else ""
        super().__init__(f"{verb}called on a picker session that is already {state}")


class ReentrantApplyNotAllowed(SelectionError, RuntimeError):
    """
    A subscriber tried to apply a new selection on the same coordinator
    while that coordinator was still notifying.
    """

    def __init__(self, attribute: Optional[str] = None) -> None:
        self.attribute = attribute or ""
        name = f" {self.attribute!r}" if self.attribute else ""
        super().__init__(f"apply_selection() re-entered on coordinator{name} during notification")


class OptionValueMismatch(SelectionError, ValueError):
    """apply_selection() got a key whose catalog value differs from the value passed."""

    def __init__(self, key: str, catalog_name: str = "") -> None:
        self.key = key
        self.catalog_name = catalog_name
        where = f" in catalog {catalog_name!r}" if catalog_name else ""
        super().__init__(f"value does not match option key {key!r}{where}")
