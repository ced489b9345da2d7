# File: stylecore/session.py
from __future__ import annotations

import logging
from enum import Enum
from typing import Generic, Optional, TypeVar

from stylecore.catalog import OptionCatalog
from stylecore.coordinator import SelectionCoordinator
from stylecore.errors import SessionAlreadyClosed, UnknownOptionKey
from stylecore.logging_context import log_context

log = logging.getLogger(__name__)

T = TypeVar("T")


class SessionState(str, Enum):
    OPEN = "open"
    RESOLVED = "resolved"
    CANCELLED = "cancelled"

    def __str__(self) -> str:
        return self.value


class PickerSession(Generic[T]):
    """
    One picker interaction: OPEN -> RESOLVED (an entry was chosen)
    or OPEN -> CANCELLED (dismissed). Both are terminal.

    The session holds the catalog and the coordinator it reports to;
    neither of them knows about the session.
    """

    def __init__(self, catalog: OptionCatalog[T], coordinator: SelectionCoordinator[T]) -> None:
        self._catalog = catalog
        self._coordinator = coordinator
        self._state = SessionState.OPEN
        self._chosen_key: Optional[str] = None

    @classmethod
    def open(cls, catalog: OptionCatalog[T], coordinator: SelectionCoordinator[T]) -> "PickerSession[T]":
        s = cls(catalog, coordinator)
        log.debug("picker session opened: %s (%d options)", s.attribute or "?", len(catalog))
        return s

    # ---------- state ----------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is SessionState.OPEN

    @property
    def catalog(self) -> OptionCatalog[T]:
        return self._catalog

    @property
    def attribute(self) -> str:
        return self._coordinator.attribute or self._catalog.name

    @property
    def chosen_key(self) -> Optional[str]:
        return self._chosen_key

    # ---------- transitions ----------

    def _require_open(self, action: str) -> None:
        if self._state is not SessionState.OPEN:
            raise SessionAlreadyClosed(self._state.value, action)

    def choose(self, key: str) -> T:
        self._require_open("choose")
        with log_context(attribute=self.attribute, action="choose"):
            if key not in self._catalog:
                log.warning("unknown option key %r", key)
                raise UnknownOptionKey(key, self._catalog.name)

            value = self._catalog.lookup(key)
            # failures here leave the coordinator untouched and the session open
            self._coordinator.check_selection(value, key)  # type: ignore[arg-type]

            # past the checks the coordinator has the value, so the session is
            # resolved even if a subscriber breaks the notification pass
            try:
                self._coordinator.apply_selection(value, key)  # type: ignore[arg-type]
            finally:
                self._state = SessionState.RESOLVED
                self._chosen_key = key
            log.info("picked %s=%r", self.attribute, key)
            return value  # type: ignore[return-value]

    def cancel(self) -> None:
        self._require_open("cancel")
        self._state = SessionState.CANCELLED
        with log_context(attribute=self.attribute, action="cancel"):
            log.info("picker cancelled")

    def __repr__(self) -> str:
        return f"PickerSession(attribute={self.attribute!r}, state={self._state.value!r})"
