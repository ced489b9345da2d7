# File: stylecore/coordinator.py
from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, Tuple, TypeVar

from stylecore.catalog import OptionCatalog
from stylecore.errors import OptionValueMismatch, ReentrantApplyNotAllowed, UnknownOptionKey

log = logging.getLogger(__name__)

T = TypeVar("T")

Subscriber = Callable[[T, str], None]

_handle_ids = itertools.count(1)


@dataclass(frozen=True)
class SubscriptionHandle:
    id: int
    attribute: str = ""


class SelectionCoordinator(Generic[T]):
    """
    Current selection for one attribute (font / size / color) + subscribers.

    Rules:
    - current() is defined right after construction (the default).
    - apply_selection() always assigns and always notifies, even when the
      value did not change.
    - subscribers run synchronously, in subscription order, on the caller's
      thread; the list is snapshotted at the start of each pass, so
      subscribe/unsubscribe inside a callback only affects later passes.
    - apply_selection() from inside a callback raises ReentrantApplyNotAllowed.
    """

    def __init__(
        self,
        default: T,
        default_key: str,
        *,
        attribute: str = "",
        catalog: Optional[OptionCatalog[T]] = None,
    ) -> None:
        self._attribute = attribute or (catalog.name if catalog is not None else "")
        self._catalog = catalog
        self._current: T = default
        self._current_key: str = default_key
        self._subs: List[Tuple[SubscriptionHandle, Subscriber]] = []
        self._notifying = False

    # ---------- state ----------

    @property
    def attribute(self) -> str:
        return self._attribute

    @property
    def catalog(self) -> Optional[OptionCatalog[T]]:
        return self._catalog

    def current(self) -> Tuple[T, str]:
        return self._current, self._current_key

    @property
    def value(self) -> T:
        return self._current

    @property
    def key(self) -> str:
        return self._current_key

    @property
    def is_notifying(self) -> bool:
        return self._notifying

    # ---------- subscription ----------

    def subscribe(self, callback: Subscriber) -> SubscriptionHandle:
        if callback is None:
            raise ValueError("callback cannot be None")
        handle = SubscriptionHandle(id=next(_handle_ids), attribute=self._attribute)
        self._subs.append((handle, callback))
        return handle

    def unsubscribe(self, handle: SubscriptionHandle) -> bool:
        before = len(self._subs)
        self._subs = [(h, fn) for h, fn in self._subs if h != handle]
        return len(self._subs) != before

    def subscriber_count(self) -> int:
        return len(self._subs)

    # ---------- apply ----------

    def check_selection(self, value: T, key: str) -> None:
        """
        Entry checks of apply_selection(); raises without touching state.
        Once this passes, apply_selection() with the same arguments mutates.
        """
        if self._notifying:
            raise ReentrantApplyNotAllowed(self._attribute)
        if self._catalog is not None:
            if key not in self._catalog:
                raise UnknownOptionKey(key, self._catalog.name)
            if self._catalog.lookup(key) != value:
                raise OptionValueMismatch(key, self._catalog.name)

    def apply_selection(self, value: T, key: str) -> None:
        self.check_selection(value, key)

        self._current = value
        self._current_key = key
        log.debug("selection applied: %s=%r", self._attribute or "?", key)

        snapshot = list(self._subs)
        self._notifying = True
        try:
            for handle, fn in snapshot:
                try:
                    fn(value, key)
                except ReentrantApplyNotAllowed:
                    raise
                except Exception:
                    log.exception("selection subscriber failed (handle=%s)", handle.id)
        finally:
            self._notifying = False

    def __repr__(self) -> str:
        return (
            f"SelectionCoordinator(attribute={self._attribute!r}, "
            f"key={self._current_key!r}, subscribers={len(self._subs)})"
        )
