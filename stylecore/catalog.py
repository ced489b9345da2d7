# File: stylecore/catalog.py
from __future__ import annotations

from typing import Dict, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class OptionCatalog(Generic[T]):
    """
    Immutable, ordered list of selectable (key, value) options.

    - keys are unique (duplicates raise ValueError at construction)
    - lookup() fails softly: unknown key -> None
    - entries() returns a fresh list every call, in construction order
    """

    def __init__(self, entries: Iterable[Tuple[str, T]], *, name: str = "") -> None:
        items: List[Tuple[str, T]] = []
        index: Dict[str, int] = {}
        for key, value in entries:
            if not isinstance(key, str):
                raise TypeError(f"catalog key must be str, got {type(key).__name__}")
            if key in index:
                raise ValueError(f"duplicate catalog key: {key!r}")
            index[key] = len(items)
            items.append((key, value))

        self._name = name
        self._items: Tuple[Tuple[str, T], ...] = tuple(items)
        self._index = index

    @classmethod
    def from_values(cls, values: Iterable[str], *, name: str = "") -> "OptionCatalog[str]":
        """Catalog where every key is also its value (font names, point sizes)."""
        return cls(((v, v) for v in values), name=name)  # type: ignore[return-value]

    @property
    def name(self) -> str:
        return self._name

    def lookup(self, key: str) -> Optional[T]:
        i = self._index.get(key)
        if i is None:
            return None
        return self._items[i][1]

    def entries(self) -> List[Tuple[str, T]]:
        return list(self._items)

    def keys(self) -> List[str]:
        return [k for k, _ in self._items]

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Tuple[str, T]]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"OptionCatalog(name={self._name!r}, keys={self.keys()!r})"
