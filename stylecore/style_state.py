# File: stylecore/style_state.py
from __future__ import annotations

import logging
from typing import Any, Callable, List, Literal, Optional

from stylecore.catalogs import DEFAULT_POINT_SIZE, StyleCatalogs, build_catalogs
from stylecore.common import parse_int
from stylecore.config import AppConfig
from stylecore.coordinator import SelectionCoordinator, SubscriptionHandle
from stylecore.models import NamedColor, TextStyle
from stylecore.session import PickerSession

log = logging.getLogger(__name__)

Attribute = Literal["font", "size", "color"]

ATTRIBUTES: tuple[Attribute, ...] = ("font", "size", "color")


class StyleState:
    """
    Host-side editing state:

    - one SelectionCoordinator per attribute (font / size / color)
    - editable sample text
    - point_size(): parsed size key; unparsable keys keep the last good number
    - subscribe(fn): called with a TextStyle snapshot whenever anything changes
    - close(): drops every subscription this object registered
    """

    def __init__(self, *, catalogs: Optional[StyleCatalogs] = None, config: Optional[AppConfig] = None) -> None:
        self._cats = catalogs or build_catalogs()
        cfg = (config or AppConfig()).resolved_against(self._cats)

        self.font: SelectionCoordinator[str] = SelectionCoordinator(
            self._cats.fonts.lookup(cfg.default_font) or cfg.default_font,
            cfg.default_font,
            attribute="font",
            catalog=self._cats.fonts,
        )
        self.size: SelectionCoordinator[str] = SelectionCoordinator(
            self._cats.sizes.lookup(cfg.default_size) or cfg.default_size,
            cfg.default_size,
            attribute="size",
            catalog=self._cats.sizes,
        )
        color = self._cats.colors.lookup(cfg.default_color)
        if color is None:
            raise ValueError(f"default color {cfg.default_color!r} not in color catalog")
        self.color: SelectionCoordinator[NamedColor] = SelectionCoordinator(
            color,
            cfg.default_color,
            attribute="color",
            catalog=self._cats.colors,
        )

        self._text = cfg.sample_text
        self._point_size = DEFAULT_POINT_SIZE
        self._text_listeners: list[Callable[[str], None]] = []
        self._style_listeners: list[Callable[[TextStyle], None]] = []
        self._handles: List[tuple[SelectionCoordinator[Any], SubscriptionHandle]] = []
        self._closed = False

        self._update_point_size(self.size.key)

        # size first so point_size() is fresh for style listeners
        self._track(self.size, self._on_size)
        self._track(self.font, self._on_any)
        self._track(self.color, self._on_any)

    # ---------- basic ----------

    @property
    def catalogs(self) -> StyleCatalogs:
        return self._cats

    @property
    def sample_text(self) -> str:
        return self._text

    def point_size(self) -> int:
        return self._point_size

    def coordinator(self, attribute: Attribute) -> SelectionCoordinator[Any]:
        if attribute == "font":
            return self.font
        if attribute == "size":
            return self.size
        if attribute == "color":
            return self.color
        raise ValueError(f"unknown attribute: {attribute!r}")

    def open_picker(self, attribute: Attribute) -> PickerSession[Any]:
        coord = self.coordinator(attribute)
        catalog = coord.catalog
        if catalog is None:
            raise RuntimeError(f"coordinator {attribute!r} has no catalog bound")
        return PickerSession.open(catalog, coord)

    def snapshot(self) -> TextStyle:
        color, color_name = self.color.current()
        return TextStyle(
            text=self._text,
            font=self.font.key,
            size_key=self.size.key,
            point_size=self._point_size,
            color=color,
            color_name=color_name,
        )

    # ---------- sample text ----------

    def set_sample_text(self, text: str) -> None:
        self._text = text if isinstance(text, str) else str(text or "")
        for fn in list(self._text_listeners):
            try:
                fn(self._text)
            except Exception:
                log.exception("text listener failed")
        self._emit_style()

    def subscribe_text(self, fn: Callable[[str], None]) -> Callable[[], None]:
        self._text_listeners.append(fn)

        def _unsub() -> None:
            try:
                self._text_listeners.remove(fn)
            except ValueError:
                pass

        return _unsub

    # ---------- whole-style listeners ----------

    def subscribe(self, fn: Callable[[TextStyle], None]) -> Callable[[], None]:
        self._style_listeners.append(fn)

        def _unsub() -> None:
            try:
                self._style_listeners.remove(fn)
            except ValueError:
                pass

        return _unsub

    def _emit_style(self) -> None:
        if not self._style_listeners:
            return
        snap = self.snapshot()
        for fn in list(self._style_listeners):
            try:
                fn(snap)
            except Exception:
                log.exception("style listener failed")

    # ---------- coordinator callbacks ----------

    def _track(self, coord: SelectionCoordinator[Any], fn: Callable[[Any, str], None]) -> None:
        self._handles.append((coord, coord.subscribe(fn)))

    def _update_point_size(self, key: str) -> None:
        n = parse_int(key)
        if n is None or n <= 0:
            log.warning("size %r is not a number; keeping %d pt", key, self._point_size)
            return
        self._point_size = n

    def _on_size(self, _value: str, key: str) -> None:
        self._update_point_size(key)
        self._emit_style()

    def _on_any(self, _value: Any, _key: str) -> None:
        self._emit_style()

    # ---------- teardown ----------

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        for coord, handle in self._handles:
            coord.unsubscribe(handle)
        self._handles.clear()
        self._text_listeners.clear()
        self._style_listeners.clear()
