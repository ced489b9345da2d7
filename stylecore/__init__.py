from __future__ import annotations

from .errors import (
    SelectionError,
    UnknownOptionKey,
    SessionAlreadyClosed,
    ReentrantApplyNotAllowed,
    OptionValueMismatch,
)
from .catalog import OptionCatalog
from .coordinator import SelectionCoordinator, SubscriptionHandle
from .session import PickerSession, SessionState
from .models import NamedColor, TextStyle
from .catalogs import StyleCatalogs, build_catalogs
from .style_state import StyleState

__all__ = [
    "SelectionError",
    "UnknownOptionKey",
    "SessionAlreadyClosed",
    "ReentrantApplyNotAllowed",
    "OptionValueMismatch",
    "OptionCatalog",
    "SelectionCoordinator",
    "SubscriptionHandle",
    "PickerSession",
    "SessionState",
    "NamedColor",
    "TextStyle",
    "StyleCatalogs",
    "build_catalogs",
    "StyleState",
]
