# qtui/pick/presenter.py
from __future__ import annotations

import logging
from typing import Any, Optional

from PySide6.QtWidgets import QWidget

from stylecore.logging_context import log_context, new_corr_id
from stylecore.session import PickerSession, SessionState
from stylecore.style_state import Attribute, StyleState
from qtui.pick.picker_dialog import PickerDialog, color_row, font_row, size_row
from qtui.status_bar import StatusController

log = logging.getLogger(__name__)

_DIALOGS = {
    "font": ("Pick a Font", "", font_row),
    "size": ("Pick a Size", "", size_row),
    "color": ("Pick a Color", "Pick a Color", color_row),
}


class QtPickerPresenter:
    """
    Opens a PickerSession for one attribute and runs its modal dialog.

    The dialog reports into the session; the session reports into the
    coordinator; the main window hears about it through its subscription.
    """

    def __init__(self, *, parent: QWidget, state: StyleState, status: StatusController) -> None:
        self._parent = parent
        self._state = state
        self._status = status
        self._active: Optional[PickerSession[Any]] = None

    @property
    def active_session(self) -> Optional[PickerSession[Any]]:
        return self._active

    def build_dialog(self, attribute: Attribute, session: PickerSession[Any]) -> PickerDialog:
        title, header, row_factory = _DIALOGS[attribute]
        return PickerDialog(
            session,
            title=title,
            header=header,
            row_factory=row_factory,
            parent=self._parent,
        )

    def request_pick(self, attribute: Attribute) -> PickerSession[Any]:
        if self._active is not None and self._active.is_open:
            log.warning("picker already open for %s; cancelling it", self._active.attribute)
            self._active.cancel()

        with log_context(corr_id=new_corr_id(), attribute=attribute, action="pick"):
            session = self._state.open_picker(attribute)
            self._active = session
            dlg = self.build_dialog(attribute, session)
            try:
                dlg.exec()
            finally:
                self._active = None

            if dlg.error is not None:
                self._status.error(str(dlg.error))
            elif session.state is SessionState.RESOLVED:
                self._status.info(f"{attribute}: {session.chosen_key}", ttl_ms=2500)
            else:
                self._status.status_msg(f"{attribute} picker cancelled", ttl_ms=2000)
            return session
