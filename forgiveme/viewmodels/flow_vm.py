from __future__ import annotations

import logging
from typing import Callable, Optional

from ..domain.entities import Answer, ResponseRecord, Screen

RecordFn = Callable[[str, str, Screen], ResponseRecord]


class FlowVM:
    """Screen sequencing and the pin-gated admin overlay.

    Screens move ``landing -> celebrate | declined`` on an answer and back to
    ``landing`` through ``go_home`` (or ``go_back`` from the declined screen).
    The overlay flag is independent of the screen. Recording is delegated to
    ``record_response``, which persists before the screen changes; it raises
    ``UseCaseError`` for a blank name, in which case nothing changes here.
    """

    def __init__(
        self,
        *,
        record_response: RecordFn,
        admin_pin: str,
        on_screen_changed: Optional[Callable[[Screen], None]] = None,
        on_admin_changed: Optional[Callable[[bool], None]] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self._record_response = record_response
        self._admin_pin = admin_pin
        self.on_screen_changed = on_screen_changed
        self.on_admin_changed = on_admin_changed

        self.screen: Screen = Screen.LANDING
        self.display_name: str = ""
        self.admin_visible: bool = False
        self.pin_entry: str = ""

    @property
    def admin_unlocked(self) -> bool:
        return self.pin_entry == self._admin_pin

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def set_display_name(self, value: str) -> None:
        self.display_name = value if isinstance(value, str) else ""

    def submit_answer(self, name: Optional[str], answer: str) -> ResponseRecord:
        """Record ``answer`` for ``name`` and move to the matching screen."""
        record = self._record_response(name, answer, self.screen)
        target = Screen.CELEBRATE if record.answer == Answer.YES.value else Screen.DECLINED
        self._log.info("Recorded '%s' from %s", record.answer, self.screen.value)
        self._set_screen(target)
        return record

    def cmd_answer(self, answer: str) -> ResponseRecord:
        return self.submit_answer(self.display_name, answer)

    def go_home(self) -> None:
        self._set_screen(Screen.LANDING)
        self._set_admin(False)

    def go_back(self) -> None:
        self._set_screen(Screen.LANDING)

    def toggle_admin(self) -> None:
        self._set_admin(not self.admin_visible)

    def submit_pin(self, candidate: str) -> bool:
        self.pin_entry = candidate if isinstance(candidate, str) else ""
        return self.admin_unlocked

    # ------------------------------------------------------------------
    def _set_screen(self, screen: Screen) -> None:
        if screen == self.screen:
            return
        self.screen = screen
        if self.on_screen_changed:
            self.on_screen_changed(screen)

    def _set_admin(self, visible: bool) -> None:
        if visible == self.admin_visible:
            return
        self.admin_visible = visible
        if self.on_admin_changed:
            self.on_admin_changed(visible)
