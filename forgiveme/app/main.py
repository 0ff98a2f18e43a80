# forgiveme/app/main.py
from __future__ import annotations
import logging
from typing import Optional

# ---- Views (UI-only) ----
from .views.main_window import MainWindowView
from .views.landing_view import LandingView
from .views.response_views import CelebrateView, DeclinedView
from .views.admin_panel_view import AdminPanelView

# ---- ViewModels ----
from ..viewmodels.flow_vm import FlowVM
from ..viewmodels.admin_vm import AdminVM
from ..viewmodels.settings_vm import SettingsVM

# ---- Wiring ----
from .controller import AppController
from ..domain.entities import Screen
from ..domain.ports import UseCaseError
from ..utils import logging as logging_utils

logging_utils.configure_root()


class App:
    """Bootstrap: wire Views <-> ViewModels and the response log."""

    def __init__(self, controller: Optional[AppController] = None) -> None:
        self._log = logging.getLogger(__name__)

        # ---- Settings + adapters ----
        if controller is None:
            controller = AppController(SettingsVM())
            controller.load_settings()
        self.controller = controller
        self.settings_vm = controller.settings_vm
        self._apply_logging_preferences()
        log = controller.ensure_ready()

        # ---- Main window ----
        self.win = MainWindowView(
            on_toggle_admin=self._on_toggle_admin,
            on_home=self._on_home,
        )

        # ---- ViewModels ----
        self.flow_vm = FlowVM(
            record_response=controller.uc_record,
            admin_pin=self.settings_vm.admin_pin,
            on_screen_changed=lambda _screen: self._render(),
            on_admin_changed=self._on_admin_changed,
        )
        self.admin_vm = AdminVM(
            list_responses=log.all,
            clear_responses=controller.uc_clear,
            confirm=self.win.ask_confirm,
            on_changed=self._render,
        )
        self._admin_panel: Optional[AdminPanelView] = None

        self._render()
        self.win.set_status_message(f"{len(log)} stored response(s).")

    def _apply_logging_preferences(self) -> None:
        level = logging_utils.apply_gui_preferences(self.settings_vm.debug_logging)
        self._log.debug("Effective log level: %s", logging.getLevelName(level))

    # ==================================================================
    # Rendering
    # ==================================================================
    def _render(self) -> None:
        host = self.win.content_host
        if self.flow_vm.admin_visible:
            self._admin_panel = AdminPanelView(
                host,
                pin=self.flow_vm.pin_entry,
                on_pin_changed=self._on_pin_changed,
                on_clear=self._on_clear,
            )
            self.win.mount(self._admin_panel)
            self._render_admin()
            return

        self._admin_panel = None
        screen = self.flow_vm.screen
        if screen is Screen.CELEBRATE:
            view = CelebrateView(host, note=self.settings_vm.config.celebration_note)
        elif screen is Screen.DECLINED:
            view = DeclinedView(host, on_back=self.flow_vm.go_back)
        else:
            view = LandingView(
                host,
                name=self.flow_vm.display_name,
                on_name_changed=self.flow_vm.set_display_name,
                on_answer=self._on_answer,
            )
        self.win.mount(view)

    def _render_admin(self) -> None:
        panel = self._admin_panel
        if panel is None:
            return
        if self.flow_vm.admin_unlocked:
            panel.show_rows(self.admin_vm.rows(), self.admin_vm.empty_text())
        else:
            panel.show_locked()

    # ==================================================================
    # Callbacks
    # ==================================================================
    def _on_answer(self, answer: str) -> None:
        try:
            self.flow_vm.cmd_answer(answer)
        except UseCaseError as exc:
            self._log.info("Answer rejected (%s)", exc.code)
            self.win.show_toast(exc.message)
            return
        self.win.set_status_message(f"{len(self.controller.response_log)} stored response(s).")

    def _on_home(self) -> None:
        self.flow_vm.go_home()

    def _on_toggle_admin(self) -> None:
        self.flow_vm.toggle_admin()

    def _on_admin_changed(self, visible: bool) -> None:
        self.win.set_admin_visible(visible)
        self._render()

    def _on_pin_changed(self, candidate: str) -> None:
        was_unlocked = self.flow_vm.admin_unlocked
        if self.flow_vm.submit_pin(candidate) != was_unlocked:
            # Rebuild outside the entry's own trace callback.
            self.win.after_idle(self._render_admin)

    def _on_clear(self) -> None:
        if self.admin_vm.cmd_clear():
            self.win.set_status_message("Responses cleared.")


def main() -> None:
    app = App()
    app.win.mainloop()


if __name__ == "__main__":
    main()
