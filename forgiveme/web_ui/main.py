"""NiceGUI entrypoint for the browser runtime.

One response log is shared by the server process; every browser tab gets its
own :class:`FlowVM`, so screen, name entry and pin stay per tab.
"""

from __future__ import annotations

import argparse
import logging
import os

from nicegui import ui

from forgiveme.app.controller import AppController
from forgiveme.domain.entities import Screen
from forgiveme.domain.ports import UseCaseError
from forgiveme.utils import logging as logging_utils
from forgiveme.viewmodels.admin_vm import CLEAR_PROMPT, AdminVM
from forgiveme.viewmodels.flow_vm import FlowVM
from forgiveme.viewmodels.screen_text import (
    DECLINED_TEXT,
    DECLINED_TITLE,
    NO_LABEL,
    PROMPT,
    THANK_YOU,
    YES_LABEL,
)
from forgiveme.viewmodels.settings_vm import SettingsVM
from forgiveme.viewmodels.typed_note_vm import TypedNoteVM

_log = logging.getLogger(__name__)


def _install_theme() -> None:
    """Install global CSS for the page background and cards."""
    ui.add_head_html(
        """
<style>
body { background: linear-gradient(135deg, #fdf2f8, #ffffff 50%, #faf5ff); }
.fm-card { max-width: 42rem; width: 100%; margin: 3rem auto; border-radius: 1rem; }
.fm-title { color: #be185d; font-weight: 800; font-size: 1.9rem; }
</style>
"""
    )


def _build_ui(controller: AppController) -> None:
    """Register the single page on the NiceGUI app."""
    settings = controller.settings_vm
    log = controller.ensure_ready()

    @ui.page("/")
    def index() -> None:
        flow_vm = FlowVM(record_response=controller.uc_record, admin_pin=settings.admin_pin)
        admin_vm = AdminVM(list_responses=log.all, clear_responses=controller.uc_clear)

        async def ask_confirm(text: str) -> bool:
            with ui.dialog() as dialog, ui.card():
                ui.label(text)
                with ui.row():
                    ui.button("OK", on_click=lambda: dialog.submit(True))
                    ui.button("Cancel", on_click=lambda: dialog.submit(False)).props("flat")
            answered = await dialog
            dialog.delete()
            return bool(answered)

        def answer(value: str) -> None:
            try:
                flow_vm.cmd_answer(value)
            except UseCaseError as exc:
                ui.notify(exc.message, color="warning")
                return
            render.refresh()

        def on_pin(value: str) -> None:
            was_unlocked = flow_vm.admin_unlocked
            if flow_vm.submit_pin(value) != was_unlocked:
                render.refresh()

        async def clear() -> None:
            confirmed = await ask_confirm(CLEAR_PROMPT)
            if controller.uc_clear(confirmed):
                ui.notify("Responses cleared.")
            render.refresh()

        def toggle_admin() -> None:
            flow_vm.toggle_admin()
            render.refresh()

        def go_home() -> None:
            flow_vm.go_home()
            render.refresh()

        def go_back() -> None:
            flow_vm.go_back()
            render.refresh()

        def render_admin() -> None:
            if not flow_vm.admin_unlocked:
                ui.label("Responses (admin)").classes("text-xl font-semibold")
                ui.label("Enter admin pin to view stored answers.").classes("text-sm text-grey-7")
                ui.input(
                    "Enter pin",
                    value=flow_vm.pin_entry,
                    password=True,
                    on_change=lambda e: on_pin(str(e.value or "")),
                )
                return
            with ui.row().classes("w-full items-center justify-between"):
                ui.label("Collected responses").classes("text-xl font-semibold")
                ui.button("Clear", on_click=clear).props("outline")
            empty = admin_vm.empty_text()
            if empty:
                ui.label(empty).classes("text-sm text-grey-6")
                return
            with ui.column().classes("w-full gap-2"):
                for row in admin_vm.rows():
                    with ui.card().classes("w-full"):
                        ui.label(row.name).classes("font-bold text-pink-8")
                        ui.label(f"Answer: {row.answer}")
                        ui.label(row.at).classes("text-xs text-grey-6")

        def render_landing() -> None:
            with ui.column().classes("w-full items-center gap-4"):
                ui.label(PROMPT).classes("text-lg text-pink-7")
                ui.input(
                    placeholder="Your name",
                    value=flow_vm.display_name,
                    on_change=lambda e: flow_vm.set_display_name(str(e.value or "")),
                )
                with ui.row().classes("gap-6"):
                    ui.button(YES_LABEL, on_click=lambda: answer("yes"), color="pink")
                    ui.button(NO_LABEL, on_click=lambda: answer("no")).props("outline")

        def render_celebrate() -> None:
            note_vm = TypedNoteVM(settings.config.celebration_note)
            with ui.column().classes("w-full items-center gap-4"):
                ui.label(THANK_YOU).classes("text-3xl font-bold text-pink-8")
                note = ui.label("|")

            def tick() -> None:
                more = note_vm.tick()
                note.set_text(note_vm.display + "|")
                if not more:
                    timer.deactivate()

            timer = ui.timer(note_vm.interval_ms / 1000, tick)

        def render_declined() -> None:
            with ui.column().classes("w-full items-center gap-4"):
                ui.label(DECLINED_TITLE).classes("text-2xl font-bold")
                ui.label(DECLINED_TEXT).classes("text-center text-grey-8")
                ui.button("Go back", on_click=go_back).props("outline")

        @ui.refreshable
        def render() -> None:
            if flow_vm.admin_visible:
                render_admin()
            elif flow_vm.screen is Screen.CELEBRATE:
                render_celebrate()
            elif flow_vm.screen is Screen.DECLINED:
                render_declined()
            else:
                render_landing()

        with ui.card().classes("fm-card q-pa-lg"):
            with ui.row().classes("w-full items-center justify-between"):
                ui.label("Forgive Me?").classes("fm-title")
                with ui.row().classes("gap-2"):
                    ui.button(
                        "Responses",
                        on_click=toggle_admin,
                    ).props("flat").bind_text_from(
                        flow_vm, "admin_visible", backward=lambda v: "Close" if v else "Responses"
                    )
                    ui.button("Home", on_click=go_home).props("flat")
            render()


def _parse_args() -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the Forgive Me? web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--reload", action="store_true")
    return parser.parse_args()


def main() -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args()
    logging_utils.configure_root()
    controller = AppController(SettingsVM())
    controller.load_settings()
    logging_utils.apply_gui_preferences(controller.settings_vm.debug_logging)
    _log.info("Serving on http://%s:%d", args.host, args.port)
    _install_theme()
    _build_ui(controller)
    ui.run(
        host=args.host,
        port=args.port,
        title="Forgive Me?",
        reload=args.reload,
        show=False,
        storage_secret=os.environ.get("FORGIVEME_WEB_STORAGE_SECRET", "forgiveme-web-secret"),
    )


if __name__ == "__main__":
    main()
