from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from ...viewmodels.screen_text import DECLINED_TEXT, DECLINED_TITLE, THANK_YOU
from ...viewmodels.typed_note_vm import TypedNoteVM


class CelebrateView(ttk.Frame):
    """Thank-you screen that types out the celebration note."""

    def __init__(self, parent: tk.Widget, *, note: str = "") -> None:
        super().__init__(parent)
        self._note_vm = TypedNoteVM(note)
        self._after_id: Optional[str] = None

        self.columnconfigure(0, weight=1)
        ttk.Label(self, text=THANK_YOU, font=("TkDefaultFont", 20, "bold")).grid(
            row=0, column=0, pady=(40, 16)
        )
        self._note_var = tk.StringVar(value="")
        ttk.Label(self, textvariable=self._note_var, wraplength=460, justify="center").grid(
            row=1, column=0, padx=24
        )
        self.bind("<Destroy>", self._on_destroy, add="+")
        self._schedule()

    def _schedule(self) -> None:
        self._after_id = self.after(self._note_vm.interval_ms, self._on_tick)

    def _on_tick(self) -> None:
        more = self._note_vm.tick()
        self._note_var.set(self._note_vm.display + "|")
        if more:
            self._schedule()
        else:
            self._after_id = None

    def _on_destroy(self, event) -> None:
        if event.widget is self and self._after_id is not None:
            self.after_cancel(self._after_id)
            self._after_id = None


class DeclinedView(ttk.Frame):
    """Screen shown after a "No" answer."""

    def __init__(self, parent: tk.Widget, *, on_back: Optional[Callable[[], None]] = None) -> None:
        super().__init__(parent)
        self.columnconfigure(0, weight=1)
        ttk.Label(self, text=DECLINED_TITLE, font=("TkDefaultFont", 16, "bold")).grid(
            row=0, column=0, pady=(40, 12)
        )
        ttk.Label(self, text=DECLINED_TEXT, wraplength=460, justify="center").grid(
            row=1, column=0, padx=24, pady=(0, 20)
        )
        ttk.Button(self, text="Go back", command=on_back).grid(row=2, column=0)
