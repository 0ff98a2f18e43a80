from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from ...viewmodels.screen_text import NO_LABEL, PROMPT, YES_LABEL


class LandingView(ttk.Frame):
    """Apology prompt with a name entry and the two answers (UI-only)."""

    OnAnswer = Optional[Callable[[str], None]]
    OnName = Optional[Callable[[str], None]]

    def __init__(
        self,
        parent: tk.Widget,
        *,
        name: str = "",
        on_name_changed: OnName = None,
        on_answer: OnAnswer = None,
    ) -> None:
        super().__init__(parent)
        self._on_name_changed = on_name_changed
        self._on_answer = on_answer

        self.name_var = tk.StringVar(value=name)
        self.name_var.trace_add("write", self._name_written)

        self.columnconfigure(0, weight=1)
        ttk.Label(self, text=PROMPT, font=("TkDefaultFont", 13)).grid(
            row=0, column=0, pady=(32, 16)
        )
        entry = ttk.Entry(self, textvariable=self.name_var, width=32, justify="center")
        entry.grid(row=1, column=0, pady=(0, 16))
        entry.focus_set()

        buttons = ttk.Frame(self)
        buttons.grid(row=2, column=0)
        ttk.Button(buttons, text=YES_LABEL, command=lambda: self._answer("yes")).grid(
            row=0, column=0, padx=12
        )
        ttk.Button(buttons, text=NO_LABEL, command=lambda: self._answer("no")).grid(
            row=0, column=1, padx=12
        )

    def _name_written(self, *_args) -> None:
        if self._on_name_changed:
            self._on_name_changed(self.name_var.get())

    def _answer(self, answer: str) -> None:
        if self._on_answer:
            self._on_answer(answer)
