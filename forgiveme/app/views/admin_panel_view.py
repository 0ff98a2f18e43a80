from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional, Sequence

from ...viewmodels.admin_vm import ResponseRow


class AdminPanelView(ttk.Frame):
    """Pin prompt or the list of collected responses (UI-only)."""

    def __init__(
        self,
        parent: tk.Widget,
        *,
        pin: str = "",
        on_pin_changed: Optional[Callable[[str], None]] = None,
        on_clear: Optional[Callable[[], None]] = None,
    ) -> None:
        super().__init__(parent)
        self._on_pin_changed = on_pin_changed
        self._on_clear = on_clear
        self.pin_var = tk.StringVar(value=pin)
        self.pin_var.trace_add("write", self._pin_written)
        self.columnconfigure(0, weight=1)
        self.rowconfigure(1, weight=1)
        self._body: Optional[ttk.Frame] = None

    def _pin_written(self, *_args) -> None:
        if self._on_pin_changed:
            self._on_pin_changed(self.pin_var.get())

    def _replace_body(self) -> ttk.Frame:
        for child in self.winfo_children():
            child.destroy()
        body = ttk.Frame(self)
        body.grid(row=0, column=0, rowspan=2, sticky="nsew", padx=8, pady=8)
        body.columnconfigure(0, weight=1)
        self._body = body
        return body

    # ------------------------------------------------------------------
    def show_locked(self) -> None:
        body = self._replace_body()
        ttk.Label(body, text="Responses (admin)", font=("TkDefaultFont", 14, "bold")).grid(
            row=0, column=0, sticky="w"
        )
        ttk.Label(body, text="Enter admin pin to view stored answers.").grid(
            row=1, column=0, sticky="w", pady=(4, 8)
        )
        entry = ttk.Entry(body, textvariable=self.pin_var, show="*", width=16)
        entry.grid(row=2, column=0, sticky="w")
        entry.focus_set()

    def show_rows(self, rows: Sequence[ResponseRow], empty_text: Optional[str]) -> None:
        body = self._replace_body()
        body.rowconfigure(1, weight=1)
        top = ttk.Frame(body)
        top.grid(row=0, column=0, sticky="ew", pady=(0, 8))
        top.columnconfigure(0, weight=1)
        ttk.Label(top, text="Collected responses", font=("TkDefaultFont", 14, "bold")).grid(
            row=0, column=0, sticky="w"
        )
        ttk.Button(top, text="Clear", command=self._on_clear).grid(row=0, column=1)

        if empty_text:
            ttk.Label(body, text=empty_text).grid(row=1, column=0, sticky="nw")
            return

        tree = ttk.Treeview(body, columns=("name", "answer", "at"), show="headings", height=10)
        for col, label, width in (("name", "Name", 180), ("answer", "Answer", 80), ("at", "When", 200)):
            tree.heading(col, text=label)
            tree.column(col, width=width, anchor="w")
        for row in rows:
            tree.insert("", "end", values=(row.name, row.answer, row.at))
        tree.grid(row=1, column=0, sticky="nsew")
        scroll = ttk.Scrollbar(body, orient="vertical", command=tree.yview)
        scroll.grid(row=1, column=1, sticky="ns")
        tree.configure(yscrollcommand=scroll.set)
