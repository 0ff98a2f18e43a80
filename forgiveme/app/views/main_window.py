"""
MainWindowView
---------------
Tkinter main window for the response flow following MVVM + Hexagonal
architecture. This file contains **only View code**: no storage, no HTTP.

Layout:
  * Header with the title and the "Responses"/"Close" and "Home" buttons
  * Content host where exactly one screen view (or the admin panel) is mounted
  * StatusBar at the bottom
All external interactions are signaled via callbacks passed to the constructor.
"""
from __future__ import annotations
import tkinter as tk
from tkinter import messagebox, ttk
from typing import Callable, Optional


class MainWindowView(tk.Tk):
    """Top-level application window (UI-only)."""

    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        *,
        on_toggle_admin: OnVoid = None,
        on_home: OnVoid = None,
    ) -> None:
        super().__init__()

        self.title("Forgive Me?")
        self.geometry("720x520")
        self.minsize(520, 420)

        self._on_toggle_admin = on_toggle_admin
        self._on_home = on_home
        self._mounted: Optional[tk.Widget] = None

        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)

        self._build_header(self)
        self._build_content(self)
        self._build_statusbar(self)

        self.bind("<Escape>", lambda e: self._on_home and self._on_home())

    # ------------------------------------------------------------------
    def _build_header(self, parent: tk.Widget) -> None:
        header = ttk.Frame(parent)
        header.grid(row=0, column=0, sticky="ew", padx=16, pady=(12, 6))
        header.columnconfigure(0, weight=1)

        ttk.Label(header, text="Forgive Me?", font=("TkDefaultFont", 20, "bold")).grid(
            row=0, column=0, sticky="w"
        )
        self._admin_button = ttk.Button(header, text="Responses", command=self._on_toggle_admin)
        self._admin_button.grid(row=0, column=1, padx=(0, 6))
        ttk.Button(header, text="Home", command=self._on_home).grid(row=0, column=2)

    def _build_content(self, parent: tk.Widget) -> None:
        self.content_host = ttk.Frame(parent)
        self.content_host.grid(row=1, column=0, sticky="nsew", padx=16, pady=6)
        self.content_host.rowconfigure(0, weight=1)
        self.content_host.columnconfigure(0, weight=1)

    def _build_statusbar(self, parent: tk.Widget) -> None:
        bar = ttk.Frame(parent)
        bar.grid(row=2, column=0, sticky="ew", padx=16, pady=(4, 10))
        self._status_var = tk.StringVar(value="")
        ttk.Label(bar, textvariable=self._status_var, anchor="w").pack(fill="x")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def mount(self, widget: tk.Widget) -> None:
        """Replace the content area with ``widget`` (created on ``content_host``)."""
        if self._mounted is not None and self._mounted is not widget:
            self._mounted.destroy()
        self._mounted = widget
        widget.grid(row=0, column=0, sticky="nsew")

    def set_admin_visible(self, visible: bool) -> None:
        self._admin_button.configure(text="Close" if visible else "Responses")

    def set_status_message(self, text: str) -> None:
        self._status_var.set(text)

    def show_toast(self, text: str) -> None:
        messagebox.showinfo("Forgive Me?", text, parent=self)

    def ask_confirm(self, text: str) -> bool:
        return bool(messagebox.askokcancel("Forgive Me?", text, parent=self))
