"""
MainWindowView
---------------
Tkinter main window for the food screen. This file contains **only View
code**: no data source or snapshot logic. It exposes callback hooks that are
connected by ``foodscreen.app.main.App``.

Layout:
  * Toolbar with Reload and Pause/Resume
  * List host frame where ``FoodListView`` is packed
  * StatusBar at the bottom
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional


class MainWindowView(tk.Tk):
    """Top-level application window; all interactions leave through callbacks."""

    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        *,
        title: str = "Food Screen",
        geometry: str = "420x560",
        on_reload: OnVoid = None,
        on_toggle_pause: OnVoid = None,
    ) -> None:
        super().__init__()

        self.title(title)
        self.geometry(geometry)
        self.minsize(320, 400)

        self._on_reload = on_reload
        self._on_toggle_pause = on_toggle_pause

        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)

        self._build_toolbar(self)
        self._build_main_area(self)
        self._build_statusbar(self)

        self.bind("<F5>", lambda e: self._on_reload and self._on_reload())
        self.bind("<space>", lambda e: self._on_toggle_pause and self._on_toggle_pause())

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    def _build_toolbar(self, parent: tk.Widget) -> None:
        toolbar = ttk.Frame(parent)
        toolbar.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 4))

        ttk.Button(toolbar, text="Reload", command=lambda: self._on_reload and self._on_reload()).pack(
            side=tk.LEFT, padx=(0, 6)
        )
        self.btn_pause = ttk.Button(
            toolbar, text="Pause", command=lambda: self._on_toggle_pause and self._on_toggle_pause()
        )
        self.btn_pause.pack(side=tk.LEFT)

    def _build_main_area(self, parent: tk.Widget) -> None:
        self.list_host = ttk.Frame(parent)
        self.list_host.grid(row=1, column=0, sticky="nsew", padx=8, pady=4)

    def _build_statusbar(self, parent: tk.Widget) -> None:
        self.status_var = tk.StringVar(value="Ready")
        bar = ttk.Label(parent, textvariable=self.status_var, anchor="w", relief=tk.SUNKEN)
        bar.grid(row=2, column=0, sticky="ew")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def set_status(self, text: str) -> None:
        self.status_var.set(text)

    def set_paused(self, paused: bool) -> None:
        self.btn_pause.configure(text="Resume" if paused else "Pause")


__all__ = ["MainWindowView"]
