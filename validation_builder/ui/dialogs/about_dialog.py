# -*- coding: utf-8 -*-
"""About dialog for Validation Builder.

Kept separate from ``app.py`` to avoid bloating the main UI code.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from validation_builder.version import get_app_version


def show_about_dialog(root: tk.Tk) -> None:
    """Display a compact, centered About dialog (single pane)."""
    top = tk.Toplevel(root)
    top.title("About Validation Builder")
    top.transient(root)
    top.resizable(False, False)

    # Center relative to the main window
    root.update_idletasks()
    w, h = 360, 200
    rx, ry = root.winfo_rootx(), root.winfo_rooty()
    rw, rh = root.winfo_width(), root.winfo_height()
    top.geometry(f"{w}x{h}+{rx + (rw - w) // 2}+{ry + (rh - h) // 2}")

    container = ttk.Frame(top, padding=16)
    container.pack(expand=True, fill="both")

    ttk.Label(container, text="Validation Builder", font=("Trebuchet MS", 14, "bold")).pack(anchor="center")
    ttk.Label(container, text=get_app_version(), foreground="#555555").pack(pady=(2, 6), anchor="center")
    ttk.Label(
        container,
        text="Declare per-column validation rules and export them as YAML.",
        wraplength=320,
        justify="center",
    ).pack(pady=(4, 10), anchor="center")

    footer = ttk.Frame(container)
    footer.pack(fill="x", side="bottom")
    ttk.Button(footer, text="Close", command=top.destroy).pack(side="right")

    try:
        top.grab_set()
    except tk.TclError:
        # Window not yet viewable on some window managers
        pass
