# -*- coding: utf-8 -*-
"""
Custom Tkinter widgets for the Validation Builder UI.
Reusable UI components and specialized controls.
"""

import tkinter as tk
from tkinter import ttk


class Tooltip:
    """Lightweight tooltip helper for ttk widgets.

    Shows a small label near the mouse pointer on hover. Use as:

        Tooltip(widget, text="Your text")

    The instance keeps itself alive by holding references on the target widget.
    """

    def __init__(self, widget: tk.Widget, text: str = "", *, delay_ms: int = 800) -> None:
        self.widget = widget
        self.text = text
        self._tip_window: tk.Toplevel | None = None
        self._delay_ms: int = max(0, int(delay_ms))
        self._after_id: str | None = None
        self.widget.bind("<Enter>", self._on_enter, add="+")
        self.widget.bind("<Leave>", self._on_leave, add="+")
        self.widget.bind("<Motion>", self._on_motion, add="+")

    def _on_enter(self, _event: tk.Event) -> None:
        self._cancel_scheduled()
        self._after_id = self.widget.after(self._delay_ms, self._show)

    def _on_leave(self, _event: tk.Event) -> None:
        self._cancel_scheduled()
        self._hide()

    def _on_motion(self, _event: tk.Event) -> None:
        # Move tooltip with the cursor when visible
        if self._tip_window is not None:
            x = self.widget.winfo_pointerx() + 12
            y = self.widget.winfo_pointery() + 12
            self._tip_window.geometry(f"+{x}+{y}")

    def _show(self) -> None:
        self._after_id = None
        if self._tip_window is not None or not self.text:
            return
        self._tip_window = tw = tk.Toplevel(self.widget)
        tw.wm_overrideredirect(True)
        tw.wm_attributes("-topmost", True)
        x = self.widget.winfo_pointerx() + 12
        y = self.widget.winfo_pointery() + 12
        tw.geometry(f"+{x}+{y}")

        frm = ttk.Frame(tw, padding=(6, 3))
        frm.pack(fill="both", expand=True)
        ttk.Label(frm, text=self.text).pack()

    def _hide(self) -> None:
        if self._tip_window is not None:
            try:
                self._tip_window.destroy()
            except tk.TclError:
                pass
            self._tip_window = None

    def _cancel_scheduled(self) -> None:
        if self._after_id is not None:
            try:
                self.widget.after_cancel(self._after_id)
            except tk.TclError:
                pass
            self._after_id = None


class ScrollableFrame(ttk.Frame):
    """Vertically scrollable container.

    Children go into :attr:`inner`. The inner frame is stretched to the
    canvas width so gridded children can expand horizontally.
    """

    def __init__(self, parent, *args, **kwargs):
        super().__init__(parent, *args, **kwargs)
        self._canvas = tk.Canvas(self, highlightthickness=0)
        self._scrollbar_y = ttk.Scrollbar(self, orient="vertical", command=self._canvas.yview)
        self.inner = ttk.Frame(self._canvas)

        self.inner.bind(
            "<Configure>",
            lambda e: self._canvas.configure(scrollregion=self._canvas.bbox("all")),
        )
        window_id = self._canvas.create_window((0, 0), window=self.inner, anchor="nw")
        self._canvas.bind("<Configure>", lambda e: self._canvas.itemconfig(window_id, width=e.width))
        self._canvas.configure(yscrollcommand=self._scrollbar_y.set)

        self._canvas.grid(row=0, column=0, sticky="nsew")
        self._scrollbar_y.grid(row=0, column=1, sticky="ns")
        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self._canvas.bind("<Enter>", lambda _e: self._canvas.bind_all("<MouseWheel>", self._on_mousewheel))
        self._canvas.bind("<Leave>", lambda _e: self._canvas.unbind_all("<MouseWheel>"))

    def _on_mousewheel(self, event: tk.Event) -> None:
        if not event.delta:
            return
        # Windows reports multiples of 120, macOS reports small deltas
        steps = int(-1 * (event.delta / 120)) or (-1 if event.delta > 0 else 1)
        self._canvas.yview_scroll(steps, "units")

    def scroll_to_top(self) -> None:
        self._canvas.yview_moveto(0.0)
