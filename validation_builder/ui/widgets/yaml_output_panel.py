from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from validation_builder.ui.custom_widgets import Tooltip


class YamlOutputPanel(ttk.Frame):
    """Read-only YAML preview with Generate and Save buttons.

    Presentation-only: button presses are forwarded to the callbacks and the
    caller pushes the text and saved flag back through :meth:`show`.
    """

    PLACEHOLDER = "# Your YAML configuration will appear here..."

    def __init__(
        self,
        master: "tk.Widget",
        *,
        on_generate: Optional[Callable[[], None]] = None,
        on_save: Optional[Callable[[], None]] = None,
    ) -> None:
        super().__init__(master)
        self._on_generate = on_generate
        self._on_save = on_save

        buttons = ttk.Frame(self)
        buttons.grid(row=0, column=0, sticky="w", pady=(0, 8))
        self._btn_generate = ttk.Button(buttons, text="Generate YAML", command=self._generate_clicked)
        self._btn_save = ttk.Button(buttons, text="Save", command=self._save_clicked)
        self._btn_generate.grid(row=0, column=0, padx=(0, 8))
        self._btn_save.grid(row=0, column=1)
        Tooltip(self._btn_generate, "Preview the YAML for the current columns")
        Tooltip(self._btn_save, "Write the YAML to a file")

        text_frame = ttk.Frame(self)
        text_frame.grid(row=1, column=0, sticky="nsew")
        self._text = tk.Text(text_frame, height=10, wrap="none", font=("Courier New", 10))
        self._default_fg = self._text.cget("foreground")
        scroll_y = ttk.Scrollbar(text_frame, orient="vertical", command=self._text.yview)
        self._text.configure(yscrollcommand=scroll_y.set)
        self._text.grid(row=0, column=0, sticky="nsew")
        scroll_y.grid(row=0, column=1, sticky="ns")
        text_frame.rowconfigure(0, weight=1)
        text_frame.columnconfigure(0, weight=1)

        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)
        self.show("", saved=False)

    def show(self, yaml_text: str, *, saved: bool) -> None:
        """Display *yaml_text* and reflect the saved flag on the Save button."""
        self._text.configure(state="normal")
        self._text.delete("1.0", "end")
        if yaml_text:
            self._text.insert("1.0", yaml_text)
            self._text.configure(foreground=self._default_fg)
        else:
            self._text.insert("1.0", self.PLACEHOLDER)
            self._text.configure(foreground="gray")
        self._text.configure(state="disabled")
        self._btn_save.configure(text="✓ Saved" if saved else "Save")

    def _generate_clicked(self) -> None:
        if self._on_generate:
            self._on_generate()

    def _save_clicked(self) -> None:
        if self._on_save:
            self._on_save()
