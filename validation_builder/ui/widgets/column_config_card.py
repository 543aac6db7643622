# -*- coding: utf-8 -*-
"""
Column configuration card.

One card per configured column: a column picker, a remove button, the data
type picker and the rule fields relevant to that type. This widget is GUI-only
and reports every user change through callbacks; the caller applies them via
the controller and re-renders.
"""

from __future__ import annotations

from typing import Callable, Optional, TYPE_CHECKING
import tkinter as tk
from tkinter import ttk

from validation_builder.core.models import COLUMN_TYPES
from validation_builder.core.utils import format_allowed_values, format_bound
from validation_builder.ui.custom_widgets import Tooltip

if TYPE_CHECKING:
    from validation_builder.ui.controllers.config_controller import ColumnRow


TYPE_LABELS = {
    "string": "String",
    "integer": "Integer",
    "float": "Float",
    "boolean": "Boolean",
}


class ColumnConfigCard(ttk.Frame):
    """Editable view of one :class:`ColumnRow`.

    Text fields commit on focus-out or Return, pickers commit on selection.
    """

    def __init__(
        self,
        parent,
        row: "ColumnRow",
        *,
        on_select_column: Optional[Callable[[int, str], None]] = None,
        on_remove: Optional[Callable[[int], None]] = None,
        on_type_change: Optional[Callable[[int, str], None]] = None,
        on_regex_change: Optional[Callable[[int, str], None]] = None,
        on_allowed_values_change: Optional[Callable[[int, str], None]] = None,
        on_bound_change: Optional[Callable[[int, str, str], None]] = None,
        padding: int = 10,
        **kwargs,
    ):
        super().__init__(parent, padding=padding, borderwidth=1, relief="solid", **kwargs)
        self.row = row
        self._on_select_column = on_select_column
        self._on_remove = on_remove
        self._on_type_change = on_type_change
        self._on_regex_change = on_regex_change
        self._on_allowed_values_change = on_allowed_values_change
        self._on_bound_change = on_bound_change
        self._disposed = False

        rule = row.config.validation
        self.columnconfigure(0, weight=1)
        self.columnconfigure(1, weight=1)

        # Column picker + remove
        ttk.Label(self, text="Column").grid(row=0, column=0, columnspan=2, sticky="w")
        self.column_var = tk.StringVar(value=row.config.name)
        self.column_combo = ttk.Combobox(self, textvariable=self.column_var, values=row.choices, state="readonly")
        self.column_combo.grid(row=1, column=0, sticky="ew", pady=(2, 8), padx=(0, 8))
        self.column_combo.bind("<<ComboboxSelected>>", self._column_selected)
        self.remove_button = ttk.Button(self, text="Remove", command=self._remove_clicked)
        self.remove_button.grid(row=1, column=1, sticky="e", pady=(2, 8))
        Tooltip(self.remove_button, "Remove this column and make it available again")

        # Data type
        ttk.Label(self, text="Data Type").grid(row=2, column=0, columnspan=2, sticky="w")
        self._label_to_type = {TYPE_LABELS[t]: t for t in COLUMN_TYPES}
        self.type_var = tk.StringVar(value=TYPE_LABELS.get(rule.type, rule.type))
        self.type_combo = ttk.Combobox(
            self,
            textvariable=self.type_var,
            values=[TYPE_LABELS[t] for t in COLUMN_TYPES],
            state="readonly",
        )
        self.type_combo.grid(row=3, column=0, columnspan=2, sticky="ew", pady=(2, 8))
        self.type_combo.bind("<<ComboboxSelected>>", self._type_selected)

        next_row = 4
        self.regex_var: Optional[tk.StringVar] = None
        if row.show_regex:
            ttk.Label(self, text="Regular Expression").grid(row=next_row, column=0, columnspan=2, sticky="w")
            self.regex_var = tk.StringVar(value=rule.regex or "")
            regex_entry = ttk.Entry(self, textvariable=self.regex_var)
            regex_entry.grid(row=next_row + 1, column=0, columnspan=2, sticky="ew", pady=(2, 8))
            regex_entry.bind("<FocusOut>", self._regex_committed)
            regex_entry.bind("<Return>", self._regex_committed)
            Tooltip(regex_entry, "e.g. ^[a-zA-Z0-9_-]+$")
            next_row += 2

        self.allowed_values_text: Optional[tk.Text] = None
        if row.show_allowed_values:
            ttk.Label(self, text="Allowed Values (comma-separated)").grid(
                row=next_row, column=0, columnspan=2, sticky="w"
            )
            self.allowed_values_text = tk.Text(self, height=2, wrap="word")
            self.allowed_values_text.insert("1.0", format_allowed_values(rule.allowed_values))
            self.allowed_values_text.grid(row=next_row + 1, column=0, columnspan=2, sticky="ew", pady=(2, 8))
            self.allowed_values_text.bind("<FocusOut>", self._allowed_values_committed)
            Tooltip(self.allowed_values_text, "e.g. value1, value2, value3")
            next_row += 2

        self.bound_vars: dict[str, tk.StringVar] = {}
        if row.show_bounds:
            for col, (which, label) in enumerate((("min", "Minimum Value"), ("max", "Maximum Value"))):
                ttk.Label(self, text=label).grid(row=next_row, column=col, sticky="w")
                var = tk.StringVar(value=format_bound(getattr(rule, which)))
                entry = ttk.Entry(self, textvariable=var)
                entry.grid(row=next_row + 1, column=col, sticky="ew", pady=(2, 0),
                           padx=(0, 8) if col == 0 else (0, 0))
                entry.bind("<FocusOut>", lambda e, w=which: self._bound_committed(w))
                entry.bind("<Return>", lambda e, w=which: self._bound_committed(w))
                self.bound_vars[which] = var

    def destroy(self) -> None:
        # Focus-out may fire while the card is torn down; ignore those commits
        self._disposed = True
        super().destroy()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _column_selected(self, _event=None) -> None:
        new_name = self.column_var.get()
        if self._on_select_column and new_name != self.row.config.name:
            self._on_select_column(self.row.index, new_name)

    def _remove_clicked(self) -> None:
        if self._on_remove:
            self._on_remove(self.row.index)

    def _type_selected(self, _event=None) -> None:
        new_type = self._label_to_type.get(self.type_var.get(), self.type_var.get())
        if self._on_type_change and new_type != self.row.config.validation.type:
            self._on_type_change(self.row.index, new_type)

    def _regex_committed(self, _event=None) -> None:
        if self._disposed or self.regex_var is None or not self._on_regex_change:
            return
        text = self.regex_var.get()
        if text != (self.row.config.validation.regex or ""):
            self._on_regex_change(self.row.index, text)

    def _allowed_values_committed(self, _event=None) -> None:
        if self._disposed or self.allowed_values_text is None or not self._on_allowed_values_change:
            return
        text = self.allowed_values_text.get("1.0", "end-1c")
        if text != format_allowed_values(self.row.config.validation.allowed_values):
            self._on_allowed_values_change(self.row.index, text)

    def _bound_committed(self, which: str) -> None:
        if self._disposed or not self._on_bound_change:
            return
        text = self.bound_vars[which].get()
        if text.strip() != format_bound(getattr(self.row.config.validation, which)):
            self._on_bound_change(self.row.index, which, text)

    def reset_bound(self, which: str) -> None:
        """Put the stored value back after a rejected entry."""
        if which in self.bound_vars:
            self.bound_vars[which].set(format_bound(getattr(self.row.config.validation, which)))
