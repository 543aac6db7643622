# -*- coding: utf-8 -*-
"""Tk-based GUI front-end for Validation Builder.

Main application widget providing the column configuration form and the YAML
output panel. Exposes the :class:`ValidationBuilderApp` widget, which is
instantiated by ``run.py``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import tkinter as tk
from tkinter import ttk, filedialog, messagebox

from validation_builder.config import ConfigManager
from validation_builder.core.models import ValidationContext
from validation_builder.core.services import (
    ColumnEditingService,
    ExportService,
    OperationResult,
    UndoService,
)
from validation_builder.core.services.export_service import (
    DEFAULT_FILENAME,
    YAML_MIME_TYPE,
    file_types_for,
)
from validation_builder.ui.controllers import ConfigController
from validation_builder.ui.custom_widgets import ScrollableFrame, Tooltip
from validation_builder.ui.dialogs.about_dialog import show_about_dialog
from validation_builder.ui.widgets import ColumnConfigCard, YamlOutputPanel
from validation_builder.version import get_app_version

logger = logging.getLogger(__name__)

__all__ = ["ValidationBuilderApp"]


class ValidationBuilderApp:
    """Main application widget wrapping all Tkinter UI components."""

    def __init__(self, root: tk.Tk, config_manager: Optional[ConfigManager] = None):
        self.root = root
        self.config_manager = config_manager or ConfigManager()
        self.output_config: Dict[str, Any] = self.config_manager.get_output_config()

        universe = self.config_manager.get_column_universe()
        logger.info("Loaded %d configurable column(s)", len(universe))
        self.context = ValidationContext.from_universe(universe)

        self.controller = ConfigController(
            self.context,
            ColumnEditingService(),
            UndoService(),
            ExportService(),
        )
        # Baseline so the first edit can be undone
        self.controller.undo_service.push_snapshot(self.context)

        # --- Widget references -----------------------------------------
        self.add_button: Optional[ttk.Button] = None
        self.clear_button: Optional[ttk.Button] = None
        self.undo_button: Optional[ttk.Button] = None
        self.redo_button: Optional[ttk.Button] = None
        self.cards_area: Optional[ScrollableFrame] = None
        self.cards: List[ColumnConfigCard] = []
        self.empty_label: Optional[ttk.Label] = None
        self.output_panel: Optional[YamlOutputPanel] = None
        self.status_label: Optional[ttk.Label] = None

        self.create_widgets()
        self.bind_shortcuts()
        self.refresh()
        self.root.protocol("WM_DELETE_WINDOW", self.on_close)

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def create_widgets(self) -> None:
        self.root.title(f"Validation Builder {get_app_version()}")
        main = ttk.Frame(self.root, padding=16)
        main.pack(expand=True, fill="both")
        main.columnconfigure(0, weight=1)
        main.rowconfigure(2, weight=3)
        main.rowconfigure(4, weight=2)

        title_frame = ttk.Frame(main)
        title_frame.grid(row=0, column=0, sticky="ew", pady=(0, 12))
        ttk.Label(title_frame, text="Low-Code Data Validation",
                  font=("Segoe UI", 20, "bold")).pack(anchor="center")
        ttk.Label(title_frame, text="Configure validation rules for your data with ease.",
                  foreground="#5f6368").pack(anchor="center", pady=(4, 0))
        about_link = ttk.Label(title_frame, text="About", foreground="#1a73e8", cursor="hand2")
        about_link.place(relx=1.0, rely=0.0, anchor="ne")
        about_link.bind("<Button-1>", lambda _e: show_about_dialog(self.root))

        # Column configurations header
        header = ttk.Frame(main)
        header.grid(row=1, column=0, sticky="ew", pady=(0, 6))
        header.columnconfigure(0, weight=1)
        ttk.Label(header, text="Column Configurations", font=("Segoe UI", 14, "bold")).grid(
            row=0, column=0, sticky="w"
        )
        self.undo_button = ttk.Button(header, text="Undo", width=6, command=self.undo)
        self.redo_button = ttk.Button(header, text="Redo", width=6, command=self.redo)
        self.add_button = ttk.Button(header, text="Add Column", style="Accent.TButton", command=self.add_column)
        self.undo_button.grid(row=0, column=1, padx=(0, 4))
        self.redo_button.grid(row=0, column=2, padx=(0, 8))
        self.clear_button = ttk.Button(header, text="Clear All", command=self.clear_all)
        self.clear_button.grid(row=0, column=3, padx=(0, 4))
        self.add_button.grid(row=0, column=4)
        Tooltip(self.undo_button, "Undo (Ctrl+Z)")
        Tooltip(self.redo_button, "Redo (Ctrl+Y)")
        Tooltip(self.add_button, "Configure the next available column")
        Tooltip(self.clear_button, "Remove every column configuration")

        self.cards_area = ScrollableFrame(main)
        self.cards_area.grid(row=2, column=0, sticky="nsew")
        self.cards_area.inner.columnconfigure(0, weight=1)

        # Configuration output
        ttk.Label(main, text="Configuration Output", font=("Segoe UI", 14, "bold")).grid(
            row=3, column=0, sticky="w", pady=(12, 6)
        )
        self.output_panel = YamlOutputPanel(main, on_generate=self.generate_yaml, on_save=self.save_yaml)
        self.output_panel.grid(row=4, column=0, sticky="nsew")

        self.status_label = ttk.Label(main, text="", foreground="gray")
        self.status_label.grid(row=5, column=0, sticky="w", pady=(8, 0))

    def bind_shortcuts(self) -> None:
        self.root.bind_all("<Control-z>", lambda _e: self.undo())
        self.root.bind_all("<Control-y>", lambda _e: self.redo())
        self.root.bind_all("<Control-s>", lambda _e: self.save_yaml())

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def refresh(self) -> None:
        """Rebuild the column cards and sync buttons and output from state."""
        for card in self.cards:
            card.destroy()
        self.cards = []
        if self.empty_label is not None:
            self.empty_label.destroy()
            self.empty_label = None

        rows = self.controller.rows()
        for row in rows:
            card = ColumnConfigCard(
                self.cards_area.inner,
                row,
                on_select_column=self.select_column,
                on_remove=self.remove_column,
                on_type_change=self.set_type,
                on_regex_change=self.set_regex,
                on_allowed_values_change=self.set_allowed_values,
                on_bound_change=self.set_bound,
            )
            card.grid(row=row.index, column=0, sticky="ew", pady=(0, 10))
            self.cards.append(card)
        if not rows:
            self.empty_label = ttk.Label(
                self.cards_area.inner,
                text="No columns configured yet. Click \"Add Column\" to start.",
                foreground="gray",
            )
            self.empty_label.grid(row=0, column=0, pady=20)

        self.sync_controls()

    def sync_controls(self) -> None:
        self.add_button.configure(state="normal" if self.controller.can_add_column() else "disabled")
        self.clear_button.configure(state="normal" if self.context.state.column_configs else "disabled")
        self.undo_button.configure(state="normal" if self.controller.can_undo() else "disabled")
        self.redo_button.configure(state="normal" if self.controller.can_redo() else "disabled")
        self.output_panel.show(self.controller.yaml_config, saved=self.controller.config_saved)

    def _report(self, result: OperationResult, *, rebuild: bool = True) -> None:
        if result.success:
            self._set_status(result.message)
        else:
            self._set_status(result.message, error=True)
        if rebuild:
            self.refresh()
        else:
            self.sync_controls()

    def _report_field(self, index: int, result: OperationResult) -> None:
        # Text fields keep their widgets; only the card's row snapshot is refreshed
        if result.success and index < len(self.cards):
            self.cards[index].row = self.controller.rows()[index]
        self._report(result, rebuild=False)

    def _set_status(self, message: str, error: bool = False) -> None:
        self.status_label.configure(text=message, foreground="#c5221f" if error else "gray")

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def add_column(self) -> None:
        self._report(self.controller.add_column())
        self.cards_area.scroll_to_top()

    def remove_column(self, index: int) -> None:
        self._report(self.controller.remove_column(index))

    def select_column(self, index: int, column_name: str) -> None:
        self._report(self.controller.select_column(index, column_name))

    def set_type(self, index: int, column_type: str) -> None:
        self._report(self.controller.set_type(index, column_type))

    def set_regex(self, index: int, text: str) -> None:
        self._report_field(index, self.controller.set_regex(index, text))

    def set_allowed_values(self, index: int, text: str) -> None:
        self._report_field(index, self.controller.set_allowed_values_text(index, text))

    def set_bound(self, index: int, which: str, text: str) -> None:
        result = self.controller.set_bound(index, which, text)
        if not result.success and index < len(self.cards):
            self.cards[index].reset_bound(which)
        self._report_field(index, result)

    def clear_all(self) -> None:
        if not self.context.state.column_configs:
            return
        if not messagebox.askyesno(
            "Clear All",
            "Remove every column configuration? This can be undone.",
            parent=self.root,
        ):
            return
        self._report(self.controller.clear_all())

    def undo(self) -> None:
        if self.controller.undo():
            self._set_status("Undone.")
            self.refresh()

    def redo(self) -> None:
        if self.controller.redo():
            self._set_status("Redone.")
            self.refresh()

    def generate_yaml(self) -> None:
        self.root.focus_set()  # commit any field that still has focus
        self.controller.generate_yaml()
        self._set_status("YAML generated.")
        self.sync_controls()

    def save_yaml(self) -> None:
        self.root.focus_set()
        file_types = file_types_for(self.output_config.get("mime_type") or YAML_MIME_TYPE)
        save_path = filedialog.asksaveasfilename(
            title="Save Validation Config As",
            initialfile=self.output_config.get("default_filename") or DEFAULT_FILENAME,
            defaultextension=".yaml",
            filetypes=file_types,
        )
        if not save_path:
            return
        try:
            written = self.controller.save_yaml(save_path)
        except OSError as exc:
            logger.exception("Saving validation config failed")
            messagebox.showerror("Save Failed", f"Could not write the file:\n\n{exc}", parent=self.root)
            self._set_status("Save failed.", error=True)
            self.sync_controls()
            return
        self._set_status(f"Saved to {written}")
        self.sync_controls()

    def on_close(self) -> None:
        if self.context.state.column_configs and not self.controller.config_saved:
            if not messagebox.askyesno(
                "Unsaved Configuration",
                "The current configuration has not been saved. Quit anyway?",
                parent=self.root,
            ):
                return
        logger.info("Closing with %d configured column(s)", len(self.context.state.column_configs))
        self.root.destroy()
