from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, List, Mapping, Union

from validation_builder.core.models import COLUMN_TYPES, ColumnConfig, ValidationContext
from validation_builder.core.services.column_editing_service import (
    ColumnEditingService,
    OperationResult,
)
from validation_builder.core.services.export_service import ExportService
from validation_builder.core.services.undo_service import UndoService
from validation_builder.core.services.yaml_emitter import generate_yaml_config
from validation_builder.core.utils import parse_allowed_values, parse_bound

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnRow:
    """What a column card needs to render one configured column."""

    index: int
    config: ColumnConfig
    choices: List[str]
    show_regex: bool
    show_allowed_values: bool
    show_bounds: bool


class ConfigController:
    """Controller coordinating column-card UI actions with services.

    This controller owns the session's :class:`ValidationContext` and delegates
    state changes to the editing service. It contains no UI toolkit code.

    Parameters
    ----------
    context : ValidationContext
        The configuration being authored.
    editing_service : ColumnEditingService
        Service that performs column bookkeeping.
    undo_service : UndoService
        Service that manages undo/redo snapshots and restoration.
    export_service : ExportService
        Service that writes YAML files.

    Notes
    -----
    - Routine validation failures are reported through OperationResult, not
      exceptions. File write errors from :meth:`save_yaml` propagate.
    - Every successful edit marks the configuration as unsaved.
    """

    def __init__(
        self,
        context: ValidationContext,
        editing_service: ColumnEditingService,
        undo_service: UndoService,
        export_service: ExportService,
    ) -> None:
        self.context: ValidationContext = context
        self.editing_service: ColumnEditingService = editing_service
        self.undo_service: UndoService = undo_service
        self.export_service: ExportService = export_service

    # ---------------------------------------------------------------------------------
    # Internal helpers
    # ---------------------------------------------------------------------------------

    def _recorded_edit(self, mutate: Callable[[], OperationResult]) -> OperationResult:
        """Execute a mutating operation with pre/post undo snapshots.

        - Pushes a snapshot before mutation.
        - Executes the provided callable.
        - On success, pushes a post snapshot and marks the config unsaved.
        """
        self.undo_service.push_snapshot(self.context)
        result = mutate()
        if result.success:
            self.undo_service.push_snapshot(self.context)
            self.context.config_saved = False
        else:
            logger.debug("Edit rejected: %s", result.message)
        return result

    # ---------------------------------------------------------------------------------
    # Queries
    # ---------------------------------------------------------------------------------

    def rows(self) -> List[ColumnRow]:
        """Return render data for every configured column in display order."""
        rows: List[ColumnRow] = []
        for index, config in enumerate(self.editing_service.iter_display_order(self.context)):
            rule = config.validation
            rows.append(ColumnRow(
                index=index,
                config=config,
                choices=self.editing_service.column_choices(self.context, index),
                show_regex=rule.supports_regex(),
                show_allowed_values=rule.supports_allowed_values(),
                show_bounds=rule.supports_bounds(),
            ))
        return rows

    def column_choices(self, index: int) -> List[str]:
        return self.editing_service.column_choices(self.context, index)

    def can_add_column(self) -> bool:
        return self.editing_service.can_add_column(self.context)

    def can_undo(self) -> bool:
        return self.undo_service.can_undo()

    def can_redo(self) -> bool:
        return self.undo_service.can_redo()

    @property
    def yaml_config(self) -> str:
        return self.context.yaml_config

    @property
    def config_saved(self) -> bool:
        return self.context.config_saved

    # ---------------------------------------------------------------------------------
    # Column edits
    # ---------------------------------------------------------------------------------

    def add_column(self) -> OperationResult:
        return self._recorded_edit(lambda: self.editing_service.add_column(self.context))

    def remove_column(self, index: int) -> OperationResult:
        return self._recorded_edit(lambda: self.editing_service.remove_column(self.context, index))

    def select_column(self, index: int, column_name: str) -> OperationResult:
        """Handle a new choice in the column picker of the card at *index*."""
        return self._recorded_edit(
            lambda: self.editing_service.rename_column(self.context, index, column_name)
        )

    def update_validation(self, index: int, partial_rule: Mapping[str, Any]) -> OperationResult:
        return self._recorded_edit(
            lambda: self.editing_service.update_validation(self.context, index, partial_rule)
        )

    def set_type(self, index: int, column_type: str) -> OperationResult:
        if column_type not in COLUMN_TYPES:
            return OperationResult(False, f"Unsupported type '{column_type}'.", {"type": column_type})
        return self.update_validation(index, {"type": column_type})

    def set_regex(self, index: int, text: str) -> OperationResult:
        # An emptied field clears the pattern
        return self.update_validation(index, {"regex": text or None})

    def set_allowed_values_text(self, index: int, text: str) -> OperationResult:
        """Store the comma-separated values typed into the allowed-values box."""
        return self.update_validation(index, {"allowed_values": parse_allowed_values(text)})

    def set_bound(self, index: int, which: str, text: str) -> OperationResult:
        """Store a min/max field; blank text clears the bound."""
        if which not in ("min", "max"):
            return OperationResult(False, f"Unknown bound '{which}'.", {"bound": which})
        try:
            value = parse_bound(text)
        except ValueError:
            logger.info("Rejected non-numeric %s value %r", which, text)
            return OperationResult(False, f"'{text}' is not a number.", {"bound": which, "text": text})
        return self.update_validation(index, {which: value})

    def clear_all(self) -> OperationResult:
        return self._recorded_edit(lambda: self.editing_service.reset(self.context))

    # ---------------------------------------------------------------------------------
    # Undo / redo
    # ---------------------------------------------------------------------------------

    def undo(self) -> bool:
        ok = self.undo_service.undo(self.context)
        if ok:
            self.context.config_saved = False
        return ok

    def redo(self) -> bool:
        ok = self.undo_service.redo(self.context)
        if ok:
            self.context.config_saved = False
        return ok

    # ---------------------------------------------------------------------------------
    # Output
    # ---------------------------------------------------------------------------------

    def generate_yaml(self) -> str:
        """Render the current configuration into the preview text."""
        text = generate_yaml_config(self.context.state.column_configs)
        self.context.yaml_config = text
        self.context.config_saved = False
        logger.info("Generated YAML for %d column(s)", len(self.context.state.column_configs))
        return text

    def save_yaml(self, path: Union[str, Path]) -> Path:
        """Render and write the configuration to *path*.

        Raises
        ------
        OSError
            If the file cannot be written. The saved flag is left unchanged.
        """
        text = generate_yaml_config(self.context.state.column_configs)
        self.context.yaml_config = text
        written = self.export_service.save_yaml(text, path)
        self.context.config_saved = True
        return written
