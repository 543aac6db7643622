from __future__ import annotations

"""Service layer for editing the column configuration set.

This module provides a UI-agnostic, testable service that encapsulates the
bookkeeping between configured columns and the pool of still-available column
names (add, remove, rename, rule updates).

Scope and guarantees:
- Operates purely in-memory on ValidationContext, no file I/O nor UI imports.
- Conservative behavior with boundary checks; invalid operations return
  OperationResult(success=False, ...) with clear messaging, never raise.
- Each successful operation swaps a single new ConfigState into the context,
  so claimed names and available names always partition the universe.

Index-based operations resolve the index against the display order (configs
sorted by column name), which is what the UI shows.

Examples
--------
Basic usage:

    service = ColumnEditingService()
    result = service.add_column(ctx)
    if not result.success:
        print(result.message)

"""

from dataclasses import dataclass
import logging
import math
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from validation_builder.core.models import (
    COLUMN_TYPES,
    RULE_FIELDS,
    ColumnConfig,
    ConfigState,
    ValidationContext,
    ValidationRule,
)


__all__ = ["OperationResult", "ColumnEditingService"]

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _check_rule_values(partial_rule: Mapping[str, Any]) -> Optional[str]:
    """Return a message for the first ill-typed value in *partial_rule*, else None."""
    regex = partial_rule.get("regex")
    if regex is not None and not isinstance(regex, str):
        return "Regex must be text."
    allowed = partial_rule.get("allowed_values")
    if allowed is not None and (
        not isinstance(allowed, (list, tuple)) or not all(isinstance(v, str) for v in allowed)
    ):
        return "Allowed values must be a list of text values."
    for bound in ("min", "max"):
        value = partial_rule.get(bound)
        if value is not None and not _is_number(value):
            return f"{bound.capitalize()} must be a finite number."
    return None


@dataclass(frozen=True)
class OperationResult:
    """Result of a column editing operation.

    Attributes
    ----------
    success
        Whether the operation completed successfully.
    message
        Human-readable summary suitable for logs or UI display.
    details
        Optional structured details for diagnostics or caller logic.
    """
    success: bool
    message: str
    details: Optional[Dict[str, Any]] = None


class ColumnEditingService:
    """Encapsulates edit operations on the column configuration set.

    Design principles:
    - No UI dependencies (no Tkinter), no disk I/O.
    - No exceptions for expected invalid actions; return OperationResult.
    - State is never mutated in place; a new ConfigState replaces the old one.
    """

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def iter_display_order(self, context: ValidationContext) -> Iterator[ColumnConfig]:
        """Yield the configured columns sorted by name.

        Every call returns a fresh iterator over the state current at the time
        of the call.
        """
        configs = context.state.column_configs
        return iter(sorted(configs, key=lambda cfg: cfg.name))

    def get_config(self, context: ValidationContext, index: int) -> Optional[ColumnConfig]:
        """Return the config shown at *index*, or None when out of range."""
        ordered = list(self.iter_display_order(context))
        if not isinstance(index, int) or index < 0 or index >= len(ordered):
            return None
        return ordered[index]

    def column_choices(self, context: ValidationContext, index: int) -> List[str]:
        """Names offered in the column picker of the config at *index*.

        The config's own name is always included so the picker can display the
        current selection; the real available pool is left untouched.
        """
        cfg = self.get_config(context, index)
        choices = set(context.state.available_columns)
        if cfg is not None:
            choices.add(cfg.name)
        return sorted(choices)

    def can_add_column(self, context: ValidationContext) -> bool:
        return bool(context.state.available_columns)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def add_column(self, context: ValidationContext) -> OperationResult:
        """Claim the first available column with a default ``string`` rule."""
        state = context.state
        logger.info("Edit: add_column available=%d", len(state.available_columns))
        if not state.available_columns:
            logger.info("Edit noop: add_column no_columns_available")
            return OperationResult(False, "No columns left to configure.")

        name = state.available_columns[0]
        context.state = ConfigState(
            column_configs=state.column_configs + (ColumnConfig(name, ValidationRule()),),
            available_columns=state.available_columns[1:],
        )
        logger.info("Edit OK: add_column column=%s", name)
        return OperationResult(True, f"Added column '{name}'.", {"column": name})

    def remove_column(self, context: ValidationContext, index: int) -> OperationResult:
        """Remove the config shown at *index* and release its name."""
        logger.info("Edit: remove_column index=%s", index)
        target = self.get_config(context, index)
        if target is None:
            logger.warning("Edit FAIL: remove_column index_out_of_range index=%s", index)
            return OperationResult(False, f"No column configured at position {index}.", {"index": index})

        state = context.state
        context.state = ConfigState(
            column_configs=tuple(cfg for cfg in state.column_configs if cfg is not target),
            available_columns=tuple(sorted(state.available_columns + (target.name,))),
        )
        logger.info("Edit OK: remove_column column=%s", target.name)
        return OperationResult(True, f"Removed column '{target.name}'.", {"column": target.name})

    def rename_column(self, context: ValidationContext, index: int, new_name: str) -> OperationResult:
        """Rebind the config shown at *index* to *new_name*.

        *new_name* must currently be available. The previous name is returned
        to the available pool. Choosing the current name again is a no-op.
        """
        logger.info("Edit: rename_column index=%s new_name=%s", index, new_name)
        target = self.get_config(context, index)
        if target is None:
            logger.warning("Edit FAIL: rename_column index_out_of_range index=%s", index)
            return OperationResult(False, f"No column configured at position {index}.", {"index": index})

        if new_name == target.name:
            return OperationResult(True, "Column unchanged.", {"column": new_name})

        state = context.state
        if new_name not in state.available_columns:
            reason = "already_configured" if new_name in state.claimed_names else "unknown_column"
            logger.warning("Edit FAIL: rename_column %s new_name=%s", reason, new_name)
            if reason == "already_configured":
                message = f"Column '{new_name}' is already configured."
            else:
                message = f"Column '{new_name}' is not a known column."
            return OperationResult(False, message, {"column": target.name, "new_name": new_name})

        renamed = ColumnConfig(new_name, target.validation)
        available = [col for col in state.available_columns if col != new_name]
        available.append(target.name)
        context.state = ConfigState(
            column_configs=tuple(renamed if cfg is target else cfg for cfg in state.column_configs),
            available_columns=tuple(sorted(available)),
        )
        logger.info("Edit OK: rename_column %s -> %s", target.name, new_name)
        return OperationResult(True, f"Renamed '{target.name}' to '{new_name}'.",
                               {"old_name": target.name, "new_name": new_name})

    def update_validation(
        self,
        context: ValidationContext,
        index: int,
        partial_rule: Mapping[str, Any],
    ) -> OperationResult:
        """Shallow-merge *partial_rule* into the rule of the config at *index*.

        Keys must be among ``type``, ``regex``, ``allowed_values``, ``min`` and
        ``max``. A key mapped to ``None`` clears that field. ``regex`` must be
        text, ``allowed_values`` a list or tuple of text, and the bounds finite
        numbers; anything else is rejected without touching the state.
        """
        logger.info("Edit: update_validation index=%s fields=%s", index, sorted(partial_rule))
        target = self.get_config(context, index)
        if target is None:
            logger.warning("Edit FAIL: update_validation index_out_of_range index=%s", index)
            return OperationResult(False, f"No column configured at position {index}.", {"index": index})

        unknown = [key for key in partial_rule if key not in RULE_FIELDS]
        if unknown:
            logger.warning("Edit FAIL: update_validation unknown_fields=%s", unknown)
            return OperationResult(False, f"Unknown rule field(s): {', '.join(sorted(unknown))}.",
                                   {"unknown": unknown})

        if "type" in partial_rule and partial_rule["type"] not in COLUMN_TYPES:
            logger.warning("Edit FAIL: update_validation bad_type=%s", partial_rule["type"])
            return OperationResult(False, f"Unsupported type '{partial_rule['type']}'.",
                                   {"type": partial_rule["type"]})

        problem = _check_rule_values(partial_rule)
        if problem is not None:
            logger.warning("Edit FAIL: update_validation bad_value=%s", problem)
            return OperationResult(False, problem, {"fields": sorted(partial_rule)})

        updated = ColumnConfig(target.name, target.validation.merged(partial_rule))
        state = context.state
        context.state = ConfigState(
            column_configs=tuple(updated if cfg is target else cfg for cfg in state.column_configs),
            available_columns=state.available_columns,
        )
        logger.info("Edit OK: update_validation column=%s", target.name)
        return OperationResult(True, f"Updated rules for '{target.name}'.", {"column": target.name})

    def reset(self, context: ValidationContext) -> OperationResult:
        """Drop every config and make the whole universe available again."""
        logger.info("Edit: reset configured=%d", len(context.state.column_configs))
        context.state = ConfigState.initial(context.universe)
        return OperationResult(True, "Cleared all column configurations.")

    # -------------------------------------------------------------------------
    # Diagnostics
    # -------------------------------------------------------------------------

    def check_consistency(self, context: ValidationContext) -> Tuple[bool, str]:
        """Verify that claimed and available names partition the universe."""
        claimed = context.state.claimed_names
        available = context.state.available_columns
        if len(set(claimed)) != len(claimed):
            return False, "duplicate configured column"
        if set(claimed) & set(available):
            return False, "column both configured and available"
        if set(claimed) | set(available) != set(context.universe):
            return False, "configured and available columns do not cover the universe"
        return True, "ok"
