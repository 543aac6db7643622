from __future__ import annotations

"""Undo/redo snapshot management for ValidationContext.

This service is UI-agnostic and performs pure in-memory history tracking of
the column configuration state. Restoring a snapshot swaps a previous
ConfigState back into a provided ValidationContext.

Design principles
-----------------
- No UI imports and no I/O (filesystem/console).
- Snapshots are the immutable ConfigState objects themselves; no copying or
  serialization is needed.
- Redo stack is cleared on every new snapshot push (standard undo/redo behavior).
- Memory usage controlled by a max_history policy (trim oldest).

Only the column configuration is tracked. The generated YAML preview and the
saved flag belong to the output panel and are not rolled back.
"""

from typing import List

from validation_builder.core.models import ConfigState, ValidationContext


class UndoService:
    """Manage undo/redo stacks for :class:`ValidationContext`.

    Parameters
    ----------
    max_history : int, default=50
        Maximum number of undo snapshots to keep. Oldest entries are discarded
        when the capacity is exceeded. Values lower than 1 are coerced to 1.

    Notes
    -----
    - Push operations clear the redo stack.
    - No logging is performed here; callers can handle UI feedback.

    Examples
    --------
    >>> ctx = ValidationContext.from_universe(["a", "b"])
    >>> svc = UndoService(max_history=10)
    >>> svc.push_snapshot(ctx)
    >>> # After mutating ctx through the editing service:
    >>> svc.push_snapshot(ctx)
    >>> changed = svc.undo(ctx)   # Restores previous state if available
    >>> redo_ok = svc.redo(ctx)   # Redo if available
    """

    def __init__(self, max_history: int = 50) -> None:
        self._max_history: int = max(1, int(max_history))
        self._undo_stack: List[ConfigState] = []
        self._redo_stack: List[ConfigState] = []

    # --------------------------------------------------------------------- API

    def push_snapshot(self, context: ValidationContext) -> None:
        """Capture the current state and push it onto the undo stack.

        Pushing a state identical to the top of the stack is ignored, so a
        post-mutation push of an unchanged state does not create an empty
        undo step.
        """
        snap = context.state
        if self._undo_stack and self._undo_stack[-1] == snap:
            return
        self._undo_stack.append(snap)
        # New user action invalidates redo history
        self._redo_stack.clear()
        self._trim(self._undo_stack)

    def undo(self, context: ValidationContext) -> bool:
        """Restore the previous state into the provided context.

        Semantics (baseline-oriented):
        - Callers push a snapshot BEFORE mutation (baseline) and AFTER mutation (post).
        - Undo restores the baseline and moves the post snapshot to redo.
        """
        # Need a baseline underneath the current state
        if len(self._undo_stack) < 2:
            return False

        post_snap = self._undo_stack.pop()
        context.state = self._undo_stack[-1]
        self._redo_stack.append(post_snap)
        self._trim(self._redo_stack)
        return True

    def redo(self, context: ValidationContext) -> bool:
        """Re-apply a state that was previously undone."""
        if not self._redo_stack:
            return False

        post_snap = self._redo_stack.pop()
        context.state = post_snap
        self._undo_stack.append(post_snap)
        self._trim(self._undo_stack)
        return True

    def can_undo(self) -> bool:
        """Return True if an undo operation is currently possible."""
        return len(self._undo_stack) > 1

    def can_redo(self) -> bool:
        """Return True if a redo operation is currently possible."""
        return bool(self._redo_stack)

    def clear(self) -> None:
        """Clear both undo and redo histories."""
        self._undo_stack.clear()
        self._redo_stack.clear()

    # --------------------------------------------------------------- Internals

    def _trim(self, stack: List[ConfigState]) -> None:
        overflow = len(stack) - self._max_history
        if overflow > 0:
            del stack[0:overflow]
