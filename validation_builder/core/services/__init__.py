from __future__ import annotations

"""High-level services (column editing, YAML output, undo/redo).

Services are UI-agnostic and instantiated directly by the application.
"""

from .column_editing_service import ColumnEditingService, OperationResult  # noqa: F401
from .undo_service import UndoService  # noqa: F401
from .export_service import ExportService  # noqa: F401
from .yaml_emitter import generate_yaml_config  # noqa: F401

__all__: list[str] = [
    "ColumnEditingService",
    "OperationResult",
    "UndoService",
    "ExportService",
    "generate_yaml_config",
]
