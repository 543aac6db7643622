"""Validation Builder UI package.

Tkinter-based widgets for the column configuration form and YAML output.
Only the toolkit-free controllers are re-exported here; widgets are imported
from :mod:`validation_builder.ui.widgets` by the application window.
"""

from .controllers.config_controller import ColumnRow, ConfigController  # noqa: F401

__all__: list[str] = [
    "ColumnRow",
    "ConfigController",
]
