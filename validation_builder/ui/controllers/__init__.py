"""UI controllers package for Validation Builder.

Controllers mediate between the Tk widgets and the underlying services and
models.
"""

from .config_controller import ColumnRow, ConfigController

__all__: list[str] = [
    "ColumnRow",
    "ConfigController",
]
