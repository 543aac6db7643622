"""Top-level package for the business-logic portion of Validation Builder.

Front-ends (the Tk GUI in :mod:`validation_builder.app`) should only depend on
the public API exposed here rather than importing internal modules directly.
"""

from .core.models import ColumnConfig, ConfigState, ValidationContext, ValidationRule  # re-export for convenience
from .core.services.yaml_emitter import generate_yaml_config

__all__: list[str] = [
    "ColumnConfig",
    "ConfigState",
    "ValidationContext",
    "ValidationRule",
    "generate_yaml_config",
]
