"""UI widgets package.

Reusable widget components for the Validation Builder window.
"""

from .column_config_card import ColumnConfigCard
from .yaml_output_panel import YamlOutputPanel

__all__ = [
    "ColumnConfigCard",
    "YamlOutputPanel",
]
