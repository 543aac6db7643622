from __future__ import annotations

"""Render column configurations as the validation YAML document.

The output is assembled line by line rather than through a YAML dumper so the
layout stays fixed: a comment header, a ``validations`` mapping, and one block
per column with ``type`` first. Regex values are wrapped in double quotes as
typed, without escaping.
"""

import json
from typing import Iterable, List, Optional

from validation_builder.core.models import ColumnConfig
from validation_builder.core.utils import format_bound

__all__ = ["YAML_HEADER", "generate_yaml_config"]

YAML_HEADER = (
    "# Validation Configuration\n"
    "# This file defines the validation rules for your data.\n"
    "# Each column in your data file should have an entry here.\n"
    "\n"
    "validations:\n"
)


def _column_block(config: ColumnConfig) -> List[str]:
    rule = config.validation
    lines = [f"  {config.name}:", f"    type: {rule.type or 'string'}"]
    if rule.regex:
        lines.append(f'    regex: "{rule.regex}"')
    if rule.allowed_values is not None:
        literal = json.dumps(list(rule.allowed_values), separators=(",", ":"), ensure_ascii=False)
        lines.append(f"    allowed_values: {literal}")
    if rule.min is not None:
        lines.append(f"    min: {format_bound(rule.min)}")
    if rule.max is not None:
        lines.append(f"    max: {format_bound(rule.max)}")
    return lines


def generate_yaml_config(configs: Optional[Iterable[ColumnConfig]]) -> str:
    """Return the YAML document for *configs*, in the order given.

    Never fails: an empty or ``None`` input yields the header followed by an
    empty ``validations:`` key.
    """
    lines: List[str] = []
    for config in configs or ():
        lines.extend(_column_block(config))
    if not lines:
        return YAML_HEADER
    return YAML_HEADER + "\n".join(lines) + "\n"
