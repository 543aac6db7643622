from __future__ import annotations

"""Shared data structures used across the Validation Builder core.

This package exposes dataclasses and value objects used by services and other
core layers. It is intentionally free of UI / I/O code so that the contained
objects can be reused in any context (unit-tests, CLI, GUI, etc.).

``ValidationRule``, ``ColumnConfig`` and ``ConfigState`` are frozen: every edit
produces a new object, which keeps undo snapshots trivially safe to share.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

__all__ = [
    "COLUMN_TYPES",
    "RULE_FIELDS",
    "ValidationRule",
    "ColumnConfig",
    "ConfigState",
    "ValidationContext",
]

Number = Union[int, float]

COLUMN_TYPES: Tuple[str, ...] = ("string", "integer", "float", "boolean")

RULE_FIELDS: Tuple[str, ...] = ("type", "regex", "allowed_values", "min", "max")


@dataclass(frozen=True)
class ValidationRule:
    """Typed constraint set applied to a single column.

    Attributes
    ----------
    type
        One of :data:`COLUMN_TYPES`.
    regex
        Pattern the value must match. Only meaningful for ``string``.
    allowed_values
        Ordered whitelist of literal values.
    min, max
        Numeric bounds. Only meaningful for ``integer`` and ``float``.
    """

    type: str = "string"
    regex: Optional[str] = None
    allowed_values: Optional[Tuple[str, ...]] = None
    min: Optional[Number] = None
    max: Optional[Number] = None

    def merged(self, partial: Mapping[str, Any]) -> "ValidationRule":
        """Return a copy with the fields of *partial* replacing ours.

        Omitted fields are preserved; a field explicitly given as ``None`` is
        cleared. Callers are expected to have checked the field names.
        """
        changes: Dict[str, Any] = dict(partial)
        if changes.get("allowed_values") is not None:
            changes["allowed_values"] = tuple(changes["allowed_values"])
        return replace(self, **changes)

    def supports_regex(self) -> bool:
        return self.type == "string"

    def supports_allowed_values(self) -> bool:
        return self.type in ("string", "integer", "float")

    def supports_bounds(self) -> bool:
        return self.type in ("integer", "float")


@dataclass(frozen=True)
class ColumnConfig:
    """A named validation-rule binding."""

    name: str
    validation: ValidationRule = field(default_factory=ValidationRule)


@dataclass(frozen=True)
class ConfigState:
    """Immutable snapshot of the configured and available column lists.

    ``column_configs`` keeps insertion order. ``available_columns`` keeps the
    order new columns are claimed from.
    """

    column_configs: Tuple[ColumnConfig, ...] = ()
    available_columns: Tuple[str, ...] = ()

    @classmethod
    def initial(cls, universe: Iterable[str]) -> "ConfigState":
        return cls(column_configs=(), available_columns=tuple(universe))

    @property
    def claimed_names(self) -> Tuple[str, ...]:
        return tuple(cfg.name for cfg in self.column_configs)


@dataclass
class ValidationContext:
    """Mutable session holder for the column configuration being authored.

    Attributes
    ----------
    universe
        Every column name the user may configure.
    state
        Current :class:`ConfigState`. Services replace it wholesale.
    yaml_config
        Text produced by the last "Generate" or "Save" action.
    config_saved
        True while ``yaml_config`` matches what was last written to disk.
    """

    universe: Tuple[str, ...] = ()
    state: ConfigState = field(default_factory=ConfigState)
    yaml_config: str = ""
    config_saved: bool = False

    @classmethod
    def from_universe(cls, universe: Iterable[str]) -> "ValidationContext":
        names = tuple(universe)
        return cls(universe=names, state=ConfigState.initial(names))
