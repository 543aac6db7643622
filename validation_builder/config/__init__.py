"""Packaged YAML defaults (column universe, output, logging) and helpers.

:class:`ConfigManager` reads the default files from this folder and merges
them with user overrides.
"""

from .manager import ConfigManager

__all__ = [
    "ConfigManager",
]
