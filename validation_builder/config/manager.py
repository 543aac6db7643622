from __future__ import annotations

"""Configuration loading and access helpers.

This module centralises declarative settings (column universe, output file
defaults, logging). It loads YAML files packaged with *validation_builder*
and merges them with user overrides.

On Windows: ``%LOCALAPPDATA%\\ValidationBuilder\\config\\*.yml``
On Unix: ``~/.validation_builder/*.yml``

Override files are copied from the packaged defaults on first start so users
have a template to edit.
"""

import importlib.resources as pkg_resources
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

logger = logging.getLogger(__name__)

__all__ = ["ConfigManager"]

USER_CONFIG_DIR_ENV = "VALIDATION_BUILDER_CONFIG_DIR"


def _get_user_config_dir() -> Path:
    """Get the per-user configuration directory."""
    override = os.environ.get(USER_CONFIG_DIR_ENV)
    if override:
        return Path(override)
    if os.name == 'nt':  # Windows
        local_appdata = os.environ.get('LOCALAPPDATA')
        if local_appdata:
            return Path(local_appdata) / "ValidationBuilder" / "config"
        return Path.home() / "AppData" / "Local" / "ValidationBuilder" / "config"
    return Path.home() / ".validation_builder"


def _read_packaged(filename: str) -> str:
    return pkg_resources.files(__package__).joinpath(filename).read_text(encoding="utf-8")


def _ensure_user_configs_exist(user_config_dir: Path, default_filenames: Dict[str, str]) -> None:
    """Copy default config files to user directory if they don't exist."""
    try:
        user_config_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("Could not create user config directory %s: %s", user_config_dir, e)
        return

    for filename in default_filenames.values():
        user_config_path = user_config_dir / filename
        if user_config_path.exists():
            continue
        try:
            user_config_path.write_text(_read_packaged(filename), encoding='utf-8')
            logger.info("Created user config: %s", user_config_path)
        except (FileNotFoundError, OSError) as e:
            logger.warning("Could not copy default config %s: %s", filename, e)


def _is_name_list(value: Any) -> bool:
    """True for a YAML sequence of scalar column names."""
    return isinstance(value, list) and all(
        isinstance(item, (str, int, float)) and not isinstance(item, bool) for item in value
    )


class _Singleton(type):
    _instance: "ConfigManager" | None = None

    def __call__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__call__(*args, **kwargs)
        return cls._instance


class ConfigManager(metaclass=_Singleton):
    """Lazy-loads and exposes configuration sections as dictionaries.

    Parameters
    ----------
    user_config_dir
        Directory holding override files. Defaults to the per-user location.
    seed_user_configs
        Copy packaged defaults into *user_config_dir* when missing.
    """

    _DEFAULT_FILENAMES = {
        "columns": "columns.yml",
        "output": "output.yml",
        "logging": "logging.yml",
    }

    def __init__(self, user_config_dir: Optional[Path] = None, seed_user_configs: bool = True) -> None:
        self._data: Dict[str, Dict[str, Any]] = {}
        self._user_config_dir = Path(user_config_dir) if user_config_dir else _get_user_config_dir()
        self._seed_user_configs = seed_user_configs
        self._ensure_loaded()

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the cached instance so the next call reloads from disk."""
        cls._instance = None

    # ------------------------------------------------------------------
    # Public helpers
    # ------------------------------------------------------------------
    def get_column_universe(self) -> List[str]:
        """Return the configurable column names, de-duplicated, in file order."""
        raw = self._data.get("columns", {}).get("columns") or []
        seen: set[str] = set()
        names: List[str] = []
        for item in raw:
            name = str(item).strip()
            if name and name not in seen:
                seen.add(name)
                names.append(name)
        return names

    def get_output_config(self) -> Dict[str, Any]:
        return self._data.get("output", {})

    def get_logging_config(self) -> Dict[str, Any]:
        return self._data.get("logging", {})

    # ------------------------------------------------------------------
    # Internal loading logic
    # ------------------------------------------------------------------
    def _ensure_loaded(self) -> None:
        if self._data:
            return  # already loaded

        startup_summary = []

        if self._seed_user_configs:
            _ensure_user_configs_exist(self._user_config_dir, self._DEFAULT_FILENAMES)

        for key, filename in self._DEFAULT_FILENAMES.items():
            merged_cfg: Dict[str, Any] = {}
            status = "missing"

            # 1. load packaged default
            try:
                packaged_data = yaml.safe_load(_read_packaged(filename)) or {}
                merged_cfg.update(packaged_data)
                status = "loaded"
            except (FileNotFoundError, OSError):
                logger.error("Missing packaged config for %s (%s)", key, filename)
            except yaml.YAMLError as exc:
                logger.error("Invalid packaged config for %s (%s): %s", key, filename, exc)
                status = "invalid"

            # 2. load user overrides
            user_path = self._user_config_dir / filename
            if user_path.exists():
                try:
                    user_data = yaml.safe_load(user_path.read_text(encoding="utf-8")) or {}
                    if not isinstance(user_data, dict):
                        raise yaml.YAMLError("top-level value must be a mapping")
                    if key == "columns" and "columns" in user_data and not _is_name_list(user_data["columns"]):
                        raise yaml.YAMLError("'columns' must be a list of column names")
                    merged_cfg.update(user_data)
                    if status == "loaded":
                        status = "loaded+overrides"
                except (OSError, yaml.YAMLError) as exc:
                    logger.error("Could not parse user config %s: %s", user_path, exc)

            self._data[key] = merged_cfg
            startup_summary.append(f"{key}: {status}")

        logger.info("Config startup: %s", " | ".join(startup_summary))
