# -*- coding: utf-8 -*-
"""Application version detection utilities.

Provides a single public function, ``get_app_version()``, used by the window
title and the About dialog.
"""

from __future__ import annotations

from importlib import metadata
from pathlib import Path
from typing import Optional

_CACHED_VERSION: Optional[str] = None

_DISTRIBUTION = "validation-builder"


def get_app_version() -> str:
    """Return the application version string (e.g., ``v1.2.3``).

    Packaged builds: read version.txt written next to the package root.
    Installed builds: read the distribution metadata.
    Development fallback: return "vdev".
    """
    global _CACHED_VERSION
    if _CACHED_VERSION:
        return _CACHED_VERSION

    version_file = Path(__file__).resolve().parent.parent / "version.txt"
    text = ""
    if version_file.exists():
        text = version_file.read_text(encoding="ascii", errors="ignore").strip()
    if not text:
        try:
            text = metadata.version(_DISTRIBUTION)
        except metadata.PackageNotFoundError:
            text = ""

    if text:
        _CACHED_VERSION = text if text.startswith("v") else f"v{text}"
    else:
        _CACHED_VERSION = "vdev"
    return _CACHED_VERSION
