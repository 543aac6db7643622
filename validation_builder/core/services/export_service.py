from __future__ import annotations

"""Write generated validation YAML to disk."""

import logging
from pathlib import Path
from typing import Dict, List, Tuple, Union

__all__ = ["ExportService", "DEFAULT_FILENAME", "YAML_MIME_TYPE", "file_types_for"]

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "validation_config.yaml"
YAML_MIME_TYPE = "text/yaml"

_MIME_FILE_TYPES: Dict[str, Tuple[str, str]] = {
    "text/yaml": ("YAML files", "*.yaml *.yml"),
    "application/yaml": ("YAML files", "*.yaml *.yml"),
    "application/x-yaml": ("YAML files", "*.yaml *.yml"),
}


def file_types_for(mime_type: str = YAML_MIME_TYPE) -> List[Tuple[str, str]]:
    """Return Tk ``filetypes`` entries for *mime_type*, ending with "All files"."""
    entries: List[Tuple[str, str]] = []
    known = _MIME_FILE_TYPES.get(mime_type)
    if known is None:
        logger.warning("No file pattern known for MIME type %s", mime_type)
    else:
        entries.append(known)
    entries.append(("All files", "*.*"))
    return entries


class ExportService:
    """Persist YAML documents produced by the emitter.

    OS errors are logged and re-raised; the UI decides how to report them.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def save_yaml(self, text: str, path: Union[str, Path]) -> Path:
        """Write *text* to *path*, creating parent directories as needed."""
        target = Path(path).expanduser()
        if target.is_dir():
            target = target / DEFAULT_FILENAME
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(text, encoding=self.encoding)
        except OSError as exc:
            logger.error("Export FAIL: could not write %s: %s", target, exc)
            raise
        logger.info("Export OK: wrote %d characters to %s", len(text), target)
        return target.resolve()
