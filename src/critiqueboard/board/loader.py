"""Load board exports (notes and connectors) from YAML or JSON files."""

import json
from pathlib import Path
from typing import Any

import yaml

from ..models import Connection, StickyNote


def load_board(file_path: Path) -> tuple[list[StickyNote], list[Connection]]:
    """Parse a board export.

    The file holds a mapping with ``notes`` (``id``/``content``) and
    ``connections`` (``from``/``to``). ``.json`` files are parsed as JSON,
    anything else as YAML. Unparseable files raise ``ValueError``.
    """
    file_path = Path(file_path)
    text = file_path.read_text(encoding="utf-8", errors="replace")
    try:
        if file_path.suffix.lower() == ".json":
            data: Any = json.loads(text) if text.strip() else {}
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Could not parse board export {file_path.name}: {e}") from e

    data = data or {}
    if not isinstance(data, dict):
        raise ValueError(f"Board export must be a mapping, got {type(data).__name__}")

    notes = [StickyNote.from_dict(n) for n in data.get("notes") or [] if isinstance(n, dict)]
    connections = [Connection.from_dict(c) for c in data.get("connections") or [] if isinstance(c, dict)]
    return notes, connections
