"""YAML / JSON document codec.

Documents are plain ``dict`` trees.  The format is chosen from the file
suffix: ``.yaml``/``.yml`` go through PyYAML's safe loader and dumper,
``.json`` through :mod:`json`.  Both dumpers preserve key order so that a
generated file reads like its template.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)


def detect_format(path: str | Path) -> str:
    """Return ``"yaml"`` or ``"json"`` for *path*.

    Raises:
        ValueError: If the suffix is not a supported document format.
    """
    suffix = Path(path).suffix.lower()
    if suffix in YAML_SUFFIXES:
        return "yaml"
    if suffix in JSON_SUFFIXES:
        return "json"
    raise ValueError(f"Unsupported document format: {suffix or '<none>'}")


def loads_document(text: str, fmt: str) -> Any:
    """Parse *text* in the given format."""
    if fmt == "yaml":
        return yaml.safe_load(text)
    if fmt == "json":
        return json.loads(text)
    raise ValueError(f"Unsupported document format: {fmt}")


def load_document(path: str | Path) -> Any:
    """Read and parse a YAML or JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If a YAML file is malformed.
        json.JSONDecodeError: If a JSON file is malformed.
    """
    file_path = Path(path)
    raw = file_path.read_text(encoding="utf-8")
    return loads_document(raw, detect_format(file_path))


def dump_document(document: dict[str, Any], fmt: str) -> str:
    """Serialise *document* to text in the given format."""
    if fmt == "yaml":
        return yaml.safe_dump(
            document,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
    if fmt == "json":
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"
    raise ValueError(f"Unsupported document format: {fmt}")
