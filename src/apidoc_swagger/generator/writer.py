"""Serializes a built document to JSON or YAML text."""

import json
from pathlib import Path

import yaml


def detect_output_format(file_path: Path) -> str:
    """Return 'yaml' for .yaml/.yml paths, 'json' otherwise."""
    if file_path.suffix.lower() in (".yaml", ".yml"):
        return "yaml"
    return "json"


def render_document(document: dict, fmt: str = "json") -> str:
    if fmt == "yaml":
        return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)
    if fmt == "json":
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"
    raise ValueError(f"Unsupported output format: {fmt}")
