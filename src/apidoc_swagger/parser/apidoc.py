"""apiDoc output loader.

Reads the ``api_data.json`` endpoint list and the project metadata file
(``api_project.json`` or ``package.json``) into validated models.
"""

import json
import logging
from pathlib import Path

import yaml

from .base import ApiOperation, ProjectInfo

logger = logging.getLogger(__name__)


def load_operations(file_path: Path) -> list[ApiOperation]:
    """Load an apiDoc endpoint list into a list of ApiOperation."""
    data = _load_file(file_path)
    if not isinstance(data, list):
        raise ValueError(f"{file_path}: expected a list of endpoints, got {type(data).__name__}")

    operations = [ApiOperation.model_validate(item) for item in data]
    logger.debug("Loaded %d operations from %s", len(operations), file_path)
    return operations


def load_project(file_path: Path) -> ProjectInfo:
    """Load project metadata (name, title, version, description, author)."""
    data = _load_file(file_path)
    if not isinstance(data, dict):
        raise ValueError(f"{file_path}: expected a project mapping, got {type(data).__name__}")

    # package.json may carry author as {"name": ..., "email": ...}
    author = data.get("author")
    if isinstance(author, dict):
        data = {**data, "author": author.get("email") or author.get("name")}

    return ProjectInfo.model_validate(data)


def _load_file(file_path: Path):
    text = file_path.read_text(encoding="utf-8")
    if file_path.suffix.lower() in (".yaml", ".yml"):
        return yaml.safe_load(text)
    return json.loads(text)
