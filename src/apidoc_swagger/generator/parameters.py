"""Path / form parameter extraction for a single operation."""

import logging
import re

from apidoc_swagger.generator.text import strip_tags
from apidoc_swagger.parser.base import ApiOperation

logger = logging.getLogger(__name__)

# /users/:id and /users/{id}
_PLACEHOLDER_RE = re.compile(r":(\w+)|\{(\w+)\}")


def path_placeholders(url: str) -> list[str]:
    """Return placeholder names in a URL template, in order of appearance."""
    names = []
    for match in _PLACEHOLDER_RE.finditer(url):
        name = match.group(1) or match.group(2)
        if name not in names:
            names.append(name)
    return names


def extract_path_parameters(operation: ApiOperation) -> list[dict]:
    """Emit every parameter row as a flat path (or formData, for files) parameter."""
    return [
        {
            "name": param.field,
            "in": "formData" if param.type == "file" else "path",
            "required": not param.optional,
            "type": param.type.lower(),
            "description": strip_tags(param.description),
        }
        for param in operation.parameter_fields
    ]


def filter_body_verb_parameters(params: list[dict], placeholders: list[str]) -> list[dict]:
    """Drop path parameters that are not bound by the URL template.

    For body verbs most parameter rows describe the payload, not the URL.
    """
    kept = []
    for param in params:
        if param["in"] == "path" and param["name"] not in placeholders:
            logger.debug("Dropping non-path parameter %r", param["name"])
            continue
        kept.append(param)
    return kept
