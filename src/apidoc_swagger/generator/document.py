"""Swagger 2.0 document builder."""

import logging
from urllib.parse import urlsplit

from apidoc_swagger.config import BuildOptions
from apidoc_swagger.generator.definitions import DefinitionRegistry
from apidoc_swagger.generator.operation import build_operation
from apidoc_swagger.parser.base import ApiOperation, ProjectInfo

logger = logging.getLogger(__name__)

SWAGGER_VERSION = "2.0"


def group_by_url(operations: list[ApiOperation]) -> dict[str, list[ApiOperation]]:
    """Group operations by URL, keeping first-appearance order."""
    groups: dict[str, list[ApiOperation]] = {}
    for op in operations:
        groups.setdefault(op.url, []).append(op)
    return groups


class DocumentBuilder:
    """Builds one Swagger document from a list of apiDoc operations."""

    def __init__(self, project: ProjectInfo | None = None, options: BuildOptions | None = None):
        self.project = project or ProjectInfo()
        self.options = options or BuildOptions()

    def build(self, operations: list[ApiOperation]) -> dict:
        """Return the complete document: metadata, paths and definitions.

        Each call gets its own DefinitionRegistry, so repeated builds never
        share definitions.
        """
        registry = DefinitionRegistry()
        paths = {}
        for url, url_operations in group_by_url(operations).items():
            paths[url] = self._build_path_item(url_operations, registry)

        logger.debug("Built %d paths, %d definitions", len(paths), len(registry))

        document = {"swagger": SWAGGER_VERSION, "info": self._info()}
        document.update(self._location())
        document["tags"] = self._tags(operations)
        document["paths"] = paths
        document["definitions"] = registry.to_dict()
        return document

    def _build_path_item(self, operations: list[ApiOperation], registry: DefinitionRegistry) -> dict:
        path_item = {}
        for op in operations:
            path_item[op.method] = build_operation(op, registry, self.options)
        return path_item

    def _info(self) -> dict:
        return {
            "title": self.project.display_title,
            "version": self.project.version,
            "description": self.project.description,
            "contact": {"email": self.project.author},
        }

    def _tags(self, operations: list[ApiOperation]) -> list[dict]:
        names: list[str] = []
        for op in operations:
            if op.group and op.group not in names:
                names.append(op.group)
        return [{"name": name} for name in names]

    def _location(self) -> dict:
        """host / basePath / schemes from options, falling back to the project url."""
        host, base_path, schemes = None, None, []
        if self.project.url:
            parts = urlsplit(self.project.url)
            host = parts.netloc or None
            base_path = parts.path.rstrip("/") or None
            schemes = [parts.scheme] if parts.scheme else []

        location = {}
        host = self.options.host or host
        base_path = self.options.base_path or base_path
        schemes = list(self.options.schemes) or schemes
        if host:
            location["host"] = host
        if base_path:
            location["basePath"] = base_path
        if schemes:
            location["schemes"] = schemes
        return location
