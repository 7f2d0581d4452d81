"""CLI entry point for apidoc-swagger."""

import logging
from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from apidoc_swagger.config import ENV_PREFIX, BuildOptions
from apidoc_swagger.generator.document import DocumentBuilder
from apidoc_swagger.generator.writer import detect_output_format, render_document
from apidoc_swagger.parser.apidoc import load_operations, load_project
from apidoc_swagger.parser.base import ProjectInfo


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """apidoc-swagger: convert apiDoc output into a Swagger 2.0 document."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("data_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file for the Swagger document.")
@click.option("--project", "project_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="api_project.json or package.json with title/version.")
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "json", "yaml"]), help="Output format (auto: by file extension).")
@click.option("--host", default=None, envvar=f"{ENV_PREFIX}_HOST", help="Document host, e.g. api.example.com.")
@click.option("--base-path", default=None, envvar=f"{ENV_PREFIX}_BASE_PATH", help="Document basePath, e.g. /v1.")
@click.option("--scheme", "schemes", multiple=True, envvar=f"{ENV_PREFIX}_SCHEMES", type=click.Choice(["http", "https", "ws", "wss"]), help="Transfer scheme (repeatable).")
@click.option("--include-errors", is_flag=True, envvar=f"{ENV_PREFIX}_INCLUDE_ERRORS", help="Add numeric @apiError rows as responses.")
def convert(
    data_path: Path,
    output: Path,
    project_path: Path | None,
    fmt: str,
    host: str | None,
    base_path: str | None,
    schemes: tuple[str, ...],
    include_errors: bool,
):
    """Convert an apiDoc api_data.json into a Swagger document."""
    click.echo(f"Reading {data_path}...")
    try:
        operations = load_operations(data_path)
        project = load_project(project_path) if project_path else ProjectInfo()
    except (ValueError, ValidationError, yaml.YAMLError) as e:
        raise click.ClickException(f"Invalid input: {e}") from e
    click.echo(f"Found {len(operations)} endpoints.")

    options = BuildOptions(
        host=host,
        base_path=base_path,
        schemes=list(schemes),
        include_error_responses=include_errors,
    )
    document = DocumentBuilder(project, options).build(operations)

    if fmt == "auto":
        fmt = detect_output_format(output)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(render_document(document, fmt), encoding="utf-8")
    click.echo(
        f"Swagger document saved to {output} "
        f"({len(document['paths'])} paths, {len(document['definitions'])} definitions)"
    )
