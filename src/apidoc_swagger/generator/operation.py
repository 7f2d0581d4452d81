"""Operation assembly: one Swagger operation object per endpoint verb.

GET / DELETE carry their parameters in the URL; POST / PUT / PATCH send a
JSON body described by the parameter block's top-level definition.
"""

import logging

from apidoc_swagger.config import BuildOptions
from apidoc_swagger.generator.definitions import (
    DefinitionRegistry,
    build_verb_definitions,
    definition_ref,
)
from apidoc_swagger.generator.parameters import (
    extract_path_parameters,
    filter_body_verb_parameters,
    path_placeholders,
)
from apidoc_swagger.generator.text import strip_tags
from apidoc_swagger.parser.base import ApiOperation, VerbDefinitionResult

logger = logging.getLogger(__name__)

JSON_MIME = "application/json"


def build_operation(
    operation: ApiOperation,
    registry: DefinitionRegistry,
    options: BuildOptions | None = None,
) -> dict:
    """Build the Swagger operation object for one endpoint."""
    options = options or BuildOptions()
    refs = build_verb_definitions(registry, operation)
    summary = strip_tags(operation.description) or strip_tags(operation.title)

    # body and response schemas must resolve even when a block declared nothing
    if operation.has_body:
        parameters = _body_parameters(operation, refs, summary)
        registry.ensure(refs.parameters_ref)
    else:
        parameters = extract_path_parameters(operation)
    if refs.success_ref is not None:
        registry.ensure(refs.success_ref)

    result = {
        "tags": [operation.group],
        "summary": summary,
    }
    if operation.name:
        result["operationId"] = operation.name
    result.update({
        "consumes": [JSON_MIME],
        "produces": [JSON_MIME],
        "parameters": parameters,
    })

    responses = _responses(operation, refs, options)
    if responses:
        result["responses"] = responses

    logger.debug(
        "Assembled %s %s (%d parameters)",
        operation.method.upper(), operation.url, len(parameters),
    )
    return result


def _body_parameters(operation: ApiOperation, refs: VerbDefinitionResult, summary: str) -> list[dict]:
    placeholders = path_placeholders(operation.url)
    params = filter_body_verb_parameters(extract_path_parameters(operation), placeholders)
    params.append({
        "in": "body",
        "name": "body",
        "description": summary,
        "required": len(operation.parameter_fields) > 0,
        "schema": {"$ref": definition_ref(refs.parameters_ref)},
    })
    return params


def _responses(operation: ApiOperation, refs: VerbDefinitionResult, options: BuildOptions) -> dict:
    responses = {}

    if refs.success_ref is not None:
        schema = {}
        if refs.success_ref_type is not None:
            schema["type"] = refs.success_ref_type
        schema["items"] = {"$ref": definition_ref(refs.success_ref)}
        responses["200"] = {"description": "successful operation", "schema": schema}

    if options.include_error_responses:
        for error in operation.error_fields:
            if error.field.isdigit():
                responses[error.field] = {"description": strip_tags(error.description)}

    return responses
