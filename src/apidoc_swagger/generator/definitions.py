"""Definition synthesis: rebuilds named object schemas from flat field rows.

Field rows arrive dot-qualified (``user.address.city``). Each row becomes a
property on the object named by its prefix; rows sharing a prefix, across all
operations of one build, are merged into a single definition.
"""

import logging

from apidoc_swagger.generator.names import resolve_nested_name
from apidoc_swagger.generator.text import strip_tags
from apidoc_swagger.parser.base import (
    ApiOperation,
    Definition,
    FieldDeclaration,
    PropertySchema,
    TopLevelResult,
    VerbDefinitionResult,
)

logger = logging.getLogger(__name__)

ARRAY_SUFFIX = "[]"
DEFINITIONS_PREFIX = "#/definitions/"


def definition_ref(name: str) -> str:
    return DEFINITIONS_PREFIX + name


class DefinitionRegistry:
    """Arena of definitions keyed by object name, owned by one document build."""

    def __init__(self):
        self._definitions: dict[str, Definition] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def names(self) -> list[str]:
        return list(self._definitions)

    def get(self, name: str) -> Definition | None:
        return self._definitions.get(name)

    def ensure(self, object_name: str) -> Definition:
        """Return the definition for object_name, creating an empty one if absent."""
        definition = self._definitions.get(object_name)
        if definition is None:
            logger.debug("Creating definition %r", object_name)
            definition = Definition()
            self._definitions[object_name] = definition
        return definition

    def apply_field(self, object_name: str, property_name: str, declaration: FieldDeclaration) -> PropertySchema:
        """Set a property on object_name from a field row.

        The property schema is replaced (last write wins) but required
        membership only ever grows. A property referencing a sub-object
        also registers that sub-object, so the reference always resolves.
        """
        definition = self.ensure(object_name)
        prop = property_schema(declaration)
        definition.properties[property_name] = prop
        if not declaration.optional and property_name not in definition.required:
            definition.required.append(property_name)
        if prop.ref or (prop.items and "$ref" in prop.items):
            self.ensure(declaration.field)
        return prop

    def to_dict(self) -> dict:
        return {name: definition.to_dict() for name, definition in self._definitions.items()}


def property_schema(declaration: FieldDeclaration) -> PropertySchema:
    """Classify a field row as object reference, array, or scalar."""
    field_type = declaration.type
    description = strip_tags(declaration.description)

    if field_type == "Object":
        return PropertySchema(
            type=field_type.lower(),
            description=description,
            ref=definition_ref(declaration.field),
        )
    if field_type.endswith(ARRAY_SUFFIX):
        return PropertySchema(
            type="array",
            description=description,
            items={"type": field_type[: -len(ARRAY_SUFFIX)]},
        )
    if field_type == "Array":
        # sub-fields ``<field>.x`` land in the definition named after the field
        return PropertySchema(
            type="array",
            description=description,
            items={"$ref": definition_ref(declaration.field)},
        )
    return PropertySchema(type=field_type.lower(), description=description)


# -- block reduction ----------------------------------------------------------


def classify_root(declaration: FieldDeclaration, default_object_name: str) -> tuple[TopLevelResult, str | None]:
    """Decide what a whole block resolves to from its first row.

    A first row typed ``Object`` or ``Array`` names the block's root object
    and is consumed; any other first row is an ordinary property of the
    object it resolves to. Returns the top-level result and the property
    name the row still contributes (None when consumed).
    """
    property_name, object_name = resolve_nested_name(declaration.field)

    if declaration.type in ("Object", "Array"):
        return TopLevelResult(
            top_level_ref=property_name,
            top_level_ref_type=declaration.type.lower(),
        ), None

    return TopLevelResult(
        top_level_ref=object_name or default_object_name,
        top_level_ref_type=declaration.type,
    ), property_name


def build_block(
    registry: DefinitionRegistry,
    declarations: list[FieldDeclaration],
    default_object_name: str,
) -> TopLevelResult:
    """Register every row of one parameter/success block and return its top-level ref."""
    if not declarations:
        return TopLevelResult(top_level_ref=default_object_name)

    first, *rest = declarations
    result, first_property = classify_root(first, default_object_name)

    registry.ensure(result.top_level_ref)
    if first_property:
        registry.apply_field(result.top_level_ref, first_property, first)

    for declaration in rest:
        property_name, object_name = resolve_nested_name(declaration.field)
        object_name = object_name or default_object_name
        registry.ensure(object_name)
        if property_name:
            registry.apply_field(object_name, property_name, declaration)

    return result


def build_verb_definitions(registry: DefinitionRegistry, operation: ApiOperation) -> VerbDefinitionResult:
    """Run both blocks of an operation through the registry."""
    default_object_name = operation.name

    params = build_block(registry, operation.parameter_fields, default_object_name)
    result = VerbDefinitionResult(parameters_ref=params.top_level_ref)

    if operation.has_success_block:
        success = build_block(registry, operation.success_fields, default_object_name)
        result.success_ref = success.top_level_ref
        result.success_ref_type = success.top_level_ref_type

    return result
