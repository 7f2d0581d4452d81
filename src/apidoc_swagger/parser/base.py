"""Data models for parsed apiDoc output and the Swagger pieces built from it.

The apiDoc parser emits a flat list of endpoint records; these models
validate that list and give the generator typed access to it.
"""

from pydantic import BaseModel, ConfigDict, Field

BODY_METHODS = ("post", "put", "patch")


class FieldDeclaration(BaseModel):
    """A single flat, dot-qualified field row (e.g. ``user.address.city``)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    field: str
    type: str  # String / Number / Object / Array / String[] / file ...
    description: str = ""
    optional: bool = False
    group: str = ""


class FieldBlock(BaseModel):
    """Field rows grouped by apiDoc group title (``Parameter``, ``Success 200``...)."""

    model_config = ConfigDict(extra="ignore")

    fields: dict[str, list[FieldDeclaration]] = {}


class ApiOperation(BaseModel):
    """One documented endpoint: HTTP verb + URL with its field declarations."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    verb: str = Field(alias="type")  # get / post / put / del / patch ...
    url: str  # /user/:id or /features/{id}
    group: str = ""
    name: str = ""
    description: str = ""
    title: str = ""
    parameter: FieldBlock | None = None
    success: FieldBlock | None = None
    error: FieldBlock | None = None

    @property
    def method(self) -> str:
        method = self.verb.lower()
        return "delete" if method == "del" else method

    @property
    def has_body(self) -> bool:
        return self.method in BODY_METHODS

    @property
    def parameter_fields(self) -> list[FieldDeclaration]:
        if self.parameter is None:
            return []
        return self.parameter.fields.get("Parameter", [])

    @property
    def has_success_block(self) -> bool:
        return self.success is not None

    @property
    def success_fields(self) -> list[FieldDeclaration]:
        if self.success is None:
            return []
        return self.success.fields.get("Success 200", [])

    @property
    def error_fields(self) -> list[FieldDeclaration]:
        if self.error is None:
            return []
        return [f for group in self.error.fields.values() for f in group]


class ProjectInfo(BaseModel):
    """Project metadata used for the document's ``info`` block."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    title: str | None = None
    version: str = "0.0.0"
    description: str = ""
    author: str | None = None
    url: str | None = None

    @property
    def display_title(self) -> str:
        return self.title or self.name


class PropertySchema(BaseModel):
    """Schema of one property inside a definition."""

    model_config = ConfigDict(populate_by_name=True)

    type: str
    description: str = ""
    ref: str | None = Field(default=None, serialization_alias="$ref")
    items: dict | None = None  # {type: ...} or {$ref: ...}

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class Definition(BaseModel):
    """A named, reusable object schema accumulated across declarations."""

    properties: dict[str, PropertySchema] = {}
    required: list[str] = []  # set semantics, insertion order kept

    def to_dict(self) -> dict:
        return {
            "properties": {name: prop.to_dict() for name, prop in self.properties.items()},
            "required": list(self.required),
        }


class TopLevelResult(BaseModel):
    """The definition a whole parameter or success block resolves to."""

    top_level_ref: str
    top_level_ref_type: str | None = None


class VerbDefinitionResult(BaseModel):
    """Top-level refs for one operation's parameter and success blocks."""

    parameters_ref: str | None = None
    success_ref: str | None = None
    success_ref_type: str | None = None
