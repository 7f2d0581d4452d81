"""Build options for the Swagger document.

The CLI fills these from its options, which fall back to environment
variables (APIDOC_SWAGGER_HOST, APIDOC_SWAGGER_BASE_PATH,
APIDOC_SWAGGER_SCHEMES, APIDOC_SWAGGER_INCLUDE_ERRORS).
"""

from pydantic import BaseModel

ENV_PREFIX = "APIDOC_SWAGGER"


class BuildOptions(BaseModel):
    """Optional document-level settings."""

    host: str | None = None
    base_path: str | None = None
    schemes: list[str] = []  # http / https
    include_error_responses: bool = False
