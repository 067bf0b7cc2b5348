"""Models of the records the enrichers write into an OpenAPI document.

The document itself stays a plain nested dict; these models only build
the fixed fragments that get inserted, serialized with their OpenAPI
field names via ``model_dump(by_alias=True)``.
"""

from pydantic import BaseModel, ConfigDict, Field


class SecurityScheme(BaseModel):
    """An entry of ``components.securitySchemes``."""

    model_config = ConfigDict(populate_by_name=True)

    type: str  # apiKey / http / oauth2 / openIdConnect
    location: str = Field(alias="in")  # header / query / cookie
    name: str
    description: str = ""


class SecurityContext(BaseModel):
    """Value of the ``x-security-context`` extension on an operation."""

    model_config = ConfigDict(populate_by_name=True)

    required_role: str = Field(alias="requiredRole")
    description: str = ""


class OperationAnnotations(BaseModel):
    """The three extension fields attached to every operation."""

    model_config = ConfigDict(populate_by_name=True)

    security_context: SecurityContext = Field(alias="x-security-context")
    validation_rules: list[str] = Field(alias="x-validation-rules")
    is_pii: bool = Field(alias="x-is-pii")

    def to_extensions(self) -> dict:
        """Return the fields keyed by their ``x-`` extension names."""
        return self.model_dump(by_alias=True)
