"""Data models for a parsed API definition.

The loader converts the YAML document into these models; the generator
only ever reads them.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _Model(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class ResponseDefinition(_Model):
    """Shape of a response body as {field_name: type_name}."""

    body: dict[str, str] = Field(default_factory=dict, alias="json")


class AuthDefinition(_Model):
    """Authorization requirements of an endpoint.

    ``enforce`` only gates the role restriction. Authentication itself is
    always required by the generated code.
    """

    enforce: bool = False
    roles: list[str] = Field(default_factory=list)

    @field_validator("roles", mode="before")
    @classmethod
    def _none_means_no_roles(cls, value):
        return [] if value is None else value


class Endpoint(_Model):
    """A single API endpoint."""

    path: str
    method: str = ""  # HTTP verb, any casing
    description: str = ""
    auth: AuthDefinition | None = None
    response: dict[int, ResponseDefinition] = Field(default_factory=dict)

    @field_validator("path", "method", "description", mode="before")
    @classmethod
    def _none_means_empty(cls, value):
        return "" if value is None else value

    @field_validator("response", mode="before")
    @classmethod
    def _none_means_no_responses(cls, value):
        return {} if value is None else value


class ApiDefinition(_Model):
    """The whole API surface: title, version and ordered endpoints."""

    title: str = ""
    version: str = ""
    endpoints: list[Endpoint] = Field(default_factory=list)

    @field_validator("title", "version", mode="before")
    @classmethod
    def _scalar_to_str(cls, value):
        # YAML 1.1 reads `version: 2` as an int and `title: yes` as a bool
        if value is None:
            return ""
        if isinstance(value, bool):
            return str(value).lower()
        if isinstance(value, (int, float, date)):
            return str(value)
        return value

    @field_validator("endpoints", mode="before")
    @classmethod
    def _none_means_no_endpoints(cls, value):
        return [] if value is None else value
