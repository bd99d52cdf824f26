"""Data models for documentation entries written into the service config.

The function configuration itself stays a plain mapping (it is owned by the
host and mutated in place); these models only shape the entries we add.
"""

from pydantic import BaseModel, ConfigDict, Field

JSON_CONTENT_TYPE = "application/json"


class ParamDoc(BaseModel):
    """Documentation for a single path or query parameter."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    required: bool
    param_schema: dict = Field(default_factory=lambda: {"type": "string"}, alias="schema")

    def to_entry(self) -> dict:
        return self.model_dump(by_alias=True)


class ModelDef(BaseModel):
    """A named JSON Schema registered under custom.documentation.models."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    content_type: str = Field(default=JSON_CONTENT_TYPE, alias="contentType")
    json_schema: dict = Field(alias="schema")

    def to_entry(self) -> dict:
        return self.model_dump(by_alias=True)


class Tag(BaseModel):
    """A top-level OpenAPI tag."""

    name: str
    description: str | None = None
