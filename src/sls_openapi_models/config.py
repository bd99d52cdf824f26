"""Plugin options and serverless.yml loading."""

from pathlib import Path

import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from sls_openapi_models.errors import InvalidDocumentError

DEFAULT_OUTPUT = "openapi.yml"


class PluginOptions(BaseModel):
    """Options passed to the plugin on the command line or by the host."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    typescript_api_path: str = Field(
        default="api.d.ts",
        validation_alias=AliasChoices("typescriptApiPath", "typescriptApiModelPath", "typescript_api_path"),
    )
    tsconfig_path: str = Field(
        default="tsconfig.json",
        validation_alias=AliasChoices("tsconfigPath", "tsconfig_path"),
    )
    output: str = DEFAULT_OUTPUT

    @classmethod
    def from_options(cls, options: dict | None) -> "PluginOptions":
        # None values mean "not given" on the command line
        return cls.model_validate({k: v for k, v in (options or {}).items() if v is not None})


def load_service(file_path: Path) -> dict:
    """Load a serverless.yml service definition."""
    text = file_path.read_text(encoding="utf-8")
    service = yaml.safe_load(text) or {}
    if not isinstance(service, dict):
        raise InvalidDocumentError(file_path, "a service mapping")
    return service


def documentation_config(service: dict) -> dict | None:
    """Return custom.documentation, or None when the service has none."""
    custom = service.get("custom") or {}
    documentation = custom.get("documentation")
    return documentation if isinstance(documentation, dict) else None


def api_namespace(service: dict) -> str:
    documentation = documentation_config(service) or {}
    return documentation.get("apiNamespace", "")
