"""Default documentation for path and query parameters."""

from typing import Callable

from sls_openapi_models.models import ParamDoc

# (request.parameters key, documentation key)
PARAM_SOURCES = (
    ("paths", "pathParams"),
    ("querystrings", "queryParams"),
)


class ParameterNormalizer:
    """Fills in ``pathParams``/``queryParams`` from the function's request parameters."""

    def __init__(self, resolve_schema: Callable[[str], dict]):
        self.resolve_schema = resolve_schema

    def normalize_event(self, http_event: dict) -> None:
        parameters = (http_event.get("request") or {}).get("parameters") or {}
        for source_key, documentation_key in PARAM_SOURCES:
            self.normalize_defaults(parameters.get(source_key) or {}, http_event, documentation_key)

    def normalize_defaults(self, params: dict, http_event: dict, key: str) -> None:
        documentation = http_event["documentation"]
        for name, required in params.items():
            if documentation.get(key) is None:
                documentation[key] = []
            documented = documentation[key]
            existing = next((p for p in documented if p.get("name") == name), None)

            if existing is not None and isinstance(existing.get("schema"), str):
                existing["schema"] = self.resolve_schema(existing["schema"])

            default = ParamDoc(name=name, required=_is_required(required)).to_entry()
            if existing is None:
                documented.append(default)
            else:
                reconcile_param(existing, default)


def reconcile_param(existing: dict, default: dict) -> dict:
    """Fill fields missing from a user-written entry with defaults, in place.

    Fields the user wrote always win, including an inline ``schema``.
    """
    for field, value in default.items():
        if field not in existing:
            existing[field] = value
    return existing


def _is_required(value) -> bool:
    # serverless accepts both `id: true` and `id: {required: true, ...}`
    if isinstance(value, dict):
        return bool(value.get("required", False))
    return bool(value)
