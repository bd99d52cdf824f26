"""Derives request/response models for an http event from its method."""

from typing import Callable

from sls_openapi_models.documentation.registry import ModelRegistry
from sls_openapi_models.models import JSON_CONTENT_TYPE

Rule = Callable[[dict, str], None]


def upper_first(name: str) -> str:
    return name[:1].upper() + name[1:]


def model_prefix(api_namespace: str, function_name: str) -> str:
    """Return ``<apiNamespace>.<FunctionName>``, the namespace of a function's models."""
    parts = [api_namespace, upper_first(function_name)]
    return ".".join(p for p in parts if p)


class ModelSynthesizer:
    """Attaches request/response models to http event documentation.

    Rules are matched in order on the lower-cased method; a write method runs
    the request-body rule and then the same json-response rule as GET.
    Methods without a rule are left untouched.
    """

    def __init__(self, registry: ModelRegistry, api_namespace: str):
        self.registry = registry
        self.api_namespace = api_namespace
        self.rules: list[tuple[frozenset[str], tuple[Rule, ...]]] = [
            (frozenset({"delete"}), (self._no_content,)),
            (frozenset({"post", "put", "patch"}), (self._request_body, self._json_response)),
            (frozenset({"get"}), (self._json_response,)),
        ]

    def synthesize(self, http_event: dict, function_name: str) -> None:
        method = str(http_event.get("method", "")).lower()
        prefix = model_prefix(self.api_namespace, function_name)
        documentation = http_event.setdefault("documentation", {})
        for methods, steps in self.rules:
            if method in methods:
                for step in steps:
                    step(documentation, prefix)
                return

    def _no_content(self, documentation: dict, prefix: str) -> None:
        documentation["methodResponses"] = [{"statusCode": 204, "responseModels": {}}]

    def _request_body(self, documentation: dict, prefix: str) -> None:
        model_name = self.registry.register(f"{prefix}.Request.Body")
        documentation["requestModels"] = {JSON_CONTENT_TYPE: model_name}
        documentation["requestBody"] = {"description": ""}

    def _json_response(self, documentation: dict, prefix: str) -> None:
        model_name = self.registry.register(f"{prefix}.Response")
        documentation["methodResponses"] = [
            {
                "statusCode": 200,
                "responseBody": {"description": ""},
                "responseModels": {JSON_CONTENT_TYPE: model_name},
            }
        ]
