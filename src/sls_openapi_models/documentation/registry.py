"""Append-only registry of documentation models (custom.documentation.models)."""

from typing import Callable

from sls_openapi_models.models import JSON_CONTENT_TYPE, ModelDef


class ModelRegistry:
    """Wraps the ``models`` list of a ``custom.documentation`` mapping.

    Entries are only ever appended. A name that is already registered, by the
    user or earlier in the run, is neither resolved nor appended again.
    """

    def __init__(self, documentation: dict, resolve_schema: Callable[[str], dict]):
        self.documentation = documentation
        self.resolve_schema = resolve_schema

    @property
    def models(self) -> list[dict]:
        return self.documentation.setdefault("models", [])

    @property
    def names(self) -> list[str]:
        return [m.get("name") for m in self.models]

    def register(self, model_name: str) -> str:
        """Ensure a model named ``model_name`` exists and return its name."""
        if model_name in self.names:
            return model_name
        model = ModelDef(
            name=model_name,
            content_type=JSON_CONTENT_TYPE,
            json_schema=self.resolve_schema(model_name),
        )
        self.merge({"models": [model.to_entry()]})
        return model_name

    def merge(self, source: dict) -> None:
        """Merge ``source`` into the documentation config.

        Mappings merge key-wise, lists are concatenated, anything else is
        overwritten.
        """
        _accumulate(self.documentation, source)


def _accumulate(target: dict, source: dict) -> None:
    for key, value in source.items():
        current = target.get(key)
        if isinstance(current, list) and isinstance(value, list):
            current.extend(value)
        elif isinstance(current, dict) and isinstance(value, dict):
            _accumulate(current, value)
        else:
            target[key] = value
