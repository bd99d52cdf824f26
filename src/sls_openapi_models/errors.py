"""Errors raised while building API documentation models.

Every error is fatal to the run: documentation must be complete and
schema-resolvable, otherwise no document is produced.
"""


class SlsOpenApiModelsError(Exception):
    """Base class for all errors raised by this package."""


class PluginOrderError(SlsOpenApiModelsError):
    """The OpenAPI generate step is not registered with the host."""

    def __init__(self):
        super().__init__(
            "Please configure your serverless.plugins list so serverless-openapi-typescript "
            "will be listed AFTER @conqa/serverless-openapi-documentation"
        )


class MissingDocumentationError(SlsOpenApiModelsError):
    """One or more functions have http events without a documentation attribute."""

    def __init__(self, function_names: list[str]):
        self.function_names = list(function_names)
        super().__init__(
            "Some functions have http events which are not documented:\n"
            f"    {', '.join(self.function_names)}\n\n"
            "Please add a documentation attribute.\n"
            "If you wish to keep the function undocumented, please explicitly set\n"
            "    documentation: ~\n"
        )


class SchemaResolutionError(SlsOpenApiModelsError):
    """A model name could not be compiled into a JSON Schema."""

    def __init__(self, model_name: str, reason: str):
        self.model_name = model_name
        self.reason = reason
        super().__init__(f"Could not generate schema for {model_name}: {reason}")


class InvalidDocumentError(SlsOpenApiModelsError):
    """A YAML or JSON file does not hold the expected top-level mapping."""

    def __init__(self, file_path, expected: str):
        self.file_path = file_path
        super().__init__(f"{file_path} does not contain {expected}")
