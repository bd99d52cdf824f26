"""Hooks that document a Serverless service around OpenAPI generation.

``before:openapi:generate:serverless`` fills ``custom.documentation.models``
and the http event documentation; ``after:openapi:generate:serverless``
post-processes the written document.
"""

from pathlib import Path

from sls_openapi_models.config import PluginOptions, api_namespace, documentation_config
from sls_openapi_models.documentation.params import ParameterNormalizer
from sls_openapi_models.documentation.registry import ModelRegistry
from sls_openapi_models.documentation.scanner import DocumentationScanner
from sls_openapi_models.documentation.synthesizer import ModelSynthesizer
from sls_openapi_models.errors import PluginOrderError
from sls_openapi_models.host import Serverless
from sls_openapi_models.openapi.finalizer import DocumentFinalizer
from sls_openapi_models.schema.resolver import SchemaResolver

GENERATE_EVENT = "openapi:generate:serverless"
LOG_PREFIX = "[serverless-openapi-typescript]"


class OpenApiTypeScriptPlugin:
    """Generates documentation models from TypeScript types for every http function."""

    def __init__(self, serverless: Serverless, options: dict | None = None):
        self.serverless = serverless
        self.assert_plugin_order()

        self.options = PluginOptions.from_options(options or serverless.options)
        self.resolver = SchemaResolver(
            typescript_api_path=self.options.typescript_api_path,
            tsconfig_path=self.options.tsconfig_path,
            log=self.log,
        )
        self.disabled = False
        self.hooks = {}

        if documentation_config(serverless.service) is None:
            self.log(
                f"Disabling OpenAPI generation for {serverless.service_name} - "
                "no 'custom.documentation' attribute found"
            )
            self.disabled = True
            serverless.plugin_manager.hooks.pop(GENERATE_EVENT, None)
        else:
            self.hooks = {
                f"before:{GENERATE_EVENT}": self.populate_serverless_with_models,
                f"after:{GENERATE_EVENT}": self.post_process_openapi,
            }

    def assert_plugin_order(self) -> None:
        if not self.serverless.plugin_manager.hooks.get(GENERATE_EVENT):
            raise PluginOrderError()

    def log(self, msg: str) -> None:
        self.serverless.log(f"{LOG_PREFIX} {msg}")

    def build_scanner(self) -> DocumentationScanner:
        service = self.serverless.service
        registry = ModelRegistry(documentation_config(service), self.resolver.resolve)
        return DocumentationScanner(
            synthesizer=ModelSynthesizer(registry, api_namespace(service)),
            normalizer=ParameterNormalizer(self.resolver.resolve),
            log=self.log,
        )

    def populate_serverless_with_models(self) -> None:
        self.build_scanner().scan(self.serverless.functions)

    def post_process_openapi(self) -> None:
        DocumentFinalizer(log=self.log).finalize(Path(self.options.output))
