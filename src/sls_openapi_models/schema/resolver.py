"""Resolves model names into JSON Schemas with ts-json-schema-generator.

The compiler is run once per distinct model name; results are memoized for
the lifetime of the resolver, which is one plugin run.
"""

import json
import subprocess
from typing import Callable

from sls_openapi_models.errors import SchemaResolutionError

GENERATOR_COMMAND = ["npx", "--no-install", "ts-json-schema-generator"]


class SchemaResolver:
    """Compiles exported TypeScript types from a declaration file into JSON Schema."""

    def __init__(
        self,
        typescript_api_path: str = "api.d.ts",
        tsconfig_path: str = "tsconfig.json",
        log: Callable[[str], None] | None = None,
        command: list[str] | None = None,
    ):
        self.typescript_api_path = typescript_api_path
        self.tsconfig_path = tsconfig_path
        self.command = command or GENERATOR_COMMAND
        self._log = log or (lambda msg: None)
        self._cache: dict[str, dict] = {}

    def resolve(self, model_name: str) -> dict:
        """Return the JSON Schema for an exported type such as ``Api.GetUser.Response``."""
        if model_name not in self._cache:
            self._log(f"Generating schema for {model_name}")
            self._cache[model_name] = self._generate(model_name)
        return self._cache[model_name]

    def _build_args(self, model_name: str) -> list[str]:
        return [
            *self.command,
            "--path", self.typescript_api_path,
            "--tsconfig", self.tsconfig_path,
            "--type", model_name,
            "--expose", "export",
            "--no-type-check",
            "--no-top-ref",
        ]

    def _generate(self, model_name: str) -> dict:
        try:
            result = subprocess.run(
                self._build_args(model_name),
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise SchemaResolutionError(model_name, f"cannot run {self.command[0]}: {e}") from e

        if result.returncode != 0:
            stderr = (result.stderr or result.stdout).strip()
            raise SchemaResolutionError(model_name, stderr[:500] or f"exit code {result.returncode}")

        try:
            schema = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise SchemaResolutionError(model_name, f"invalid JSON output: {e}") from e

        if not isinstance(schema, dict):
            raise SchemaResolutionError(model_name, "schema output is not an object")
        return schema
