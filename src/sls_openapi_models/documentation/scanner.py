"""Walks the service functions and documents every http event."""

from typing import Callable

from sls_openapi_models.documentation.params import ParameterNormalizer
from sls_openapi_models.documentation.synthesizer import ModelSynthesizer
from sls_openapi_models.errors import MissingDocumentationError


class DocumentationScanner:
    """Classifies http events and drives model and parameter documentation.

    An event is documented when ``documentation`` is a mapping, intentionally
    undocumented when it is ``None`` or the event is private, and missing
    otherwise. Missing events are collected and reported together once the
    whole service has been scanned.
    """

    def __init__(
        self,
        synthesizer: ModelSynthesizer,
        normalizer: ParameterNormalizer,
        log: Callable[[str], None] | None = None,
    ):
        self.synthesizer = synthesizer
        self.normalizer = normalizer
        self._log = log or (lambda msg: None)
        self.functions_missing_documentation: list[str] = []

    def scan(self, functions: dict) -> None:
        self._log("Scanning functions for documentation attribute")
        for function_name, function in (functions or {}).items():
            for event in (function or {}).get("events") or []:
                http_event = event.get("http") if isinstance(event, dict) else None
                if http_event is not None:
                    self._scan_http_event(function_name, http_event)
        self.assert_all_documented()

    def _scan_http_event(self, function_name: str, http_event) -> None:
        # `http: GET /path` shorthand has nowhere to hold documentation
        if not isinstance(http_event, dict):
            self._record_missing(function_name)
            return

        documentation = http_event.get("documentation", ...)
        if isinstance(documentation, dict):
            self._log(f"Generating docs for {function_name}")
            self.synthesizer.synthesize(http_event, function_name)
            self.normalizer.normalize_event(http_event)
        elif documentation is None or http_event.get("private"):
            return
        else:
            self._record_missing(function_name)

    def _record_missing(self, function_name: str) -> None:
        if function_name not in self.functions_missing_documentation:
            self.functions_missing_documentation.append(function_name)

    def assert_all_documented(self) -> None:
        if self.functions_missing_documentation:
            raise MissingDocumentationError(self.functions_missing_documentation)
