"""Post-processes the generated OpenAPI document in place."""

import json
from pathlib import Path
from typing import Callable

import yaml

from sls_openapi_models.errors import InvalidDocumentError
from sls_openapi_models.models import Tag

OPENAPI_VERSION = "3.1.0"


class DocumentFinalizer:
    """Stamps the OpenAPI version and tags every operation with the API title."""

    def __init__(self, log: Callable[[str], None] | None = None):
        self._log = log or (lambda msg: None)

    def finalize(self, output_path: Path) -> dict:
        output_path = Path(output_path)
        document = load_document(output_path)
        self.patch_openapi_version(document)
        self.tag_methods(document)
        write_document(output_path, document)
        return document

    def patch_openapi_version(self, document: dict) -> dict:
        self._log(f"Setting openapi version to {OPENAPI_VERSION}")
        document["openapi"] = OPENAPI_VERSION
        return document

    def tag_methods(self, document: dict) -> dict:
        """Replace all tags with a single tag named after ``info.title``."""
        info = document.get("info") or {}
        tag_name = info.get("title")
        if not tag_name:
            raise InvalidDocumentError("OpenAPI document", "an info.title")
        document["tags"] = [Tag(name=tag_name, description=info.get("description")).model_dump(exclude_none=True)]
        for path_item in (document.get("paths") or {}).values():
            if not isinstance(path_item, dict):
                continue
            for operation in path_item.values():
                # path-level `parameters`, `summary` etc. are not operations
                if isinstance(operation, dict):
                    operation["tags"] = [tag_name]
        return document


def _is_json(file_path: Path) -> bool:
    return file_path.suffix.lower() == ".json"


def load_document(file_path: Path) -> dict:
    text = file_path.read_text(encoding="utf-8")
    document = json.loads(text) if _is_json(file_path) else yaml.safe_load(text)
    if not isinstance(document, dict):
        raise InvalidDocumentError(file_path, "an OpenAPI document")
    return document


def write_document(file_path: Path, document: dict) -> None:
    if _is_json(file_path):
        text = json.dumps(document, indent=2, ensure_ascii=False) + "\n"
    else:
        text = yaml.safe_dump(document, sort_keys=False, allow_unicode=True)
    file_path.write_text(text, encoding="utf-8")
