"""Machine-readable manifest of an emitted suite."""

from __future__ import annotations

import json
import os
from typing import Any

import jsonschema

from json_conformance_suite.config import GeneratorConfig
from json_conformance_suite.exceptions import ManifestValidationError
from json_conformance_suite.types import GenerationResult

MANIFEST_API_VERSION = "1"

MANIFEST_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "apiVersion": {"const": MANIFEST_API_VERSION},
        "target": {"type": "string", "minLength": 1},
        "inputs": {"type": "string", "minLength": 1},
        "fixtures": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "id": {"type": "string", "pattern": "^[a-z_][a-z0-9_]*$"},
                    "category": {"enum": ["y", "n", "i"]},
                    "path": {"type": "string", "minLength": 1},
                    "procedures": {
                        "type": "array",
                        "minItems": 1,
                        "maxItems": 2,
                        "items": {
                            "type": "object",
                            "properties": {
                                "name": {"type": "string"},
                                "mode": {"enum": ["strict", "flexible"]},
                                "expect": {"enum": ["accept", "reject"]},
                            },
                            "required": ["name", "mode", "expect"],
                            "additionalProperties": False,
                        },
                    },
                },
                "required": ["id", "category", "path", "procedures"],
                "additionalProperties": False,
            },
        },
        "skipped": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["apiVersion", "target", "inputs", "fixtures", "skipped"],
    "additionalProperties": False,
}


def build_manifest(result: GenerationResult, config: GeneratorConfig) -> dict[str, Any]:
    return {
        "apiVersion": MANIFEST_API_VERSION,
        "target": config.target,
        "inputs": config.inputs_dir,
        "fixtures": [
            {
                "id": block.identifier,
                "category": block.category.value,
                "path": block.file_path,
                "procedures": [
                    {
                        "name": procedure.name,
                        "mode": procedure.mode.value,
                        "expect": "accept" if procedure.expect_success else "reject",
                    }
                    for procedure in block.procedures
                ],
            }
            for block in result.blocks
        ],
        "skipped": list(result.skipped),
    }


def validate_manifest(document: Any) -> None:
    """Validate a manifest against MANIFEST_SCHEMA.

    Raises:
        ManifestValidationError: With one message per violation.
    """
    validator = jsonschema.Draft202012Validator(MANIFEST_SCHEMA)
    errors = [
        f"{'/'.join(str(p) for p in e.absolute_path) or '<root>'}: {e.message}"
        for e in validator.iter_errors(document)
    ]
    if errors:
        raise ManifestValidationError(errors)


def dump_manifest(document: dict[str, Any]) -> str:
    """Validate and serialize a manifest.

    Raises:
        ManifestValidationError: If the document violates MANIFEST_SCHEMA.
    """
    validate_manifest(document)
    return json.dumps(document, indent=2) + "\n"


def write_manifest(path: str | os.PathLike[str], document: dict[str, Any]) -> None:
    text = dump_manifest(document)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
