"""json-conformance-suite: JSON parser conformance test generator.

Public API re-exports for consumer convenience.
"""

from json_conformance_suite.classifier import classify, fixture_stem
from json_conformance_suite.config import GeneratorConfig, resolve_config
from json_conformance_suite.emitter import TestEmitter
from json_conformance_suite.exceptions import (
    FixtureScanError,
    GeneratorError,
    IdentifierCollisionError,
    InvalidIdentifierError,
    ManifestValidationError,
)
from json_conformance_suite.generator import SuiteGenerator, build_blocks, check_unique
from json_conformance_suite.renderer import SuiteRenderer
from json_conformance_suite.renderers import PytestRenderer, RustRenderer
from json_conformance_suite.sanitizer import is_valid_identifier, sanitize
from json_conformance_suite.scanner import scan_fixtures
from json_conformance_suite.types import (
    Category,
    EmissionBlock,
    FixtureFile,
    GenerationResult,
    Mode,
    Procedure,
)

__all__ = [
    "Category",
    "EmissionBlock",
    "FixtureFile",
    "FixtureScanError",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "IdentifierCollisionError",
    "InvalidIdentifierError",
    "ManifestValidationError",
    "Mode",
    "Procedure",
    "PytestRenderer",
    "RustRenderer",
    "SuiteGenerator",
    "SuiteRenderer",
    "TestEmitter",
    "build_blocks",
    "check_unique",
    "classify",
    "fixture_stem",
    "is_valid_identifier",
    "resolve_config",
    "sanitize",
    "scan_fixtures",
]
