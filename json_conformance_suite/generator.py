"""Suite generator: orchestrates the scan → classify → sanitize → emit pass."""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Optional, TextIO

from json_conformance_suite.classifier import classify, fixture_stem
from json_conformance_suite.config import GeneratorConfig, renderer_for
from json_conformance_suite.emitter import TestEmitter
from json_conformance_suite.exceptions import (
    IdentifierCollisionError,
    InvalidIdentifierError,
)
from json_conformance_suite.sanitizer import is_valid_identifier, sanitize
from json_conformance_suite.scanner import scan_fixtures
from json_conformance_suite.types import EmissionBlock, FixtureFile, GenerationResult


def build_blocks(fixtures: Iterable[FixtureFile]) -> GenerationResult:
    """Classify and name each fixture.

    Unclassified fixtures are collected in ``skipped``. Blocks are sorted by
    path so output does not depend on directory listing order.

    Raises:
        InvalidIdentifierError: If a fixture name sanitizes to something
            that is not a valid identifier.
    """
    blocks: list[EmissionBlock] = []
    skipped: list[str] = []
    for fixture in fixtures:
        category = classify(fixture.base_name)
        if category is None:
            skipped.append(fixture.path)
            continue
        identifier = sanitize(fixture_stem(fixture.base_name))
        if not is_valid_identifier(identifier):
            raise InvalidIdentifierError(fixture.path, identifier)
        blocks.append(EmissionBlock(identifier, category, fixture.path))

    blocks.sort(key=lambda block: block.file_path)
    return GenerationResult(blocks=blocks, skipped=sorted(skipped))


def check_unique(blocks: Iterable[EmissionBlock]) -> None:
    """Raise IdentifierCollisionError if any procedure name is emitted twice."""
    owners: dict[str, list[str]] = defaultdict(list)
    for block in blocks:
        for procedure in block.procedures:
            owners[procedure.name].append(block.file_path)
    collisions = {name: paths for name, paths in owners.items() if len(paths) > 1}
    if collisions:
        raise IdentifierCollisionError(collisions)


class SuiteGenerator:
    """Generates a conformance suite from a fixture directory.

    The whole pass is synchronous: the directory is listed and released,
    every block is built and checked, and only then is text written.

    Args:
        config: Generator settings; defaults to the conventional layout.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self.config = config or GeneratorConfig()
        self.emitter = TestEmitter(renderer_for(self.config))

    def collect(self) -> GenerationResult:
        """Scan, classify, sanitize and validate without rendering.

        Raises:
            FixtureScanError: If the inputs directory cannot be listed.
            InvalidIdentifierError: See :func:`build_blocks`.
            IdentifierCollisionError: See :func:`check_unique`.
        """
        result = build_blocks(scan_fixtures(self.config.inputs_dir))
        check_unique(result.blocks)
        return result

    def render(self, result: GenerationResult) -> str:
        return self.emitter.render(result.blocks)

    def generate(self, stream: TextIO) -> GenerationResult:
        """Full pass: collect fixtures and write the suite to ``stream``."""
        result = self.collect()
        self.emitter.emit(result.blocks, stream)
        return result
