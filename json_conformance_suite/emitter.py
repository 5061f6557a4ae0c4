"""Two-phase suite emission: preamble once, then one block per fixture."""

from __future__ import annotations

from typing import Iterable, TextIO

from json_conformance_suite.renderer import SuiteRenderer
from json_conformance_suite.types import EmissionBlock


class TestEmitter:
    """Writes a rendered suite to a text stream in strict order.

    Args:
        renderer: Target-language renderer.
    """

    __test__ = False  # not a pytest test class

    def __init__(self, renderer: SuiteRenderer) -> None:
        self.renderer = renderer

    def render(self, blocks: Iterable[EmissionBlock]) -> str:
        parts = [self.renderer.preamble()]
        parts.extend(self.renderer.render_block(block) for block in blocks)
        return "".join(parts)

    def emit(self, blocks: Iterable[EmissionBlock], stream: TextIO) -> None:
        """Render fully, then write, so a failure never leaves a partial suite."""
        stream.write(self.render(blocks))
