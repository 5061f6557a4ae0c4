"""Strategy interface for rendering a conformance suite in a target language."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from json_conformance_suite.types import EmissionBlock


@runtime_checkable
class SuiteRenderer(Protocol):
    """Strategy interface for rendering emission blocks as test source.

    Each target test framework has its own declaration syntax.
    Implementations own the preamble text and the per-block template;
    classification and naming happen before a block reaches them.
    """

    name: str

    def preamble(self) -> str:
        """Fixed harness text emitted once at the top of the suite.

        Returns:
            Source text defining the fixture helper and the ``strict`` and
            ``flexible`` parser configurations.
        """
        ...

    def render_block(self, block: EmissionBlock) -> str:
        """Render every procedure of one emission block.

        Args:
            block: The classified, sanitized fixture.

        Returns:
            Source text for the block's procedures, embedding the literal
            fixture path.
        """
        ...
