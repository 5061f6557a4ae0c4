"""Core types for the JSON conformance suite generator."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class Category(str, enum.Enum):
    """Conformance class encoded in a fixture's filename prefix."""

    Y = "y"  # must accept
    N = "n"  # must reject
    I = "i"  # noqa: E741 - implementation-defined


class Mode(str, enum.Enum):
    """Named parser configuration a procedure runs under."""

    STRICT = "strict"
    FLEXIBLE = "flexible"


@dataclass(frozen=True)
class FixtureFile:
    """A candidate fixture found by the scanner.

    Args:
        path: Path of the file as listed (directory joined with the name).
        base_name: Final path component.
    """

    path: str
    base_name: str

    def __post_init__(self) -> None:
        if not self.base_name:
            raise ValueError("base_name must not be empty")


@dataclass(frozen=True)
class Procedure:
    """One rendered test procedure.

    Args:
        name: Procedure identifier in the target language.
        mode: Parser configuration to run the fixture under.
        expect_success: True if the fixture must parse, False if the
                        procedure expects the parse to be rejected.
    """

    name: str
    mode: Mode
    expect_success: bool


@dataclass(frozen=True)
class EmissionBlock:
    """One fixture's worth of rendered test output.

    Args:
        identifier: Sanitized test identifier.
        category: Conformance class of the fixture.
        file_path: Literal fixture path embedded in the rendered procedures.
    """

    identifier: str
    category: Category
    file_path: str

    @property
    def procedures(self) -> list[Procedure]:
        """Procedures this block renders: one for Y and N, two for I."""
        if self.category is Category.Y:
            return [Procedure(self.identifier, Mode.STRICT, True)]
        if self.category is Category.N:
            return [Procedure(self.identifier, Mode.STRICT, False)]
        return [
            Procedure(f"flexible_{self.identifier}", Mode.FLEXIBLE, True),
            Procedure(f"strict_{self.identifier}", Mode.STRICT, False),
        ]


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of a generation pass.

    Args:
        blocks: Emission blocks in output order.
        skipped: Paths of scanned files that matched no category.
    """

    blocks: list[EmissionBlock] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def procedure_count(self) -> int:
        return sum(len(block.procedures) for block in self.blocks)
