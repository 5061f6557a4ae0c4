"""pytest module renderer (default target)."""

from __future__ import annotations

import json
from string import Template

from json_conformance_suite.types import EmissionBlock, Mode, Procedure

_PREAMBLE = Template('''\
"""JSON parser conformance tests generated from fixture files.

Do not edit by hand; regenerate with ``python -m json_conformance_suite``.
"""

from pathlib import Path

import pytest

from $parser_module import Options, ParseError, parse


class FixtureRejected(Exception):
    """The fixture could not be decoded or was rejected by the parser."""


def decoded_chars(text):
    """Yield ``(byte_offset, char)`` pairs over ``text``."""
    offset = 0
    for char in text:
        yield offset, char
        offset += len(char.encode("utf-8"))


def run_fixture(filename, options):
    buffer = Path(filename).read_bytes()
    try:
        if options.accept_invalid_codepoints:
            text = buffer.decode("utf-8", errors="replace")
        else:
            text = buffer.decode("utf-8")
        parse(filename, decoded_chars(text), options)
    except (UnicodeDecodeError, ParseError) as e:
        raise FixtureRejected(f"{filename}: {e}") from e


STRICT = Options.strict()
FLEXIBLE = Options.flexible()
''')

_OPTIONS = {Mode.STRICT: "STRICT", Mode.FLEXIBLE: "FLEXIBLE"}


class PytestRenderer:
    """Renders the suite as a pytest module.

    Procedures become ``test_<name>`` functions so pytest collects them.
    Expected rejections are asserted with ``pytest.raises(FixtureRejected)``,
    so a fixture the parser wrongly accepts fails the test.

    The parser module must export ``Options`` (with ``strict()``,
    ``flexible()`` and an ``accept_invalid_codepoints`` attribute),
    ``ParseError`` and ``parse(path, chars, options)``.

    Args:
        parser_module: Import path of the parser under test.
    """

    name = "pytest"

    def __init__(self, parser_module: str = "json_syntax") -> None:
        self.parser_module = parser_module

    def preamble(self) -> str:
        return _PREAMBLE.substitute(parser_module=self.parser_module)

    def render_block(self, block: EmissionBlock) -> str:
        path = json.dumps(block.file_path, ensure_ascii=False)
        return "".join(
            self._render_procedure(procedure, path) for procedure in block.procedures
        )

    def _render_procedure(self, procedure: Procedure, path: str) -> str:
        call = f"run_fixture({path}, {_OPTIONS[procedure.mode]})"
        lines = ["", "", f"def test_{procedure.name}():"]
        if procedure.expect_success:
            lines.append(f"    {call}")
        else:
            lines.append("    with pytest.raises(FixtureRejected):")
            lines.append(f"        {call}")
        return "\n".join(lines) + "\n"
