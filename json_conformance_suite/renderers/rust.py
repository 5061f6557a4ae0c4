"""Rust (cargo test) renderer for the ``json_syntax`` crate."""

from __future__ import annotations

from string import Template

from json_conformance_suite.types import EmissionBlock, Procedure

_PREAMBLE = Template("""\
use std::path::Path;
use std::fs;
use std::fmt::Debug;
use $parser_module::{Value, Parse, parse::Options};
use decoded_char::DecodedChars;

fn infallible<T>(t: T) -> Result<T, std::convert::Infallible> {
\tOk(t)
}

fn test<P: Clone + AsRef<Path> + Debug>(filename: P, options: Options) {
\tlet buffer = fs::read(filename.clone()).unwrap();
\tlet input = if options.accept_invalid_codepoints {
\t\tString::from_utf8_lossy(&buffer)
\t} else {
\t\tstd::borrow::Cow::Borrowed(std::str::from_utf8(&buffer).unwrap())
\t};

\tValue::parse_with(filename, input.decoded_chars().map(infallible), options).expect("parse error");
}
""")


def _rust_string(value: str) -> str:
    out = []
    for char in value:
        if char in ('"', "\\"):
            out.append("\\" + char)
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            out.append(f"\\u{{{ord(char):x}}}")
        else:
            out.append(char)
    return '"' + "".join(out) + '"'


class RustRenderer:
    """Renders the suite as a Rust integration test file.

    Procedures keep their bare names. Expected rejections are marked
    ``#[should_panic]``: the shared ``test`` helper panics on decode or
    parse errors.

    Args:
        parser_module: Crate path exporting ``Value``, ``Parse`` and
                       ``parse::Options``.
    """

    name = "rust"

    def __init__(self, parser_module: str = "json_syntax") -> None:
        self.parser_module = parser_module

    def preamble(self) -> str:
        return _PREAMBLE.substitute(parser_module=self.parser_module)

    def render_block(self, block: EmissionBlock) -> str:
        path = _rust_string(block.file_path)
        return "".join(
            self._render_procedure(procedure, path) for procedure in block.procedures
        )

    def _render_procedure(self, procedure: Procedure, path: str) -> str:
        lines = ["", "#[test]"]
        if not procedure.expect_success:
            lines.append("#[should_panic]")
        lines += [
            f"fn {procedure.name}() {{",
            f"\ttest({path}, Options::{procedure.mode.value}())",
            "}",
        ]
        return "\n".join(lines) + "\n"
