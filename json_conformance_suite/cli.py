"""Command-line entry point.

Usage:
    python -m json_conformance_suite [--inputs DIR] [--target {pytest,rust}]
        [--parser-module NAME] [--output FILE] [--manifest FILE] [--check]

With no arguments, reads ``tests/inputs`` and writes a pytest suite to stdout.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from json_conformance_suite.config import resolve_config
from json_conformance_suite.exceptions import GeneratorError
from json_conformance_suite.generator import SuiteGenerator
from json_conformance_suite.manifest import build_manifest, dump_manifest
from json_conformance_suite.renderers import RENDERERS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json-conformance-suite",
        description="Generate JSON parser conformance tests from y_/n_/i_ fixture files",
    )
    parser.add_argument("--inputs", help="Fixture directory (default: tests/inputs)")
    parser.add_argument(
        "--target",
        choices=sorted(RENDERERS),
        help="Test framework to render for (default: pytest)",
    )
    parser.add_argument(
        "--parser-module",
        help="Module the generated suite imports the parser from (default: json_syntax)",
    )
    parser.add_argument("--output", help="Write the suite here instead of stdout")
    parser.add_argument("--manifest", help="Also write a JSON manifest of the suite")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Exit 1 if --output is missing or out of date; write nothing",
    )
    return parser


def _write_outputs(
    text: str,
    output: Optional[str],
    manifest_text: Optional[str],
    manifest: Optional[str],
) -> None:
    """Write the manifest, then the suite; drop the manifest if the suite fails."""
    if manifest_text is not None:
        Path(manifest).write_text(manifest_text, encoding="utf-8")
    try:
        if output:
            Path(output).write_bytes(text.encode("utf-8"))
        else:
            sys.stdout.write(text)
    except OSError:
        if manifest_text is not None:
            Path(manifest).unlink(missing_ok=True)
        raise


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.check and not args.output:
        parser.error("--check requires --output")
    if args.check and args.manifest:
        parser.error("--check cannot be combined with --manifest")

    try:
        config = resolve_config(
            inputs=args.inputs, target=args.target, parser_module=args.parser_module
        )
    except ValueError as e:
        parser.error(str(e))

    generator = SuiteGenerator(config)
    try:
        result = generator.collect()
        text = generator.render(result)

        if args.check:
            output = Path(args.output)
            current = output.read_bytes() if output.is_file() else None
            if current != text.encode("utf-8"):
                print(f"Error: {output} is out of date; regenerate it", file=sys.stderr)
                return 1
            print(f"{output} is up to date", file=sys.stderr)
            return 0

        # Nothing is written until both documents are known to be valid.
        manifest_text = None
        if args.manifest:
            manifest_text = dump_manifest(build_manifest(result, config))
        _write_outputs(text, args.output, manifest_text, args.manifest)
    except (GeneratorError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(
        f"Generated {result.procedure_count} procedures from {len(result.blocks)} "
        f"fixtures ({len(result.skipped)} skipped) for target {config.target}",
        file=sys.stderr,
    )
    return 0

