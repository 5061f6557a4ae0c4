"""Tests for the command-line entry point."""

import json
from unittest.mock import patch

import pytest

from json_conformance_suite.cli import main
from json_conformance_suite.config import ENV_INPUTS_DIR, ENV_PARSER_MODULE, ENV_TARGET


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (ENV_INPUTS_DIR, ENV_TARGET, ENV_PARSER_MODULE):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def conventional_layout(tmp_path, monkeypatch):
    """cwd containing tests/inputs with a few fixtures."""
    inputs = tmp_path / "tests" / "inputs"
    inputs.mkdir(parents=True)
    for name in ("y_a.json", "n_b.json", "i_c.json", "readme.txt"):
        (inputs / name).write_text("[]")
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestDefaultInvocation:
    def test_no_arguments_writes_suite_to_stdout(self, conventional_layout, capsys):
        assert main([]) == 0
        captured = capsys.readouterr()
        assert "from json_syntax import Options, ParseError, parse" in captured.out
        assert 'run_fixture("tests/inputs/y_a.json", STRICT)' in captured.out
        assert "def test_strict_i_c():" in captured.out
        assert "Generated 4 procedures from 3 fixtures (1 skipped)" in captured.err

    def test_missing_inputs_exits_nonzero_without_output(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        assert main([]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error: cannot scan fixture directory")

    def test_environment_inputs(self, make_inputs, tmp_path, monkeypatch, capsys):
        directory = make_inputs(["y_env.json"], dirname="elsewhere")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv(ENV_INPUTS_DIR, str(directory))
        assert main([]) == 0
        assert "def test_y_env():" in capsys.readouterr().out


class TestOptions:
    def test_rust_target_to_file(self, conventional_layout, capsys):
        assert main(["--target", "rust", "--output", "parse.rs"]) == 0
        text = (conventional_layout / "parse.rs").read_text(encoding="utf-8")
        assert "#[should_panic]\nfn strict_i_c() {" in text
        assert capsys.readouterr().out == ""

    def test_parser_module(self, conventional_layout, capsys):
        assert main(["--parser-module", "my_json"]) == 0
        assert "from my_json import" in capsys.readouterr().out

    def test_unknown_target_is_usage_error(self, conventional_layout):
        with pytest.raises(SystemExit) as exc_info:
            main(["--target", "junit"])
        assert exc_info.value.code == 2

    def test_manifest(self, conventional_layout):
        assert main(["--output", "suite.py", "--manifest", "manifest.json"]) == 0
        doc = json.loads((conventional_layout / "manifest.json").read_text())
        assert [f["id"] for f in doc["fixtures"]] == ["i_c", "n_b", "y_a"]

    def test_invalid_identifier_reported(self, conventional_layout, capsys):
        (conventional_layout / "tests" / "inputs" / "n_<odd>.json").write_text("")
        assert main([]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "not a valid identifier" in captured.err


class TestCheck:
    def test_requires_output(self, conventional_layout):
        with pytest.raises(SystemExit) as exc_info:
            main(["--check"])
        assert exc_info.value.code == 2

    def test_up_to_date(self, conventional_layout):
        assert main(["--output", "suite.py"]) == 0
        assert main(["--output", "suite.py", "--check"]) == 0

    def test_stale_after_new_fixture(self, conventional_layout, capsys):
        assert main(["--output", "suite.py"]) == 0
        (conventional_layout / "tests" / "inputs" / "y_new.json").write_text("[]")
        before = (conventional_layout / "suite.py").read_text()
        assert main(["--output", "suite.py", "--check"]) == 1
        assert "out of date" in capsys.readouterr().err
        assert (conventional_layout / "suite.py").read_text() == before

    def test_missing_output_is_stale(self, conventional_layout):
        assert main(["--output", "suite.py", "--check"]) == 1

    def test_undecodable_output_is_stale(self, conventional_layout, capsys):
        (conventional_layout / "suite.py").write_bytes(b"\xff\xfe garbage")
        assert main(["--output", "suite.py", "--check"]) == 1
        assert "out of date" in capsys.readouterr().err

    def test_manifest_rejected(self, conventional_layout):
        with pytest.raises(SystemExit) as exc_info:
            main(["--output", "suite.py", "--check", "--manifest", "m.json"])
        assert exc_info.value.code == 2


class TestWriteFailures:
    """A failed run leaves neither the suite nor the manifest behind."""

    def test_unwritable_output(self, conventional_layout, capsys):
        assert main(["--output", "nodir/suite.py"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error:")

    def test_unwritable_manifest_writes_no_suite(self, conventional_layout, capsys):
        assert main(["--output", "suite.py", "--manifest", "nodir/m.json"]) == 1
        assert not (conventional_layout / "suite.py").exists()
        assert capsys.readouterr().err.startswith("Error:")

    def test_unwritable_manifest_writes_nothing_to_stdout(self, conventional_layout, capsys):
        assert main(["--manifest", "nodir/m.json"]) == 1
        assert capsys.readouterr().out == ""

    def test_invalid_manifest_writes_nothing(self, conventional_layout, capsys):
        from json_conformance_suite.exceptions import ManifestValidationError

        with patch(
            "json_conformance_suite.cli.dump_manifest",
            side_effect=ManifestValidationError(["<root>: broken"]),
        ):
            assert main(["--output", "suite.py", "--manifest", "m.json"]) == 1
        assert not (conventional_layout / "suite.py").exists()
        assert not (conventional_layout / "m.json").exists()
        assert "invalid manifest" in capsys.readouterr().err

    def test_suite_failure_removes_manifest(self, conventional_layout):
        assert main(["--output", "nodir/suite.py", "--manifest", "m.json"]) == 1
        assert not (conventional_layout / "m.json").exists()
