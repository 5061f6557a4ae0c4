"""Shared pytest fixtures for the conformance suite generator tests.

Builds throwaway fixture directories under ``tmp_path`` and loads the
JSONTestSuite name table from tests/data/.
"""

import pytest

from _corpus import CORPUS_NAMES


# ---------------------------------------------------------------------------
# Pytest fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_inputs(tmp_path):
    """Factory: create an inputs directory holding the given files.

    Accepts a mapping of file name → contents (str or bytes) or an iterable
    of names (created empty).
    """

    def _make(files, dirname="inputs"):
        directory = tmp_path / dirname
        directory.mkdir(parents=True, exist_ok=True)
        items = files.items() if isinstance(files, dict) else ((n, b"") for n in files)
        for name, contents in items:
            data = contents.encode("utf-8") if isinstance(contents, str) else contents
            (directory / name).write_bytes(data)
        return directory

    return _make


@pytest.fixture
def corpus_inputs(make_inputs):
    """Inputs directory with every fixture name from the real corpus, plus noise."""
    return make_inputs(CORPUS_NAMES + ["readme.txt", "LICENSE", "Y_upper_prefix.json"])
