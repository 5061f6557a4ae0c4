"""Fixture directory enumeration."""

from __future__ import annotations

import os
from pathlib import Path

from json_conformance_suite.exceptions import FixtureScanError
from json_conformance_suite.types import FixtureFile


def scan_fixtures(directory: str | os.PathLike[str]) -> list[FixtureFile]:
    """List the regular files directly inside ``directory``.

    No recursion; subdirectories are skipped. Order is whatever the file
    system reports.

    Raises:
        FixtureScanError: If the directory does not exist or cannot be read.
    """
    root = Path(directory)
    try:
        with os.scandir(root) as entries:
            return [
                FixtureFile(path=(root / entry.name).as_posix(), base_name=entry.name)
                for entry in entries
                if entry.is_file()
            ]
    except OSError as e:
        raise FixtureScanError(f"cannot scan fixture directory {root}: {e}") from e
