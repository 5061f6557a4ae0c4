"""Filename-based fixture classification.

A fixture's category is encoded in its base name: ``y_<rest>.json`` must be
accepted, ``n_<rest>.json`` must be rejected and ``i_<rest>.json`` is
implementation-defined. Anything else has no category and is ignored.
"""

from __future__ import annotations

import os
import re
from pathlib import PurePath

from json_conformance_suite.types import Category

_SUFFIX = ".json"

_PATTERNS: dict[Category, re.Pattern[str]] = {
    Category.Y: re.compile(r"y_.*\.json", re.DOTALL),
    Category.N: re.compile(r"n_.*\.json", re.DOTALL),
    Category.I: re.compile(r"i_.*\.json", re.DOTALL),
}


def base_name(path: str | os.PathLike[str]) -> str:
    """Final path component, split off with the platform path API."""
    return PurePath(path).name


def classify(path: str | os.PathLike[str]) -> Category | None:
    """Return the fixture category for ``path``, or None if it has none.

    Matching is case-sensitive and must cover the whole base name.
    """
    name = base_name(path)
    matches = [
        category for category, pattern in _PATTERNS.items() if pattern.fullmatch(name)
    ]
    if not matches:
        return None
    # Prefixes are disjoint, so at most one pattern can match.
    (category,) = matches
    return category


def fixture_stem(path: str | os.PathLike[str]) -> str:
    """Base name without the ``.json`` suffix; the category prefix is kept."""
    name = base_name(path)
    if name.endswith(_SUFFIX):
        return name[: -len(_SUFFIX)]
    return name
