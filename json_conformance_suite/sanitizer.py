"""Fixture name → test procedure identifier."""

from __future__ import annotations

import re

# Applied in order; earlier substitutions introduce the underscores that the
# collapse step merges.
_REPLACEMENTS = (
    ("UTF-8", "utf8"),
    ("U+", "u"),
    ("+", "_plus_"),
    ("-", "_minus_"),
)
_SEPARATORS = re.compile(r"[.#]")
_UNDERSCORE_RUN = re.compile(r"_+")
_IDENTIFIER = re.compile(r"[a-z_][a-z0-9_]*", re.ASCII)


def sanitize(name: str) -> str:
    """Turn a fixture name into a lower-case identifier.

    Characters outside ``[A-Za-z0-9._+#-]`` are passed through unchanged;
    use :func:`is_valid_identifier` to check the result.

    >>> sanitize("n_structure_U+2060_word_joined")
    'n_structure_u2060_word_joined'
    """
    for old, new in _REPLACEMENTS:
        name = name.replace(old, new)
    name = _SEPARATORS.sub("_", name)
    name = _UNDERSCORE_RUN.sub("_", name)
    return name.lower()


def is_valid_identifier(identifier: str) -> bool:
    """True if ``identifier`` is ASCII ``[a-z0-9_]`` and does not start with a digit."""
    return _IDENTIFIER.fullmatch(identifier) is not None
