"""Exception hierarchy for the JSON conformance suite generator."""

from __future__ import annotations


class GeneratorError(RuntimeError):
    """Base exception for unrecoverable generation failures."""


class FixtureScanError(GeneratorError):
    """The fixture directory is missing or cannot be listed."""


class IdentifierCollisionError(GeneratorError):
    """Two fixtures sanitize to the same test identifier.

    Args:
        collisions: Colliding name → fixture paths that produce it.
    """

    def __init__(self, collisions: dict[str, list[str]]) -> None:
        self.collisions = collisions
        details = "; ".join(
            f"{name}: {', '.join(paths)}" for name, paths in sorted(collisions.items())
        )
        super().__init__(f"duplicate test identifiers: {details}")


class InvalidIdentifierError(GeneratorError):
    """A sanitized fixture name is not a usable procedure identifier."""

    def __init__(self, path: str, identifier: str) -> None:
        self.path = path
        self.identifier = identifier
        super().__init__(
            f"{path}: sanitized name {identifier!r} is not a valid identifier"
        )


class ManifestValidationError(GeneratorError):
    """Generated manifest does not conform to the manifest schema."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("invalid manifest: " + "; ".join(errors))
