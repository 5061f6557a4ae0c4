"""Target-language renderers for the conformance suite."""

from json_conformance_suite.renderers.pytest_module import PytestRenderer
from json_conformance_suite.renderers.rust import RustRenderer

RENDERERS = {
    PytestRenderer.name: PytestRenderer,
    RustRenderer.name: RustRenderer,
}

__all__ = ["RENDERERS", "PytestRenderer", "RustRenderer"]
