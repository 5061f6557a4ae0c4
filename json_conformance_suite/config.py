"""Generator configuration: explicit value → environment variable → convention."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from json_conformance_suite.renderer import SuiteRenderer
from json_conformance_suite.renderers import RENDERERS

DEFAULT_INPUTS_DIR = "tests/inputs"
DEFAULT_TARGET = "pytest"
DEFAULT_PARSER_MODULE = "json_syntax"

ENV_INPUTS_DIR = "JSON_CONFORMANCE_INPUTS"
ENV_TARGET = "JSON_CONFORMANCE_TARGET"
ENV_PARSER_MODULE = "JSON_CONFORMANCE_PARSER"


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings for one generation run.

    Args:
        inputs_dir: Directory holding the ``{y|n|i}_*.json`` fixtures.
        target: Renderer name (see ``RENDERERS``).
        parser_module: Module (or crate) the generated suite imports the
                       parser from.
    """

    inputs_dir: str = DEFAULT_INPUTS_DIR
    target: str = DEFAULT_TARGET
    parser_module: str = DEFAULT_PARSER_MODULE

    def __post_init__(self) -> None:
        if not self.inputs_dir or not self.inputs_dir.strip():
            raise ValueError("inputs_dir must not be empty")
        if self.target not in RENDERERS:
            raise ValueError(
                f"unknown target {self.target!r}; expected one of {sorted(RENDERERS)}"
            )
        if not self.parser_module or not self.parser_module.strip():
            raise ValueError("parser_module must not be empty")


def resolve_config(
    inputs: Optional[str] = None,
    target: Optional[str] = None,
    parser_module: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> GeneratorConfig:
    """Build a config, falling back to the environment and then to defaults."""
    env = os.environ if environ is None else environ

    def pick(explicit, name, default):
        # An explicit empty string is kept so validation rejects it.
        if explicit is not None:
            return explicit
        return env.get(name) or default

    return GeneratorConfig(
        inputs_dir=pick(inputs, ENV_INPUTS_DIR, DEFAULT_INPUTS_DIR),
        target=pick(target, ENV_TARGET, DEFAULT_TARGET),
        parser_module=pick(parser_module, ENV_PARSER_MODULE, DEFAULT_PARSER_MODULE),
    )


def renderer_for(config: GeneratorConfig) -> SuiteRenderer:
    return RENDERERS[config.target](parser_module=config.parser_module)
