"""Action inputs: GitHub Actions INPUT_* environment variables or a YAML inputs file.

Inputs file YAML format (for running outside of a workflow):
- a flat mapping of input name -> value, using the same names as the action
  (`project`, `scheme`, `only-testing`, `use-xcpretty`, ...)
- booleans may be written as YAML booleans; lists (only-testing, skip-testing)
  may be written as YAML sequences or as a multi-line string
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from xcodebuild_tooling.errors import ConfigurationError

log = logging.getLogger(__name__)

# Defaults from the action metadata; applied when an input is absent.
DEFAULT_INPUTS: dict[str, str] = {
    "action": "build",
    "use-xcpretty": "true",
    "xcpretty-colored-output": "true",
    "dry-run": "false",
}

TRUE_VALUES = ("true", "True", "TRUE")
FALSE_VALUES = ("false", "False", "FALSE")


def _input_key(name: str) -> str:
    # INPUT_SPM-PACKAGE (runner) and INPUT_SPM_PACKAGE (composite env) name the same input.
    return name.replace(" ", "_").replace("-", "_").lower()


def _scalar_to_str(value: Any) -> str:
    """YAML scalar -> input string (booleans as true/false, null as empty)."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return "\n".join(_scalar_to_str(v) for v in value)
    return str(value)


def resolve_inputs(values: Mapping[str, str] | None) -> dict[str, str]:
    """Return input dict with defaults filled and keys normalized."""
    out = {_input_key(k): v for k, v in DEFAULT_INPUTS.items()}
    if values:
        out.update({_input_key(k): v for k, v in values.items()})
    return out


class ActionInputs:
    """Read-only view over the named inputs of one run."""

    def __init__(
        self,
        values: Mapping[str, str] | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        self._values = resolve_inputs(values)
        self._env = os.environ if env is None else env

    @classmethod
    def from_environ(cls, env: Mapping[str, str] | None = None) -> ActionInputs:
        """Inputs from INPUT_<NAME> variables, as set by the Actions runner."""
        if env is None:
            env = os.environ
        values = {k[len("INPUT_") :]: v for k, v in env.items() if k.startswith("INPUT_")}
        return cls(values, env=env)

    @classmethod
    def from_yaml(cls, path: Path, env: Mapping[str, str] | None = None) -> ActionInputs:
        """Inputs from a YAML mapping file. Raises ConfigurationError if it is not a mapping."""
        try:
            with path.open() as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            msg = f"Could not parse inputs file {path}: {e}"
            raise ConfigurationError(msg) from e
        if not isinstance(data, dict):
            msg = f"Inputs file must contain a mapping of input names to values: {path}"
            raise ConfigurationError(msg)
        log.debug("Loaded %d inputs from %s", len(data), path)
        return cls({str(k): _scalar_to_str(v) for k, v in data.items()}, env=env)

    def get_input(self, name: str, required: bool = False) -> str:
        """Trimmed input value; empty string if unset. Raises ConfigurationError if required and unset."""
        value = self._values.get(_input_key(name), "")
        if required and not value:
            msg = f"Input required and not supplied: {name}"
            raise ConfigurationError(msg)
        return value.strip()

    def get_multiline_input(self, name: str, required: bool = False) -> list[str]:
        """Non-empty lines of the input, each trimmed."""
        lines = [line for line in self.get_input(name, required=required).split("\n") if line != ""]
        return [line.strip() for line in lines]

    def get_boolean_input(self, name: str, required: bool = False) -> bool:
        """YAML 1.2 core schema boolean. Raises ConfigurationError for anything else."""
        value = self.get_input(name, required=required)
        if value in TRUE_VALUES:
            return True
        if value in FALSE_VALUES:
            return False
        msg = (
            f"Input does not meet YAML 1.2 \"Core Schema\" specification: {name}\n"
            "Support boolean input list: `true | True | TRUE | false | False | FALSE`"
        )
        raise ConfigurationError(msg)

    def is_debug(self) -> bool:
        """True when the runner has step debug logging enabled (RUNNER_DEBUG=1)."""
        return self._env.get("RUNNER_DEBUG") == "1"
