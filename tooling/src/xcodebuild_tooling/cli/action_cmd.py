"""`xcodebuild-action run|compose` — run the action, or only print the composed commands."""

from __future__ import annotations

import logging
from pathlib import Path

from xcodebuild_tooling.action import run_action
from xcodebuild_tooling.actions import ActionInputs, ActionOutputs
from xcodebuild_tooling.cli.parse_common import parse_flags, path_resolver
from xcodebuild_tooling.errors import ConfigurationError


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def load_inputs(inputs_file: Path | None) -> ActionInputs:
    """Inputs from inputs_file when given, else INPUT_* environment variables."""
    if inputs_file is None:
        return ActionInputs.from_environ()
    if not inputs_file.is_file():
        msg = f"Inputs file not found: {inputs_file}"
        raise ConfigurationError(msg)
    return ActionInputs.from_yaml(inputs_file)


def run_action_argv(argv: list[str], compose_only: bool = False) -> int:
    """Load inputs and run the action. compose_only forces a dry run. Returns exit code."""
    parsed, _ = parse_flags(
        argv,
        ("inputs_file", "--inputs-file", None, path_resolver),
        switches=[("verbose", "--verbose")],
    )
    outputs = ActionOutputs()
    try:
        inputs = load_inputs(parsed["inputs_file"])
    except (ConfigurationError, OSError) as e:
        return outputs.set_failed(str(e))
    configure_logging(parsed["verbose"] or inputs.is_debug())
    return run_action(inputs, outputs, force_dry_run=compose_only)
