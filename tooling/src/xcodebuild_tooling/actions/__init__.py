"""GitHub Actions I/O: inputs (INPUT_* env or YAML file), outputs, groups, failure."""

from xcodebuild_tooling.actions.inputs import DEFAULT_INPUTS, ActionInputs
from xcodebuild_tooling.actions.outputs import ActionOutputs

__all__ = [
    "DEFAULT_INPUTS",
    "ActionInputs",
    "ActionOutputs",
]
