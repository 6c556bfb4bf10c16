"""Errors raised while composing or running an xcodebuild invocation.

All of them are fatal for the run; the action driver reports them through
the same failure channel (see xcodebuild_tooling.action.run_action).
"""

from __future__ import annotations


class ActionError(Exception):
    """Base class for errors that fail the action."""


class ConfigurationError(ActionError, ValueError):
    """Inputs violate a rule (missing required, mutually exclusive, bad boolean)."""


class PlatformError(ActionError):
    """Host platform cannot run xcodebuild."""


class ExecutionError(ActionError):
    """xcodebuild (or its formatter) finished with a non-zero status."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"Xcodebuild action failed ({code})!")
