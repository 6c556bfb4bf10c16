"""Render the full invocation (xcodebuild | xcpretty) as two display strings.

`unprocessed` uses values as supplied, `executed` uses resolved values (absolute
paths). Both are whitespace-escaped so they can be pasted into a shell.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from xcodebuild_tooling.command.arguments import (
    Argument,
    ArgumentValue,
    all_argument_strings,
    argument_value_string,
)

XCODEBUILD = "xcodebuild"
XCPRETTY = "xcpretty"


@dataclass(frozen=True)
class FormatterInvocation:
    """Arguments for the xcpretty process that xcodebuild's stdout is piped into."""

    args: tuple[Argument, ...] = field(default_factory=tuple)

    @classmethod
    def xcpretty(cls, colored: bool) -> FormatterInvocation:
        return cls(args=(Argument(name="--color"),) if colored else ())


@dataclass(frozen=True)
class ComposedCommand:
    unprocessed: str
    executed: str


def invocation_arguments(
    xcodebuild_args: Sequence[Argument],
    formatter: FormatterInvocation | None = None,
) -> list[Argument]:
    """Pseudo-arguments for the whole pipeline, used for display only."""
    out = [Argument(name=XCODEBUILD), *xcodebuild_args]
    if formatter is not None:
        out.append(Argument(name="|"))
        out.append(Argument(name=XCPRETTY))
        out.extend(formatter.args)
    return out


def _in_directory(invocation: list[str], directory: ArgumentValue, use_resolved_value: bool) -> list[str]:
    return [
        "pushd",
        argument_value_string(directory, use_resolved_value, escape_value=True),
        "&&",
        *invocation,
        ";",
        "popd",
    ]


def render_command(
    xcodebuild_args: Sequence[Argument],
    formatter: FormatterInvocation | None = None,
    working_directory: ArgumentValue | None = None,
) -> ComposedCommand:
    """Both display strings. working_directory wraps them in pushd/popd (package builds)."""
    arguments = invocation_arguments(xcodebuild_args, formatter)
    unprocessed = all_argument_strings(arguments, use_resolved_value=False, escape_value=True)
    executed = all_argument_strings(arguments, use_resolved_value=True, escape_value=True)
    if working_directory is not None:
        unprocessed = _in_directory(unprocessed, working_directory, use_resolved_value=False)
        executed = _in_directory(executed, working_directory, use_resolved_value=True)
    return ComposedCommand(unprocessed=" ".join(unprocessed), executed=" ".join(executed))
