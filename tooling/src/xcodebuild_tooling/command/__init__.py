"""xcodebuild command composition: argument model, builder from inputs, display rendering."""

from xcodebuild_tooling.command.arguments import (
    Argument,
    ArgumentValue,
    all_argument_strings,
    argument_strings,
    argument_value_string,
    escape_whitespace,
)
from xcodebuild_tooling.command.builder import (
    Selector,
    XcodebuildArgumentBuilder,
    build_xcodebuild_arguments,
    read_selector,
    resolve_path,
)
from xcodebuild_tooling.command.render import (
    ComposedCommand,
    FormatterInvocation,
    invocation_arguments,
    render_command,
)

__all__ = [
    "Argument",
    "ArgumentValue",
    "ComposedCommand",
    "FormatterInvocation",
    "Selector",
    "XcodebuildArgumentBuilder",
    "all_argument_strings",
    "argument_strings",
    "argument_value_string",
    "build_xcodebuild_arguments",
    "escape_whitespace",
    "invocation_arguments",
    "read_selector",
    "render_command",
    "resolve_path",
]
