"""Command-line argument model and rendering.

An Argument is a name (already carrying any `-` prefix) plus an optional
value. Values keep both the string as supplied and its resolved form (e.g. an
absolute path) so the command can be rendered either way from one list.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

# Whitespace not already escaped by a backslash.
_UNESCAPED_WHITESPACE = re.compile(r"(?<!\\)(\s)")


@dataclass(frozen=True)
class ArgumentValue:
    original_value: str
    resolved_value: str

    @classmethod
    def plain(cls, value: str) -> ArgumentValue:
        """Value whose resolved form is the original string."""
        return cls(original_value=value, resolved_value=value)


@dataclass(frozen=True)
class Argument:
    name: str
    value: ArgumentValue | None = None


def escape_whitespace(text: str) -> str:
    """Prefix every unescaped whitespace character with a backslash (`a b` -> `a\\ b`)."""
    return _UNESCAPED_WHITESPACE.sub(r"\\\1", text)


def argument_value_string(
    value: ArgumentValue,
    use_resolved_value: bool = True,
    escape_value: bool = False,
) -> str:
    text = value.resolved_value if use_resolved_value else value.original_value
    return escape_whitespace(text) if escape_value else text


def argument_strings(
    argument: Argument,
    use_resolved_value: bool = True,
    escape_value: bool = False,
) -> list[str]:
    """[name] or [name, value] for one argument."""
    out = [argument.name]
    if argument.value is not None:
        out.append(argument_value_string(argument.value, use_resolved_value, escape_value))
    return out


def all_argument_strings(
    arguments: Iterable[Argument],
    use_resolved_value: bool = True,
    escape_value: bool = False,
) -> list[str]:
    """Flatten arguments in order, name before value within each."""
    return [
        s
        for argument in arguments
        for s in argument_strings(argument, use_resolved_value, escape_value)
    ]
