"""Shared CLI argument parsing for common flags (--inputs-file, --verbose)."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any


def parse_flags(
    argv: list[str],
    *specs: tuple[str, str, Any, Callable[[str], Any] | None],
    switches: Sequence[tuple[str, str]] = (),
) -> tuple[dict[str, Any], list[str]]:
    """Parse optional `--flag value` options and bare `--switch` options from argv in one pass.

    Each spec is (key, flag_str, default, converter); converter can be None for
    string values. Each switch is (key, flag_str) and yields True when present.
    Unrecognized arguments are returned in order as the remaining argv.
    """
    result: dict[str, Any] = {key: default() if callable(default) else default for key, _f, default, _c in specs}
    result.update({key: False for key, _flag in switches})
    by_flag = {flag: (key, converter) for key, flag, _default, converter in specs}
    switch_keys = {flag: key for key, flag in switches}

    rest: list[str] = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg in switch_keys:
            result[switch_keys[arg]] = True
            i += 1
        elif arg in by_flag and i + 1 < len(argv):
            key, converter = by_flag[arg]
            result[key] = converter(argv[i + 1]) if converter else argv[i + 1]
            i += 2
        else:
            rest.append(arg)
            i += 1
    return result, rest


def path_resolver(s: str) -> Path:
    """Resolve a path argument to absolute Path (e.g. --inputs-file)."""
    return Path(s).resolve()
