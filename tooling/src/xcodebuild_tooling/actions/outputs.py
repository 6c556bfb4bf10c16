"""Action outputs, log groups and failure reporting.

Under GitHub Actions (GITHUB_ACTIONS=true) these are workflow commands
(::group::, ::error::, GITHUB_OUTPUT file); elsewhere plain text so local runs
stay readable.
"""

from __future__ import annotations

import os
import sys
import uuid
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path


class ActionOutputs:
    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env = os.environ if env is None else env

    @property
    def in_actions(self) -> bool:
        return self._env.get("GITHUB_ACTIONS") == "true"

    def info(self, message: str) -> None:
        print(message)

    def set_output(self, name: str, value: str) -> None:
        """Set step output `name`. Appends to $GITHUB_OUTPUT when available."""
        output_file = self._env.get("GITHUB_OUTPUT")
        if output_file:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            with Path(output_file).open("a", encoding="utf-8") as f:
                f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
        elif self.in_actions:
            print(f"::set-output name={name}::{value}")
        else:
            print(f"{name}={value}")

    @contextmanager
    def group(self, title: str) -> Iterator[None]:
        """Collapsible log section; closed even when the body raises."""
        if self.in_actions:
            print(f"::group::{title}")
        else:
            print(f"== {title} ==")
        try:
            yield
        finally:
            if self.in_actions:
                print("::endgroup::")

    def set_failed(self, message: str) -> int:
        """Report the run as failed. Returns the process exit code (1)."""
        if self.in_actions:
            print(f"::error::{message}")
        else:
            print(f"Error: {message}", file=sys.stderr)
        return 1
