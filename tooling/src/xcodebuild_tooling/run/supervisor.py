"""Run xcodebuild, optionally piping its stdout through xcpretty, and settle one exit status.

States: NOT_STARTED -> PRIMARY_RUNNING -> (SECONDARY_RUNNING) -> SETTLED.
The primary (xcodebuild) is always waited on first. A non-zero primary status
wins; a successful primary defers to the formatter's status.

There is no timeout: both processes are expected to exit on their own.
"""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any

from xcodebuild_tooling.command.arguments import Argument, all_argument_strings
from xcodebuild_tooling.command.render import XCODEBUILD, XCPRETTY, FormatterInvocation
from xcodebuild_tooling.run.signals import status_for_signal

log = logging.getLogger(__name__)

PopenFactory = Callable[..., Any]


class SupervisorState(Enum):
    NOT_STARTED = "not_started"
    PRIMARY_RUNNING = "primary_running"
    SECONDARY_RUNNING = "secondary_running"
    SETTLED = "settled"


def settled_status(returncode: int | None) -> int:
    """Exit code if non-zero, mapped signal number if killed (negative returncode), else 0."""
    if not returncode:
        return 0
    if returncode < 0:
        return status_for_signal(-returncode)
    return returncode


def combine_statuses(primary: int, secondary: int | None) -> int:
    """Primary failure wins; primary success defers to the secondary (if any)."""
    if primary != 0 or secondary is None:
        return primary
    return secondary


class XcodebuildSupervisor:
    def __init__(
        self,
        arguments: Sequence[Argument],
        formatter: FormatterInvocation | None = None,
        cwd: str | os.PathLike[str] | None = None,
        popen: PopenFactory = subprocess.Popen,
    ) -> None:
        self.arguments = list(arguments)
        self.formatter = formatter
        self.cwd = os.fspath(cwd) if cwd is not None else None
        self._popen = popen
        self._primary: Any = None
        self._secondary: Any = None
        self.state = SupervisorState.NOT_STARTED
        self.status: int | None = None

    def start(self) -> None:
        """Spawn xcodebuild and, if configured, xcpretty reading its stdout. OSError propagates."""
        if self.state is not SupervisorState.NOT_STARTED:
            msg = f"Supervisor already started (state={self.state.value})"
            raise RuntimeError(msg)
        cmd = [XCODEBUILD, *all_argument_strings(self.arguments)]
        log.debug("Spawning %s (cwd=%s)", cmd, self.cwd)
        self._primary = self._popen(
            cmd,
            stdout=subprocess.PIPE if self.formatter is not None else None,
            cwd=self.cwd,
        )
        self.state = SupervisorState.PRIMARY_RUNNING
        if self.formatter is None:
            return

        formatter_cmd = [XCPRETTY, *all_argument_strings(self.formatter.args)]
        log.debug("Spawning %s", formatter_cmd)
        try:
            self._secondary = self._popen(formatter_cmd, stdin=self._primary.stdout, cwd=self.cwd)
        except OSError:
            self._primary.kill()
            self._primary.wait()
            raise
        # xcpretty owns the read end now; xcodebuild gets SIGPIPE if it exits early.
        self._primary.stdout.close()
        self.state = SupervisorState.SECONDARY_RUNNING

    def wait(self) -> int:
        """Wait for xcodebuild, then xcpretty; return the combined status."""
        if self.state is SupervisorState.SETTLED:
            return self.status
        if self.state is SupervisorState.NOT_STARTED:
            msg = "Supervisor not started"
            raise RuntimeError(msg)

        primary = settled_status(self._primary.wait())
        log.debug("%s settled with %d", XCODEBUILD, primary)
        secondary = None
        if self._secondary is not None:
            secondary = settled_status(self._secondary.wait())
            log.debug("%s settled with %d", XCPRETTY, secondary)

        self.status = combine_statuses(primary, secondary)
        self.state = SupervisorState.SETTLED
        return self.status

    def run(self) -> int:
        self.start()
        return self.wait()


def run_xcodebuild(
    arguments: Sequence[Argument],
    formatter: FormatterInvocation | None = None,
    cwd: str | os.PathLike[str] | None = None,
    popen: PopenFactory = subprocess.Popen,
) -> int:
    """Run the pipeline to completion. Returns the combined status (0 on success)."""
    return XcodebuildSupervisor(arguments, formatter=formatter, cwd=cwd, popen=popen).run()
