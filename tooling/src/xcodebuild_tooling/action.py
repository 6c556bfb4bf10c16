"""The xcodebuild action: validate inputs, compose the command, run it.

Every failure (bad inputs, wrong platform, spawn error, non-zero status) ends in
ActionOutputs.set_failed and exit code 1.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from dataclasses import dataclass

from xcodebuild_tooling.actions import ActionInputs, ActionOutputs
from xcodebuild_tooling.command import (
    Argument,
    ArgumentValue,
    ComposedCommand,
    FormatterInvocation,
    Selector,
    build_xcodebuild_arguments,
    read_selector,
    render_command,
    resolve_path,
)
from xcodebuild_tooling.errors import ActionError, ExecutionError, PlatformError
from xcodebuild_tooling.run import run_xcodebuild
from xcodebuild_tooling.run.supervisor import PopenFactory

log = logging.getLogger(__name__)

SUPPORTED_PLATFORM = "darwin"


@dataclass(frozen=True)
class ActionPlan:
    selector: Selector
    arguments: list[Argument]
    formatter: FormatterInvocation | None
    dry_run: bool

    @property
    def working_directory(self) -> ArgumentValue | None:
        """Package directory that xcodebuild runs in, for spm-package builds."""
        if not self.selector.spm_package:
            return None
        package = self.selector.spm_package
        return ArgumentValue(original_value=package, resolved_value=resolve_path(package))


def is_dry_run(inputs: ActionInputs) -> bool:
    """dry-run is only honoured with runner debug logging on."""
    return inputs.is_debug() and inputs.get_input("dry-run") == "true"


def prepare(
    inputs: ActionInputs,
    platform: str | None = None,
    force_dry_run: bool = False,
) -> ActionPlan:
    """Validate inputs and build the argument list. Raises ConfigurationError / PlatformError."""
    selector = read_selector(inputs)
    arguments = build_xcodebuild_arguments(inputs, selector=selector)

    use_xcpretty = inputs.get_boolean_input("use-xcpretty", required=True)
    colored = use_xcpretty and inputs.get_boolean_input("xcpretty-colored-output", required=True)
    dry_run = force_dry_run or is_dry_run(inputs)

    # Other platforms are allowed for dry runs.
    if platform is None:
        platform = sys.platform
    if not dry_run and platform != SUPPORTED_PLATFORM:
        msg = "This action only supports macOS!"
        raise PlatformError(msg)

    formatter = FormatterInvocation.xcpretty(colored) if use_xcpretty else None
    return ActionPlan(selector=selector, arguments=arguments, formatter=formatter, dry_run=dry_run)


def compose(plan: ActionPlan, outputs: ActionOutputs) -> ComposedCommand:
    """Render both command strings, publish them as outputs and log them."""
    command = render_command(plan.arguments, plan.formatter, plan.working_directory)
    outputs.set_output("unprocessed-command", command.unprocessed)
    outputs.set_output("executed-command", command.executed)
    outputs.info(f"Resolving paths for execution in: `{command.unprocessed}`")
    outputs.info(f"Executing: `{command.executed}`")
    return command


def execute(plan: ActionPlan, popen: PopenFactory = subprocess.Popen) -> None:
    """Run xcodebuild for plan. Raises ExecutionError on non-zero status; OSError on spawn failure."""
    cwd = plan.selector.spm_package or None
    code = run_xcodebuild(plan.arguments, formatter=plan.formatter, cwd=cwd, popen=popen)
    if code != 0:
        raise ExecutionError(code)


def run_action(
    inputs: ActionInputs,
    outputs: ActionOutputs | None = None,
    platform: str | None = None,
    force_dry_run: bool = False,
    popen: PopenFactory = subprocess.Popen,
) -> int:
    """Run the whole action. Returns 0 on success, 1 after reporting the failure."""
    if outputs is None:
        outputs = ActionOutputs()
    try:
        with outputs.group("Validating input"):
            plan = prepare(inputs, platform=platform, force_dry_run=force_dry_run)
        with outputs.group("Composing command"):
            compose(plan, outputs)
        if plan.dry_run:
            log.debug("Dry run: not executing xcodebuild")
            return 0
        with outputs.group("Running xcodebuild"):
            execute(plan, popen=popen)
    except (ActionError, OSError) as e:
        log.debug("Action failed: %r", e)
        return outputs.set_failed(str(e))
    return 0
