"""Build the xcodebuild argument list from action inputs.

Input kinds:
- plain: `-name value`
- path: like plain, value resolved to an absolute path (original kept for display)
- list: one `-name value` per non-empty line
- bool: `-name YES|NO`, only when the input is set
- flag: bare `-name`, only when the input is set and true
- raw: space-separated tokens appended verbatim (build-settings, action)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Protocol

from xcodebuild_tooling.command.arguments import Argument, ArgumentValue
from xcodebuild_tooling.errors import ConfigurationError

log = logging.getLogger(__name__)

SELECTOR_ERROR = (
    "Either `project`, `workspace` or `spm-package-path` must be set, "
    "but they are mutually exclusive!"
)


class InputSource(Protocol):
    def get_input(self, name: str, required: bool = False) -> str: ...

    def get_multiline_input(self, name: str, required: bool = False) -> list[str]: ...

    def get_boolean_input(self, name: str, required: bool = False) -> bool: ...


@dataclass(frozen=True)
class Selector:
    """What to build: exactly one of workspace / project / spm_package is non-empty."""

    workspace: str = ""
    project: str = ""
    spm_package: str = ""
    scheme: str = ""


def read_selector(inputs: InputSource) -> Selector:
    """Read workspace/project/spm-package and scheme. Raises ConfigurationError."""
    workspace = inputs.get_input("workspace")
    project = inputs.get_input("project")
    spm_package = inputs.get_input("spm-package")
    if sum(1 for v in (workspace, project, spm_package) if v) != 1:
        raise ConfigurationError(SELECTOR_ERROR)
    scheme = inputs.get_input("scheme", required=bool(workspace or spm_package))
    return Selector(workspace=workspace, project=project, spm_package=spm_package, scheme=scheme)


def resolve_path(value: str, cwd: str | os.PathLike[str] | None = None) -> str:
    """Absolute, normalized form of value relative to cwd (default: process cwd)."""
    base = os.fspath(cwd) if cwd is not None else os.getcwd()
    return os.path.abspath(os.path.join(base, value))


class XcodebuildArgumentBuilder:
    """Accumulates Arguments in call order."""

    def __init__(self, inputs: InputSource, cwd: str | os.PathLike[str] | None = None) -> None:
        self.inputs = inputs
        self.cwd = cwd
        self.arguments: list[Argument] = []

    def push(self, name: str, value: ArgumentValue | None = None, no_dash: bool = False) -> None:
        self.arguments.append(Argument(name=name if no_dash else f"-{name}", value=value))

    def push_value(
        self,
        name: str,
        value: str,
        is_path: bool = False,
        skip_empty: bool = False,
        no_dash: bool = False,
    ) -> None:
        resolved = value
        if skip_empty:
            resolved = resolved.strip()
            if not resolved:
                return
        if is_path:
            resolved = resolve_path(resolved, self.cwd)
        self.push(name, ArgumentValue(original_value=value, resolved_value=resolved), no_dash)

    def add_input_arg(self, input_name: str, arg_name: str | None = None, no_dash: bool = False) -> None:
        value = self.inputs.get_input(input_name)
        if value:
            self.push_value(arg_name or input_name, value, no_dash=no_dash)

    def add_path_arg(self, input_name: str, arg_name: str | None = None) -> None:
        value = self.inputs.get_input(input_name)
        if value:
            self.push_value(arg_name or input_name, value, is_path=True)

    def add_list_arg(self, input_name: str, arg_name: str | None = None) -> None:
        for value in self.inputs.get_multiline_input(input_name):
            self.push_value(arg_name or input_name, value, skip_empty=True)

    def add_bool_arg(self, input_name: str, arg_name: str | None = None, no_dash: bool = False) -> None:
        if not self.inputs.get_input(input_name):
            return
        value = "YES" if self.inputs.get_boolean_input(input_name) else "NO"
        self.push_value(arg_name or input_name, value, no_dash=no_dash)

    def add_flag_arg(self, input_name: str, arg_name: str | None = None) -> None:
        if self.inputs.get_input(input_name) and self.inputs.get_boolean_input(input_name):
            self.push(arg_name or input_name)

    def add_raw_tokens(self, text: str) -> None:
        """Append each space-separated token as a bare argument."""
        self.arguments.extend(Argument(name=token) for token in text.split(" "))


def build_xcodebuild_arguments(
    inputs: InputSource,
    selector: Selector | None = None,
    cwd: str | os.PathLike[str] | None = None,
) -> list[Argument]:
    """Full xcodebuild argument list (without the executable). Raises ConfigurationError."""
    if selector is None:
        selector = read_selector(inputs)
    b = XcodebuildArgumentBuilder(inputs, cwd=cwd)

    if selector.workspace:
        b.push_value("workspace", selector.workspace, is_path=True)
    elif selector.project:
        b.push_value("project", selector.project, is_path=True)
    if selector.scheme:
        b.push_value("scheme", selector.scheme)

    b.add_input_arg("target")
    b.add_input_arg("destination")
    b.add_input_arg("configuration")
    b.add_input_arg("sdk")
    b.add_input_arg("arch")
    b.add_path_arg("xcconfig")
    b.add_input_arg("jobs")
    b.add_flag_arg("parallelize-targets", "parallelizeTargets")
    b.add_bool_arg("enable-code-coverage", "enableCodeCoverage")
    b.add_bool_arg("parallel-testing-enabled")
    b.add_input_arg("maximum-concurrent-test-device-destinations")
    b.add_input_arg("maximum-concurrent-test-simulator-destinations")
    b.add_flag_arg("quiet")
    b.add_flag_arg("hide-shell-script-environment", "hideShellScriptEnvironment")
    b.add_bool_arg("enable-address-sanitizer", "enableAddressSanitizer")
    b.add_bool_arg("enable-thread-sanitizer", "enableThreadSanitizer")
    b.add_bool_arg("enable-undefined-behavior-sanitizer", "enableUndefinedBehaviorSanitizer")
    b.add_path_arg("result-bundle-path", "resultBundlePath")
    b.add_path_arg("archive-path", "archivePath")
    b.add_input_arg("result-bundle-version", "resultBundleVersion")
    b.add_path_arg("cloned-source-packages-path", "clonedSourcePackagesDirPath")
    b.add_path_arg("derived-data-path", "derivedDataPath")
    b.add_path_arg("xcroot")
    b.add_path_arg("xctestrun")
    b.add_input_arg("test-plan", "testPlan")
    b.add_list_arg("only-testing")
    b.add_list_arg("skip-testing")
    b.add_flag_arg("skip-unavailable-actions", "skipUnavailableActions")
    b.add_flag_arg("allow-provisioning-updates", "allowProvisioningUpdates")
    b.add_flag_arg("allow-provisioning-device-registration", "allowProvisioningDeviceRegistration")
    b.add_input_arg("code-sign-identity", "CODE_SIGN_IDENTITY", no_dash=True)
    b.add_bool_arg("code-signing-required", "CODE_SIGNING_REQUIRED", no_dash=True)

    build_settings = inputs.get_input("build-settings")
    if build_settings:
        b.add_raw_tokens(build_settings)
    b.add_raw_tokens(inputs.get_input("action", required=True))

    log.debug("Composed %d xcodebuild arguments", len(b.arguments))
    return b.arguments
