"""Process supervision: xcodebuild (| xcpretty) and signal -> status mapping."""

from xcodebuild_tooling.run.signals import (
    SIGNAL_NAME_TO_NUMBER,
    signal_number,
    status_for_signal,
)
from xcodebuild_tooling.run.supervisor import (
    SupervisorState,
    XcodebuildSupervisor,
    combine_statuses,
    run_xcodebuild,
    settled_status,
)

__all__ = [
    "SIGNAL_NAME_TO_NUMBER",
    "SupervisorState",
    "XcodebuildSupervisor",
    "combine_statuses",
    "run_xcodebuild",
    "settled_status",
    "signal_number",
    "status_for_signal",
]
