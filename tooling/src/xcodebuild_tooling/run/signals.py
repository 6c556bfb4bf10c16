"""Signal name -> conventional number, used as the exit status of a killed process."""

from __future__ import annotations

import signal
from types import MappingProxyType

SIGNAL_NAME_TO_NUMBER = MappingProxyType(
    {
        "SIGHUP": 1,
        "SIGINT": 2,
        "SIGQUIT": 3,
        "SIGILL": 4,
        "SIGTRAP": 5,
        "SIGABRT": 6,
        "SIGIOT": 6,
        "SIGBUS": 7,
        "SIGFPE": 8,
        "SIGKILL": 9,
        "SIGUSR1": 10,
        "SIGSEGV": 11,
        "SIGUSR2": 12,
        "SIGPIPE": 13,
        "SIGALRM": 14,
        "SIGTERM": 15,
        "SIGSTKFLT": 16,
        "SIGCHLD": 17,
        "SIGCONT": 18,
        "SIGSTOP": 19,
        "SIGTSTP": 20,
        "SIGTTIN": 21,
        "SIGTTOU": 22,
        "SIGURG": 23,
        "SIGXCPU": 24,
        "SIGXFSZ": 25,
        "SIGVTALRM": 26,
        "SIGPROF": 27,
        "SIGWINCH": 28,
        "SIGIO": 29,
        "SIGPOLL": 29,
        "SIGPWR": 30,
        "SIGSYS": 31,
        "SIGUNUSED": 31,
        # Placeholders: no kernel number on Linux.
        "SIGBREAK": 97,
        "SIGINFO": 98,
        "SIGLOST": 99,
    }
)


def signal_name(signum: int) -> str | None:
    """Host name for signum (e.g. 15 -> SIGTERM), or None if unknown."""
    try:
        return signal.Signals(signum).name
    except ValueError:
        return None


def signal_number(name: str) -> int | None:
    return SIGNAL_NAME_TO_NUMBER.get(name)


def status_for_signal(signum: int) -> int:
    """Exit status for a process killed by signum; raw number when the name is not in the table."""
    name = signal_name(signum)
    number = signal_number(name) if name else None
    return number if number is not None else signum
