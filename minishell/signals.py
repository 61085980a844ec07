"""Human-readable descriptions of signals."""

from __future__ import annotations

import signal
from functools import lru_cache

_UNKNOWN = "Unknown signal"

_DESCRIPTIONS = (
    ("SIGHUP", "Hangup"),
    ("SIGINT", "Interrupt"),
    ("SIGQUIT", "Quit"),
    ("SIGILL", "Illegal instruction"),
    ("SIGTRAP", "BPT trace/trap"),
    ("SIGABRT", "ABORT instruction"),
    ("SIGFPE", "Floating point exception"),
    ("SIGKILL", "Killed"),
    ("SIGBUS", "Bus error"),
    ("SIGSEGV", "Segmentation fault"),
    ("SIGSYS", "Bad system call"),
    ("SIGPIPE", "Broken pipe"),
    ("SIGALRM", "Alarm clock"),
    ("SIGTERM", "Terminated"),
    ("SIGURG", "Urgent IO condition"),
    ("SIGSTOP", "Stopped (signal)"),
    ("SIGTSTP", "Stopped"),
    ("SIGCONT", "Continue"),
    ("SIGCHLD", "Child death or stop"),
    ("SIGTTIN", "Stopped (tty input)"),
    ("SIGTTOU", "Stopped (tty output)"),
    ("SIGIO", "I/O ready"),
    ("SIGXCPU", "CPU limit"),
    ("SIGXFSZ", "File limit"),
    ("SIGVTALRM", "Alarm (virtual)"),
    ("SIGPROF", "Alarm (profile)"),
    ("SIGWINCH", "Window changed"),
    ("SIGUSR1", "User signal 1"),
    ("SIGUSR2", "User signal 2"),
)


@lru_cache(maxsize=None)
def _siglist() -> tuple[str, ...]:
    table = [_UNKNOWN] * signal.NSIG
    table[0] = "Bogus signal"
    for name, description in _DESCRIPTIONS:
        signum = getattr(signal, name, None)
        if signum is not None and 0 <= int(signum) < signal.NSIG:
            table[int(signum)] = description
    return tuple(table)


def create_siglist() -> list[str]:
    """Return a list, indexed by signal number, of signal descriptions."""
    return list(_siglist())


def signal_description(signum: int) -> str:
    """Return the description of a signal number."""
    table = _siglist()
    if 0 <= signum < len(table):
        return table[signum]
    return _UNKNOWN