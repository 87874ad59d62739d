"""Child process lifecycle: spawn, wait, forward signals, relay the exit status.

Purpose
-------
Implement the :class:`ward_launcher.application.ports.ProcessRunner` protocol
with :mod:`subprocess`. The child inherits the launcher's stdin, stdout and
stderr file descriptors, so terminal colouring, prompts and streaming output
behave exactly as if the tool had been called directly.

Contents
--------
* :class:`SubprocessRunner` – runs one command and returns the code to relay.
* :func:`forward_signals` – context manager installing the forwarding policy.
* :func:`normalize_exit_status` – maps ``Popen.returncode`` onto a shell exit code.

System Role
-----------
The only module that creates processes. :func:`ward_launcher.core.launch`
hands it the planned command and returns whatever it reports.
"""

from __future__ import annotations

import signal
import subprocess
import threading
from contextlib import contextmanager
from typing import Any, Iterator, Sequence

from ...domain.errors import SpawnError, ToolNotFound
from ...observability import log_debug, log_info, make_event

#: Signals relayed to the child while the launcher waits for it.
FORWARDED_SIGNALS: tuple[signal.Signals, ...] = tuple(
    getattr(signal, name) for name in ("SIGTERM", "SIGHUP") if hasattr(signal, name)
)
#: Signals the terminal already delivers to the child's process group; the
#: launcher only has to survive them until the child is gone.
ABSORBED_SIGNALS: tuple[signal.Signals, ...] = tuple(
    getattr(signal, name) for name in ("SIGINT", "SIGQUIT") if hasattr(signal, name)
)


class SubprocessRunner:
    """Spawn a command with inherited standard streams and wait for it.

    Why
    ----
    The launcher's contract is transparency: one child per invocation, no
    pipes, no shell, and the child's status relayed unchanged.
    """

    def run(self, command: Sequence[str]) -> int:
        """Run *command* to completion and return the exit code to relay.

        Raises
        ------
        ToolNotFound
            The executable vanished between resolution and spawn.
        SpawnError
            The operating system refused to start the executable.
        """

        argv = list(command)
        try:
            process = subprocess.Popen(argv)
        except FileNotFoundError as exc:
            raise ToolNotFound(f"{argv[0]}: command not found") from exc
        except OSError as exc:
            raise SpawnError(f"{argv[0]}: {exc.strerror or exc}") from exc

        log_debug("spawned", **make_event("spawn", argv[0], {"pid": process.pid, "argc": len(argv)}))
        with forward_signals(process):
            returncode = process.wait()
        exit_code = normalize_exit_status(returncode)
        log_info("child-exited", **make_event("exit", argv[0], {"returncode": returncode, "exit_code": exit_code}))
        return exit_code


@contextmanager
def forward_signals(process: Any) -> Iterator[None]:
    """Relay termination signals to *process* for the duration of the block.

    ``SIGTERM`` and ``SIGHUP`` are sent on to the child so it is never
    orphaned when the launcher is asked to stop. ``SIGINT`` and ``SIGQUIT``
    are swallowed: an interactive interrupt reaches the whole foreground
    process group, so the child already has it. Previous handlers are restored
    on exit. Off the main thread handlers cannot be installed and the block
    runs unchanged.
    """

    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def _forward(signum: int, _frame: Any) -> None:
        log_debug("forward-signal", **make_event("signal", None, {"signal": signum, "pid": process.pid}))
        process.send_signal(signum)

    def _absorb(signum: int, _frame: Any) -> None:
        log_debug("absorb-signal", **make_event("signal", None, {"signal": signum, "pid": process.pid}))

    previous: dict[int, Any] = {}
    try:
        for signum in FORWARDED_SIGNALS:
            previous[signum] = signal.signal(signum, _forward)
        for signum in ABSORBED_SIGNALS:
            previous[signum] = signal.signal(signum, _absorb)
        yield
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler if handler is not None else signal.SIG_DFL)


def normalize_exit_status(returncode: int) -> int:
    """Return the shell exit code for a ``Popen.returncode``.

    Normal exits are relayed as-is. A child killed by signal ``N`` reports
    ``-N``; the shell convention ``128 + N`` keeps that non-zero.

    Examples
    --------
    >>> normalize_exit_status(0)
    0
    >>> normalize_exit_status(3)
    3
    >>> normalize_exit_status(-9)
    137
    """

    if returncode < 0:
        return 128 - returncode
    return returncode
