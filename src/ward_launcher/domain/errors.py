"""Domain-level exception hierarchy.

Purpose
-------
Expose the small error taxonomy shared by adapters, the composition root, and
the command line entry points. Every error carries the exit code the ``ward``
shim returns to the calling shell, so failures stay observable to automation
without the launcher printing anything beyond a single diagnostic line.

Contents
--------
* :class:`LauncherError` – umbrella base class carrying an ``exit_code``.
* :class:`ToolNotFound` – the external build tool could not be located.
* :class:`SpawnError` – the operating system refused to start the tool.
* :class:`UnknownProfile` – a launch profile name did not match any preset.

System Role
-----------
Adapters raise these exceptions; :mod:`ward_launcher.cli` converts them into
process exit codes. Failures of the child itself are never modelled here: the
child's exit status is relayed, not judged.
"""

from __future__ import annotations

from typing import Final

EXIT_CANNOT_EXECUTE: Final[int] = 126
EXIT_COMMAND_NOT_FOUND: Final[int] = 127


class LauncherError(Exception):
    """Base type for all exceptions emitted by ``ward_launcher``.

    Why
    ----
    Give the shim a single catch-all type that already knows which exit code
    to hand back to the shell.
    """

    exit_code: int = 1

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ToolNotFound(LauncherError):
    """Raised when the external tool is missing from the search path.

    Uses the shell's "command not found" code so callers can tell a launcher
    failure apart from the tool running and failing.
    """

    exit_code = EXIT_COMMAND_NOT_FOUND


class SpawnError(LauncherError):
    """Raised when the tool exists but the operating system refused to start it."""

    exit_code = EXIT_CANNOT_EXECUTE


class UnknownProfile(LauncherError):
    """Raised when a profile name does not match any known preset."""

    exit_code = 2
