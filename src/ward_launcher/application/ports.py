"""Application-layer ports describing adapter responsibilities.

Purpose
-------
Define the structural contracts adapters must satisfy so the composition root
can orchestrate a launch without depending on concrete implementations. Tests
swap in recording fakes through these seams.

Contents
--------
* :class:`PathResolver` – locates the installation, project root, manifest and tool.
* :class:`ProcessRunner` – spawns the child and returns the exit code to relay.

System Role
-----------
These protocols enforce dependency inversion between
:mod:`ward_launcher.core` and the adapters under :mod:`ward_launcher.adapters`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class PathResolver(Protocol):
    """Discover filesystem locations relative to the launcher installation.

    Why
    ----
    Keep every location decision anchored to where the launcher is installed,
    never to the caller's working directory, behind one replaceable seam.
    """

    def install_dir(self) -> Path:
        """Return the directory the launcher package is installed in."""

    def project_root(self, manifest_name: str = "Cargo.toml") -> Path:
        """Return the root directory of the project the tool operates on."""

    def manifest_path(self, manifest_name: str = "Cargo.toml") -> Path:
        """Return the absolute path of the project's build descriptor."""

    def tool(self, name: str) -> str:
        """Return an absolute path to the executable *name* or raise ``ToolNotFound``."""


@runtime_checkable
class ProcessRunner(Protocol):
    """Run a command with inherited standard streams.

    Why
    ----
    Isolate process lifecycle concerns (spawning, waiting, signals) from plan
    construction.
    """

    def run(self, command: Sequence[str]) -> int:
        """Spawn *command*, wait for it, and return the exit code to relay."""
