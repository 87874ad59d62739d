"""Construction of the external tool invocation.

Purpose
-------
Translate a :class:`~ward_launcher.domain.profile.LaunchProfile` and the
caller's arguments into the exact argument vector handed to the operating
system. The module is pure: no filesystem access, no process spawning, which
keeps the forwarding guarantees easy to verify.

Contents
--------
* :func:`build_arguments` – the argument list following the tool executable.
* :class:`LaunchPlan` – resolved executable, arguments, and locations.

System Role
-----------
Called by :func:`ward_launcher.core.plan_launch` after the path resolver has
located the tool and (for explicit-manifest profiles) the manifest.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

from ..domain.profile import LaunchProfile


def build_arguments(
    profile: LaunchProfile,
    forwarded: Sequence[str],
    *,
    manifest_path: Path | None = None,
) -> list[str]:
    """Return the tool arguments for *profile* followed by *forwarded* verbatim.

    Why
        The launcher must be transparent: whatever the caller typed reaches
        the child unchanged, after the separator that ends the tool's own
        option parsing.

    Raises
        ValueError: when *profile* requires an explicit manifest and none was
        supplied.

    Examples
    --------
    >>> from ward_launcher.domain.profile import DEVELOPMENT, PRODUCTION
    >>> build_arguments(DEVELOPMENT, ["scan"])
    ['run', '--quiet', '--', 'scan']
    >>> build_arguments(PRODUCTION, ["--", "-v"], manifest_path=Path("/opt/ward/Cargo.toml"))
    ['run', '--release', '--quiet', '--manifest-path', '/opt/ward/Cargo.toml', '--', '--', '-v']
    """

    arguments = [profile.subcommand]
    if profile.release:
        arguments.append("--release")
    if profile.quiet:
        arguments.append("--quiet")
    if profile.explicit_manifest:
        if manifest_path is None:
            raise ValueError(f"profile {profile.name!r} requires a manifest path")
        arguments += ["--manifest-path", str(manifest_path)]
    arguments.append(profile.separator)
    arguments.extend(forwarded)
    return arguments


@dataclass(frozen=True)
class LaunchPlan:
    """Fully resolved invocation, ready to be handed to a process runner."""

    profile: LaunchProfile
    executable: str
    arguments: tuple[str, ...]
    project_root: Path | None = None
    manifest_path: Path | None = None

    @property
    def command(self) -> list[str]:
        """Executable followed by its arguments, as passed to ``Popen``."""

        return [self.executable, *self.arguments]

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly view used by the inspection CLI."""

        return {
            "profile": self.profile.name,
            "executable": self.executable,
            "arguments": list(self.arguments),
            "project_root": str(self.project_root) if self.project_root is not None else None,
            "manifest_path": str(self.manifest_path) if self.manifest_path is not None else None,
        }
