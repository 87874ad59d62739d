"""Filesystem and executable resolution anchored to the launcher installation.

Purpose
-------
Implement the :class:`ward_launcher.application.ports.PathResolver` protocol.
This adapter is the only component that touches the filesystem layout or the
executable search path, so the invariant "locations depend on where the
launcher is installed, never on the caller's working directory" lives in one
place.

Contents
--------
* :class:`DefaultPathResolver` – resolves install dir, project root, manifest
  and tool executable.
* :func:`package_dir` – directory holding the installed ``ward_launcher`` package.

System Role
-----------
Feeds :func:`ward_launcher.core.plan_launch`. Emits debug events describing
every location it settles on.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from ...domain.errors import ToolNotFound
from ...observability import log_debug, make_event

_PACKAGE_DIR = Path(__file__).resolve().parents[2]


def package_dir() -> Path:
    """Return the directory of the installed ``ward_launcher`` package."""

    return _PACKAGE_DIR


class DefaultPathResolver:
    """Resolve launcher-relative locations and the external tool executable.

    Why
    ----
    Centralise location rules so the composition root stays platform-agnostic
    and tests can inject a fake installation directory or search path.
    """

    def __init__(self, *, anchor: Path | None = None, search_path: str | None = None) -> None:
        """Store the context required to resolve locations.

        Parameters
        ----------
        anchor:
            Installation directory to resolve from. Defaults to
            :func:`package_dir`.
        search_path:
            ``os.pathsep`` separated directories used for tool lookup instead
            of the caller's ``PATH``.
        """

        self._install_dir = (anchor or package_dir()).resolve()
        self.search_path = search_path

    def install_dir(self) -> Path:
        """Return the resolved installation directory."""

        return self._install_dir

    def project_root(self, manifest_name: str = "Cargo.toml") -> Path:
        """Return the project root for the installation directory.

        The root is the parent of the installation directory. When the
        manifest is not there, the nearest further ancestor holding it wins,
        which covers ``src/`` layouts. Without any match the parent is kept
        so the tool reports the missing manifest itself.

        Examples
        --------
        >>> from tempfile import TemporaryDirectory
        >>> tmp = TemporaryDirectory()
        >>> root = Path(tmp.name).resolve()
        >>> _ = (root / "Cargo.toml").write_text("[package]\\n", encoding="utf-8")
        >>> install = root / "src" / "ward_launcher"
        >>> install.mkdir(parents=True)
        >>> DefaultPathResolver(anchor=install).project_root() == root
        True
        >>> tmp.cleanup()
        """

        parent = self._install_dir.parent
        root = next(
            (candidate for candidate in (parent, *parent.parents) if (candidate / manifest_name).is_file()),
            parent,
        )
        log_debug("project-root", **make_event("resolve", str(root), {"install_dir": str(self._install_dir)}))
        return root

    def manifest_path(self, manifest_name: str = "Cargo.toml") -> Path:
        """Return the manifest path next to the resolved project root."""

        return self.project_root(manifest_name) / manifest_name

    def tool(self, name: str) -> str:
        """Locate *name* on the executable search path.

        Raises
        ------
        ToolNotFound
            When no executable called *name* is found. The lookup is not
            retried.
        """

        located = shutil.which(name, path=self.search_path)
        if located is None:
            raise ToolNotFound(f"{name}: command not found")
        # Symlinks stay unresolved: toolchain proxies dispatch on argv[0].
        executable = os.path.abspath(located)
        log_debug("tool", **make_event("resolve", executable, {"tool": name}))
        return executable
