"""Path resolver tests: locations follow the installation, never the cwd."""

from __future__ import annotations

import os
import stat
import sys
from pathlib import Path

import pytest

from ward_launcher.adapters.path_resolvers.default import DefaultPathResolver, package_dir
from ward_launcher.domain.errors import ToolNotFound


def _install(tmp_path: Path, *, manifest_at: str | None) -> Path:
    """Create a fake checkout with the launcher under ``src/ward_launcher``."""

    root = tmp_path / "checkout"
    install = root / "src" / "ward_launcher"
    install.mkdir(parents=True)
    if manifest_at is not None:
        target = root / manifest_at / "Cargo.toml"
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text('[package]\nname = "ward"\n', encoding="utf-8")
    return install


def _executable(directory: Path, name: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    suffix = ".bat" if sys.platform == "win32" else ""
    path = directory / f"{name}{suffix}"
    path.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


def test_default_anchor_is_the_installed_package() -> None:
    resolver = DefaultPathResolver()
    assert resolver.install_dir() == package_dir()
    assert (package_dir() / "core.py").is_file()


def test_project_root_is_parent_of_install_dir_when_manifest_lives_there(tmp_path: Path) -> None:
    install = _install(tmp_path, manifest_at="src")
    resolver = DefaultPathResolver(anchor=install)
    assert resolver.project_root() == install.resolve().parent
    assert resolver.manifest_path() == install.resolve().parent / "Cargo.toml"


def test_project_root_walks_up_to_the_manifest(tmp_path: Path) -> None:
    install = _install(tmp_path, manifest_at=".")
    resolver = DefaultPathResolver(anchor=install)
    assert resolver.manifest_path() == (tmp_path / "checkout" / "Cargo.toml").resolve()


def test_project_root_falls_back_to_parent_without_manifest(tmp_path: Path) -> None:
    install = _install(tmp_path, manifest_at=None)
    resolver = DefaultPathResolver(anchor=install)
    assert resolver.project_root(manifest_name="Missing.toml") == install.resolve().parent


def test_manifest_path_ignores_the_working_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    install = _install(tmp_path, manifest_at=".")
    decoy = tmp_path / "elsewhere"
    decoy.mkdir()
    (decoy / "Cargo.toml").write_text("[package]\n", encoding="utf-8")

    seen = []
    for cwd in (tmp_path, decoy):
        monkeypatch.chdir(cwd)
        seen.append(DefaultPathResolver(anchor=install).manifest_path())
    assert seen[0] == seen[1]
    assert decoy not in seen[0].parents


def test_tool_lookup_uses_the_search_path(tmp_path: Path) -> None:
    tool = _executable(tmp_path / "bin", "cargo")
    resolver = DefaultPathResolver(search_path=str(tmp_path / "bin"))
    located = resolver.tool("cargo")
    assert os.path.isabs(located)
    assert Path(located).name == tool.name


@pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")
def test_tool_lookup_keeps_symlinked_proxies(tmp_path: Path) -> None:
    proxy = _executable(tmp_path / "toolchain", "rustup")
    shims = tmp_path / "shims"
    shims.mkdir()
    (shims / "cargo").symlink_to(proxy)
    located = DefaultPathResolver(search_path=str(shims)).tool("cargo")
    assert Path(located).name == "cargo"


def test_missing_tool_raises_tool_not_found(tmp_path: Path) -> None:
    resolver = DefaultPathResolver(search_path=str(tmp_path))
    with pytest.raises(ToolNotFound, match="cargo") as excinfo:
        resolver.tool("cargo")
    assert excinfo.value.exit_code == 127
