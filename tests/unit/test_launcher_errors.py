from __future__ import annotations

from ward_launcher.domain.errors import (
    EXIT_CANNOT_EXECUTE,
    EXIT_COMMAND_NOT_FOUND,
    LauncherError,
    SpawnError,
    ToolNotFound,
    UnknownProfile,
)


def test_error_hierarchy() -> None:
    assert issubclass(ToolNotFound, LauncherError)
    assert issubclass(SpawnError, LauncherError)
    assert issubclass(UnknownProfile, LauncherError)
    for exception in (ToolNotFound(""), SpawnError(""), UnknownProfile("")):
        assert isinstance(exception, LauncherError)


def test_spawn_failures_use_shell_sentinels() -> None:
    assert ToolNotFound("cargo").exit_code == EXIT_COMMAND_NOT_FOUND == 127
    assert SpawnError("cargo").exit_code == EXIT_CANNOT_EXECUTE == 126
    assert LauncherError("boom").exit_code == 1


def test_exit_code_override_is_per_instance() -> None:
    error = SpawnError("cargo", exit_code=70)
    assert error.exit_code == 70
    assert SpawnError("cargo").exit_code == 126
    assert str(error) == "cargo"
