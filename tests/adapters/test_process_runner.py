"""Process runner tests using real child interpreters.

Children are short ``python -c`` programs so the tests exercise the actual
spawn, stream inheritance, and exit-status relay without needing cargo.
"""

from __future__ import annotations

import os
import signal
import subprocess
import sys
import textwrap
from pathlib import Path

import pytest

from ward_launcher.adapters.process.default import (
    ABSORBED_SIGNALS,
    FORWARDED_SIGNALS,
    SubprocessRunner,
    forward_signals,
    normalize_exit_status,
)
from ward_launcher.domain.errors import SpawnError, ToolNotFound

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="POSIX signal semantics")
SRC = Path(__file__).resolve().parents[2] / "src"


def _python(code: str) -> list[str]:
    return [sys.executable, "-c", textwrap.dedent(code)]


class RecordingProcess:
    """Stand-in for ``Popen`` that records the signals it receives."""

    pid = 4242

    def __init__(self) -> None:
        self.signals: list[int] = []

    def send_signal(self, signum: int) -> None:
        self.signals.append(signum)


@pytest.mark.parametrize("code", [0, 1, 3, 42, 255])
def test_child_exit_code_is_relayed(code: int) -> None:
    assert SubprocessRunner().run(_python(f"raise SystemExit({code})")) == code


def test_arguments_reach_the_child_unchanged(tmp_path: Path) -> None:
    out = tmp_path / "argv.txt"
    forwarded = ["--", "a b", "--help", "", "-x=1"]
    command = _python(
        f"""
        import json, sys
        with open({str(out)!r}, "w", encoding="utf-8") as handle:
            json.dump(sys.argv[1:], handle)
        """
    )
    assert SubprocessRunner().run([*command, *forwarded]) == 0
    assert out.read_text(encoding="utf-8") == '["--", "a b", "--help", "", "-x=1"]'


def test_standard_streams_are_inherited() -> None:
    """Stdin written by the caller reaches the child; its stdout reaches the caller."""

    child = _python(
        """
        import sys
        data = sys.stdin.read()
        sys.stdout.write(data.upper())
        raise SystemExit(0 if data == "ping" else 5)
        """
    )
    driver = _python(
        f"""
        from ward_launcher.adapters.process.default import SubprocessRunner
        raise SystemExit(SubprocessRunner().run({child!r}))
        """
    )
    env = {**os.environ, "PYTHONPATH": os.pathsep.join(filter(None, [str(SRC), os.environ.get("PYTHONPATH")]))}
    completed = subprocess.run(driver, input=b"ping", capture_output=True, env=env, timeout=60, check=False)
    assert completed.returncode == 0, completed.stderr
    assert completed.stdout == b"PING"


@posix_only
def test_child_killed_by_signal_exits_non_zero() -> None:
    code = SubprocessRunner().run(_python("import os, signal; os.kill(os.getpid(), signal.SIGKILL)"))
    assert code == 128 + signal.SIGKILL


def test_missing_executable_raises_tool_not_found(tmp_path: Path) -> None:
    with pytest.raises(ToolNotFound) as excinfo:
        SubprocessRunner().run([str(tmp_path / "no-such-cargo"), "run"])
    assert excinfo.value.exit_code == 127


@posix_only
def test_non_executable_file_raises_spawn_error(tmp_path: Path) -> None:
    target = tmp_path / "cargo"
    target.write_text("not a program\n", encoding="utf-8")
    target.chmod(0o644)
    with pytest.raises(SpawnError) as excinfo:
        SubprocessRunner().run([str(target)])
    assert excinfo.value.exit_code == 126


@posix_only
def test_terminate_is_forwarded_and_handlers_restored() -> None:
    process = RecordingProcess()
    before = {signum: signal.getsignal(signum) for signum in (*FORWARDED_SIGNALS, *ABSORBED_SIGNALS)}
    with forward_signals(process):
        signal.raise_signal(signal.SIGTERM)
        signal.raise_signal(signal.SIGINT)
    assert process.signals == [signal.SIGTERM]
    assert {signum: signal.getsignal(signum) for signum in before} == before


@pytest.mark.parametrize(("returncode", "expected"), [(0, 0), (7, 7), (255, 255), (-15, 143), (-2, 130)])
def test_normalize_exit_status(returncode: int, expected: int) -> None:
    assert normalize_exit_status(returncode) == expected
