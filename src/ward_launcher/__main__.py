"""Module execution entry point delegating to the launcher shim."""

from __future__ import annotations

import sys

from .cli import launch_main


if __name__ == "__main__":  # pragma: no cover - exercised via python -m
    raise SystemExit(launch_main(sys.argv[1:]))
