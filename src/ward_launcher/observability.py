"""Structured logging helpers distilled into tiny orchestration phrases.

Purpose
    Keep every emission of logging data predictable and contextual without
    making the launcher write anything to the terminal it shares with the
    child. The package logger is silent unless a host attaches handlers.

Contents
    - ``INVOCATION_ID``: context variable storing the active launch identifier.
    - ``get_logger``: returns the shared package logger (quiet by default).
    - ``bind_invocation_id``: binds or clears the active launch identifier.
    - ``log_debug`` / ``log_info`` / ``log_error``: emit structured entries via a
      single private emitter.
    - ``make_event``: convenience builder for structured event payloads.

System Integration
    Used by the adapters and the composition root so every record emitted
    during one launch carries the same identifier.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Final, Mapping

INVOCATION_ID: ContextVar[str | None] = ContextVar("ward_launcher_invocation_id", default=None)
"""Identifier of the launch currently in progress, ``None`` outside a launch."""

_LOGGER: Final[logging.Logger] = logging.getLogger("ward_launcher")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Expose the package logger so applications may attach handlers.

    Why
        The shim shares stdout/stderr with the child, so the library stays
        silent by default and leaves handler configuration to the host.
    """

    return _LOGGER


def bind_invocation_id(invocation_id: str | None) -> None:
    """Bind or clear the active launch identifier.

    Examples
    --------
    >>> bind_invocation_id('abc123')
    >>> INVOCATION_ID.get()
    'abc123'
    >>> bind_invocation_id(None)
    >>> INVOCATION_ID.get() is None
    True
    """

    INVOCATION_ID.set(invocation_id)


def log_debug(message: str, **fields: Any) -> None:
    """Emit a structured debug log entry that includes the invocation context."""

    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    """Emit a structured info log entry that includes the invocation context."""

    _emit(logging.INFO, message, fields)


def log_error(message: str, **fields: Any) -> None:
    """Emit a structured error log entry that includes the invocation context."""

    _emit(logging.ERROR, message, fields)


def make_event(
    stage: str,
    path: str | None,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a structured logging payload for launch lifecycle events.

    Inputs
        stage: Launch step being observed (``resolve``, ``spawn``, ``exit``).
        path: Filesystem path associated with the event, if available.
        payload: Optional mapping with extra diagnostic detail.

    Examples
    --------
    >>> make_event('resolve', None, {'tool': 'cargo'})
    {'stage': 'resolve', 'path': None, 'tool': 'cargo'}
    """

    event: dict[str, Any] = {"stage": stage, "path": path}
    if payload:
        event |= dict(payload)
    return event


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    """Send a log entry through the shared logger with contextual metadata."""

    _LOGGER.log(level, message, extra={"context": _with_invocation(fields)})


def _with_invocation(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Attach the current invocation identifier to the provided structured fields."""

    context = {"invocation_id": INVOCATION_ID.get()}
    context.update(fields)
    return context
