"""Transparent ``cargo run`` launcher for the Ward secret scanner.

The public surface covers the composition root (:func:`launch`,
:func:`plan_launch`), the launch profiles, the error taxonomy, and the logging
hooks, so ``import ward_launcher`` and the ``ward`` console script drive the
same code path.
"""

from __future__ import annotations

from .core import launch, plan_launch
from .domain.errors import LauncherError, SpawnError, ToolNotFound, UnknownProfile
from .domain.profile import ACTIVE_PROFILE, DEVELOPMENT, PRODUCTION, LaunchProfile, get_profile
from .observability import bind_invocation_id, get_logger

__all__ = [
    "ACTIVE_PROFILE",
    "DEVELOPMENT",
    "LaunchProfile",
    "LauncherError",
    "PRODUCTION",
    "SpawnError",
    "ToolNotFound",
    "UnknownProfile",
    "bind_invocation_id",
    "get_logger",
    "get_profile",
    "launch",
    "plan_launch",
]
