"""Composition root for ``ward_launcher``.

Purpose
-------
Provide the entry points that wire path resolution, invocation construction
and process execution together. The flow is strictly linear:
resolve → construct → spawn → wait → relay the exit code. There are no
retries and no timeouts; the launcher either fully delegates or fails to start
the delegate at all.

Contents
--------
* :func:`plan_launch` – resolve locations and build a :class:`LaunchPlan`.
* :func:`launch` – plan, run the child, and return the code to exit with.

System Role
-----------
Called by :mod:`ward_launcher.cli`. Adapters are injectable so tests and
embedding applications can replace filesystem and process access.
"""

from __future__ import annotations

import uuid
from typing import Sequence

from .adapters.path_resolvers.default import DefaultPathResolver
from .adapters.process.default import SubprocessRunner
from .application.invocation import LaunchPlan, build_arguments
from .application.ports import PathResolver, ProcessRunner
from .domain.profile import ACTIVE_PROFILE, LaunchProfile
from .observability import bind_invocation_id, log_debug, log_error, make_event


def plan_launch(
    argv: Sequence[str],
    *,
    profile: LaunchProfile | None = None,
    resolver: PathResolver | None = None,
) -> LaunchPlan:
    """Return the invocation the launcher would run for *argv*.

    Parameters
    ----------
    argv:
        Caller arguments, excluding the program name. Forwarded verbatim.
    profile:
        Invocation shape; defaults to :data:`ACTIVE_PROFILE`.
    resolver:
        Location adapter; defaults to :class:`DefaultPathResolver`.

    Raises
    ------
    ToolNotFound
        When the tool is not on the executable search path.
    """

    profile = profile or ACTIVE_PROFILE
    resolver = resolver or DefaultPathResolver()
    executable = resolver.tool(profile.tool)
    project_root = manifest_path = None
    if profile.explicit_manifest:
        manifest_path = resolver.manifest_path(profile.manifest_name)
        project_root = manifest_path.parent
    arguments = build_arguments(profile, argv, manifest_path=manifest_path)
    return LaunchPlan(
        profile=profile,
        executable=executable,
        arguments=tuple(arguments),
        project_root=project_root,
        manifest_path=manifest_path,
    )


def launch(
    argv: Sequence[str],
    *,
    profile: LaunchProfile | None = None,
    resolver: PathResolver | None = None,
    runner: ProcessRunner | None = None,
) -> int:
    """Run the external tool for *argv* and return the exit code to relay.

    Side Effects
    ------------
    Spawns exactly one child process and blocks until it terminates. Binds a
    fresh invocation identifier for the structured log records of this launch.
    """

    bind_invocation_id(uuid.uuid4().hex)
    try:
        plan = plan_launch(argv, profile=profile, resolver=resolver)
        log_debug("plan", **make_event("plan", plan.executable, plan.as_dict()))
        return (runner or SubprocessRunner()).run(plan.command)
    except Exception as exc:
        log_error("launch-failed", **make_event("spawn", None, {"error": str(exc)}))
        raise
    finally:
        bind_invocation_id(None)
