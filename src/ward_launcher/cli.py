"""Command line adapters for ``ward_launcher``.

Purpose
-------
Expose two entry points:

* ``ward`` – the transparent shim. Every argument goes to the external tool
  untouched, so it deliberately bypasses any option parser.
* ``ward-launcher`` – a ``rich_click`` group for operators who want to see
  what the shim would run without spawning anything.

Contents
--------
* :func:`launch_main` – console entry for the shim; returns the exit code.
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – inspection group wiring traceback handling into
  ``lib_cli_exit_tools``.
* :func:`cli_info` – prints distribution metadata and the active profile.
* :func:`cli_plan` – prints the resolved launch plan as JSON.
* :func:`main` – console entry for the inspection group.

System Role
-----------
Outermost layer. Converts :class:`~ward_launcher.domain.errors.LauncherError`
into exit codes and funnels anything unexpected through
``lib_cli_exit_tools`` so both entry points share one exit code strategy.
"""

from __future__ import annotations

import json
import sys
from importlib import metadata
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .core import launch, plan_launch
from .domain.errors import LauncherError
from .domain.profile import ACTIVE_PROFILE, PROFILES, get_profile

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000
_SHIM_NAME: Final[str] = "ward"


def _resolve_version() -> str:
    """Return the installed package version, ``"0.0.0"`` when metadata is missing."""

    try:
        return metadata.version("ward-launcher")
    except metadata.PackageNotFoundError:
        return "0.0.0"


def launch_main(argv: Optional[Sequence[str]] = None) -> int:
    """Forward *argv* (default ``sys.argv[1:]``) to the tool and return its exit code.

    Why
        The shim must not interpret ``--help``, ``--version`` or ``--``: those
        belong to the program being launched. Nothing is printed on the normal
        path; a launcher failure produces one ``ward: <reason>`` line on stderr.
    """

    args = list(sys.argv[1:] if argv is None else argv)
    try:
        return launch(args)
    except LauncherError as exc:
        click.echo(f"{_SHIM_NAME}: {exc}", err=True)
        return exc.exit_code
    except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
        lib_cli_exit_tools.print_exception_message(
            trace_back=lib_cli_exit_tools.config.traceback,
            length_limit=_TRACEBACK_SUMMARY_LIMIT,
        )
        return lib_cli_exit_tools.get_system_exit_code(exc)


@click.group(
    help="Inspect the ward launcher without running the scanner",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="ward-launcher",
    message="ward-launcher version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Root command storing the traceback preference for all subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata("ward-launcher")
    except metadata.PackageNotFoundError:
        click.echo("ward-launcher (metadata unavailable)")
        click.echo(f"  Active profile  : {ACTIVE_PROFILE.name}")
        return
    click.echo(f"Info for {meta.get('Name', 'ward-launcher')}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    click.echo(f"  Active profile  : {ACTIVE_PROFILE.name}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")


@cli.command(
    "plan",
    context_settings={**CLICK_CONTEXT_SETTINGS, "ignore_unknown_options": True},
)
@click.option(
    "--profile",
    "profile_name",
    type=click.Choice(tuple(PROFILES), case_sensitive=False),
    default=ACTIVE_PROFILE.name,
    show_default=True,
    help="Launch profile to resolve",
)
@click.option(
    "--indent",
    type=int,
    default=2,
    show_default=True,
    help="Pretty-print JSON output with the provided indent size",
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def cli_plan(profile_name: str, indent: int, args: Sequence[str]) -> None:
    """Resolve and print the command ``ward ARGS...`` would run, as JSON.

    Put ``--`` before ARGS that look like options of this command.
    """

    try:
        plan = plan_launch(list(args), profile=get_profile(profile_name))
    except LauncherError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(json.dumps(plan.as_dict(), indent=indent))


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the inspection CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="ward-launcher",
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
