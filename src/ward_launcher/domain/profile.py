"""Launch profiles describing how the external build tool is invoked.

Purpose
-------
Model the two launcher variants (optimised production runs and local
development runs) as one immutable value object instead of two diverging
entry points. A profile captures every knob that differs between the variants
so the rest of the package can stay variant-agnostic.

Contents
--------
* :class:`LaunchProfile` – frozen dataclass describing a ``cargo run`` shape.
* :data:`PRODUCTION` / :data:`DEVELOPMENT` – the two shipped presets.
* :data:`ACTIVE_PROFILE` – the preset used by the ``ward`` shim.
* :func:`get_profile` – case-insensitive lookup by preset name.

System Role
-----------
Pure domain data. :mod:`ward_launcher.application.invocation` turns a profile
into an argument list; :mod:`ward_launcher.core` decides whether a manifest
path has to be resolved by reading :attr:`LaunchProfile.explicit_manifest`.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Mapping

from .errors import UnknownProfile


@dataclass(frozen=True)
class LaunchProfile:
    """Immutable description of a single build-and-run invocation shape.

    Attributes
    ----------
    name:
        Preset identifier shown by the inspection CLI.
    release:
        Request an optimised build (``--release``).
    explicit_manifest:
        Point the tool at the manifest next to the installation
        (``--manifest-path``) instead of letting it discover one from the cwd.
    quiet:
        Suppress the tool's own status output (``--quiet``).
    tool / subcommand / manifest_name / separator:
        Invocation contract of the external tool. Everything after
        ``separator`` is opaque to the tool's option parser.
    """

    name: str
    release: bool
    explicit_manifest: bool
    quiet: bool = True
    tool: str = "cargo"
    subcommand: str = "run"
    manifest_name: str = "Cargo.toml"
    separator: str = "--"


PRODUCTION: Final[LaunchProfile] = LaunchProfile(name="production", release=True, explicit_manifest=True)
DEVELOPMENT: Final[LaunchProfile] = LaunchProfile(name="development", release=False, explicit_manifest=False)

#: Preset driving the ``ward`` console script. Chosen when the package is
#: built; the shim never switches profiles from its own arguments.
ACTIVE_PROFILE: Final[LaunchProfile] = PRODUCTION

PROFILES: Final[Mapping[str, LaunchProfile]] = MappingProxyType(
    {profile.name: profile for profile in (PRODUCTION, DEVELOPMENT)}
)


def get_profile(name: str) -> LaunchProfile:
    """Return the preset registered under *name*.

    Examples
    --------
    >>> get_profile("Development").release
    False
    >>> get_profile("nightly")
    Traceback (most recent call last):
    ...
    ward_launcher.domain.errors.UnknownProfile: unknown launch profile 'nightly' (expected one of: production, development)
    """

    try:
        return PROFILES[name.strip().lower()]
    except KeyError as exc:
        choices = ", ".join(PROFILES)
        raise UnknownProfile(f"unknown launch profile {name!r} (expected one of: {choices})") from exc
