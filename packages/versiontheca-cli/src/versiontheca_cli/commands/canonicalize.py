# SPDX-License-Identifier: MIT
"""Canonicalize and validate version strings."""

from __future__ import annotations

import click

from versiontheca import SchemeKind, new_version

from ..main import Context, echo_error, echo_info, pass_context, resolve_scheme


def _check_versions(scheme: SchemeKind, versions: tuple[str, ...], display: bool) -> int:
    """Parse each version, printing errors and optionally the canonical form.

    Returns the number of invalid versions.
    """
    errors = 0
    for text in versions:
        version = new_version(scheme, text)
        if not version.is_valid():
            echo_error(
                f'version "{text}" is not considered valid: {version.get_last_error()}'
            )
            errors += 1
        elif display:
            echo_info(version.get_version())
    return errors


@click.command()
@click.argument("versions", nargs=-1, required=True)
@pass_context
def canonicalize(ctx: Context, versions: tuple[str, ...]) -> None:
    """Print each version in its canonical form.

    \b
    Examples:
        versiontheca canonicalize 1.0.0.0          # 1.0
        versiontheca -s roman canonicalize IIII    # IV.0
    """
    if _check_versions(resolve_scheme(ctx), versions, display=True):
        raise SystemExit(1)


@click.command()
@click.argument("versions", nargs=-1, required=True)
@pass_context
def validate(ctx: Context, versions: tuple[str, ...]) -> None:
    """Check that each version is valid.

    Nothing is printed for valid versions; the exit code is 1 if any
    version is invalid.
    """
    if _check_versions(resolve_scheme(ctx), versions, display=False):
        raise SystemExit(1)
