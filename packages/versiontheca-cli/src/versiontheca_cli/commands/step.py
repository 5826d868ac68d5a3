# SPDX-License-Identifier: MIT
"""Compute the next or previous version."""

from __future__ import annotations

from typing import Optional

import click

from versiontheca import MAX_PARTS, SchemeKind, Version, new_version

from ..main import Context, echo_error, echo_info, pass_context, resolve_config, resolve_scheme


def _default_position(version: Version) -> int:
    """Return the position of the last upstream part of ``version``."""
    bounds = version.scheme.upstream_range()
    if bounds is None:
        return 0
    start, end = bounds
    return max(0, end - start - 1)


def _step(
    ctx: Context,
    versions: tuple[str, ...],
    position: Optional[int],
    format_version: Optional[str],
    forward: bool,
) -> None:
    scheme: SchemeKind = resolve_scheme(ctx)
    if position is None or format_version is None:
        config = resolve_config(ctx)
        if position is None:
            position = config.position
        if format_version is None:
            format_version = config.format

    format: Optional[Version] = None
    if format_version:
        format = new_version(scheme, format_version)
        if not format.is_valid():
            echo_error(
                f'format version "{format_version}" is not valid: {format.get_last_error()}'
            )
            raise SystemExit(1)

    direction = "next" if forward else "previous"
    errors = 0
    for text in versions:
        version = new_version(scheme, text)
        if not version.is_valid():
            echo_error(f'version "{text}" is not valid: {version.get_last_error()}')
            errors += 1
            continue
        if format is not None:
            version.set_format(format)
        pos = position if position is not None else _default_position(version)
        moved = version.next(pos) if forward else version.previous(pos)
        if moved:
            echo_info(version.get_version())
        else:
            echo_error(
                f'could not compute {direction} version for "{text}": {version.get_last_error()}'
            )
            errors += 1

    if errors:
        raise SystemExit(1)


_position_option = click.option(
    "-p",
    "--position",
    type=click.IntRange(0, MAX_PARTS - 1),
    help="Part to change, 0 being the first (defaults to the last part).",
)
_format_option = click.option(
    "-f",
    "--format",
    "format_version",
    help="Version giving the maximum value of each part.",
)


@click.command("next")
@click.argument("versions", nargs=-1, required=True)
@_position_option
@_format_option
@pass_context
def next_version(
    ctx: Context,
    versions: tuple[str, ...],
    position: Optional[int],
    format_version: Optional[str],
) -> None:
    """Print the version following each of VERSIONS.

    \b
    Examples:
        versiontheca next 1.3.2                   # 1.3.3
        versiontheca next --position 0 1.3.2      # 2.0
        versiontheca next -p 1 -f 9.9 1.9         # 2.0
    """
    _step(ctx, versions, position, format_version, forward=True)


@click.command("previous")
@click.argument("versions", nargs=-1, required=True)
@_position_option
@_format_option
@pass_context
def previous_version(
    ctx: Context,
    versions: tuple[str, ...],
    position: Optional[int],
    format_version: Optional[str],
) -> None:
    """Print the version preceding each of VERSIONS.

    \b
    Examples:
        versiontheca previous 1.3.2               # 1.3.1
        versiontheca previous -p 4 1.3.2.0.1      # 1.3.2
    """
    _step(ctx, versions, position, format_version, forward=False)
