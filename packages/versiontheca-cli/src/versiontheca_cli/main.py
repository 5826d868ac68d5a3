# SPDX-License-Identifier: MIT
"""CLI entry point for the versiontheca command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from versiontheca import SchemeKind, VersionthecaError

from .config import CLIConfig, ConfigError, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None
        self.scheme: Optional[SchemeKind] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def resolve_config(ctx: Context) -> CLIConfig:
    """Return the configuration, exiting when it cannot be loaded."""
    try:
        return ctx.load_config()
    except ConfigError as e:
        echo_error(str(e))
        raise SystemExit(1)


def resolve_scheme(ctx: Context) -> SchemeKind:
    """Return the scheme from the command line, else from the configuration."""
    if ctx.scheme is not None:
        return ctx.scheme
    return resolve_config(ctx).scheme


@click.group()
@click.version_option(package_name="versiontheca")
@click.option(
    "-s",
    "--scheme",
    type=click.Choice([kind.value for kind in SchemeKind], case_sensitive=False),
    help="Version scheme (defaults to [tool.versiontheca].scheme, else basic).",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read the configuration from this directory.",
)
@pass_context
def cli(ctx: Context, scheme: Optional[str], verbose: bool, directory: Optional[Path]) -> None:
    """Parse, canonicalize, compare and increment version strings.

    \b
    Examples:
        versiontheca canonicalize 1.0.0.0
        versiontheca -s debian compare 1.0~rc1 lt 1.0
        versiontheca -s rpm next --position 2 1:1.5.3-r5
        versiontheca previous 1.3.2
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    ctx.scheme = SchemeKind(scheme.lower()) if scheme else None
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register commands
from .commands import canonicalize, compare, step

cli.add_command(canonicalize.canonicalize)
cli.add_command(canonicalize.validate)
cli.add_command(compare.compare)
cli.add_command(step.next_version)
cli.add_command(step.previous_version)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except VersionthecaError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
