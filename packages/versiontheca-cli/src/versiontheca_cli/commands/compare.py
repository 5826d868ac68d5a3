# SPDX-License-Identifier: MIT
"""Compare two versions with an operator."""

from __future__ import annotations

import logging
from typing import Callable

import click

from versiontheca import new_version

from ..main import Context, echo_error, pass_context, resolve_scheme

logger = logging.getLogger(__name__)

# exit code when the input itself is wrong (0 and 1 are the answer)
EXIT_INVALID = 2

OPERATORS: dict[str, Callable[[int], bool]] = {
    "==": lambda r: r == 0,
    "=": lambda r: r == 0,
    "eq": lambda r: r == 0,
    "!=": lambda r: r != 0,
    "<>": lambda r: r != 0,
    "ne": lambda r: r != 0,
    "<": lambda r: r < 0,
    "lt": lambda r: r < 0,
    "<=": lambda r: r <= 0,
    "le": lambda r: r <= 0,
    ">": lambda r: r > 0,
    "gt": lambda r: r > 0,
    ">=": lambda r: r >= 0,
    "ge": lambda r: r >= 0,
}


@click.command()
@click.argument("left")
@click.argument("operator")
@click.argument("right")
@pass_context
def compare(ctx: Context, left: str, operator: str, right: str) -> None:
    """Compare LEFT and RIGHT with OPERATOR.

    OPERATOR is one of ==, =, eq, !=, <>, ne, <, lt, <=, le, >, gt, >=, ge.
    The exit code is 0 when the comparison holds, 1 when it does not and 2
    when a version or the operator is invalid.

    \b
    Examples:
        versiontheca compare 1.2 lt 1.10
        versiontheca -s debian compare 1:1.0 ">" 2.0
    """
    test = OPERATORS.get(operator)
    if test is None:
        echo_error(f'unrecognized operator "{operator}".')
        raise SystemExit(EXIT_INVALID)

    scheme = resolve_scheme(ctx)
    lhs = new_version(scheme, left)
    if not lhs.is_valid():
        echo_error(f'invalid left hand side version "{left}": {lhs.get_last_error()}')
        raise SystemExit(EXIT_INVALID)
    rhs = new_version(scheme, right)
    if not rhs.is_valid():
        echo_error(f'invalid right hand side version "{right}": {rhs.get_last_error()}')
        raise SystemExit(EXIT_INVALID)

    result = lhs.compare(rhs)
    logger.debug("compare(%s, %s) = %d", lhs, rhs, result)
    raise SystemExit(0 if test(result) else 1)
