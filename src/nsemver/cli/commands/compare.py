# SPDX-License-Identifier: MIT
"""Compare two versions."""

from __future__ import annotations

import click

from ...semver import InvalidVersionError
from ..main import Context, echo_error, pass_context


@click.command()
@click.argument("first")
@click.argument("second")
@pass_context
def compare(ctx: Context, first: str, second: str) -> None:
    """Print -1, 0 or 1 as FIRST is lower than, equal to or higher than SECOND.

    Build metadata is ignored and missing segments count as zero.

    \b
    Examples:
        nsemver compare 1.2 1.10        # -1
        nsemver compare 1.1 1.1.0.0     # 0
        nsemver compare 1.0.0 1.0.0-rc  # 1
    """
    try:
        version1 = ctx.parse_version(first)
        version2 = ctx.parse_version(second)
    except InvalidVersionError as e:
        echo_error(e.message)
        raise SystemExit(1)

    click.echo(str(version1.compare(version2)))
