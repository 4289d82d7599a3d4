# SPDX-License-Identifier: MIT
"""Sort versions."""

from __future__ import annotations

from typing import Optional

import click

from ...constraint import ConstraintError, ConstraintSet
from ...semver import InvalidVersionError
from ..main import Context, echo_error, pass_context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Print the highest version first.",
)
@click.option(
    "--constraint",
    "-c",
    "constraint_text",
    help="Only print versions satisfying this constraint.",
)
@pass_context
def sort(
    ctx: Context,
    versions: tuple[str, ...],
    reverse: bool,
    constraint_text: Optional[str],
) -> None:
    """Print VERSIONS in ascending order, one per line.

    Versions that compare equal keep their input order.

    \b
    Examples:
        nsemver sort 1.10 1.9 1.9-rc.1
        nsemver sort -r -c "<2" 1.0 2.0 1.5
    """
    try:
        parsed = [ctx.parse_version(text) for text in versions]
    except InvalidVersionError as e:
        echo_error(e.message)
        raise SystemExit(1)

    if constraint_text:
        try:
            constraints = ConstraintSet.parse(constraint_text)
        except ConstraintError as e:
            echo_error(e.message)
            raise SystemExit(1)
        parsed = list(constraints.filter(parsed))

    for version in sorted(parsed, reverse=reverse):
        click.echo(version.original)
