# SPDX-License-Identifier: MIT
"""Check versions against a constraint."""

from __future__ import annotations

from typing import Optional

import click

from ...constraint import ConstraintError, ConstraintSet
from ...semver import InvalidVersionError
from ..config import ConfigError
from ..main import Context, echo_error, echo_info, echo_success, pass_context


@click.command()
@click.argument("versions", nargs=-1)
@click.option(
    "--constraint",
    "-c",
    "constraint_text",
    help="Constraint to check against (defaults to [tool.nsemver].constraint).",
)
@pass_context
def check(ctx: Context, versions: tuple[str, ...], constraint_text: Optional[str]) -> None:
    """Check VERSIONS against a constraint.

    Without VERSIONS the project version from pyproject.toml is checked.
    Exits with status 1 if any version does not satisfy the constraint.

    \b
    Examples:
        nsemver check -c ">=1.2, <2.0" 1.4.0 2.1.0
        nsemver check -c "^0.3 || 1.x"
        nsemver check                    # Project version vs configured constraint
    """
    if not versions or not constraint_text:
        try:
            cli_config = ctx.load_config()
        except (ConfigError, FileNotFoundError) as e:
            echo_error(str(e))
            raise SystemExit(1)

        if not constraint_text:
            constraint_text = cli_config.constraint
            if not constraint_text:
                echo_error("No constraint given. Use --constraint or set [tool.nsemver].constraint.")
                raise SystemExit(1)

        if not versions:
            if not cli_config.version:
                echo_error("No version given and [project].version is not set.")
                raise SystemExit(1)
            versions = (cli_config.version,)

    try:
        constraints = ConstraintSet.parse(constraint_text)
    except ConstraintError as e:
        echo_error(e.message)
        raise SystemExit(1)

    if ctx.verbose:
        echo_info(f"Constraint: {constraints}")

    failed = 0
    for text in versions:
        try:
            version = ctx.parse_version(text)
        except InvalidVersionError as e:
            echo_error(e.message)
            failed += 1
            continue

        ok, violations = constraints.validate(version)
        if ok:
            echo_success(f"{text}: ok")
            continue

        failed += 1
        click.secho(f"{text}: fail", fg="red")
        for violation in violations:
            echo_info(f"  - {violation}")

    if failed:
        raise SystemExit(1)
