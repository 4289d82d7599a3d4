# SPDX-License-Identifier: MIT
"""Parse a version and print its components."""

from __future__ import annotations

import json

import click

from ...semver import InvalidVersionError, Version
from ..main import Context, echo_error, echo_info, pass_context


@click.command()
@click.argument("version")
@click.option(
    "--strict",
    is_flag=True,
    help="Reject a leading 'v' regardless of configuration.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the components as a JSON object.",
)
@pass_context
def parse(ctx: Context, version: str, strict: bool, as_json: bool) -> None:
    """Parse VERSION and print its components.

    \b
    Examples:
        nsemver parse 1.2.3-beta.1+build.7
        nsemver parse v2.0 --json
        nsemver parse v2.0 --strict      # Fails, leading 'v' rejected
    """
    try:
        parsed = Version.parse(version, strict=True) if strict else ctx.parse_version(version)
    except InvalidVersionError as e:
        echo_error(e.message)
        raise SystemExit(1)

    components = {
        "version": str(parsed),
        "original": parsed.original,
        "parts": list(parsed.parts),
        "major": parsed.major,
        "minor": parsed.minor,
        "patch": parsed.patch,
        "prerelease": parsed.prerelease,
        "metadata": parsed.metadata,
    }

    if as_json:
        click.echo(json.dumps(components, indent=2))
        return

    for key, value in components.items():
        if key == "parts":
            value = ".".join(str(part) for part in value)
        echo_info(f"{key}: {value}")
