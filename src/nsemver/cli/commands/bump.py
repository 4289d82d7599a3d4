# SPDX-License-Identifier: MIT
"""Increment a version segment."""

from __future__ import annotations

import re
from typing import Optional

import click

from ...semver import InvalidVersionError, Version
from ..config import ConfigError
from ..main import Context, echo_error, pass_context

NAMED_PARTS = {"major": 1, "minor": 2, "patch": 3}

_INDEX_PATTERN = re.compile(r"[1-9][0-9]*")


def bump_version(version: Version, part: str) -> Version:
    """Increment the segment named by PART.

    Raises:
        click.BadParameter: If PART is not a segment name or 1-based index
    """
    if part == "last":
        return version.increment_last()
    if part in NAMED_PARTS:
        return version.increment_part(NAMED_PARTS[part])
    if _INDEX_PATTERN.fullmatch(part):
        return version.increment_part(int(part))
    raise click.BadParameter(
        f"'{part}' is not one of major, minor, patch, last or a 1-based index",
        param_hint="PART",
    )


@click.command()
@click.argument("part")
@click.argument("version", required=False)
@click.option(
    "--prerelease",
    "-p",
    help="Pre-release to attach to the new version.",
)
@click.option(
    "--metadata",
    "-m",
    help="Build metadata to attach to the new version.",
)
@pass_context
def bump(
    ctx: Context,
    part: str,
    version: Optional[str],
    prerelease: Optional[str],
    metadata: Optional[str],
) -> None:
    """Print VERSION with PART incremented.

    PART is major, minor, patch, last or a 1-based segment index. Segments
    after PART are reset to zero and the pre-release is dropped. Without
    VERSION the project version from pyproject.toml is used.

    \b
    Examples:
        nsemver bump minor 1.2.3         # 1.3.0
        nsemver bump 4 v1.2              # v1.2.0.1
        nsemver bump patch 2.0.0 -p rc.1 # 2.0.1-rc.1
        nsemver bump last                # Project version, last segment
    """
    if version is None:
        try:
            cli_config = ctx.load_config()
        except (ConfigError, FileNotFoundError) as e:
            echo_error(str(e))
            raise SystemExit(1)

        if not cli_config.version:
            echo_error("No version given and [project].version is not set.")
            raise SystemExit(1)
        version = cli_config.version

    try:
        bumped = bump_version(ctx.parse_version(version), part)
        if prerelease is not None:
            bumped = bumped.with_prerelease(prerelease)
        if metadata is not None:
            bumped = bumped.with_metadata(metadata)
    except InvalidVersionError as e:
        echo_error(e.message)
        raise SystemExit(1)

    click.echo(bumped.original)
