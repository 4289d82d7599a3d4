# SPDX-License-Identifier: MIT
"""CLI entry point for the nsemver command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from ..semver import Version
from .config import CLIConfig, ConfigError, find_project_root, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.strict: Optional[bool] = None
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config

    def find_config(self) -> Optional[CLIConfig]:
        """Load configuration if a project root exists, else return None."""
        if self.config is None and self.project_dir is None:
            try:
                find_project_root()
            except ConfigError:
                return None
        return self.load_config()

    def parse_version(self, text: str) -> Version:
        """Parse a version honoring --strict/--lenient, then [tool.nsemver].strict."""
        strict = self.strict
        if strict is None:
            config = self.find_config()
            strict = config.strict if config is not None else False
        return Version.parse(text, strict=strict)


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


@click.group()
@click.version_option()
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
    help="Project directory holding pyproject.toml.",
)
@click.option(
    "--strict/--lenient",
    default=None,
    help="Reject (or accept) a leading 'v' in versions. Defaults to [tool.nsemver].strict.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path], strict: Optional[bool]) -> None:
    """Semantic version tool for versions with any number of segments.

    Parse, compare, bump and sort versions, and check them against range
    constraints such as ">=1.2, <2.0 || ^3.1".

    \b
    Examples:
        nsemver parse v1.2.3-beta.1
        nsemver compare 1.1 1.1.0
        nsemver check -c "~1.2.3" 1.2.9 1.3.0
        nsemver bump minor
        nsemver sort 1.10 1.9 1.9-rc.1
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    ctx.strict = strict

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


# Import and register commands
from .commands import bump, check, compare, parse, sort

cli.add_command(parse.parse)
cli.add_command(compare.compare)
cli.add_command(check.check)
cli.add_command(bump.bump)
cli.add_command(sort.sort)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
