# SPDX-License-Identifier: MIT
"""CLI entry point for the forkver command."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

import click

from ..compare import compare_versions, is_same_fork, matches, version_key
from ..config import CLIConfig, ConfigError, load_config
from ..errors import ForkMismatch, InvalidVersionFormat, VersionError
from ..model import Version, VersionNode
from ..parser import parse_version
from ..render import render


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config


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


def _parse_or_exit(version_string: str) -> Version:
    try:
        return parse_version(version_string)
    except InvalidVersionFormat as e:
        echo_error(e.message)
        raise SystemExit(1)


def _node_to_dict(node: VersionNode) -> dict[str, Any]:
    return {
        "numbers": list(node.numbers),
        "stage": node.stage.label,
        "build": node.build,
        "snapshot": node.snapshot,
    }


def _version_to_dict(version: Version) -> dict[str, Any]:
    data = _node_to_dict(version.node)
    data["version"] = str(version)
    data["subversions"] = [
        {"identifier": subversion.identifier, **_node_to_dict(subversion.node)}
        for subversion in version.subversions
    ]
    return data


@click.group()
@click.version_option(package_name="forkver")
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
    help="Read [tool.forkver] settings from this directory.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Parse and compare versions with chained subversions.

    \b
    Examples:
        forkver parse 1.2.0rc5-UNIQUE3.2b102-SNAPSHOT
        forkver compare 1.2.0-UNIQUE3.2 1.2.0-UNIQUE3.3
        forkver sort 1.2.0-b5 1.1.0 1.2.0rc2
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("version")
@click.option(
    "--json/--text",
    "as_json",
    default=None,
    help="Print the result as JSON or text (default from config).",
)
@pass_context
def parse(ctx: Context, version: str, as_json: Optional[bool]) -> None:
    """Parse VERSION and print its components."""
    config = ctx.load_config()
    parsed = _parse_or_exit(version)

    if as_json is None:
        as_json = config.output == "json"

    if as_json:
        click.echo(json.dumps(_version_to_dict(parsed), indent=2))
        return

    echo_info(f"Version:  {parsed}")
    echo_info(f"Numbers:  {'.'.join(str(n) for n in parsed.numbers)}")
    echo_info(f"Stage:    {parsed.stage.label}")
    echo_info(f"Build:    {parsed.build}")
    echo_info(f"Snapshot: {'yes' if parsed.last_node.snapshot else 'no'}")
    for subversion in parsed.subversions:
        node = subversion.node
        echo_info(
            f"  {subversion.identifier}: {'.'.join(str(n) for n in node.numbers)} "
            f"({node.stage.label}, build {node.build})"
        )


@cli.command(name="render")
@click.argument("version")
@click.option("--plain", is_flag=True, help="Print only the root version numbers.")
def render_command(version: str, plain: bool) -> None:
    """Print the canonical form of VERSION."""
    click.echo(render(_parse_or_exit(version), full=not plain))


@cli.command()
@click.argument("versions", nargs=-1, required=True)
def check(versions: tuple[str, ...]) -> None:
    """Check that every VERSION is valid."""
    failed = 0
    for version in versions:
        try:
            parse_version(version)
        except InvalidVersionFormat as e:
            failed += 1
            echo_error(f"{version}: {e.message}")
        else:
            echo_success(f"{version}: valid")

    if failed:
        raise SystemExit(1)


@cli.command()
@click.argument("version1")
@click.argument("version2")
@click.option(
    "--full-match/--no-full-match",
    default=None,
    help="Compare the last subversions of both forks (default from config).",
)
@click.option(
    "--ignore-build",
    is_flag=True,
    help="Ignore build numbers and development stages when testing equality.",
)
@pass_context
def compare(
    ctx: Context,
    version1: str,
    version2: str,
    full_match: Optional[bool],
    ignore_build: bool,
) -> None:
    """Compare VERSION1 with VERSION2."""
    config = ctx.load_config()
    if full_match is None:
        full_match = config.full_match
    match_build_and_stage = config.match_build_and_stage and not ignore_build

    v1 = _parse_or_exit(version1)
    v2 = _parse_or_exit(version2)

    if matches(v1, v2, match_build_and_stage, full_match):
        echo_info(f"{v1} == {v2}")
        return

    try:
        result = compare_versions(v1, v2, full_match)
    except ForkMismatch as e:
        echo_error(e.message)
        raise SystemExit(2)

    symbol = {-1: "<", 0: "==", 1: ">"}[result]
    echo_info(f"{v1} {symbol} {v2}")


@cli.command()
@click.argument("version1")
@click.argument("version2")
def fork(version1: str, version2: str) -> None:
    """Check whether VERSION1 and VERSION2 belong to the same fork."""
    v1 = _parse_or_exit(version1)
    v2 = _parse_or_exit(version2)

    if is_same_fork(v1, v2):
        echo_success(f"{v1} and {v2} are the same fork")
        return

    echo_info(f"{v1} and {v2} are different forks")
    raise SystemExit(1)


@cli.command(name="sort")
@click.argument("versions", nargs=-1, required=True)
@click.option("-r", "--reverse", is_flag=True, help="Sort from newest to oldest.")
def sort_command(versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS in order."""
    parsed = [_parse_or_exit(version) for version in versions]
    for version in sorted(parsed, key=version_key, reverse=reverse):
        click.echo(str(version))


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except VersionError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
