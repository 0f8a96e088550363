"""Command-line interface for repoimport."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from importlib.metadata import PackageNotFoundError, version

from rich.console import Console
from rich.table import Table

from repoimport import (
    AuthenticationError,
    ConfigError,
    ImporterConfig,
    ImportResult,
    ProviderError,
    RepoImporter,
    RepositoryURLError,
    load_config,
    parse_reference,
)


def _package_version() -> str:
    try:
        return version("repoimport")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="repoimport")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)
    fetch_parser = subparsers.add_parser("fetch", help="Fetch a repository and print the mapped project")
    fetch_parser.add_argument("url", help="Repository URL, e.g. https://github.com/owner/repo")
    fetch_parser.add_argument("--config", help="Path to a repoimport JSON config")
    fetch_parser.add_argument("--json", action="store_true", help="Print the form values as JSON")
    fetch_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


async def _run_fetch(args: argparse.Namespace) -> ImportResult:
    config = load_config(args.config) if args.config else ImporterConfig()
    parse_reference(args.url, config)
    importer = await RepoImporter.from_config(config)
    return await importer.run(args.url)


def _print_result(result: ImportResult, *, as_json: bool, console: Console) -> None:
    if as_json:
        print(json.dumps(result.project.to_form_values(), indent=2))
        return

    project = result.project
    table = Table(title=f"repoimport - {result.reference.slug}", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Name", project.name)
    table.add_row("URI", project.uri)
    table.add_row("Short description", project.short_description)
    table.add_row("Description", f"{len(project.description)} characters of HTML")
    table.add_row(
        "Collaborators",
        "\n".join(f"{c.full_name} ({c.role})" for c in project.collaborators) or "-",
    )
    console.print(table)


def _print_failures(result: ImportResult) -> None:
    for failure in result.failures:
        print(f"warning: {failure.message}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        result = asyncio.run(_run_fetch(args))
    except (ConfigError, RepositoryURLError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (AuthenticationError, ProviderError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1

    _print_failures(result)
    _print_result(result, as_json=args.json, console=Console())
    return 0
