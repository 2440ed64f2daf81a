from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from . import __version__
from .config import DEFAULT_ORG, ReleaseConfig
from .errors import ReleaseToolError
from .github_api import GitHubClient
from .profiles import RELEASE_PROFILES, load_profile
from .releaser import PreparedRelease, Releaser, ReleaseRequest
from .types import ReleaseOutcome

console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="release-tool",
        description="Create a GitHub release with generated release notes and upload its artifacts.",
    )
    parser.add_argument(
        "-r", "--repository", required=True,
        help=f"The name of the repository being released ({', '.join(sorted(RELEASE_PROFILES))}).",
    )
    parser.add_argument("-n", "--release-name", required=True, help="The name of the new release.")
    parser.add_argument(
        "-p", "--prerelease", action="store_true",
        help="Indicate that this is a pre-release.",
    )
    parser.add_argument("-t", "--release-tag", required=True, help="The tag name of the new release.")
    parser.add_argument("-o", "--previous-tag", required=True, help="The tag name of the previous release.")
    parser.add_argument(
        "-g", "--github-pat", default=None,
        help="The GitHub PAT (or set GITHUB_TOKEN).",
    )
    parser.add_argument("-a", "--artifact", default=None, help="The binary release artifact (full path).")
    parser.add_argument("-d", "--output-directory", default=None, help="Where to store output file(s).")
    parser.add_argument("--org", default=DEFAULT_ORG, help=f"GitHub organization (default: {DEFAULT_ORG})")
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Only generate and print the release notes; do not create the release.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _print_banner(request: ReleaseRequest, product_name: str) -> None:
    console.rule(f"[bold]Releasing {escape(product_name)}")
    console.print(f"Creating Release: {escape(request.release_tag)}")
    console.print(f"Previous Release: {escape(request.previous_tag)}")
    console.print(f"            Name: {escape(request.release_name)}")
    if request.artifact:
        console.print(f"        Artifact: {escape(request.artifact.name)}")
    console.print(f"     Pre-Release: {request.prerelease}")
    console.rule()


def _print_notes(prepared: PreparedRelease) -> None:
    console.print(f"Found {len(prepared.issues)} issues closed in release {escape(prepared.request.release_tag)}")
    console.print(Panel(Text(prepared.notes), title="Release Notes", expand=False))


def _print_outcome(outcome: ReleaseOutcome) -> None:
    if outcome.release_url:
        console.print(f"[green]Release {escape(outcome.tag)} created:[/green] {escape(outcome.release_url)}")
    for name in outcome.uploaded_assets:
        console.print(f"[green]Uploaded asset:[/green] {escape(name)}")
    if outcome.metadata_file:
        console.print(f"[green]Release info written to:[/green] {escape(outcome.metadata_file)}")
    console.rule("[bold green]All Done!")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    try:
        return _main_inner(argv)
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled.[/yellow]")
        return 130


def _main_inner(argv: list[str] | None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    request = ReleaseRequest(
        repository=args.repository,
        release_name=args.release_name,
        release_tag=args.release_tag,
        previous_tag=args.previous_tag,
        prerelease=args.prerelease,
        artifact=Path(args.artifact) if args.artifact else None,
    )

    try:
        config = ReleaseConfig.from_args(token=args.github_pat, org=args.org, output_dir=args.output_directory)
        profile = load_profile(request.repository)
        _print_banner(request, profile.product_name)
        releaser = Releaser(GitHubClient(config.token), config)
        prepared = releaser.prepare(request)
    except (ReleaseToolError, ValueError) as error:
        console.print(f"[red]Error:[/red] {escape(str(error))}")
        return 1

    _print_notes(prepared)
    if args.dry_run:
        console.print("[yellow]Dry run: release not created.[/yellow]")
        return 0

    try:
        outcome = releaser.publish(prepared)
    except ReleaseToolError as error:
        console.print(f"[red]Error:[/red] {escape(str(error))}")
        return 1

    _print_outcome(outcome)
    return 0


if __name__ == "__main__":
    sys.exit(main())
