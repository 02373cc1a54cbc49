"""Option definitions for the chug command."""

from pathlib import Path

import typer

OWNER_OPTION = typer.Option(
    None, "--owner", "-o", help="Repository owner (default: from remote 'origin')"
)

REPO_OPTION = typer.Option(
    None, "--repo", "-r", help="Repository name (default: from remote 'origin')"
)

TOKEN_OPTION = typer.Option(
    ...,
    "--token",
    "-t",
    envvar=["GITHUB_API_TOKEN", "GITHUB_TOKEN"],
    show_envvar=True,
    help="GitHub API token",
)

PATH_OPTION = typer.Option(Path("."), "--path", "-p", help="Path to local repo")

START_OPTION = typer.Option(
    None, "--start", "-s", help="Start ref, exclusive (prompted for when omitted)"
)

END_OPTION = typer.Option(
    None, "--end", "-e", help="End ref, inclusive (prompted for when omitted)"
)

VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
