"""Main CLI entry point."""

import logging
from pathlib import Path

import typer
from dotenv import load_dotenv
from git import Commit, Repo
from pydantic import ValidationError

from .. import __version__
from ..changelog import format_issues, get_issues
from ..config import ChangelogConfig
from ..github_client.client import GitHubClient
from ..history.errors import ChugError, PromptAborted, RepositoryNotFoundError
from ..history.extractor import extract_issue_numbers
from ..history.remote import infer_owner_repo
from ..history.repository import open_repository, resolve_revision
from ..logging_config import error_console, setup_logging
from .options import (
    END_OPTION,
    OWNER_OPTION,
    PATH_OPTION,
    REPO_OPTION,
    START_OPTION,
    TOKEN_OPTION,
    VERBOSE_OPTION,
)
from .prompts import read_ref

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="chug",
    help="Generate a markdown changelog of the GitHub issues referenced between two refs",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"chug v{__version__}")
        raise typer.Exit()


def _log_error(error: Exception) -> None:
    if error.__cause__ is not None:
        logger.error("%s: %s", error, error.__cause__)
    else:
        logger.error("%s", error)


def build_config(
    repo: Repo, owner: str | None, name: str | None, token: str
) -> ChangelogConfig:
    """Fill in a missing owner or repository name from the remote and freeze."""
    if not owner or not name:
        remote_owner, remote_name = infer_owner_repo(repo)
        owner = owner or remote_owner
        name = name or remote_name

    return ChangelogConfig(owner=owner, repo=name, token=token)


def _get_ref(repo: Repo, spec: str | None, label: str) -> Commit:
    if spec is not None:
        return resolve_revision(repo, spec)
    return read_ref(repo, label, error_console)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def main(
    owner: str | None = OWNER_OPTION,
    repo: str | None = REPO_OPTION,
    token: str = TOKEN_OPTION,
    path: Path = PATH_OPTION,
    start: str | None = START_OPTION,
    end: str | None = END_OPTION,
    verbose: bool = VERBOSE_OPTION,
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version information and exit",
    ),
) -> None:
    """Generate a markdown changelog of the GitHub issues referenced between two refs.

    Every commit reachable from END but not from START is scanned for issue
    references such as #123. Refs not given as options are prompted for.

    Examples:
        chug --token $GITHUB_API_TOKEN
        chug -o myorg -r myrepo --start v0.1.0 --end v0.2.0
    """
    setup_logging(verbose)

    try:
        git_repo = open_repository(path)
    except RepositoryNotFoundError as e:
        _log_error(e)
        raise typer.Exit(1)

    with git_repo:
        try:
            config = build_config(git_repo, owner, repo, token)
            start_commit = _get_ref(git_repo, start, "Start ref")
            end_commit = _get_ref(git_repo, end, "End ref")
            issue_numbers = extract_issue_numbers(git_repo, start_commit, end_commit)
        except PromptAborted:
            return
        except (ChugError, ValidationError) as e:
            _log_error(e)
            return

    logger.info("Found %d issues...", len(issue_numbers))
    logger.debug("Fetching issues from %s", config.full_name)

    client = GitHubClient(token=config.token)
    issues = get_issues(client, config, issue_numbers)

    typer.echo(format_issues(issues))


if __name__ == "__main__":
    app()
