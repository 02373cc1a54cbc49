"""Opening the local repository and resolving revisions with GitPython."""

import logging
from pathlib import Path

from git import Commit, Repo
from git.exc import BadName, BadObject, InvalidGitRepositoryError, NoSuchPathError

from .errors import RangeResolutionError, RepositoryNotFoundError

logger = logging.getLogger(__name__)


def open_repository(path: str | Path) -> Repo:
    """Open the git repository at ``path``.

    The returned ``Repo`` is a context manager; callers should use it in a
    ``with`` block so the handle is released on every exit path.

    Raises:
        RepositoryNotFoundError: If ``path`` is missing or not a repository.
    """
    try:
        repo = Repo(path)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise RepositoryNotFoundError(f"Not a git repository: {path}") from e

    logger.debug("Opened repository at %s", repo.working_dir or repo.git_dir)
    return repo


def resolve_revision(repo: Repo, spec: str) -> Commit:
    """Resolve a branch, tag, hash or rev-parse expression to a commit."""
    spec = spec.strip()
    if not spec:
        raise RangeResolutionError("Revision must not be empty")

    try:
        commit = repo.commit(spec)
    except (BadName, BadObject, ValueError) as e:
        raise RangeResolutionError(f"Unable to resolve revision '{spec}'") from e

    logger.debug("Resolved %s to %s", spec, commit.hexsha)
    return commit
