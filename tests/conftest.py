"""Test configuration and fixtures."""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from git import Actor, Commit, Repo

AUTHOR = Actor("Test Author", "author@example.com")


@pytest.fixture
def git_repo(tmp_path: Path) -> Iterator[Repo]:
    """Create an empty git repository."""
    repo = Repo.init(tmp_path / "repo")
    yield repo
    repo.close()


@pytest.fixture
def make_commit(git_repo: Repo) -> Callable[[str], Commit]:
    """Return a helper that commits to ``git_repo`` with the given message."""

    def _commit(message: str) -> Commit:
        return git_repo.index.commit(message, author=AUTHOR, committer=AUTHOR)

    return _commit
