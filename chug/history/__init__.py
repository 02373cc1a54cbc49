"""Local git repository access: revisions, commit ranges and remotes."""

from .errors import (
    ChugError,
    PromptAborted,
    RangeResolutionError,
    RemoteError,
    RepositoryNotFoundError,
)
from .extractor import (
    extract_issue_numbers,
    find_issue_references,
    parse_issue_numbers,
)
from .remote import infer_owner_repo, parse_remote_url, split_owner_repo
from .repository import open_repository, resolve_revision

__all__ = [
    "ChugError",
    "PromptAborted",
    "RangeResolutionError",
    "RemoteError",
    "RepositoryNotFoundError",
    "extract_issue_numbers",
    "find_issue_references",
    "infer_owner_repo",
    "open_repository",
    "parse_issue_numbers",
    "parse_remote_url",
    "resolve_revision",
    "split_owner_repo",
]
