"""GitHub client package for API interaction."""

from .client import GitHubClient
from .models import GitHubIssue, GitHubUser

__all__ = [
    "GitHubClient",
    "GitHubIssue",
    "GitHubUser",
]
