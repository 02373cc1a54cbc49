"""GitHub API client using PyGitHub."""

import logging
import os

from github import Github
from github.Issue import Issue
from github.NamedUser import NamedUser
from github.Repository import Repository

from .models import GitHubIssue, GitHubUser

logger = logging.getLogger(__name__)

TOKEN_ENV_VARS = ("GITHUB_API_TOKEN", "GITHUB_TOKEN")


class GitHubClient:
    """Token authenticated GitHub API client."""

    def __init__(self, token: str | None = None):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub personal access token. If None, reads from
                GITHUB_API_TOKEN, then GITHUB_TOKEN.
        """
        self.token = token or next(
            (os.environ[name] for name in TOKEN_ENV_VARS if os.getenv(name)), None
        )
        if not self.token:
            raise ValueError(
                "GitHub token is required. Set GITHUB_API_TOKEN environment variable."
            )

        self.github = Github(self.token)

    def _convert_user(self, github_user: NamedUser) -> GitHubUser:
        """Convert PyGitHub user to our model."""
        return GitHubUser(login=github_user.login, html_url=github_user.html_url)

    def _convert_issue(self, github_issue: Issue) -> GitHubIssue:
        """Convert PyGitHub issue to our model."""
        assignee = None
        if github_issue.assignee is not None:
            assignee = self._convert_user(github_issue.assignee)

        return GitHubIssue(
            number=github_issue.number,
            title=github_issue.title,
            html_url=github_issue.html_url,
            assignee=assignee,
        )

    def get_repository(self, owner: str, repo: str) -> Repository:
        """Get a lazy repository object; no request is made until it is used."""
        return self.github.get_repo(f"{owner}/{repo}", lazy=True)

    def get_issue(self, owner: str, repo: str, issue_number: int) -> GitHubIssue:
        """Fetch a single issue.

        Raises:
            github.GithubException: If the API request fails
        """
        repository = self.get_repository(owner, repo)
        github_issue = repository.get_issue(issue_number)
        logger.debug("Fetched issue #%d: %s", github_issue.number, github_issue.title)

        return self._convert_issue(github_issue)
