"""Fetching referenced issues and rendering them as a markdown list."""

import logging

from .config import ChangelogConfig
from .github_client.client import GitHubClient
from .github_client.models import GitHubIssue

logger = logging.getLogger(__name__)


def get_issues(
    client: GitHubClient, config: ChangelogConfig, issue_numbers: list[int]
) -> list[GitHubIssue]:
    """Fetch issues one at a time, skipping any that fail.

    Args:
        client: Authenticated GitHub client
        config: Run configuration naming the owner and repository
        issue_numbers: Issue numbers in the order they should be returned

    Returns:
        The fetched issues, in input order
    """
    issues: list[GitHubIssue] = []
    for number in issue_numbers:
        logger.info("#%d", number)
        try:
            issue = client.get_issue(config.owner, config.repo, number)
        except Exception as e:
            logger.error("Error fetching issue #%d: %s", number, e)
            continue

        issues.append(issue)

    return issues


def format_issue(issue: GitHubIssue) -> str:
    """Render one issue as a markdown list item."""
    line = f"- #[{issue.number}]({issue.html_url}) {issue.title}"
    if issue.assignee is not None:
        line += f" ([{issue.assignee.login}]({issue.assignee.html_url}))"
    return line


def format_issues(issues: list[GitHubIssue]) -> str:
    """Render issues as newline separated markdown list items."""
    return "\n".join(format_issue(issue) for issue in issues)
