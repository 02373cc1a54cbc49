"""Tests for fetching and formatting changelog issues."""

import logging
from unittest.mock import Mock, call

import pytest
from github.GithubException import UnknownObjectException

from chug.changelog import format_issue, format_issues, get_issues
from chug.config import ChangelogConfig
from chug.github_client.models import GitHubIssue, GitHubUser


@pytest.fixture
def config() -> ChangelogConfig:
    return ChangelogConfig(owner="acme", repo="widgets", token="test_token")


def _issue(number: int, title: str = "Fix bug", assignee=None) -> GitHubIssue:
    return GitHubIssue(
        number=number,
        title=title,
        html_url=f"https://x/{number}",
        assignee=assignee,
    )


class TestGetIssues:
    """Test get_issues function."""

    def test_fetches_in_order(self, config: ChangelogConfig) -> None:
        client = Mock()
        client.get_issue.side_effect = lambda owner, repo, number: _issue(number)

        result = get_issues(client, config, [3, 5, 8])

        assert [issue.number for issue in result] == [3, 5, 8]
        assert client.get_issue.call_args_list == [
            call("acme", "widgets", 3),
            call("acme", "widgets", 5),
            call("acme", "widgets", 8),
        ]

    def test_failed_fetch_is_skipped(
        self, config: ChangelogConfig, caplog: pytest.LogCaptureFixture
    ) -> None:
        def fetch(owner: str, repo: str, number: int) -> GitHubIssue:
            if number == 5:
                raise UnknownObjectException(404, "Not Found", None)
            return _issue(number)

        client = Mock()
        client.get_issue.side_effect = fetch

        with caplog.at_level(logging.INFO, logger="chug.changelog"):
            result = get_issues(client, config, [3, 5])

        assert len(result) == 1
        assert result[0].number == 3
        assert "Error fetching issue #5" in caplog.text

    def test_logs_progress(
        self, config: ChangelogConfig, caplog: pytest.LogCaptureFixture
    ) -> None:
        client = Mock()
        client.get_issue.side_effect = lambda owner, repo, number: _issue(number)

        with caplog.at_level(logging.INFO, logger="chug.changelog"):
            get_issues(client, config, [3, 5])

        messages = [record.getMessage() for record in caplog.records]
        assert "#3" in messages
        assert "#5" in messages

    def test_all_failed(self, config: ChangelogConfig) -> None:
        client = Mock()
        client.get_issue.side_effect = RuntimeError("connection reset")

        assert get_issues(client, config, [1, 2]) == []

    def test_empty(self, config: ChangelogConfig) -> None:
        client = Mock()

        assert get_issues(client, config, []) == []
        client.get_issue.assert_not_called()


class TestFormatIssues:
    """Test format_issue and format_issues functions."""

    def test_without_assignee(self) -> None:
        assert format_issue(_issue(3)) == "- #[3](https://x/3) Fix bug"

    def test_with_assignee(self) -> None:
        issue = _issue(3, assignee=GitHubUser(login="ann", html_url="https://x/ann"))

        assert format_issue(issue) == "- #[3](https://x/3) Fix bug ([ann](https://x/ann))"

    def test_joins_with_newline(self) -> None:
        issues = [_issue(3), _issue(5, title="Add feature")]

        assert format_issues(issues) == (
            "- #[3](https://x/3) Fix bug\n- #[5](https://x/5) Add feature"
        )

    def test_single_issue_has_no_trailing_newline(self) -> None:
        assert format_issues([_issue(3)]) == "- #[3](https://x/3) Fix bug"

    def test_empty(self) -> None:
        assert format_issues([]) == ""
