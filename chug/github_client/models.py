"""Pydantic models for the GitHub issue data used in changelogs.

These models keep the subset of GitHub's REST API issue object that a
changelog line needs.
API Reference: https://docs.github.com/en/rest/issues/issues
"""

from pydantic import BaseModel, Field


class GitHubUser(BaseModel):
    """GitHub user model, used for issue assignees.

    API Reference: https://docs.github.com/en/rest/users/users
    """

    login: str = Field(..., description="GitHub username/login (string)")
    html_url: str = Field(..., description="URL of the user's profile page")


class GitHubIssue(BaseModel):
    """GitHub issue model representing a referenced issue."""

    number: int = Field(..., description="Issue number within the repository (integer)")
    title: str = Field(..., description="Short description/title of the issue (string)")
    html_url: str = Field(..., description="URL of the issue page")
    assignee: GitHubUser | None = Field(
        None, description="User the issue is assigned to, if any"
    )
