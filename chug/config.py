"""Run configuration for changelog generation."""

from pydantic import BaseModel, ConfigDict, Field


class ChangelogConfig(BaseModel):
    """Immutable settings for a single changelog run.

    Built once by the CLI after the owner and repository are known and
    handed to every component that needs them.
    """

    model_config = ConfigDict(frozen=True)

    owner: str = Field(..., min_length=1, description="GitHub repository owner")
    repo: str = Field(..., min_length=1, description="GitHub repository name")
    token: str = Field(..., min_length=1, repr=False, description="GitHub API token")

    @property
    def full_name(self) -> str:
        """Repository in "owner/name" format."""
        return f"{self.owner}/{self.repo}"
