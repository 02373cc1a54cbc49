"""Exceptions raised while reading the local repository."""


class ChugError(Exception):
    """Base class for errors surfaced to the CLI."""


class RepositoryNotFoundError(ChugError):
    """The path does not point at a readable git repository."""


class RemoteError(ChugError):
    """The remote is missing or does not look like a GitHub repository."""


class RangeResolutionError(ChugError):
    """A revision or commit range could not be resolved."""


class PromptAborted(ChugError):
    """The user cancelled an interactive prompt."""
