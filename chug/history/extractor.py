"""Extraction of issue references from the commits in a range."""

import logging
import re
from collections.abc import Iterable

from git import Commit, Repo
from git.exc import BadName, GitCommandError

from .errors import RangeResolutionError

logger = logging.getLogger(__name__)

ISSUE_PATTERN = re.compile(r"#(\d+)")


def find_issue_references(message: str) -> list[str]:
    """Return the digit strings of every ``#123`` style reference in a message.

    The leading ``#`` is stripped; the strings are returned as written, so
    ``#007`` yields ``"007"``.
    """
    return ISSUE_PATTERN.findall(message)


def parse_issue_numbers(references: Iterable[str]) -> list[int]:
    """Convert raw issue references to unique issue numbers, ascending.

    References that do not parse as integers are logged and dropped.
    Differently written references to the same number (``07`` and ``7``)
    collapse into a single entry.
    """
    numbers: set[int] = set()
    for reference in references:
        try:
            numbers.add(int(reference))
        except ValueError as e:
            logger.warning("Skipping issue reference %r: %s", reference, e)
    return sorted(numbers)


def extract_issue_numbers(repo: Repo, start: Commit, end: Commit) -> list[int]:
    """Collect the issue numbers referenced by commits in ``start..end``.

    Args:
        repo: Open repository the revisions belong to
        start: Exclusive lower bound of the range
        end: Inclusive upper bound of the range

    Returns:
        Unique issue numbers in ascending order

    Raises:
        RangeResolutionError: If the range cannot be walked
    """
    rev_range = f"{start.hexsha}..{end.hexsha}"
    logger.debug("Walking commit range %s", rev_range)

    references: set[str] = set()
    commit_count = 0
    try:
        for commit in repo.iter_commits(rev_range):
            commit_count += 1
            message = commit.message
            if isinstance(message, bytes):
                message = message.decode("utf-8", errors="replace")
            references.update(find_issue_references(message))
    except (GitCommandError, BadName, ValueError) as e:
        raise RangeResolutionError(f"Unable to walk commit range {rev_range}") from e

    logger.debug(
        "Scanned %d commits, found %d issue references", commit_count, len(references)
    )
    return parse_issue_numbers(references)
