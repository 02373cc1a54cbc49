"""Inference of the GitHub owner and repository from a git remote.

Remote URLs come in several shapes: full URLs (``https://github.com/o/r.git``,
``ssh://git@github.com/o/r``), SCP-like shorthands (``git@github.com:o/r.git``)
and bare ``owner/repo`` or ``repo`` references. All of them are normalized to
an absolute URL before the owner and repository are read from its path.
"""

import logging
import re
from urllib.parse import SplitResult, urlsplit

from git import Repo

from .errors import RemoteError

logger = logging.getLogger(__name__)

DEFAULT_HOST = "github.com"
DEFAULT_SCHEME = "https"

HAS_SCHEME_PATTERN = re.compile(r"^[^:]+://")
SCP_LIKE_URL_PATTERN = re.compile(r"^([^@]+@)?([^:]+):/?(.+)$")


def parse_remote_url(ref: str) -> SplitResult:
    """Normalize a remote reference into an absolute URL.

    A bare name with no slash is doubled (``chug`` -> ``chug/chug``), which is
    only a guess at the owner.

    Raises:
        ValueError: If the reference cannot be parsed as a URL.
    """
    if not HAS_SCHEME_PATTERN.match(ref):
        match = SCP_LIKE_URL_PATTERN.match(ref)
        if match:
            user, host, path = match.groups()
            ref = f"ssh://{user or ''}{host}/{path}"

    url = urlsplit(ref)
    if url.scheme:
        return url

    path = url.path
    if "/" not in path:
        path = f"{path}/{path}"
    if not path.startswith("/"):
        path = "/" + path

    return url._replace(scheme=DEFAULT_SCHEME, netloc=DEFAULT_HOST, path=path)


def split_owner_repo(url: SplitResult, remote_name: str = "origin") -> tuple[str, str]:
    """Read ``(owner, repo)`` from a normalized remote URL."""
    parts = url.path.split("/")
    if len(parts) != 3 or parts[0] or not parts[1] or not parts[2]:
        raise RemoteError(
            f"Remote '{remote_name}' doesn't appear to be a GitHub repository"
        )

    owner, repo = parts[1], parts[2]
    repo = repo.removesuffix(".git")
    if not repo:
        raise RemoteError(
            f"Remote '{remote_name}' doesn't appear to be a GitHub repository"
        )
    return owner, repo


def infer_owner_repo(repo: Repo, remote_name: str = "origin") -> tuple[str, str]:
    """Infer the GitHub owner and repository from a configured remote.

    Raises:
        RemoteError: If the remote is missing or its URL has the wrong shape.
    """
    try:
        remote_url = repo.remote(remote_name).url
    except ValueError as e:
        raise RemoteError(f"Remote '{remote_name}' not found") from e

    logger.debug("Remote '%s' points at %s", remote_name, remote_url)
    try:
        url = parse_remote_url(remote_url)
    except ValueError as e:
        raise RemoteError(f"Remote '{remote_name}' has an invalid URL") from e

    owner, name = split_owner_repo(url, remote_name)
    logger.info("Using repository %s/%s from remote '%s'", owner, name, remote_name)
    return owner, name
