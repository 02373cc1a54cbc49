"""Interactive prompts for the revisions bounding the changelog."""

import sys

from git import Commit, Repo
from rich.console import Console
from rich.prompt import Prompt

from ..history.errors import PromptAborted
from ..history.repository import resolve_revision

# Importing readline gives input() line editing and history.
if sys.platform != "win32":
    import readline  # noqa: F401


def read_ref(repo: Repo, label: str, console: Console) -> Commit:
    """Ask for a revision and resolve it against ``repo``.

    Raises:
        PromptAborted: If the prompt is interrupted or input ends.
        RangeResolutionError: If the answer does not name a revision.
    """
    try:
        spec = Prompt.ask(label, console=console)
    except (KeyboardInterrupt, EOFError) as e:
        console.print()
        raise PromptAborted(label) from e

    return resolve_revision(repo, spec)
