"""Logging setup for the CLI.

All log records go to standard error through rich, leaving standard output
for the generated changelog.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

error_console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Route the ``chug`` loggers to a rich handler on stderr."""
    logger = logging.getLogger("chug")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=error_console,
            show_path=verbose,
            show_time=verbose,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
