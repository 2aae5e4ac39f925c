"""Logging setup for the command line front-end."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str | int = "WARNING", console: Console | None = None) -> None:
    """Route log records through a rich handler on stderr.

    Library modules only create ``logging.getLogger(__name__)`` loggers; this
    is called once by the CLI. Calling it again replaces the handler.
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=level.upper() if isinstance(level, str) else level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
