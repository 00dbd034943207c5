import logging

from rich.console import Console
from rich.logging import RichHandler

from urlsentry.config import LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Route every module logger through rich on stderr, keeping stdout for results."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
        force=True,
    )
