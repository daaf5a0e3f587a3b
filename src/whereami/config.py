"""Runtime settings and logging setup for whereami."""

import logging
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler

PROGRAM_NAME = "whereami"


@dataclass(slots=True, frozen=True)
class Settings:
    """Settings for a single run."""

    color: bool = True

    @classmethod
    def from_console(cls, console: Console | None = None) -> "Settings":
        """
        Derive settings from terminal detection.

        Color is enabled only when rich detects a color-capable terminal
        and NO_COLOR is not set. FORCE_COLOR forces it on.
        """
        console = console or Console()
        return cls(color=console.color_system is not None and not console.no_color)


def setup_logging(level: int = logging.WARNING) -> None:
    """Send log records to stderr through rich, keeping stdout for the report."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
