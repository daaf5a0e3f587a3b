"""whereami - Command-line entry point and option dispatch."""

import logging
import sys
from collections.abc import Callable, Iterable, Sequence
from enum import Enum

from whereami.config import Settings, setup_logging
from whereami.errors import QueryError
from whereami.models import SystemSnapshot
from whereami.report import Painter, ReportRenderer
from whereami.sysinfo import SystemCollector

logger = logging.getLogger(__name__)


class Option(Enum):
    """Report blocks selectable from the command line."""

    DISK = "disk"
    RELEASE_NOTES = "release-notes"
    MEMORY = "memory"
    HELP = "help"


OPTION_FLAGS: dict[str, Option] = {
    "-d": Option.DISK,
    "--disk": Option.DISK,
    "-r": Option.RELEASE_NOTES,
    "--release-notes": Option.RELEASE_NOTES,
    "-m": Option.MEMORY,
    "--memory": Option.MEMORY,
    "-h": Option.HELP,
    "--help": Option.HELP,
}


def unique(args: Iterable[str]) -> list[str]:
    """Drop repeated arguments, keeping the first occurrence of each in order."""
    return list(dict.fromkeys(args))


def render_option(option: Option, snapshot: SystemSnapshot, renderer: ReportRenderer) -> str:
    """Render the block for a single recognized option."""
    handlers: dict[Option, Callable[[], str]] = {
        Option.DISK: lambda: renderer.render_disk(snapshot.disk),
        Option.RELEASE_NOTES: lambda: renderer.render_release_notes(snapshot.release_notes),
        Option.MEMORY: lambda: renderer.render_memory(snapshot.memory) + "\n",
        Option.HELP: renderer.render_help,
    }
    return handlers[option]()


def dispatch(args: Sequence[str], snapshot: SystemSnapshot, renderer: ReportRenderer) -> str:
    """
    Build the program output for the given arguments.

    With no arguments the full report is produced. Otherwise each distinct
    argument is handled in order, and the first unrecognized one produces an
    error message with the help text and stops processing.
    """
    if not args:
        return renderer.render_full(snapshot) + "\n"

    blocks: list[str] = []
    for arg in unique(args):
        option = OPTION_FLAGS.get(arg)
        if option is None:
            logger.debug("Unrecognized option %r", arg)
            blocks.append(renderer.render_invalid_option(arg))
            break
        blocks.append(render_option(option, snapshot, renderer))
    return "".join(blocks)


def run(
    args: Sequence[str],
    collector: SystemCollector | None = None,
    settings: Settings | None = None,
) -> int:
    """
    Gather system info and print the output for args.

    Every query runs up front, whatever the arguments. A failed query prints
    a highlighted error instead of any report. The exit status is 0 either way.
    """
    settings = settings or Settings.from_console()
    renderer = ReportRenderer(Painter(color=settings.color))
    collector = collector or SystemCollector()

    try:
        snapshot = collector.collect()
    except QueryError as e:
        logger.debug("System query %s failed", e.query, exc_info=True)
        print(renderer.render_error(e))
        return 0

    print(dispatch(args, snapshot, renderer), end="")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the whereami command."""
    setup_logging()
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        return run(args)
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
