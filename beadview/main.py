"""Application Bootstrap (Entry Point)."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Sequence

from .cli import app
from .config import get_settings

LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 3

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"

# Commands that take over the terminal with Textual
TUI_COMMANDS = frozenset({"tui"})


def runs_tui(argv: Sequence[str]) -> bool:
    """True if ``argv`` (without the program name) will open the TUI.

    Bare ``beadview`` and ``beadview tui ...`` do; ``--version``/``--help``
    and every other command print to the terminal and exit.
    """
    if any(arg in ("--version", "-V", "--help") for arg in argv):
        return False
    commands = [arg for arg in argv if not arg.startswith("-")]
    return not commands or commands[0] in TUI_COMMANDS


def _file_handler(log_file: Path) -> RotatingFileHandler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_file,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handler.setLevel(logging.DEBUG)
    return handler


def setup_logging(console: bool = True) -> None:
    """Configure logging to ~/.beadview/beadview.log (BEADVIEW_LOG_FILE).

    Level comes from BEADVIEW_LOG_LEVEL (default: INFO). With ``console``,
    WARNING+ is also echoed to stderr; leave it off while the TUI owns the
    terminal, or log lines are drawn over the screen.
    """
    try:
        settings = get_settings()
        log_file = settings.log_file
        log_level = settings.log_level
    except Exception as e:
        print(f"Warning: Failed to load settings for logging: {e}", file=sys.stderr)
        log_file = Path.home() / ".beadview" / "beadview.log"
        log_level = "INFO"

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level))
    root_logger.addHandler(_file_handler(log_file))

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        console_handler.setLevel(logging.WARNING)
        root_logger.addHandler(console_handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def main() -> None:
    """Main entry point for the beadview CLI."""
    setup_logging(console=not runs_tui(sys.argv[1:]))
    app()


if __name__ == "__main__":
    main()
