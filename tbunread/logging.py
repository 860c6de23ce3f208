"""Diagnostic logging to stderr.

stdout carries only the unread count, so every log record goes to stderr.
"""

import logging
import sys

import typer

LOGGER_NAME = "tbunread"

# Level symbol and colour, levels above WARNING share the error style
LEVEL_STYLES: dict[int, tuple[str, str]] = {
    logging.DEBUG: ("D", typer.colors.CYAN),
    logging.INFO: ("I", typer.colors.GREEN),
    logging.WARNING: ("!", typer.colors.YELLOW),
}
ERROR_STYLE = ("X", typer.colors.RED)


class ConsoleFormatter(logging.Formatter):
    """Prefix each message with a one-letter level symbol."""

    def __init__(self, use_color: bool) -> None:
        super().__init__("%(message)s")
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno > logging.WARNING:
            symbol, color = ERROR_STYLE
        else:
            symbol, color = LEVEL_STYLES.get(record.levelno, ("?", typer.colors.WHITE))
        if self.use_color:
            symbol = typer.style(symbol, fg=color)
        return f"{symbol} {super().format(record)}"


def configure_logging(verbosity: int = 0) -> None:
    """Attach a stderr handler to the tbunread logger.

    Args:
        verbosity: 0 for warnings only, 1 for info, 2 or more for debug.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level_from_verbosity(verbosity))
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ConsoleFormatter(use_color=sys.stderr.isatty()))
    logger.addHandler(handler)


def level_from_verbosity(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


__all__ = ["ConsoleFormatter", "configure_logging"]
