"""Errors raised while resolving settings and reading mailboxes.

Every failure surfaced to the user derives from TbUnreadError, so the CLI
can catch one type, print the message and exit non-zero.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tbunread.config.schema import Settings


class TbUnreadError(Exception):
    """Base class for all fatal tbunread errors.

    Attributes:
        settings: Snapshot of the partially merged settings at the time of
            failure, attached by the resolver so dump mode can still print it.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.settings: Settings | None = None


class ConfigFileUnreadable(TbUnreadError):
    """The user config file exists (or was named) but cannot be read."""


class ConfigFileMalformed(TbUnreadError):
    """The user config file is not valid TOML or has mistyped keys."""


class ProfileNotFound(TbUnreadError):
    """The profile directory is missing or could not be discovered."""


class NoInputFiles(TbUnreadError):
    """No mailbox files were given by arguments or config file."""


class UnreadableFile(TbUnreadError):
    """A mailbox file could not be opened or read."""
