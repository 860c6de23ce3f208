"""Unread counts from Thunderbird .msf mailbox summary files.

Thunderbird stores folder summaries in an old format called "Mork":
https://github.com/KevinGoodsell/mork-converter/blob/master/doc/mork-format.txt

Mork is an append-only log of key/value cells. The cell "(^A2=<hex>)"
holds the unread message count, where "^A2" references the key name and
the value after "=" is hexadecimal. The cell is written many times; only
the last occurrence reflects the current state of the folder.

Example:
    (^A2=A) ... (^A2=1F)   -> 31 unread
"""

import logging
import string
from collections.abc import Iterable
from pathlib import Path

from tbunread.errors import UnreadableFile


UNREAD_MARKER = "(^A2="
VALUE_END = ")"

# Thunderbird stores the count as an unsigned 32-bit value
MAX_UNREAD = 0xFFFFFFFF

LOGGER = logging.getLogger(__name__)


def count_unread(path: Path) -> int:
    """Return the number of unread messages recorded in a mailbox file.

    Args:
        path: Path to a .msf mailbox file.

    Returns:
        The unread count, or 0 if the file holds no readable count.

    Raises:
        UnreadableFile: If the file can't be opened or read.
    """
    try:
        # Mork is mostly ASCII, undecodable bytes never touch the marker
        document = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise UnreadableFile(f"Failed to read mailbox: {path}") from exc

    count = parse_unread(document)
    LOGGER.debug("%s: %d unread", path, count)
    return count


def parse_unread(document: str) -> int:
    """Extract the last unread count cell from Mork text.

    Missing marker, missing closing parenthesis, a non-hex value or a
    value beyond 32 bits all yield 0. A leading "+" is allowed.
    """
    start = document.rfind(UNREAD_MARKER)
    if start == -1:
        return 0

    value_start = start + len(UNREAD_MARKER)
    end = document.find(VALUE_END, value_start)
    if end == -1:
        return 0

    token = document[value_start:end]
    digits = token.removeprefix("+")
    # int() alone would also accept "-", spaces, "0x" and underscores
    if not digits or not all(char in string.hexdigits for char in digits):
        LOGGER.debug("Unparsable unread value %r, counting as 0", token)
        return 0

    value = int(digits, 16)
    if value > MAX_UNREAD:
        LOGGER.debug("Unread value %r out of range, counting as 0", token)
        return 0
    return value


def count_mailboxes(files: Iterable[Path]) -> list[tuple[Path, int]]:
    """Count unread messages for each mailbox, in input order.

    Raises:
        UnreadableFile: On the first mailbox that can't be read.
    """
    return [(path, count_unread(path)) for path in files]
