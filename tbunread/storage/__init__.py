"""Readers for Thunderbird mailbox summary files."""

from .msf import UNREAD_MARKER, count_mailboxes, count_unread, parse_unread

__all__ = ["UNREAD_MARKER", "count_mailboxes", "count_unread", "parse_unread"]
