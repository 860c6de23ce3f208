"""Tests for stdout text assembly."""

from pathlib import Path

import pytest

from tbunread.config.schema import EffectiveConfig
from tbunread.output import format_total, location_lines, render_report

A = Path("/p/a/INBOX.msf")
B = Path("/p/b/Inbox.msf")


def _config(**overrides) -> EffectiveConfig:
    return EffectiveConfig(files=(A, B), profile=Path("/p"), config=None, **overrides)


class TestFormatTotal:
    """Tests for format_total."""

    def test_plain(self):
        """The total is printed in decimal."""
        assert format_total(_config(), 15) == "15"

    def test_before_and_after(self):
        """Before and after text wrap the number."""
        assert format_total(_config(before="Unread: ", after=" msgs"), 15) == "Unread: 15 msgs"

    def test_no_zero_hides_zero(self):
        """With no_zero a total of 0 prints nothing but the wrapping text."""
        assert format_total(_config(no_zero=True, before="[", after="]"), 0) == "[]"

    def test_no_zero_keeps_nonzero(self):
        """no_zero only affects a total of 0."""
        assert format_total(_config(no_zero=True), 3) == "3"

    def test_trim(self):
        """trim strips whitespace around the whole text."""
        config = _config(trim=True, before="  Mail: ", after=" \t")

        assert format_total(config, 2) == "Mail: 2"

    def test_trim_with_hidden_zero(self):
        """Trimming text around a hidden zero can leave nothing."""
        config = _config(trim=True, no_zero=True, before=" ", after=" ")

        assert format_total(config, 0) == ""


class TestLocationLines:
    """Tests for location_lines."""

    def test_disabled(self):
        """No lines without location."""
        assert location_lines(_config(), [(A, 1), (B, 2)]) == []

    def test_lines_in_order(self):
        """Each mailbox gets a "<count> <path>" line."""
        lines = location_lines(_config(location=True), [(A, 1), (B, 0)])

        assert lines == [f"1 {A}", f"0 {B}"]

    def test_no_zero_skips_empty(self):
        """Mailboxes without unread mail are skipped with no_zero."""
        lines = location_lines(_config(location=True, no_zero=True), [(A, 0), (B, 2)])

        assert lines == [f"2 {B}"]


class TestRenderReport:
    """Tests for render_report."""

    def test_sum_with_wrapping(self):
        """Counts are summed and the total line ends with a newline."""
        config = _config(before="Unread: ", after=" msgs")

        assert render_report(config, [(A, 10), (B, 5)]) == "Unread: 15 msgs\n"

    @pytest.mark.parametrize("no_newline, expected", [(False, "\n"), (True, "")])
    def test_all_zero_with_no_zero(self, no_newline: bool, expected: str):
        """Only the newline is left for a hidden zero total."""
        config = _config(no_zero=True, no_newline=no_newline)

        assert render_report(config, [(A, 0), (B, 0)]) == expected

    def test_location_lines_before_total(self):
        """Location lines come first, each on its own line."""
        config = _config(location=True, no_newline=True)

        assert render_report(config, [(A, 1), (B, 2)]) == f"1 {A}\n2 {B}\n3"
