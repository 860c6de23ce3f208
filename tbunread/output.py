"""Assembly of the text written to stdout."""

from pathlib import Path

from tbunread.config.schema import EffectiveConfig


def location_lines(config: EffectiveConfig, counts: list[tuple[Path, int]]) -> list[str]:
    """Return "<count> <path>" lines for each mailbox when location is on.

    Mailboxes with 0 unread are left out when no_zero is set.
    """
    if not config.location:
        return []
    return [
        f"{count} {path}"
        for path, count in counts
        if not (config.no_zero and count == 0)
    ]


def format_total(config: EffectiveConfig, total: int) -> str:
    """Wrap the total in the before/after text, without newline."""
    number = "" if config.no_zero and total == 0 else str(total)
    text = f"{config.before}{number}{config.after}"
    return text.strip() if config.trim else text


def render_report(config: EffectiveConfig, counts: list[tuple[Path, int]]) -> str:
    """Build the complete stdout text for a run.

    Location lines always end with a newline, the total line only when
    no_newline is not set.
    """
    total = sum(count for _, count in counts)
    lines = [f"{line}\n" for line in location_lines(config, counts)]
    lines.append(format_total(config, total))
    if not config.no_newline:
        lines.append("\n")
    return "".join(lines)
