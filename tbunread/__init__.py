"""Count unread messages in Thunderbird mailboxes."""

from importlib import metadata


def _discover_version() -> str:
    """Return the installed package version, falling back to dev marker."""
    try:
        return metadata.version("tbunread")
    except metadata.PackageNotFoundError:  # pragma: no cover - source checkout
        return "0.0.0"


__all__ = ["__version__"]
__version__ = _discover_version()
