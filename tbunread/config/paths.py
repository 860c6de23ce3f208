"""Path constants and the shared path canonicalization helper.

Follows the XDG Base Directory specification for the user config:
- Config: ~/.config/tbunread/options.toml

Thunderbird keeps its profiles under ~/.thunderbird, with profiles.ini
naming the default profile directory.
"""

from pathlib import Path


CONFIG_DIR = Path("~/.config/tbunread")
CONFIG_FILE = CONFIG_DIR / "options.toml"

THUNDERBIRD_DIR = Path("~/.thunderbird")
PROFILES_INI = "profiles.ini"


def expand_home(path: Path | str) -> Path:
    """Expand a leading "~" or "~/" to the home directory.

    "~user" forms are left alone, so "~name/Inbox.msf" stays a relative path.
    """
    path = Path(path)
    if path.parts and path.parts[0] == "~":
        return Path.home().joinpath(*path.parts[1:])
    return path


def fullpath(path: Path | str) -> Path | None:
    """Expand "~" and resolve a path to its absolute, symlink-free form.

    Returns None when the path does not exist.
    """
    try:
        return expand_home(path).resolve(strict=True)
    except (OSError, RuntimeError):
        return None
