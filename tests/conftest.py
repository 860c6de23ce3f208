"""Shared fixtures: an isolated home directory and Thunderbird files."""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

MORK_HEADER = """\
// <!-- <mdb:mork:z v="1.4"/> -->
< <(a=c)> // (f=iso-8859-1)
  (B8=fixedBadUidl)(B9=expungedBytes)(A2=totalUnreadMsgs)(A1=totalMsgs)>
<(80=0)(81=1)>
{1:^80 {(k^B1:c)(s=9)} [1(^A1=0)(^A2=0)(^B9=0)]}
"""

PROFILES_INI = """\
[Install4F96D1932A9F858E]
Default=abcd.default
Locked=1

[Profile0]
Name=default
IsRelative=1
Path=abcd.default
Default=1

[General]
StartWithLastProfile=1
Version=2
"""


@pytest.fixture(autouse=True)
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ~ at an empty temporary directory."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir.resolve()


@pytest.fixture
def profile(home: Path) -> Path:
    """Create ~/.thunderbird with a default profile listed in profiles.ini."""
    thunderbird = home / ".thunderbird"
    profile_dir = thunderbird / "abcd.default"
    profile_dir.mkdir(parents=True)
    (thunderbird / "profiles.ini").write_text(PROFILES_INI)
    return profile_dir


@pytest.fixture
def make_mailbox() -> Callable[..., Path]:
    """Return a factory writing a .msf file with the given unread updates.

    Each hex value is appended as a new (^A2=...) cell, the way
    Thunderbird appends transactions.
    """

    def _make(path: Path, *unread: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        updates = "".join(
            f"@$${i + 2}{{@\n[-1(^A2={value})]\n@$$}}{i + 2}@\n"
            for i, value in enumerate(unread)
        )
        path.write_text(MORK_HEADER + updates)
        return path

    return _make


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo handlers installed by the CLI so caplog keeps working."""
    yield
    logger = logging.getLogger("tbunread")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
