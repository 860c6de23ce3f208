"""Configuration schema definitions.

Uses TypedDict for the sparse setting layers: a missing key means the
layer does not set that field. These keys match options.toml.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import TypedDict


class Settings(TypedDict, total=False):
    """One partial layer of settings (defaults, config file or arguments).

    Attributes:
        files: Mailbox .msf files or folders, absolute or profile-relative.
        profile: Thunderbird profile directory.
        config: Location of the user config file (informational only).
        dump_config: Print the active settings and exit.
        no_config: Skip loading the user config file.
        no_zero: Print nothing for a total of 0.
        no_newline: Omit the final newline.
        trim: Strip surrounding whitespace from the total line.
        before: Text printed before the total.
        after: Text printed after the total.
        location: Print "<count> <path>" for each mailbox.
    """

    files: list[Path]
    profile: Path
    config: Path
    dump_config: bool
    no_config: bool
    no_zero: bool
    no_newline: bool
    trim: bool
    before: str
    after: str
    location: bool


# Field order used for rendering, matches EffectiveConfig
SETTINGS_FIELDS = (
    "files",
    "profile",
    "config",
    "dump_config",
    "no_config",
    "no_zero",
    "no_newline",
    "trim",
    "before",
    "after",
    "location",
)

BOOL_FIELDS = frozenset(
    {"dump_config", "no_config", "no_zero", "no_newline", "trim", "location"}
)
STR_FIELDS = frozenset({"before", "after"})
PATH_FIELDS = frozenset({"profile", "config"})


def merge_into(base: Settings, overlay: Settings) -> Settings:
    """Copy every field present in overlay onto base.

    Layers must be applied lowest precedence first:
    defaults, then config file, then arguments.

    Args:
        base: Settings being built up; modified in place.
        overlay: Higher precedence layer.

    Returns:
        The updated base, for chaining.
    """
    for key in SETTINGS_FIELDS:
        if key in overlay:
            value = overlay[key]
            base[key] = list(value) if key == "files" else value
    return base


@dataclass(frozen=True)
class EffectiveConfig:
    """Fully merged and resolved settings for one run.

    Built once the resolver has finished; every switch is concrete and
    every file path is absolute.
    """

    files: tuple[Path, ...]
    profile: Path | None
    config: Path | None
    dump_config: bool = False
    no_config: bool = False
    no_zero: bool = False
    no_newline: bool = False
    trim: bool = False
    before: str = ""
    after: str = ""
    location: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "EffectiveConfig":
        """Freeze merged settings, turning unset switches into False."""
        return cls(
            files=tuple(settings.get("files", [])),
            profile=settings.get("profile"),
            config=settings.get("config"),
            before=settings.get("before", ""),
            after=settings.get("after", ""),
            **{key: bool(settings.get(key, False)) for key in BOOL_FIELDS},
        )

    def as_settings(self) -> Settings:
        """Return the resolved values as a settings mapping for rendering."""
        settings: Settings = {"files": list(self.files)}
        for key in SETTINGS_FIELDS[1:]:
            value = getattr(self, key)
            if value is not None:
                settings[key] = value
        return settings
