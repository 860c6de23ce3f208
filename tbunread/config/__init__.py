"""Configuration management module.

Handles loading the user config file and rendering the active settings.
Config is stored at ~/.config/tbunread/options.toml

Usage:
    from tbunread.config import load_config, render_settings

    file_layer = load_config(Path("~/.config/tbunread/options.toml"))
    print(render_settings(file_layer))
"""

import logging
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from tbunread.errors import ConfigFileMalformed, ConfigFileUnreadable

from .paths import CONFIG_FILE, fullpath
from .schema import (
    BOOL_FIELDS,
    PATH_FIELDS,
    SETTINGS_FIELDS,
    STR_FIELDS,
    EffectiveConfig,
    Settings,
    merge_into,
)

__all__ = [
    "canonical_config_path",
    "load_config",
    "parse_settings",
    "render_settings",
    "merge_into",
    "EffectiveConfig",
    "Settings",
    "CONFIG_FILE",
]

LOGGER = logging.getLogger(__name__)


def load_config(explicit: Path | None = None) -> Settings:
    """Load the user config file as a sparse settings layer.

    A missing default config file yields an empty layer. A file named
    explicitly (with --config) must exist.

    Args:
        explicit: Config file given on the command line, if any.

    Returns:
        Settings with only the keys present in the file.

    Raises:
        ConfigFileUnreadable: If the file cannot be read.
        ConfigFileMalformed: If the file is not valid TOML or a key has the
            wrong type.
    """
    path = canonical_config_path(explicit)
    if path is None:
        if explicit is not None:
            raise ConfigFileUnreadable(f"Specified config file could not be found: {explicit}")
        LOGGER.debug("No user config file at %s, skipping.", CONFIG_FILE)
        return {}

    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileMalformed(f"Failed to parse config file {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigFileUnreadable(f"Failed to read config file {path}: {exc}") from exc

    LOGGER.info("Loaded config file %s", path)
    return parse_settings(raw, source=path)


def parse_settings(raw: dict[str, Any], source: Path | str = "<config>") -> Settings:
    """Validate a decoded TOML table and convert it to a settings layer.

    The file's own "config" key is informational and is dropped.

    Raises:
        ConfigFileMalformed: If a recognized key carries the wrong type.
    """
    settings: Settings = {}

    for key, value in raw.items():
        if key not in SETTINGS_FIELDS:
            LOGGER.warning("Ignoring unknown key '%s' in %s", key, source)
            continue

        if key == "files":
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ConfigFileMalformed(f"{source}: 'files' must be a list of strings.")
            settings["files"] = [Path(v) for v in value]
        elif key in BOOL_FIELDS:
            if not isinstance(value, bool):
                raise ConfigFileMalformed(f"{source}: '{key}' must be true or false.")
            settings[key] = value
        elif key in STR_FIELDS or key in PATH_FIELDS:
            if not isinstance(value, str):
                raise ConfigFileMalformed(f"{source}: '{key}' must be a string.")
            if key == "profile":
                # An empty profile, as written by --dump-config, means unset
                if value:
                    settings["profile"] = Path(value)
            elif key in STR_FIELDS:
                settings[key] = value

    return settings


def render_settings(settings: Settings, default_profile: Path | None = None) -> str:
    """Render settings in the same TOML layout as options.toml.

    One line per field in fixed order. Unset switches render as false and
    unset strings or paths as "". A single file stays on the "files" line,
    several files are placed one per indented line with a trailing comma.

    Args:
        settings: Merged (possibly partial) settings.
        default_profile: Shown when no profile is set, typically the
            auto-discovered one.

    Returns:
        The rendered text, without a final newline.
    """
    files = [str(f) for f in settings.get("files", [])]
    if not files:
        files_line = "files = []"
    elif len(files) == 1:
        files_line = f"files = [{_toml_value(files[0])}]"
    else:
        items = "".join(f"\n    {_toml_value(f)}," for f in files)
        files_line = f"files = [{items}\n]"

    lines = [files_line]
    for key in SETTINGS_FIELDS[1:]:
        if key in BOOL_FIELDS:
            value = bool(settings.get(key, False))
        elif key == "profile":
            profile = settings.get("profile", default_profile)
            value = str(profile) if profile is not None else ""
        elif key == "config":
            value = str(settings["config"]) if settings.get("config") else ""
        else:
            value = settings.get(key, "")
        lines.append(f"{key} = {_toml_value(value)}")

    return "\n".join(lines)


def _toml_value(value: str | bool) -> str:
    """Encode a single scalar as a TOML value."""
    return tomli_w.dumps({"v": value}).removeprefix("v = ").rstrip("\n")


def canonical_config_path(explicit: Path | None) -> Path | None:
    """Return the canonical config file location, or None if it is missing."""
    return fullpath(explicit if explicit is not None else CONFIG_FILE)
