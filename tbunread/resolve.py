"""Settings resolution.

Merges the three settings layers in fixed precedence order

    defaults < config file < arguments

and then normalizes the result against the filesystem: finds the
Thunderbird profile, makes every mailbox path absolute and expands
mailbox folders to their default inbox file.
"""

import logging
from pathlib import Path

from tbunread.config import canonical_config_path, load_config
from tbunread.config.paths import PROFILES_INI, THUNDERBIRD_DIR, expand_home, fullpath
from tbunread.config.schema import EffectiveConfig, Settings, merge_into
from tbunread.errors import NoInputFiles, ProfileNotFound, TbUnreadError

# Probed in order inside a mailbox folder, first existing file wins
DEFAULT_MAILBOX_NAMES = ("Inbox.msf", "INBOX.msf")

# Key in profiles.ini naming the profile directory
PROFILE_PATH_KEY = "Path="

LOGGER = logging.getLogger(__name__)


def default_settings(config_path: Path | None = None) -> Settings:
    """Build the built-in defaults layer.

    Only the config file location is set. Every other field is left unset
    and falls back to False or "" when the settings are frozen.
    """
    settings: Settings = {}
    config = canonical_config_path(config_path)
    if config is not None:
        settings["config"] = config
    return settings


def resolve_settings(arguments: Settings, config_path: Path | None = None) -> EffectiveConfig:
    """Merge all settings layers and resolve them against the filesystem.

    Args:
        arguments: Settings given on the command line. Only present keys
            override the config file.
        config_path: Config file named with --config, or None for the
            default location.

    Returns:
        The run-ready configuration.

    Raises:
        TbUnreadError: Any resolution failure. The merged settings at the
            time of failure are attached as ``error.settings``.
    """
    settings = default_settings(config_path)

    try:
        if not arguments.get("no_config", False):
            merge_into(settings, load_config(config_path))
        else:
            LOGGER.debug("Skipping user config file.")
        merge_into(settings, arguments)

        profile = resolve_profile(settings)
        expand_relative_files(settings, profile)
        expand_directory_defaults(settings)
    except TbUnreadError as exc:
        exc.settings = dict(settings)
        raise

    return EffectiveConfig.from_settings(settings)


def resolve_profile(settings: Settings) -> Path:
    """Return the absolute profile directory and store it in settings.

    An explicit profile must exist. Without one, the default profile is
    discovered from profiles.ini.

    Raises:
        ProfileNotFound: If the profile can't be found.
    """
    if "profile" in settings:
        profile = fullpath(settings["profile"])
        if profile is None:
            raise ProfileNotFound(
                f"Specified profile could not be found: {settings['profile']}"
            )
    else:
        profile = find_default_profile()

    settings["profile"] = profile
    return profile


def find_default_profile(base_dir: Path | None = None) -> Path:
    """Look up the default profile directory in profiles.ini.

    The first "Path=" entry is taken as the default profile, its value
    runs to the end of that line and is relative to the Thunderbird
    directory unless absolute.

    Args:
        base_dir: Thunderbird directory, defaults to ~/.thunderbird.

    Raises:
        ProfileNotFound: If profiles.ini is missing or names no profile.
    """
    base_dir = base_dir if base_dir is not None else THUNDERBIRD_DIR
    ini_path = fullpath(base_dir / PROFILES_INI)
    if ini_path is None:
        raise ProfileNotFound(f"Could not find Thunderbird {PROFILES_INI} in {base_dir}.")

    try:
        document = ini_path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise ProfileNotFound(f"Failed to read {ini_path}: {exc}") from exc

    _, found, rest = document.partition(PROFILE_PATH_KEY)
    name = rest.split("\n", 1)[0].rstrip("\r") if found else ""
    if not name:
        raise ProfileNotFound(f"No default profile found in {ini_path}.")

    profile = ini_path.parent / name
    LOGGER.info("Using default profile %s", profile)
    return profile


def expand_relative_files(settings: Settings, profile: Path) -> None:
    """Make every mailbox path absolute, relative ones under the profile.

    Paths that don't exist stay absolute but unresolved, so reading them
    fails later with the full path in the message.

    Raises:
        NoInputFiles: If no files are set.
    """
    files = settings.get("files") or []
    if not files:
        raise NoInputFiles("No input files for mailboxes specified.")

    expanded: list[Path] = []
    for entry in files:
        path = expand_home(entry)
        if not path.is_absolute():
            path = profile / path
        resolved = fullpath(path)
        if resolved is None:
            LOGGER.warning("Mailbox not found: %s", path)
            resolved = path.absolute()
        expanded.append(resolved)

    settings["files"] = expanded


def expand_directory_defaults(settings: Settings) -> None:
    """Replace mailbox folders by their default inbox file.

    Folders without any default inbox file are kept as given and fail
    when read.
    """
    expanded: list[Path] = []
    for path in settings.get("files", []):
        expanded.append(default_mailbox(path) if path.is_dir() else path)
    settings["files"] = expanded


def default_mailbox(directory: Path) -> Path:
    """Return the default inbox file inside a mailbox folder, if present."""
    for name in DEFAULT_MAILBOX_NAMES:
        candidate = directory / name
        if candidate.is_file():
            LOGGER.debug("Expanded folder %s to %s", directory, candidate)
            return candidate
    return directory
