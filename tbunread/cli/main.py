"""Main CLI entry point for tbunread."""

from pathlib import Path
from typing import NoReturn

import typer
from typing_extensions import Annotated

from tbunread import __version__
from tbunread.config import render_settings
from tbunread.config.schema import Settings
from tbunread.errors import ProfileNotFound, TbUnreadError
from tbunread.logging import configure_logging
from tbunread.output import render_report
from tbunread.resolve import find_default_profile, resolve_settings
from tbunread.storage import count_mailboxes

app = typer.Typer(
    name="tbunread",
    help="Get number of unread messages from Thunderbird mailbox files.",
    epilog="Mailboxes are Thunderbird .msf summary files or the folders holding them.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tbunread version {__version__}")
        raise typer.Exit()


@app.command()
def count(
    files: Annotated[
        list[Path] | None,
        typer.Argument(
            help="Mailbox .msf files or folders, absolute or relative to the profile "
            "directory. Folders are searched for Inbox.msf or INBOX.msf.",
            show_default=False,
        ),
    ] = None,
    profile: Annotated[
        Path | None,
        typer.Option("--profile", "-p", metavar="DIR", help="Path to Thunderbird user profile folder"),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", metavar="FILE", help="Configuration file with options in TOML format"),
    ] = None,
    dump_config: Annotated[
        bool, typer.Option("--dump-config", "-d", help="Print current active settings and exit")
    ] = False,
    no_config: Annotated[
        bool, typer.Option("--no-config", "-C", help="Ignore user configuration file")
    ] = False,
    no_zero: Annotated[
        bool, typer.Option("--no-zero", "-z", help="Suppress output of number if mail count is 0")
    ] = False,
    no_newline: Annotated[
        bool, typer.Option("--no-newline", "-n", help="Do not output final newline character")
    ] = False,
    trim: Annotated[
        bool,
        typer.Option("--trim", "-t", help="Strip leading and trailing whitespace from output text"),
    ] = False,
    before: Annotated[
        str | None,
        typer.Option("--before", "-b", metavar="TEXT", help="Prepend text to the beginning of total count"),
    ] = None,
    after: Annotated[
        str | None,
        typer.Option("--after", "-a", metavar="TEXT", help="Append text to end of total count"),
    ] = None,
    location: Annotated[
        bool, typer.Option("--location", "-l", help="Display file path for each input mailbox")
    ] = False,
    verbose: Annotated[
        int, typer.Option("--verbose", "-v", count=True, help="Log progress to stderr (repeat for debug)")
    ] = 0,
    version: Annotated[
        bool,
        typer.Option("--version", "-V", callback=_version_callback, is_eager=True, help="Show version and exit"),
    ] = False,
):
    """Count unread messages in Thunderbird mailboxes and print the total.

    Settings come from built-in defaults, the user config file
    (~/.config/tbunread/options.toml) and these options, later ones winning.
    """
    configure_logging(verbose)

    arguments = _arguments_layer(
        files=files,
        profile=profile,
        before=before,
        after=after,
        dump_config=dump_config,
        no_config=no_config,
        no_zero=no_zero,
        no_newline=no_newline,
        trim=trim,
        location=location,
    )

    try:
        effective = resolve_settings(arguments, config)
    except TbUnreadError as e:
        snapshot = e.settings or {}
        if dump_config or snapshot.get("dump_config", False):
            typer.echo(render_settings(snapshot, _discovered_profile(snapshot)))
        _fail(e)

    if effective.dump_config:
        typer.echo(render_settings(effective.as_settings()))
        return

    try:
        counts = count_mailboxes(effective.files)
    except TbUnreadError as e:
        _fail(e)

    typer.echo(render_report(effective, counts), nl=False)


def _arguments_layer(
    *,
    files: list[Path] | None,
    profile: Path | None,
    before: str | None,
    after: str | None,
    **switches: bool,
) -> Settings:
    """Build the settings layer for command-line arguments.

    Flags only ever switch an option on, so an absent flag leaves the
    config file value in place.
    """
    arguments: Settings = {}
    if files:
        arguments["files"] = list(files)
    if profile is not None:
        arguments["profile"] = profile
    if before is not None:
        arguments["before"] = before
    if after is not None:
        arguments["after"] = after
    for key, value in switches.items():
        if value:
            arguments[key] = True
    return arguments


def _discovered_profile(snapshot: Settings) -> Path | None:
    """Default profile shown in a dump when none was resolved."""
    if "profile" in snapshot:
        return None
    try:
        return find_default_profile()
    except ProfileNotFound:
        return None


def _fail(error: TbUnreadError) -> NoReturn:
    typer.secho(f"Error: {error}", fg=typer.colors.RED, err=True)
    raise typer.Exit(1) from error


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
