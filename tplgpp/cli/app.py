"""Typer application for the tplgpp command."""

import typer

from .. import __version__


app = typer.Typer(
    name="tplgpp",
    help="Compile topology class definitions into a class schema.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tplgpp {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """tplgpp - topology pre-processor class compiler."""


# Register commands
from .commands import classes, config  # noqa: E402,F401
