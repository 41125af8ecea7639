"""config command: show or change persistent settings."""

import typer

from ...config import get_config_path, load_config, set_config_value
from ..app import app


@app.command("config")
def config_command(
    action: str = typer.Argument(..., help="show or set"),
    key: str | None = typer.Argument(None, help="Setting to change, e.g. logging.level"),
    value: str | None = typer.Argument(None, help="New value"),
) -> None:
    """Show or change tplgpp settings."""
    if action == "show":
        try:
            config = load_config()
        except ValueError as e:
            typer.echo(f"Error: {e}")
            raise typer.Exit(1)
        typer.echo(f"Config file: {get_config_path()}")
        typer.echo("")
        typer.echo("Compiler")
        typer.echo(f"  class_type: {config.compiler.class_type.value}")
        typer.echo("Logging")
        typer.echo(f"  level: {config.logging.level}")
        return

    if action == "set":
        if key is None or value is None:
            typer.echo("Usage: tplgpp config set KEY VALUE")
            raise typer.Exit(1)
        try:
            set_config_value(key, value)
        except KeyError:
            typer.echo(f"Unknown key: {key}")
            raise typer.Exit(1)
        except ValueError as e:
            typer.echo(str(e))
            raise typer.Exit(1)
        typer.echo(f"Set {key} = {value}")
        return

    typer.echo(f"Unknown action: {action}")
    raise typer.Exit(1)
