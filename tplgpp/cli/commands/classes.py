"""classes command: compile a class tree and print the result."""

import json
from pathlib import Path

import typer
import yaml

from ...classes import Registry, define_classes
from ...config import configure_logging, load_config
from ...core.errors import SchemaError
from ...core.models import Attribute, AttributeMask, Class
from ...core.node import load_tree
from ..app import app


def _format_mask(mask: AttributeMask) -> str:
    names = [flag.name.lower() for flag in AttributeMask if flag in mask]
    return ",".join(names) if names else "-"


def _format_attribute(attr: Attribute) -> list[str]:
    c = attr.constraint
    line = (
        f"  {attr.name} [{attr.param_type.value}] "
        f"min={c.min} max={c.max} mask={_format_mask(c.mask)}"
    )
    if attr.has_token:
        line += f" token={attr.token_ref}"

    lines = [line]
    for ref in c.valid_values:
        value = ref.value if ref.resolved else "unresolved"
        label = ref.string if ref.string is not None else ref.id
        lines.append(f"    {ref.id}: {label} -> {value}")
    return lines


def format_class(cls: Class) -> str:
    """Render a compiled class as indented text."""
    lines = [f"Class {cls.name} ({cls.class_type.value}), {cls.num_args} argument(s)"]
    for attr in cls.attributes:
        lines.extend(_format_attribute(attr))
    return "\n".join(lines)


@app.command("classes")
def classes_command(
    path: Path = typer.Argument(..., help="YAML file holding class definitions"),
    as_json: bool = typer.Option(False, "--json", help="Print classes as JSON."),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging."),
) -> None:
    """Compile class definitions and print the resulting classes."""
    try:
        config = load_config()
    except ValueError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)
    configure_logging(config, debug=debug)

    if not path.exists():
        typer.echo(f"Error: file not found: {path}")
        raise typer.Exit(1)

    registry = Registry()
    try:
        tree = load_tree(path)
        define_classes(registry, tree, config.compiler.class_type)
    except (SchemaError, yaml.YAMLError) as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps([cls.model_dump(mode="json") for cls in registry], indent=2))
        return

    for cls in registry:
        typer.echo(format_class(cls))
