"""CLI tool for trying out lazylog formatting and level configuration."""

from pathlib import Path
from typing import Optional

import typer
from jsonschema import validate as json_validate
from jsonschema.exceptions import ValidationError as JsonSchemaValidationError
from typing_extensions import Annotated

from lazylog.config import level_config_schema, load_level_config, read_level_file
from lazylog.demo_data import RandomString
from lazylog.formatting.formatter import format_if_enabled
from lazylog.models.enums import Severity


app = typer.Typer(help="lazylog formatting and configuration CLI")
config_app = typer.Typer(help="Manage level configuration files")

app.add_typer(config_app, name="config")


def parse_severity(value: str) -> Severity:
    try:
        return Severity.parse(value)
    except ValueError as e:
        raise typer.BadParameter(str(e))


@app.command("format")
def format_command(
    template: Annotated[str, typer.Argument(help="Message template with {} placeholders")],
    args: Annotated[
        Optional[list[str]], typer.Argument(help="Values for the placeholders")
    ] = None,
    severity: Annotated[
        str, typer.Option(help="Severity of the call")
    ] = "INFO",
    threshold: Annotated[
        str, typer.Option(help="Minimum severity that is emitted")
    ] = "INFO",
):
    """Formats a template the way a logger would."""
    message = format_if_enabled(
        parse_severity(threshold), parse_severity(severity), template, args or []
    )
    if message.suppressed:
        typer.echo("(suppressed)")
        return
    typer.echo(message.text)


@app.command("level")
def level_command(
    name: Annotated[str, typer.Argument(help="Logger name")],
    config: Annotated[
        Optional[Path], typer.Option(help="Path to level configuration YAML")
    ] = None,
):
    """Prints the effective level of a logger."""
    try:
        level_config = load_level_config(config)
    except Exception as e:
        typer.echo(f"Error loading configuration: {str(e)}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{name}: {level_config.level_for(name).value}")


@config_app.command("validate")
def config_validate(
    file_path: Annotated[
        Path, typer.Argument(help="Path to level configuration YAML")
    ],
):
    """Validates a level configuration YAML file against the schema."""
    if not file_path.exists():
        typer.echo(f"Error: File not found: {file_path}", err=True)
        raise typer.Exit(code=1)

    try:
        data = read_level_file(file_path)
    except Exception as e:
        typer.echo(f"Error parsing YAML: {str(e)}", err=True)
        raise typer.Exit(code=1)

    try:
        json_validate(instance=data, schema=level_config_schema())
        typer.echo(f"Level configuration {file_path} is valid.")
    except JsonSchemaValidationError as e:
        typer.echo(f"Validation Error: {e.message}", err=True)
        if e.path:
            typer.echo(f"Path: {'.'.join(str(p) for p in e.path)}", err=True)
        raise typer.Exit(code=1)


@app.command("random-string")
def random_string_command(
    length: Annotated[int, typer.Option(help="Characters per string")] = 21,
    count: Annotated[int, typer.Option(help="How many strings to print")] = 1,
):
    """Prints random alphanumeric strings."""
    try:
        generator = RandomString(length)
    except ValueError as e:
        typer.echo(f"Error: {str(e)}", err=True)
        raise typer.Exit(code=1)
    for _ in range(count):
        typer.echo(generator.next_string())


def main():
    app()


if __name__ == "__main__":
    main()
