"""Typer CLI entrypoint for profilekit."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from profilekit.cli.bootstrap import configure_logging, resolve_definition
from profilekit.cli.renderers.profile import (
    render_definition,
    render_profile,
    render_profile_json,
)
from profilekit.config import DefinitionConfigError, load_attribute_payload
from profilekit.definition import ProfileDefinition

app = typer.Typer(help="Profile attribute conversion CLI")
_CONSOLE = Console()
_LOGGER = logging.getLogger(__name__)

_DefinitionOption = Annotated[
    Path | None,
    typer.Option(
        "--definition",
        file_okay=True,
        dir_okay=False,
        help="Path to declarative definition YAML/JSON file.",
    ),
]


def _load_definition(definition_file: Path | None) -> ProfileDefinition:
    """Resolve definition or exit with code 1.

    Raises:
        Exit: When the definition file is invalid.
    """
    try:
        return resolve_definition(definition_file)
    except DefinitionConfigError as exc:
        _CONSOLE.print(f"[bold red]{escape(str(exc))}[/bold red]")
        raise typer.Exit(code=1) from exc


@app.command("describe")
def describe_command(definition_file: _DefinitionOption = None) -> None:
    """List declared attributes with their classification and converter.

    Args:
        definition_file: Optional definition file; common attributes otherwise.
    """
    configure_logging()
    definition = _load_definition(definition_file)
    render_definition(_CONSOLE, definition)


@app.command("convert")
def convert_command(  # noqa: PLR0913
    attributes_file: Annotated[
        Path,
        typer.Option(
            "--attributes",
            file_okay=True,
            dir_okay=False,
            help="Raw profile attributes YAML/JSON file.",
        ),
    ],
    auth_attributes_file: Annotated[
        Path | None,
        typer.Option(
            "--auth-attributes",
            file_okay=True,
            dir_okay=False,
            help="Raw authentication attributes YAML/JSON file.",
        ),
    ] = None,
    definition_file: _DefinitionOption = None,
    profile_id: Annotated[
        str | None,
        typer.Option("--id", help="Identifier assigned to the built profile."),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the profile as JSON."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log every conversion at DEBUG level."),
    ] = False,
) -> None:
    """Convert raw attribute payloads into a profile and print it.

    Args:
        attributes_file: Raw profile attributes file.
        auth_attributes_file: Optional raw authentication attributes file.
        definition_file: Optional definition file; common attributes otherwise.
        profile_id: Optional profile identifier.
        as_json: Whether to print JSON instead of a table.
        verbose: Whether to enable DEBUG logging.

    Raises:
        Exit: With code 1 when inputs are invalid or conversion fails.
    """
    configure_logging(verbose=verbose)
    definition = _load_definition(definition_file)
    try:
        profile_attributes = load_attribute_payload(attributes_file)
        authentication_attributes = (
            load_attribute_payload(auth_attributes_file)
            if auth_attributes_file is not None
            else None
        )
    except DefinitionConfigError as exc:
        _CONSOLE.print(f"[bold red]{escape(str(exc))}[/bold red]")
        raise typer.Exit(code=1) from exc

    profile = definition.new_profile()
    profile.set_id(profile_id)
    try:
        definition.convert_and_add_all(
            profile, profile_attributes, authentication_attributes
        )
    except Exception as exc:
        _LOGGER.exception("attribute conversion failed")
        _CONSOLE.print(
            f"[bold red]Attribute conversion failed: {escape(str(exc))}[/bold red]"
        )
        raise typer.Exit(code=1) from exc

    if as_json:
        render_profile_json(_CONSOLE, profile)
    else:
        render_profile(_CONSOLE, profile)


if __name__ == "__main__":
    app()
