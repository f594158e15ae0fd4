"""Definition and profile Rich renderer helpers."""

from __future__ import annotations

import json

from pydantic import BaseModel
from rich.console import Console
from rich.json import JSON
from rich.table import Table

from profilekit.definition import ProfileDefinition
from profilekit.profile import BasicProfile


def render_definition(console: Console, definition: ProfileDefinition) -> None:
    """Render declared attributes in table form.

    Args:
        console: Rich console.
        definition: Constructed profile definition.
    """
    table = Table(
        title=f"Profile Definition ({definition.profile_type.__name__})",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Attribute", style="bold")
    table.add_column("Classification", style="magenta")
    table.add_column("Converter")
    for name in definition.primary_attributes:
        table.add_row(name, "primary", _converter_label(definition, name))
    for name in definition.secondary_attributes:
        table.add_row(name, "secondary", _converter_label(definition, name))
    console.print(table)


def _converter_label(definition: ProfileDefinition, name: str) -> str:
    """Return display label for the converter bound to ``name``."""
    converter = definition.converter_for(name)
    return "-" if converter is None else repr(converter)


def render_profile(console: Console, profile: BasicProfile) -> None:
    """Render both attribute buckets of a profile.

    Args:
        console: Rich console.
        profile: Populated profile.
    """
    table = Table(
        title=f"Profile {profile.typed_id}",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Location", style="magenta", no_wrap=True)
    table.add_column("Attribute", style="bold")
    table.add_column("Value")
    table.add_column("Type", style="green")
    for name, value in profile.attributes.items():
        table.add_row("profile", name, _display_value(value), type(value).__name__)
    for name, value in profile.authentication_attributes.items():
        table.add_row(
            "authentication", name, _display_value(value), type(value).__name__
        )
    console.print(table)


def render_profile_json(console: Console, profile: BasicProfile) -> None:
    """Render profile as JSON.

    Args:
        console: Rich console.
        profile: Populated profile.
    """
    payload = profile.model_dump(mode="json")
    console.print(JSON(json.dumps(payload, sort_keys=True)))


def _display_value(value: object) -> str:
    if isinstance(value, BaseModel):
        return json.dumps(value.model_dump(mode="json"), sort_keys=True)
    return str(value)
