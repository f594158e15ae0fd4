"""CLI bootstrap helpers: logging and definition resolution."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.logging import RichHandler

from profilekit.common import CommonProfileDefinition
from profilekit.config import load_definition_config
from profilekit.configured import ConfiguredProfileDefinition
from profilekit.definition import ProfileDefinition

_LOGGING_CONFIGURED = False


def configure_logging(*, verbose: bool = False) -> None:
    """Configure Rich-backed logging once for CLI commands.

    Args:
        verbose: Log at DEBUG instead of INFO.
    """
    global _LOGGING_CONFIGURED  # noqa: PLW0603
    level = logging.DEBUG if verbose else logging.INFO
    if _LOGGING_CONFIGURED:
        logging.getLogger().setLevel(level)
        return
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
    )
    _LOGGING_CONFIGURED = True


def resolve_definition(definition_file: Path | None) -> ProfileDefinition:
    """Build definition from file, or the common definition when omitted.

    Args:
        definition_file: Optional declarative definition path.

    Returns:
        Constructed profile definition.

    Raises:
        DefinitionConfigError: If the definition file is invalid.
    """
    if definition_file is None:
        return CommonProfileDefinition()
    return ConfiguredProfileDefinition(load_definition_config(definition_file))
