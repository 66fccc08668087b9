"""Build a command catalog from a JSON document.

Expected shape::

    {
      "commands": [
        {
          "name": "bar",
          "help": "Do the bar thing",
          "options": [
            {"key": "option1", "type": "choice", "choices": ["abc", "def"]},
            {"key": "force", "requires_value": false}
          ]
        }
      ]
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click

from shcomplete.catalog.catalog import CommandCatalog
from shcomplete.catalog.types import CommandDescriptor, OptionDescriptor, ValueType

__all__ = ["catalog_from_json", "load_catalog", "parse_value_type"]

_SIMPLE_TYPES: dict[str, ValueType] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "path": Path,
}


def parse_value_type(spec: dict[str, Any]) -> ValueType:
    """Resolve the ``type`` field of an option definition."""
    type_name = spec.get("type", "str")
    if type_name is None or type_name == "text":
        return None
    if type_name == "choice":
        choices = spec.get("choices")
        if not isinstance(choices, list) or not all(
            isinstance(c, str) for c in choices
        ):
            raise ValueError(f"Option {spec.get('key')!r}: choices must be strings")
        return click.Choice(choices)
    try:
        return _SIMPLE_TYPES[type_name]
    except KeyError:
        raise ValueError(f"Unknown option type: {type_name!r}") from None


def _flag(spec: dict[str, Any], name: str, *, default: bool) -> bool:
    value = spec.get(name, default)
    if not isinstance(value, bool):
        raise TypeError(f"Option {spec.get('key')!r}: {name} must be true or false")
    return value


def _parse_option(spec: Any) -> OptionDescriptor:
    if not isinstance(spec, dict):
        raise TypeError(f"Option definition must be an object, got {spec!r}")
    key = spec.get("key")
    if not isinstance(key, str):
        raise ValueError(f"Option definition without a string key: {spec!r}")

    aliases = spec.get("aliases", [])
    if not isinstance(aliases, list) or not all(isinstance(a, str) for a in aliases):
        raise TypeError(f"Option {key!r}: aliases must be a list of strings")

    return OptionDescriptor(
        key=key,
        aliases=tuple(aliases),
        requires_value=_flag(spec, "requires_value", default=True),
        value_type=parse_value_type(spec),
        option_context=str(spec.get("option_context", "")),
        mandatory=_flag(spec, "mandatory", default=False),
        help=str(spec.get("help", "")),
    )


def _parse_command(spec: Any) -> CommandDescriptor:
    if not isinstance(spec, dict):
        raise TypeError(f"Command definition must be an object, got {spec!r}")
    options = spec.get("options", [])
    if not isinstance(options, list):
        raise TypeError(f"Command {spec.get('name')!r}: options must be a list")

    return CommandDescriptor(
        name=str(spec.get("name", "")),
        options=tuple(_parse_option(option) for option in options),
        help=str(spec.get("help", "")),
    )


def catalog_from_json(data: dict[str, Any]) -> CommandCatalog:
    """
    Build a catalog from already decoded JSON data.

    Raises:
        TypeError: If the document does not have the expected shape.
        ValueError: On invalid names, unknown types or duplicate commands.
    """
    commands = data.get("commands")
    if not isinstance(commands, list):
        raise TypeError("Catalog document needs a 'commands' list")
    return CommandCatalog(_parse_command(command) for command in commands)


def load_catalog(path: Path) -> CommandCatalog:
    """Read and parse a JSON catalog file."""
    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise TypeError(f"{path}: catalog document must be a JSON object")
    return catalog_from_json(data)
