from __future__ import annotations

import importlib

import click

from shcomplete.catalog.catalog import CommandCatalog
from shcomplete.catalog.types import (
    DEFAULT_OPTION_KEY,
    CommandDescriptor,
    OptionDescriptor,
    ValueType,
)

# click's scalar types map onto the plain Python types value sources match on
_CLICK_TYPE_NAMES: dict[str, ValueType] = {
    "text": str,
    "integer": int,
    "float": float,
    "boolean": bool,
}


def _long_keys(opts: list[str]) -> list[str]:
    """Return the ``--long`` spellings of an option without their dashes."""
    return [opt[2:] for opt in opts if opt.startswith("--") and len(opt) > 2]


def _option_value_type(param: click.Parameter) -> ValueType:
    type_name = getattr(param.type, "name", "")
    return _CLICK_TYPE_NAMES.get(type_name, param.type)


def _click_option_to_descriptor(opt: click.Option) -> OptionDescriptor | None:
    """Convert a click Option; options with no long spelling are skipped."""
    keys = _long_keys(opt.opts) + _long_keys(opt.secondary_opts)
    if not keys:
        return None

    is_flag = bool(getattr(opt, "is_flag", False)) or bool(getattr(opt, "count", False))
    return OptionDescriptor(
        key=keys[0],
        aliases=tuple(keys[1:]),
        requires_value=not is_flag,
        value_type=_option_value_type(opt),
        mandatory=opt.required,
        help=opt.help or "",
    )


def _click_argument_to_descriptor(arg: click.Argument) -> OptionDescriptor:
    return OptionDescriptor(
        key=DEFAULT_OPTION_KEY,
        value_type=_option_value_type(arg),
        mandatory=arg.required,
    )


def _extract_options(command: click.Command) -> tuple[OptionDescriptor, ...]:
    """Extract option descriptors from a click command.

    The first positional argument becomes the default option.
    """
    options: list[OptionDescriptor] = []
    has_default = False
    for param in command.params:
        if getattr(param, "hidden", False):
            continue
        if isinstance(param, click.Option):
            descriptor = _click_option_to_descriptor(param)
            if descriptor is not None:
                options.append(descriptor)
        elif isinstance(param, click.Argument) and not has_default:
            options.append(_click_argument_to_descriptor(param))
            has_default = True
    return tuple(options)


def catalog_from_click(group: click.Group) -> CommandCatalog:
    """Build a catalog from the subcommands of a click group."""
    ctx = click.Context(group)
    catalog = CommandCatalog()
    for name in group.list_commands(ctx):
        command = group.get_command(ctx, name)
        if command is None or getattr(command, "hidden", False):
            continue
        catalog.add_command(
            CommandDescriptor(
                name=name,
                options=_extract_options(command),
                help=command.get_short_help_str(),
            )
        )
    return catalog


def load_click_app(target: str) -> click.Group:
    """
    Import a click group from a ``module:attribute`` string.

    Raises:
        ValueError: If the target is malformed.
        TypeError: If the attribute is not a click group.
    """
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Expected MODULE:ATTRIBUTE, got {target!r}")
    module = importlib.import_module(module_name)
    app = getattr(module, attr)
    if not isinstance(app, click.Group):
        raise TypeError(f"{target} is not a click group: {type(app).__name__}")
    return app
