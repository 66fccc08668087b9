from __future__ import annotations

import dataclasses
from typing import Any, TypeAlias

# A Python type, an Enum subclass or a click.ParamType instance
ValueType: TypeAlias = Any

DEFAULT_OPTION_KEY = ""


@dataclasses.dataclass(frozen=True)
class OptionDescriptor:
    """A declared option of a command.

    The empty key denotes the command's default option, which is filled by
    bare tokens instead of a ``--key``.
    """

    key: str
    aliases: tuple[str, ...] = ()
    requires_value: bool = True
    value_type: ValueType = str
    option_context: str = ""
    mandatory: bool = False
    help: str = ""

    @property
    def keys(self) -> tuple[str, ...]:
        return (self.key, *self.aliases)

    @property
    def is_default(self) -> bool:
        return DEFAULT_OPTION_KEY in self.keys


@dataclasses.dataclass(frozen=True)
class CommandDescriptor:
    """A command name with its ordered option signature."""

    name: str
    options: tuple[OptionDescriptor, ...] = ()
    help: str = ""

    def __post_init__(self) -> None:
        if not self.name or any(c in self.name for c in " \t\"'"):
            raise ValueError(f"Invalid command name: {self.name!r}")
        seen: set[str] = set()
        for option in self.options:
            for key in option.keys:
                if key in seen:
                    raise ValueError(
                        f"Duplicate option key {key!r} in command {self.name!r}"
                    )
                seen.add(key)

    def find_option(self, key: str) -> OptionDescriptor | None:
        """Return the option declaring ``key`` (or an alias of it)."""
        for option in self.options:
            if key in option.keys:
                return option
        return None

    @property
    def default_option(self) -> OptionDescriptor | None:
        return self.find_option(DEFAULT_OPTION_KEY)

    @property
    def takes_arguments(self) -> bool:
        return bool(self.options)
