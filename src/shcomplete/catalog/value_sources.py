"""Pluggable sources of option values.

A value source declares which value types it understands and enumerates
full candidate values for a partially typed value. Sources are kept in a
registry and consulted in registration order; the first one whose
``supports`` returns True is used.
"""

from __future__ import annotations

import enum
import os
import threading
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import NamedTuple, Protocol, runtime_checkable

import click

from shcomplete.catalog.types import ValueType
from shcomplete.logging import get_logger

__all__ = [
    "BooleanValueSource",
    "ChoiceValueSource",
    "EnumValueSource",
    "PathValueSource",
    "StaticValueSource",
    "ValueCandidates",
    "ValueSource",
    "ValueSourceRegistry",
    "default_value_sources",
]


class ValueCandidates(NamedTuple):
    """Full replacement values offered for an option value slot."""

    values: list[str]
    more_may_exist: bool = False


@runtime_checkable
class ValueSource(Protocol):
    def supports(self, value_type: ValueType, option_context: str) -> bool: ...

    def enumerate_candidates(
        self, partial: str, value_type: ValueType, option_context: str
    ) -> ValueCandidates: ...


class StaticValueSource:
    """Offer a fixed list of values for options of one declared type."""

    def __init__(self, values: Iterable[str], value_type: ValueType = str) -> None:
        self._values = list(values)
        self._value_type = value_type

    def supports(self, value_type: ValueType, option_context: str) -> bool:
        return value_type is self._value_type

    def enumerate_candidates(
        self, partial: str, value_type: ValueType, option_context: str
    ) -> ValueCandidates:
        return ValueCandidates(list(self._values))


class ChoiceValueSource:
    """Values of a ``click.Choice`` parameter type."""

    def supports(self, value_type: ValueType, option_context: str) -> bool:
        return isinstance(value_type, click.Choice)

    def enumerate_candidates(
        self, partial: str, value_type: ValueType, option_context: str
    ) -> ValueCandidates:
        return ValueCandidates([str(choice) for choice in value_type.choices])


class EnumValueSource:
    """Members of an ``enum.Enum`` subclass.

    String-valued members are offered by value, other members by name.
    """

    def supports(self, value_type: ValueType, option_context: str) -> bool:
        return isinstance(value_type, type) and issubclass(value_type, enum.Enum)

    def enumerate_candidates(
        self, partial: str, value_type: ValueType, option_context: str
    ) -> ValueCandidates:
        values = [
            member.value if isinstance(member.value, str) else member.name
            for member in value_type
        ]
        return ValueCandidates(values)


class BooleanValueSource:
    def supports(self, value_type: ValueType, option_context: str) -> bool:
        return value_type is bool or value_type is click.BOOL

    def enumerate_candidates(
        self, partial: str, value_type: ValueType, option_context: str
    ) -> ValueCandidates:
        return ValueCandidates(["true", "false"])


class PathValueSource:
    """Filesystem entries next to the partially typed path.

    Directories are offered with a trailing separator; since the user may
    descend into them, ``more_may_exist`` is set whenever one is offered.
    Hidden entries are only listed when the partial name starts with a dot.
    """

    def __init__(self, root: Path | None = None) -> None:
        self._root = root

    def supports(self, value_type: ValueType, option_context: str) -> bool:
        return value_type is Path or isinstance(value_type, click.Path)

    def enumerate_candidates(
        self, partial: str, value_type: ValueType, option_context: str
    ) -> ValueCandidates:
        head, _, name_prefix = partial.rpartition(os.sep)
        if head or partial.startswith(os.sep):
            dir_part = head + os.sep
        else:
            dir_part = ""

        directory = Path(os.path.expanduser(dir_part or "."))
        if self._root is not None and not directory.is_absolute():
            directory = self._root / directory
        if not directory.is_dir():
            return ValueCandidates([])

        values: list[str] = []
        more_may_exist = False
        for entry in sorted(directory.iterdir(), key=lambda p: p.name):
            if entry.name.startswith(".") and not name_prefix.startswith("."):
                continue
            if entry.is_dir():
                values.append(f"{dir_part}{entry.name}{os.sep}")
                more_may_exist = True
            else:
                values.append(f"{dir_part}{entry.name}")
        return ValueCandidates(values, more_may_exist)


def default_value_sources() -> list[ValueSource]:
    """Return the built-in value sources in lookup order."""
    return [
        ChoiceValueSource(),
        EnumValueSource(),
        BooleanValueSource(),
        PathValueSource(),
    ]


class ValueSourceRegistry:
    """Ordered list of value sources; the first supporting source wins."""

    def __init__(self, sources: Iterable[ValueSource] = ()) -> None:
        self._sources: tuple[ValueSource, ...] = ()
        self._lock = threading.Lock()
        self._logger = get_logger("catalog.value_sources")
        for source in sources:
            self.add_value_source(source)

    def add_value_source(self, source: ValueSource) -> None:
        if not isinstance(source, ValueSource):
            raise TypeError(
                f"Not a value source: {type(source).__name__} "
                "(needs supports() and enumerate_candidates())"
            )
        with self._lock:
            self._sources = (*self._sources, source)
        self._logger.debug("Registered value source %s", type(source).__name__)

    def snapshot(self) -> Sequence[ValueSource]:
        return self._sources

    def find(
        self, value_type: ValueType, option_context: str
    ) -> ValueSource | None:
        """Return the first registered source supporting ``value_type``."""
        for source in self._sources:
            if source.supports(value_type, option_context):
                return source
        return None

    def __len__(self) -> int:
        return len(self._sources)
