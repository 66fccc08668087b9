"""Registry of commands known to the completion engine."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping

from shcomplete.catalog.types import CommandDescriptor
from shcomplete.logging import get_logger

__all__ = ["CommandCatalog"]


class CommandCatalog:
    """Ordered, thread-safe mapping of command name to descriptor.

    Registration takes a lock; readers get an immutable snapshot so a
    completion call never observes a half-applied registration.
    """

    def __init__(self, commands: Iterable[CommandDescriptor] = ()) -> None:
        self._commands: dict[str, CommandDescriptor] = {}
        self._snapshot: Mapping[str, CommandDescriptor] = {}
        self._lock = threading.Lock()
        self._logger = get_logger("catalog")
        for command in commands:
            self.add_command(command)

    def add_command(self, command: CommandDescriptor) -> None:
        """Register a command.

        Raises:
            ValueError: If a command with the same name is already registered.
        """
        with self._lock:
            if command.name in self._commands:
                raise ValueError(f"Command already registered: {command.name}")
            self._commands[command.name] = command
            # Copy-on-write: snapshots handed out earlier stay untouched
            self._snapshot = dict(self._commands)
        self._logger.debug(
            "Registered command %s with %d options",
            command.name,
            len(command.options),
        )

    def snapshot(self) -> Mapping[str, CommandDescriptor]:
        """Return the commands as registered at the time of the call."""
        return self._snapshot

    def get(self, name: str) -> CommandDescriptor | None:
        return self._snapshot.get(name)

    def names(self) -> list[str]:
        return list(self._snapshot)

    def __contains__(self, name: object) -> bool:
        return name in self._snapshot

    def __len__(self) -> int:
        return len(self._snapshot)
