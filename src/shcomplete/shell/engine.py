"""Completion engine facade.

Ties the command catalog and the value-source registry to the classifier
and the completion generator behind a single entry point.
"""

from __future__ import annotations

from shcomplete.catalog.catalog import CommandCatalog
from shcomplete.catalog.types import CommandDescriptor
from shcomplete.catalog.value_sources import ValueSource, ValueSourceRegistry
from shcomplete.logging import get_logger
from shcomplete.shell.completion_context import get_completion_context
from shcomplete.shell.completions import get_completions
from shcomplete.shell.types import Completion, CompletionResult

__all__ = ["CompletionEngine"]


class CompletionEngine:
    """Complete partially typed command lines.

    The engine keeps no state between calls: each call reads one snapshot
    of the catalog and of the value sources.
    """

    def __init__(
        self,
        catalog: CommandCatalog | None = None,
        value_sources: ValueSourceRegistry | None = None,
    ) -> None:
        self.catalog = catalog if catalog is not None else CommandCatalog()
        self.value_sources = (
            value_sources if value_sources is not None else ValueSourceRegistry()
        )
        self._logger = get_logger("shell.engine")

    def add(self, item: CommandDescriptor | ValueSource) -> None:
        """Register a command or a value source."""
        if isinstance(item, CommandDescriptor):
            self.catalog.add_command(item)
        else:
            self.value_sources.add_value_source(item)

    def complete(self, buffer: str, cursor: int) -> CompletionResult:
        """
        Complete ``buffer`` at ``cursor``.

        Args:
            buffer: The input buffer. Text after the cursor is ignored.
            cursor: Cursor offset, ``0 <= cursor <= len(buffer)``.

        Returns:
            CompletionResult whose completions are spliced at ``offset``.

        Raises:
            ValueError: If the cursor lies outside the buffer.
        """
        commands = self.catalog.snapshot()
        ctx = get_completion_context(buffer, cursor, commands)
        self._logger.debug(
            "Completion context: mode=%s, prefix=%r", ctx.mode, ctx.prefix
        )

        result = get_completions(ctx, commands, self.value_sources)
        self._logger.debug(
            "Returning %d completions at offset %d",
            len(result.completions),
            result.offset,
        )
        return result

    def complete_advanced(
        self, buffer: str, cursor: int, candidates: list[Completion]
    ) -> int:
        """
        Append completions for ``buffer`` at ``cursor`` to ``candidates``.

        Existing entries of ``candidates`` are kept.

        Returns:
            The offset at which each appended completion is spliced.
        """
        result = self.complete(buffer, cursor)
        candidates.extend(result.completions)
        return result.offset
