"""Completion logic for shell command lines.

Routes completion requests based on CompletionContext mode and generates
completions from the command catalog and the value sources.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from shcomplete.catalog.options import format_option_label, option_label_matches_prefix
from shcomplete.catalog.types import DEFAULT_OPTION_KEY, CommandDescriptor, OptionDescriptor
from shcomplete.catalog.value_sources import ValueCandidates, ValueSourceRegistry
from shcomplete.error_handling import wrap_handler
from shcomplete.logging import get_logger
from shcomplete.shell.types import (
    Completion,
    CompletionContext,
    CompletionKind,
    CompletionMode,
    CompletionResult,
)

_SEPARATOR = " "
_NEEDS_QUOTING = frozenset(" \t\"'\\")

_logger = get_logger("shell.completions")


def get_completions(
    ctx: CompletionContext,
    commands: Mapping[str, CommandDescriptor],
    value_sources: ValueSourceRegistry,
) -> CompletionResult:
    """
    Get completions based on the completion context.

    Routes to the appropriate handler based on mode:
    - "command": Complete command names
    - "option_key": Complete option keys not yet used on the line
    - "option_value": Complete values from the option's value source
    - "none": Return no completions

    Args:
        ctx: The completion context from the classifier
        commands: Snapshot of the command catalog
        value_sources: Registry consulted for option values

    Returns:
        CompletionResult with the splice offset and the completions.
    """
    active = ctx.active
    empty = CompletionResult(offset=active.start, completions=[])

    # The user finished this token by closing its quote
    if active.closed or ctx.mode == CompletionMode.NONE:
        return empty

    if ctx.mode == CompletionMode.COMMAND:
        return CompletionResult(
            offset=active.start,
            completions=_complete_commands(commands, ctx.prefix),
        )

    command = commands.get(ctx.command_name or "")
    if command is None:
        return empty

    if ctx.mode == CompletionMode.OPTION_KEY:
        # A quoted token is never a key; completing it would drop the quote
        if active.quote_char is not None:
            return empty
        completions = _complete_option_keys(command, ctx.prefix, ctx.consumed)
        more_may_exist = False
        default = command.default_option
        if not ctx.prefix and default is not None and default.key not in ctx.consumed:
            values, more_may_exist = _complete_values(ctx, default, value_sources)
            completions.extend(values)
        return CompletionResult(
            offset=active.start,
            completions=_dedupe(completions),
            more_may_exist=more_may_exist,
        )

    option = command.find_option(
        ctx.option_key if ctx.option_key is not None else DEFAULT_OPTION_KEY
    )
    if option is None:
        return empty

    completions, more_may_exist = _complete_values(ctx, option, value_sources)
    return CompletionResult(
        offset=active.content_start,
        completions=completions,
        more_may_exist=more_may_exist,
    )


def longest_common_prefix(values: Iterable[str]) -> str:
    """Return the longest prefix shared by every value ("" for no values)."""
    items = list(values)
    if not items:
        return ""
    shortest = min(items, key=len)
    for i, char in enumerate(shortest):
        if any(item[i] != char for item in items):
            return shortest[:i]
    return shortest


def _complete_commands(
    commands: Mapping[str, CommandDescriptor], prefix: str
) -> list[Completion]:
    """Complete command names; a unique match that takes options gets a space."""
    matches = [cmd for name, cmd in commands.items() if name.startswith(prefix)]
    unique = len(matches) == 1
    return [
        Completion(
            text=cmd.name + (_SEPARATOR if unique and cmd.takes_arguments else ""),
            heading=cmd.help or None,
            kind=CompletionKind.COMMAND,
        )
        for cmd in matches
    ]


def _complete_option_keys(
    command: CommandDescriptor,
    prefix: str,
    consumed: frozenset[str],
) -> list[Completion]:
    """
    Complete option keys for a command.

    Options already present on the line are skipped. Each option is offered
    once, under the first of its keys matching the prefix.
    """
    matches: list[tuple[str, OptionDescriptor]] = []

    for option in command.options:
        if option.key in consumed:
            continue
        for key in option.keys:
            if key == DEFAULT_OPTION_KEY:
                continue
            if option_label_matches_prefix(key, prefix):
                matches.append((format_option_label(key), option))
                break

    unique = len(matches) == 1
    items: list[Completion] = []
    for label, option in matches:
        heading_parts: list[str] = []
        if option.mandatory:
            heading_parts.append("(required)")
        if option.help:
            heading_parts.append(option.help)
        items.append(
            Completion(
                text=label + (_SEPARATOR if unique and option.requires_value else ""),
                heading=" ".join(heading_parts) or None,
                kind=CompletionKind.OPTION,
            )
        )
    return items


def _complete_values(
    ctx: CompletionContext,
    option: OptionDescriptor,
    value_sources: ValueSourceRegistry,
) -> tuple[list[Completion], bool]:
    """
    Complete an option value from the first supporting value source.

    Values inside an open quote continue that quote (the offset already sits
    past it) and are escaped for it; unquoted values that would not survive
    tokenizing are wrapped in double quotes.
    """
    prefix = ctx.prefix
    quote_char = ctx.active.quote_char
    candidates = _lookup_values(value_sources, option, prefix)

    items: list[Completion] = []
    for value in candidates.values:
        if not value.startswith(prefix):
            continue
        if quote_char is None:
            text = _quote_if_needed(value)
        else:
            text = _escape_for_quote(value, quote_char)
        items.append(Completion(text=text, kind=CompletionKind.VALUE))

    return _dedupe(items), candidates.more_may_exist


@wrap_handler(
    logger=_logger,
    feature_name="value source",
    default_factory=lambda: ValueCandidates([]),
)
def _lookup_values(
    value_sources: ValueSourceRegistry,
    option: OptionDescriptor,
    prefix: str,
) -> ValueCandidates:
    source = value_sources.find(option.value_type, option.option_context)
    if source is None:
        _logger.debug("No value source for option %r", option.key)
        return ValueCandidates([])
    values, more_may_exist = source.enumerate_candidates(
        prefix, option.value_type, option.option_context
    )
    return ValueCandidates([str(value) for value in values], bool(more_may_exist))


def _quote_if_needed(value: str) -> str:
    if not any(char in _NEEDS_QUOTING for char in value):
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _escape_for_quote(value: str, quote_char: str) -> str:
    """Escape a value so it reads back unchanged inside an open quote."""
    if quote_char == "'":
        # Single quotes cannot hold a quote: close, escape it, reopen
        return value.replace("'", "'\\''")
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _dedupe(items: list[Completion]) -> list[Completion]:
    seen: set[str] = set()
    unique: list[Completion] = []
    for item in items:
        if item.text in seen:
            continue
        seen.add(item.text)
        unique.append(item)
    return unique
