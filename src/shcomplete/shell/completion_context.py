"""Completion context determination for shell command lines.

Builds a CompletionContext from the tokenized line to decide which
syntactic position the cursor occupies.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from shcomplete.catalog.options import option_key_from_token
from shcomplete.catalog.types import CommandDescriptor, OptionDescriptor
from shcomplete.shell.tokenizer import tokenize
from shcomplete.shell.types import CompletionContext, CompletionMode, Token


def get_completion_context(
    buffer: str,
    cursor: int,
    commands: Mapping[str, CommandDescriptor],
) -> CompletionContext:
    """
    Get completion context at the given cursor position.

    Args:
        buffer: The input buffer. Text after the cursor is ignored.
        cursor: Cursor offset, ``0 <= cursor <= len(buffer)``.
        commands: Snapshot of the command catalog.

    Returns:
        CompletionContext with mode, tokens, active token, etc.

    Raises:
        ValueError: If the cursor lies outside the buffer.
    """
    tokens, token_index = tokenize(buffer, cursor)
    active = tokens[token_index]
    prefix = active.value

    if token_index == 0:
        return CompletionContext(
            mode=CompletionMode.COMMAND,
            tokens=tokens,
            active=active,
            token_index=token_index,
            prefix=prefix,
        )

    command_name = tokens[0].value
    command = commands.get(command_name)
    if command is None:
        return CompletionContext(
            mode=CompletionMode.NONE,
            tokens=tokens,
            active=active,
            token_index=token_index,
            prefix=prefix,
        )

    consumed, expecting = _walk_options(command, tokens[1:token_index])
    mode = CompletionMode.OPTION_KEY
    option_key: str | None = None

    if expecting is not None:
        mode = CompletionMode.OPTION_VALUE
        option_key = expecting.key
    else:
        default = command.default_option
        if (
            default is not None
            and default.key not in consumed
            and (prefix or active.quote_char is not None)
            and not (active.quote_char is None and prefix.startswith("-"))
        ):
            mode = CompletionMode.OPTION_VALUE
            option_key = default.key

    return CompletionContext(
        mode=mode,
        tokens=tokens,
        active=active,
        token_index=token_index,
        prefix=prefix,
        command_name=command_name,
        option_key=option_key,
        consumed=consumed,
    )


def _walk_options(
    command: CommandDescriptor, tokens: Sequence[Token]
) -> tuple[frozenset[str], OptionDescriptor | None]:
    """
    Replay the tokens between the command name and the cursor.

    Returns:
        A tuple of (primary keys already used, option still waiting for its
        value). Unknown ``--keys`` are skipped; bare tokens fill the default
        option when the command has one.
    """
    consumed: set[str] = set()
    expecting: OptionDescriptor | None = None

    for token in tokens:
        if expecting is not None:
            expecting = None
            continue

        key = option_key_from_token(token.value) if token.quote_char is None else None
        if key is None:
            default = command.default_option
            if default is not None:
                consumed.add(default.key)
            continue

        option = command.find_option(key)
        if option is None:
            continue
        consumed.add(option.key)
        if option.requires_value:
            expecting = option

    return frozenset(consumed), expecting
