"""Type definitions for shell line completion."""

from __future__ import annotations

from enum import Enum

from typing import NamedTuple


class _StrEnum(str, Enum):
    """String-valued enum that behaves like str at runtime."""

    def __str__(self) -> str:
        return str(self.value)


class CompletionMode(_StrEnum):
    """Syntactic role of the token under the cursor."""

    COMMAND = "command"
    OPTION_KEY = "option_key"
    OPTION_VALUE = "option_value"
    NONE = "none"


class CompletionKind(_StrEnum):
    """Kind categorizes completion items."""

    COMMAND = "command"
    OPTION = "option"
    VALUE = "value"


class Token(NamedTuple):
    """A token with its position in the original buffer."""

    raw: str  # Text as typed, quotes and escapes included
    value: str  # Unquoted value
    start: int  # Start offset in buffer
    end: int  # End offset in buffer (exclusive)
    quote_char: str | None = None  # Quote that opened the token
    closed: bool = False  # Opening quote was matched before the cursor

    @property
    def content_start(self) -> int:
        """Offset of the first value character, past any opening quote."""
        return self.start + 1 if self.quote_char is not None else self.start


class Completion(NamedTuple):
    """A continuation to splice into the buffer at the returned offset."""

    text: str
    heading: str | None = None
    kind: CompletionKind | None = None


class CompletionResult(NamedTuple):
    """Completions together with the offset they are spliced at."""

    offset: int
    completions: list[Completion]
    more_may_exist: bool = False  # A value source reported a partial list

    def apply(self, buffer: str, completion: Completion) -> str:
        """Return ``buffer`` cut at the offset with ``completion`` appended."""
        return buffer[: self.offset] + completion.text


class CompletionContext(NamedTuple):
    """Context for completion at a specific cursor position."""

    mode: CompletionMode
    tokens: list[Token]  # Tokens up to the cursor, active token last
    active: Token  # Token at cursor (may be synthetic and empty)
    token_index: int  # Index of the active token (0-based)
    prefix: str  # Unquoted text before cursor in the active token
    command_name: str | None = None  # Resolved command, None in command mode
    option_key: str | None = None  # Option whose value is being typed
    consumed: frozenset[str] = frozenset()  # Primary keys already on the line
