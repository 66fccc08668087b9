"""Shell tokenizer for completion.

Splits a partially typed line into tokens, respecting quotes, and tracks
whether the token under the cursor is still inside an open quote.
"""

from __future__ import annotations

from shcomplete.shell.types import Token

_WHITESPACE = " \t"
_QUOTES = "\"'"


def tokenize_line(line: str) -> list[Token]:
    """
    Tokenize a shell line respecting quotes.

    Args:
        line: The shell line to tokenize.

    Returns:
        List of Token with positions relative to ``line``.

    Quote handling:
        - Single quotes: no escapes inside, everything is literal
        - Double quotes: backslash escapes the next character
        - Unquoted: backslash escapes the next character
        - A quote left open runs to the end of the line
    """
    tokens: list[Token] = []
    i = 0
    n = len(line)

    while i < n:
        while i < n and line[i] in _WHITESPACE:
            i += 1
        if i >= n:
            break

        token_start = i
        token_chars: list[str] = []
        quote_char = line[i] if line[i] in _QUOTES else None
        closed = False

        while i < n:
            char = line[i]

            if char in _WHITESPACE:
                break
            elif char == "'":
                i += 1  # Skip opening quote
                while i < n and line[i] != "'":
                    token_chars.append(line[i])
                    i += 1
                if i < n:
                    i += 1  # Skip closing quote
                    closed = True
                else:
                    closed = False
            elif char == '"':
                i += 1  # Skip opening quote
                while i < n and line[i] != '"':
                    if line[i] == "\\" and i + 1 < n:
                        i += 1  # Skip backslash
                    token_chars.append(line[i])
                    i += 1
                if i < n:
                    i += 1  # Skip closing quote
                    closed = True
                else:
                    closed = False
            elif char == "\\" and i + 1 < n:
                i += 1  # Skip backslash
                token_chars.append(line[i])
                i += 1
                closed = False
            else:
                token_chars.append(char)
                i += 1
                closed = False

        tokens.append(
            Token(
                raw=line[token_start:i],
                value="".join(token_chars),
                start=token_start,
                end=i,
                quote_char=quote_char,
                # Only a token that ends on its closing quote counts as finished
                closed=quote_char is not None and closed,
            )
        )

    return tokens


def tokenize(buffer: str, cursor: int) -> tuple[list[Token], int]:
    """
    Tokenize ``buffer`` up to ``cursor`` and locate the active token.

    Text after the cursor is ignored. When the cursor sits in whitespace, or
    the buffer is empty, a synthetic empty token is appended at the cursor.

    Args:
        buffer: The full input buffer.
        cursor: Cursor offset, ``0 <= cursor <= len(buffer)``.

    Returns:
        A tuple of (tokens, active_index). The active token is always last.

    Raises:
        ValueError: If the cursor lies outside the buffer.
    """
    if not 0 <= cursor <= len(buffer):
        raise ValueError(
            f"cursor {cursor} outside buffer of length {len(buffer)}"
        )

    line = buffer[:cursor]
    tokens = tokenize_line(line)

    if not tokens or tokens[-1].end < cursor:
        tokens.append(Token(raw="", value="", start=cursor, end=cursor))

    return tokens, len(tokens) - 1
