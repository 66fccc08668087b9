"""Adapter module for converting between internal types and LSP protocol types."""

from __future__ import annotations

from lsprotocol import types
from pygls.workspace import TextDocument

from shcomplete.shell.types import Completion, CompletionKind

__all__ = [
    "completion_kind_to_lsp",
    "line_at_position",
    "to_client_character",
    "to_lsp_completion_item",
]

_COMPLETION_KIND_TO_LSP: dict[CompletionKind, types.CompletionItemKind] = {
    CompletionKind.COMMAND: types.CompletionItemKind.Function,
    CompletionKind.OPTION: types.CompletionItemKind.Field,
    CompletionKind.VALUE: types.CompletionItemKind.Value,
}


def line_at_position(
    document: TextDocument, position: types.Position
) -> tuple[str, int]:
    """
    Return the line under ``position`` and the cursor offset within it.

    Args:
        document: The text document
        position: LSP position with 0-based line and character

    Returns:
        Tuple of (line text without its line break, cursor offset as a str
        index clamped to the line length). Positions past the last line give
        ("", 0).
    """
    lines = document.lines
    if position.line >= len(lines):
        return "", 0

    line = lines[position.line].rstrip("\r\n")
    codec = document.position_codec
    if position.character >= codec.client_num_units(line):
        return line, len(line)

    # The client counts in its negotiated encoding (UTF-16 by default)
    server_position = codec.position_from_client_units(
        lines, types.Position(line=position.line, character=position.character)
    )
    return line, server_position.character


def to_client_character(document: TextDocument, line: str, index: int) -> int:
    """Convert a str index into ``line`` to the client's character units."""
    return document.position_codec.client_num_units(line[:index])


def completion_kind_to_lsp(kind: CompletionKind | None) -> types.CompletionItemKind:
    """
    Map internal CompletionKind to LSP CompletionItemKind.

    Args:
        kind: Internal completion kind enum

    Returns:
        LSP CompletionItemKind enum value
    """
    if kind is None:
        return types.CompletionItemKind.Text
    return _COMPLETION_KIND_TO_LSP.get(kind, types.CompletionItemKind.Text)


def to_lsp_completion_item(
    item: Completion,
    *,
    line: int,
    start_character: int,
    end_character: int,
) -> types.CompletionItem:
    """
    Convert an internal Completion to an LSP CompletionItem.

    The text edit replaces everything between the completion offset and the
    cursor, so quotes kept by the offset stay in the document.

    Args:
        item: Internal completion
        line: Line the completion applies to
        start_character: Completion offset within the line
        end_character: Cursor offset within the line

    Returns:
        LSP-compatible CompletionItem
    """
    return types.CompletionItem(
        label=item.text.rstrip(),
        detail=item.heading,
        kind=completion_kind_to_lsp(item.kind),
        filter_text=item.text,
        text_edit=types.TextEdit(
            range=types.Range(
                start=types.Position(line=line, character=start_character),
                end=types.Position(line=line, character=end_character),
            ),
            new_text=item.text,
        ),
    )
