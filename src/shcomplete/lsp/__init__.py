"""LSP surface for shell line completion."""

from shcomplete.lsp.adapter import (
    completion_kind_to_lsp,
    line_at_position,
    to_client_character,
    to_lsp_completion_item,
)
from shcomplete.lsp.server import create_server

__all__ = [
    "completion_kind_to_lsp",
    "create_server",
    "line_at_position",
    "to_client_character",
    "to_lsp_completion_item",
]
