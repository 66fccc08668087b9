"""Shell completion LSP server using pygls 2.0.

Provides completion for command lines in shell scripts, backed by the
completion engine.
"""

from __future__ import annotations

import logging

from lsprotocol import types
from pygls.lsp.server import LanguageServer

from shcomplete.catalog.engine_provider import EngineProvider
from shcomplete.error_handling import wrap_handler
from shcomplete.logging import get_logger
from shcomplete.lsp.adapter import (
    line_at_position,
    to_client_character,
    to_lsp_completion_item,
)


def create_server(
    *,
    get_engine: EngineProvider,
    logger: logging.Logger | None = None,
) -> LanguageServer:
    """
    Create and configure the LSP server.

    Args:
        get_engine: Provider function for the completion engine.
        logger: Optional logger instance. If None, uses default shcomplete.lsp logger.

    Returns:
        Configured LanguageServer instance with completion support.
    """
    if logger is None:
        logger = get_logger("lsp")

    server = LanguageServer("shcomplete", "v0.1.0")

    def _empty_completion_list() -> types.CompletionList:
        return types.CompletionList(is_incomplete=False, items=[])

    @server.feature(
        types.TEXT_DOCUMENT_COMPLETION,
        types.CompletionOptions(
            trigger_characters=[" ", "-"],
            resolve_provider=False,
        ),
    )
    @wrap_handler(
        logger=logger,
        feature_name="textDocument/completion",
        default_factory=_empty_completion_list,
    )
    def completion(params: types.CompletionParams) -> types.CompletionList:
        """
        Handle textDocument/completion requests.

        The line under the cursor is the buffer; text after the cursor is
        ignored by the engine.
        """
        logger.debug("Completion request at %s", params.position)

        document = server.workspace.get_text_document(params.text_document.uri)
        line, cursor = line_at_position(document, params.position)

        result = get_engine().complete(line, cursor)
        start_character = to_client_character(document, line, result.offset)
        end_character = to_client_character(document, line, cursor)

        lsp_items = [
            to_lsp_completion_item(
                item,
                line=params.position.line,
                start_character=start_character,
                end_character=end_character,
            )
            for item in result.completions
        ]

        logger.debug("Returning %d completion items", len(lsp_items))
        return types.CompletionList(
            is_incomplete=result.more_may_exist,
            items=lsp_items,
        )

    return server
