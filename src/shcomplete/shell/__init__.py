"""Shell line tokenizing and completion."""

from shcomplete.shell.completion_context import get_completion_context
from shcomplete.shell.completions import get_completions, longest_common_prefix
from shcomplete.shell.engine import CompletionEngine
from shcomplete.shell.tokenizer import tokenize, tokenize_line
from shcomplete.shell.types import (
    Completion,
    CompletionContext,
    CompletionKind,
    CompletionMode,
    CompletionResult,
    Token,
)

__all__ = [
    "Completion",
    "CompletionContext",
    "CompletionEngine",
    "CompletionKind",
    "CompletionMode",
    "CompletionResult",
    "Token",
    "get_completion_context",
    "get_completions",
    "longest_common_prefix",
    "tokenize",
    "tokenize_line",
]
