"""Completion core for interactive command shells."""

from shcomplete.catalog.catalog import CommandCatalog
from shcomplete.catalog.types import CommandDescriptor, OptionDescriptor
from shcomplete.catalog.value_sources import (
    ValueCandidates,
    ValueSource,
    ValueSourceRegistry,
)
from shcomplete.shell import Completion, CompletionEngine, CompletionResult

__all__ = [
    "CommandCatalog",
    "CommandDescriptor",
    "Completion",
    "CompletionEngine",
    "CompletionResult",
    "OptionDescriptor",
    "ValueCandidates",
    "ValueSource",
    "ValueSourceRegistry",
]
