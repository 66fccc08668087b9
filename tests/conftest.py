"""Shared fixtures for completion tests."""

from __future__ import annotations

import logging

import pytest

from shcomplete.catalog.catalog import CommandCatalog
from shcomplete.catalog.types import CommandDescriptor, OptionDescriptor
from shcomplete.shell.engine import CompletionEngine


@pytest.fixture
def my_commands() -> list[CommandDescriptor]:
    """A command without options and one with a single value option."""
    return [
        CommandDescriptor(name="foo", help="Do foo"),
        CommandDescriptor(
            name="bar",
            options=(OptionDescriptor(key="option1"),),
            help="Do bar",
        ),
    ]


@pytest.fixture
def engine(my_commands: list[CommandDescriptor]) -> CompletionEngine:
    """Engine over my_commands with no value sources."""
    return CompletionEngine(CommandCatalog(my_commands))


@pytest.fixture(autouse=True)
def _restore_shcomplete_logger():
    """Undo configure_logging so later tests can capture records again."""
    logger = logging.getLogger("shcomplete")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
