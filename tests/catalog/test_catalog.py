"""Tests for command and option descriptors and the command catalog."""

from __future__ import annotations

import pytest

from shcomplete.catalog.catalog import CommandCatalog
from shcomplete.catalog.options import (
    format_option_label,
    option_key_from_token,
    option_label_matches_prefix,
)
from shcomplete.catalog.types import CommandDescriptor, OptionDescriptor


class TestCommandDescriptor:
    @pytest.mark.parametrize("name", ["", "two words", 'qu"ote', "tab\there"])
    def test_invalid_names_rejected(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid command name"):
            CommandDescriptor(name=name)

    def test_duplicate_option_keys_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate option key"):
            CommandDescriptor(
                name="cmd",
                options=(
                    OptionDescriptor(key="out"),
                    OptionDescriptor(key="output", aliases=("out",)),
                ),
            )

    def test_find_option_by_alias(self) -> None:
        option = OptionDescriptor(key="color", aliases=("colour",))
        command = CommandDescriptor(name="paint", options=(option,))
        assert command.find_option("colour") is option
        assert command.find_option("missing") is None

    def test_default_option(self) -> None:
        default = OptionDescriptor(key="")
        command = CommandDescriptor(name="cat", options=(default,))
        assert command.default_option is default
        assert default.is_default
        assert CommandDescriptor(name="ls").default_option is None

    def test_takes_arguments(self) -> None:
        assert not CommandDescriptor(name="ls").takes_arguments
        assert CommandDescriptor(
            name="ls", options=(OptionDescriptor(key="all"),)
        ).takes_arguments

    def test_descriptors_are_frozen(self) -> None:
        command = CommandDescriptor(name="ls")
        with pytest.raises(AttributeError):
            command.name = "dir"  # type: ignore[misc]


class TestCommandCatalog:
    def test_preserves_registration_order(self) -> None:
        catalog = CommandCatalog(
            [CommandDescriptor(name="zeta"), CommandDescriptor(name="alpha")]
        )
        assert catalog.names() == ["zeta", "alpha"]
        assert len(catalog) == 2
        assert "zeta" in catalog

    def test_duplicate_name_rejected(self) -> None:
        catalog = CommandCatalog([CommandDescriptor(name="ls")])
        with pytest.raises(ValueError, match="already registered"):
            catalog.add_command(CommandDescriptor(name="ls"))

    def test_snapshot_not_affected_by_later_registration(self) -> None:
        catalog = CommandCatalog([CommandDescriptor(name="ls")])
        snapshot = catalog.snapshot()
        catalog.add_command(CommandDescriptor(name="cp"))

        assert list(snapshot) == ["ls"]
        assert list(catalog.snapshot()) == ["ls", "cp"]

    def test_get(self) -> None:
        ls = CommandDescriptor(name="ls")
        catalog = CommandCatalog([ls])
        assert catalog.get("ls") is ls
        assert catalog.get("l") is None


class TestOptionHelpers:
    def test_format_option_label(self) -> None:
        assert format_option_label("option1") == "--option1"

    @pytest.mark.parametrize(
        "prefix,expected",
        [
            ("", True),
            ("-", True),
            ("--", True),
            ("--op", True),
            ("op", True),
            ("--x", False),
            ("x", False),
            ("-op", False),
        ],
    )
    def test_option_label_matches_prefix(self, prefix: str, expected: bool) -> None:
        assert option_label_matches_prefix("option1", prefix) is expected

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("--option1", "option1"),
            ("--", None),
            ("-o", None),
            ("value", None),
        ],
    )
    def test_option_key_from_token(self, token: str, expected: str | None) -> None:
        assert option_key_from_token(token) == expected
