"""Tests for command-line interface."""

from __future__ import annotations

import dataclasses
import json
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from shcomplete.cli import CliArgs, parse_args, run


class TestParseArgs:
    """Tests for parse_args function."""

    def test_default_args(self) -> None:
        """Default arguments use stdio transport."""
        args = parse_args([])
        assert args.transport == "stdio"
        assert args.host == "127.0.0.1"
        assert args.port == 4389
        assert args.catalog is None
        assert args.app is None
        assert args.log_level == "INFO"
        assert args.log_file is None
        assert args.debug is False

    def test_custom_host_port(self) -> None:
        args = parse_args(["--transport", "tcp", "--host", "0.0.0.0", "--port", "9999"])
        assert args.transport == "tcp"
        assert args.host == "0.0.0.0"
        assert args.port == 9999

    def test_catalog_and_app(self, tmp_path: Path) -> None:
        catalog = tmp_path / "catalog.json"
        args = parse_args(["--catalog", str(catalog), "--app", "pkg.cli:main"])
        assert args.catalog == catalog
        assert args.app == "pkg.cli:main"

    @pytest.mark.parametrize("flag", ["--debug", "-v"])
    def test_debug_flag_sets_debug_level(self, flag: str) -> None:
        args = parse_args([flag])
        assert args.debug is True
        assert args.log_level == "DEBUG"

    def test_explicit_log_level_overrides_debug(self) -> None:
        """--log-level takes precedence over --debug."""
        args = parse_args(["--debug", "--log-level", "WARNING"])
        assert args.debug is True
        assert args.log_level == "WARNING"

    def test_log_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "test.log"
        args = parse_args(["--log-file", str(log_file)])
        assert args.log_file == log_file

    @pytest.mark.parametrize(
        "argv",
        [
            ["--transport", "invalid"],
            ["--port", "not_a_number"],
            ["--log-level", "INVALID"],
        ],
    )
    def test_invalid_values_exit(self, argv: list[str]) -> None:
        with pytest.raises(SystemExit):
            parse_args(argv)


class TestCliArgs:
    """Tests for CliArgs dataclass."""

    def test_is_frozen(self) -> None:
        args = CliArgs(
            transport="stdio",
            host="127.0.0.1",
            port=4389,
            catalog=None,
            app=None,
            log_level="INFO",
            log_file=None,
            debug=False,
        )
        with pytest.raises(dataclasses.FrozenInstanceError):
            args.transport = "tcp"  # type: ignore[misc]


class TestRun:
    """Tests for run function."""

    @pytest.fixture
    def catalog_file(self, tmp_path: Path) -> Path:
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"commands": [{"name": "ls"}]}))
        return path

    def test_starts_stdio_server(
        self, mocker: MockerFixture, catalog_file: Path, tmp_path: Path
    ) -> None:
        create_server = mocker.patch("shcomplete.cli.create_server")

        code = run(
            ["--catalog", str(catalog_file), "--log-file", str(tmp_path / "x.log")]
        )

        assert code == 0
        create_server.return_value.start_io.assert_called_once_with()
        get_engine = create_server.call_args.kwargs["get_engine"]
        assert [c.text for c in get_engine().complete("l", 1).completions] == ["ls"]

    def test_starts_tcp_server(
        self, mocker: MockerFixture, catalog_file: Path, tmp_path: Path
    ) -> None:
        create_server = mocker.patch("shcomplete.cli.create_server")

        code = run(
            [
                "--catalog",
                str(catalog_file),
                "--transport",
                "tcp",
                "--port",
                "5000",
                "--log-file",
                str(tmp_path / "x.log"),
            ]
        )

        assert code == 0
        create_server.return_value.start_tcp.assert_called_once_with("127.0.0.1", 5000)

    def test_broken_catalog_fails_at_startup(
        self, mocker: MockerFixture, tmp_path: Path
    ) -> None:
        create_server = mocker.patch("shcomplete.cli.create_server")
        broken = tmp_path / "catalog.json"
        broken.write_text("{not json")

        code = run(["--catalog", str(broken), "--log-file", str(tmp_path / "x.log")])

        assert code == 1
        create_server.assert_not_called()

    def test_keyboard_interrupt_exits_cleanly(
        self, mocker: MockerFixture, tmp_path: Path
    ) -> None:
        create_server = mocker.patch("shcomplete.cli.create_server")
        create_server.return_value.start_io.side_effect = KeyboardInterrupt

        assert run(["--log-file", str(tmp_path / "x.log")]) == 0
