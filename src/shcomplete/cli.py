"""Command-line interface for shcomplete."""

from __future__ import annotations

import argparse
import dataclasses
from collections.abc import Sequence
from pathlib import Path
from typing import Literal

from shcomplete.catalog.engine_provider import build_engine, make_cached_engine_provider
from shcomplete.logging import configure_logging, get_logger
from shcomplete.lsp.server import create_server


@dataclasses.dataclass(frozen=True)
class CliArgs:
    """Parsed command-line arguments."""

    transport: Literal["stdio", "tcp"]
    host: str
    port: int
    catalog: Path | None
    app: str | None
    log_level: str
    log_file: Path | None
    debug: bool


def parse_args(argv: Sequence[str] | None = None) -> CliArgs:
    """
    Parse command-line arguments.

    Args:
        argv: Command-line arguments. If None, uses sys.argv[1:].

    Returns:
        Parsed arguments as CliArgs dataclass.
    """
    parser = argparse.ArgumentParser(
        prog="shcomplete",
        description="Shell command line completion server (LSP)",
    )

    parser.add_argument(
        "--transport",
        choices=["stdio", "tcp"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )

    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host for TCP transport (default: 127.0.0.1)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=4389,
        help="Port for TCP transport (default: 4389)",
    )

    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="JSON file declaring commands and options",
    )

    parser.add_argument(
        "--app",
        default=None,
        metavar="MODULE:ATTR",
        help="click group whose subcommands are offered for completion",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Log level (default: INFO, or DEBUG if --debug is set)",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Log file path (default: stderr)",
    )

    parser.add_argument(
        "-v",
        "--debug",
        action="store_true",
        help="Enable debug mode (sets log level to DEBUG unless --log-level is specified)",
    )

    args = parser.parse_args(argv)

    # Explicit --log-level wins, otherwise --debug sets DEBUG
    if args.log_level is not None:
        log_level = args.log_level
    elif args.debug:
        log_level = "DEBUG"
    else:
        log_level = "INFO"

    return CliArgs(
        transport=args.transport,
        host=args.host,
        port=args.port,
        catalog=args.catalog,
        app=args.app,
        log_level=log_level,
        log_file=args.log_file,
        debug=args.debug,
    )


def run(argv: Sequence[str] | None = None) -> int:
    """
    Run the LSP server.

    Args:
        argv: Command-line arguments. If None, uses sys.argv[1:].

    Returns:
        Exit code (0 for success, 1 for error).
    """
    args = parse_args(argv)

    configure_logging(level=args.log_level, log_file=args.log_file)
    logger = get_logger("main")

    logger.info("Starting shcomplete server")
    logger.debug("Configuration: %s", args)

    if args.catalog is None and args.app is None:
        logger.warning("No --catalog or --app given; only empty completions will be served")

    try:
        get_engine = make_cached_engine_provider(
            lambda: build_engine(catalog_path=args.catalog, click_app=args.app)
        )
        # Load eagerly so a broken catalog fails at startup
        get_engine()

        server = create_server(get_engine=get_engine)

        if args.transport == "stdio":
            logger.info("Starting in stdio mode")
            server.start_io()
        else:
            logger.info("Starting in TCP mode on %s:%d", args.host, args.port)
            server.start_tcp(args.host, args.port)

        return 0

    except KeyboardInterrupt:
        logger.info("Server stopped by user")
        return 0

    except Exception:
        logger.critical("Fatal error in server", exc_info=True)
        return 1
