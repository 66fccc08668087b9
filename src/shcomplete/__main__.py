"""Entry point for the shcomplete LSP server."""

import sys

from shcomplete.cli import run


def main() -> None:
    """Start the LSP server with command-line configuration."""
    sys.exit(run())


if __name__ == "__main__":
    main()
