"""A small click application used to exercise catalog loading."""

from __future__ import annotations

import click


@click.group()
def app() -> None:
    """Sample tool."""


@app.command()
@click.option("--name", "-n", help="Who to greet")
@click.option("--shout/--no-shout", default=False, help="Greet loudly")
@click.option("--format", "fmt", type=click.Choice(["json", "text"]))
@click.option("--count", type=int, required=True)
@click.option("-q", "quiet", is_flag=True)
@click.argument("path", type=click.Path())
def greet(
    name: str | None, shout: bool, fmt: str | None, count: int, quiet: bool, path: str
) -> None:
    """Greet somebody."""


@app.command()
@click.option("--verbose", "-v", count=True)
def status(verbose: int) -> None:
    """Show status."""


@app.command(hidden=True)
def secret() -> None:
    """Not listed."""
