"""Command line entry points for ambiguess."""

from typer import Typer

from ..configuration.cli import config_app
from .guess import guess_command


cli = Typer(help="Guess what an ambiguous string might be", no_args_is_help=True)
cli.command("guess")(guess_command)
cli.add_typer(config_app, name="config")


def main() -> None:
    """Console script entry point."""
    cli()


__all__ = ["cli", "config_app", "guess_command", "main"]
