"""CLI entry point."""

import typer

app = typer.Typer(
    name="coupling-insight",
    help="Coupling Insight - which developers keep touching the same files",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import the command module to register it
from .analyze import analyze as _analyze  # noqa: F401, E402


def main() -> None:
    app()
