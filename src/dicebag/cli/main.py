"""Typer CLI application."""
from __future__ import annotations

from typing import Optional

import typer

app = typer.Typer(
    name="dicebag",
    help="Parse, roll and analyse tabletop dice notation such as 4d6dl1+2",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    from dicebag.app import configure_logging

    configure_logging(verbose)


@app.command()
def roll(
    expression: str = typer.Argument(..., help="Dice notation, e.g. 3d6dl1+4"),
    times: int = typer.Option(1, "--times", "-t", min=1, help="Roll this many times"),
) -> None:
    """Roll a dice expression."""
    from dicebag.app import DiceApp

    if not DiceApp().roll(expression, times=times):
        raise typer.Exit(code=1)


@app.command(name="range")
def range_(
    expression: str = typer.Argument(..., help="Dice notation"),
) -> None:
    """Show the minimum and maximum total of an expression."""
    from dicebag.app import DiceApp

    if DiceApp().show_range(expression) is None:
        raise typer.Exit(code=1)


@app.command()
def dist(
    expression: str = typer.Argument(..., help="Dice notation"),
    rolls: Optional[int] = typer.Option(None, "--rolls", "-r", min=1, help="Number of samples"),
    counts: bool = typer.Option(False, "--counts", "-c", help="Show raw counts instead of percentages"),
) -> None:
    """Sample an expression and print its frequency distribution."""
    from dicebag.app import DiceApp

    if not DiceApp().distribution(expression, rolls=rolls, counts=counts):
        raise typer.Exit(code=1)


@app.command()
def shell() -> None:
    """Interactive prompt: enter an expression, get a roll."""
    from dicebag.app import DiceApp

    DiceApp().shell()


if __name__ == "__main__":
    app()
