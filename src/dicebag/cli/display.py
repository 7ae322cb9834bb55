"""Rich terminal display for rolls, ranges and distributions."""
from __future__ import annotations

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from dicebag.errors import ParseError
from dicebag.mechanics.distribution import mean
from dicebag.models.bag import DiceBag
from dicebag.models.clauses import DiceOp
from dicebag.models.result import RollResult
from dicebag.notation import format_bag, format_group

console = Console()


class Display:
    def __init__(self, show_rolls: bool = True):
        self.console = console
        self.show_rolls = show_rolls

    def show_shell_banner(self, default_expression: str) -> None:
        title = Text()
        title.append("Dice shell\n", style="bold cyan")
        title.append(f"Enter dice notation. Empty line rolls {default_expression}; 'quit' leaves.", style="dim")
        self.console.print(Panel(title, border_style="cyan", box=box.ROUNDED))

    def prompt(self) -> str:
        return self.console.input("[bold cyan]> [/bold cyan]")

    def show_error(self, text: str, error: ParseError) -> None:
        self.console.print(f"[bold red]Could not parse[/bold red] {text!r}: {error.message}")

    def show_range(self, bag: DiceBag) -> None:
        low, high = bag.range
        self.console.print(f"[bold]{format_bag(bag)}[/bold] range [cyan]{low}[/cyan] to [cyan]{high}[/cyan]")

    def show_roll(self, bag: DiceBag, result: RollResult) -> None:
        if not self.show_rolls:
            self.console.print(f"{format_bag(bag)} = [bold]{result.total}[/bold]")
            return
        table = Table(title=format_bag(bag), box=box.SIMPLE_HEAVY, border_style="cyan")
        table.add_column("Group", style="bold")
        table.add_column("Kept rolls")
        table.add_column("Subtotal", justify="right")
        for group_result in result.dice_groups:
            sign = "-" if group_result.dice.op is DiceOp.SUB else "+"
            rolls = ", ".join(str(v) for v in group_result.results) or "-"
            table.add_row(f"{sign}{format_group(group_result.dice)}", rolls, str(group_result.total))
        if result.bonus.boni:
            boni = ", ".join(f"{b:+d}" for b in result.bonus.boni)
            table.add_row("bonus", boni, str(result.bonus.total))
        self.console.print(table)
        self.console.print(f"  Total: [bold green]{result.total}[/bold green]")

    def show_distribution(
        self,
        bag: DiceBag,
        counts: dict[int, int],
        values: dict[int, float] | dict[int, int],
        rolls: int,
        as_counts: bool = False,
    ) -> None:
        table = Table(
            title=f"{format_bag(bag)} over {rolls} rolls",
            box=box.SIMPLE_HEAVY,
            border_style="magenta",
        )
        table.add_column("Value", justify="right", style="bold")
        table.add_column("Count" if as_counts else "Percentage", justify="right")
        for value, v in values.items():
            table.add_row(str(value), str(v) if as_counts else f"{v:.3f}")
        self.console.print(table)
        self.console.print(f"  Mean: [bold]{mean(counts):.3f}[/bold]")
