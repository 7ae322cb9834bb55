"""Application bootstrap: config, logging and the interactive front end."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

from dicebag.errors import ParseError
from dicebag.models.bag import DiceBag
from dicebag.models.result import RollResult
from dicebag.parsing.parser import parse

logger = logging.getLogger(__name__)

QUIT_WORDS = frozenset({"quit", "exit", "q"})


def _load_config() -> dict[str, Any]:
    """Load config.toml from project root."""
    import tomllib

    config_path = Path(__file__).parent.parent.parent / "config.toml"
    if config_path.exists():
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    return {}


def configure_logging(verbose: bool = False) -> None:
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


class DiceApp:
    """Wires config, parser, roller and display together."""

    def __init__(self, config: dict[str, Any] | None = None):
        self.config = config if config is not None else _load_config()
        self._display = None

    # -- Config --

    @property
    def default_expression(self) -> str:
        return self.config.get("dice", {}).get("default_expression", "1d20")

    @property
    def explosion_limit(self) -> int:
        from dicebag.mechanics.roller import EXPLOSION_LIMIT

        return self.config.get("dice", {}).get("explosion_limit", EXPLOSION_LIMIT)

    @property
    def default_rolls(self) -> int:
        return self.config.get("distribution", {}).get("default_rolls", 10_000)

    @property
    def display(self):
        if self._display is None:
            from dicebag.cli.display import Display

            show_rolls = self.config.get("display", {}).get("show_rolls", True)
            self._display = Display(show_rolls=show_rolls)
        return self._display

    # -- Commands --

    def parse(self, text: str) -> DiceBag | None:
        try:
            return parse(text)
        except ParseError as exc:
            logger.info("Could not parse %r: %s", text, exc)
            self.display.show_error(text, exc)
            return None

    def roll(self, text: str, times: int = 1) -> list[RollResult]:
        from dicebag.mechanics.roller import roll_bag

        bag = self.parse(text)
        if bag is None:
            return []
        results = []
        for _ in range(times):
            result = roll_bag(bag, explosion_limit=self.explosion_limit)
            self.display.show_roll(bag, result)
            results.append(result)
        return results

    def show_range(self, text: str) -> tuple[int, int] | None:
        bag = self.parse(text)
        if bag is None:
            return None
        self.display.show_range(bag)
        return bag.range

    def distribution(self, text: str, rolls: int | None = None, counts: bool = False) -> dict[int, Any]:
        from dicebag.mechanics.distribution import make_count_distribution, to_percentages

        bag = self.parse(text)
        if bag is None:
            return {}
        rolls = rolls if rolls is not None else self.default_rolls
        dist = make_count_distribution(bag, rolls, explosion_limit=self.explosion_limit)
        table: dict[int, Any] = dist if counts else to_percentages(dist, rolls)
        self.display.show_distribution(bag, dist, table, rolls, as_counts=counts)
        return table

    def shell(self, read_line: Callable[[], str] | None = None) -> None:
        """Read expressions line by line and roll each; an empty line rolls the default."""
        read_line = read_line or self.display.prompt
        self.display.show_shell_banner(self.default_expression)
        while True:
            try:
                line = read_line().strip()
            except (EOFError, KeyboardInterrupt):
                break
            if line.lower() in QUIT_WORDS:
                break
            self.roll(line or self.default_expression)
