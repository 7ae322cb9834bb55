"""A parsed dice expression."""
from __future__ import annotations

import random
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, PrivateAttr

from dicebag.mechanics.ranges import calculate_range
from dicebag.models.groups import Bonus, DiceGroup, DieGroup
from dicebag.models.result import RollResult


class DiceBag(BaseModel):
    """An ordered, immutable collection of dice groups.

    ``range`` is computed from ``dice`` once, at construction, and cannot be
    set on its own.
    """

    model_config = ConfigDict(frozen=True)

    dice: tuple[DiceGroup, ...] = ()
    _range: tuple[int, int] = PrivateAttr(default=(0, 0))

    def model_post_init(self, __context: Any) -> None:
        self._range = calculate_range(self.dice)

    def model_copy(self, *, update: dict[str, Any] | None = None, deep: bool = False) -> DiceBag:
        copied = super().model_copy(update=update, deep=deep)
        copied._range = calculate_range(copied.dice)
        return copied

    @classmethod
    def from_dice(cls, dice: Iterable[DieGroup | Bonus]) -> DiceBag:
        return cls(dice=tuple(dice))

    @property
    def range(self) -> tuple[int, int]:
        return self._range

    def range_as_list(self) -> list[int]:
        low, high = self._range
        return list(range(low, high + 1))

    def roll(self, rng: random.Random | None = None) -> RollResult:
        from dicebag.mechanics.roller import roll_bag

        return roll_bag(self, rng=rng)

    def make_count_distribution(self, roll_count: int, rng: random.Random | None = None) -> dict[int, int]:
        from dicebag.mechanics.distribution import make_count_distribution

        return make_count_distribution(self, roll_count, rng=rng)

    def make_frequency_distribution(
        self, roll_count: int, rng: random.Random | None = None
    ) -> dict[int, float]:
        from dicebag.mechanics.distribution import make_frequency_distribution

        return make_frequency_distribution(self, roll_count, rng=rng)

    def __str__(self) -> str:
        from dicebag.notation import format_bag

        return format_bag(self)
