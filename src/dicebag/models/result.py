"""Roll reports produced by the roll evaluator."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from dicebag.models.groups import Bonus, DieGroup


class DieGroupResult(BaseModel):
    dice: DieGroup
    results: list[int] = Field(default_factory=list)
    total: int = 0

    @classmethod
    def from_rolls(cls, dice: DieGroup, results: list[int]) -> DieGroupResult:
        """Build a result; the signed subtotal is derived from the survivors."""
        return cls(dice=dice, results=results, total=dice.op.apply(0, sum(results)))


class BonusResult(BaseModel):
    boni: list[int] = Field(default_factory=list)
    total: int = 0


class RollResult(BaseModel):
    dice_groups: list[DieGroupResult] = Field(default_factory=list)
    bonus: BonusResult = Field(default_factory=BonusResult)
    total: int = 0

    def add_dice_result(self, result: DieGroupResult) -> None:
        self.total += result.total
        self.dice_groups.append(result)

    def add_bonus(self, bonus: Bonus) -> None:
        signed = bonus.signed
        self.bonus.boni.append(signed)
        self.bonus.total += signed
        self.total += signed

    def summary(self) -> dict[str, Any]:
        """Plain ints for callers that copy results across a language boundary."""
        return {
            "groups": [g.total for g in self.dice_groups],
            "bonus": self.bonus.total,
            "total": self.total,
        }
