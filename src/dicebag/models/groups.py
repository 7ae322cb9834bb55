"""Dice groups: a set of same-sized dice, or a flat bonus."""
from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from dicebag.errors import (
    DuplicateDropClause,
    ExcessiveDrop,
    ImpossibleDropCombination,
    ExcessiveReroll,
    InvalidCutoffBound,
    InvertedCutoffRange,
    ThresholdOutOfRange,
)
from dicebag.models.clauses import (
    Cutoff,
    CutoffBoth,
    CutoffMaximum,
    CutoffMinimum,
    CutoffNone,
    DiceOp,
    Drop,
    DropCustom,
    DropHighest,
    DropLowest,
    DropNone,
    Reroll,
    RerollIfAbove,
    RerollIfBelow,
    RerollNever,
)


def check_drop(n: int, count: int) -> None:
    if n >= count:
        raise ExcessiveDrop(n, count)


def check_reroll_above(threshold: int, size: int) -> None:
    if not 1 <= threshold < size:
        raise ThresholdOutOfRange(threshold, size)


def check_reroll_below(threshold: int, size: int) -> None:
    if not 1 < threshold <= size:
        raise ThresholdOutOfRange(threshold, size)


def check_reroll_count(rerolls: int, count: int) -> None:
    if rerolls > count:
        raise ExcessiveReroll(rerolls, count)


def check_cutoff_maximum(maximum: int, size: int) -> None:
    if not 1 <= maximum < size:
        raise InvalidCutoffBound("maximum", maximum, size)


def check_cutoff_minimum(minimum: int, size: int) -> None:
    if not 1 < minimum <= size:
        raise InvalidCutoffBound("minimum", minimum, size)


class DieGroup(BaseModel):
    """``count`` dice with ``size`` sides plus their modifier clauses.

    Builder methods never mutate; they validate and return a new group.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["dice"] = "dice"
    size: int
    count: int = Field(default=1, ge=0)
    drop: Drop = Field(default_factory=DropNone)
    reroll: Reroll = Field(default_factory=RerollNever)
    cutoff: Cutoff = Field(default_factory=CutoffNone)
    op: DiceOp = DiceOp.ADD
    explosive: bool = False

    @classmethod
    def of(cls, size: int, count: int = 1) -> DieGroup:
        return cls(size=size, count=count)

    @property
    def true_count(self) -> int:
        """Number of dice that survive the drop clause."""
        return self.drop.kept(self.count)

    def with_op(self, op: DiceOp) -> DieGroup:
        return self.model_copy(update={"op": op})

    def to_plus(self) -> DieGroup:
        return self.with_op(DiceOp.ADD)

    def to_minus(self) -> DieGroup:
        return self.with_op(DiceOp.SUB)

    def exploding(self, explosive: bool = True) -> DieGroup:
        return self.model_copy(update={"explosive": explosive})

    def with_drop(self, drop: DropNone | DropLowest | DropHighest | DropCustom) -> DieGroup:
        return self.model_copy(update={"drop": drop})

    def with_drop_lowest(self, n: int) -> DieGroup:
        """Drop the ``n`` lowest dice, merging with an existing drop-highest."""
        current = self.drop
        if isinstance(current, (DropLowest, DropCustom)):
            raise DuplicateDropClause("dl/kh")
        check_drop(n, self.count)
        if isinstance(current, DropHighest):
            return self._merge_drops(n, current.n)
        return self.with_drop(DropLowest(n=n))

    def with_drop_highest(self, n: int) -> DieGroup:
        """Drop the ``n`` highest dice, merging with an existing drop-lowest."""
        current = self.drop
        if isinstance(current, (DropHighest, DropCustom)):
            raise DuplicateDropClause("dh/kl")
        check_drop(n, self.count)
        if isinstance(current, DropLowest):
            return self._merge_drops(current.n, n)
        return self.with_drop(DropHighest(n=n))

    def with_drop_highest_and_lowest(self, lowest: int, highest: int) -> DieGroup:
        """Keep the middle slice of the sorted rolls, e.g. ``5d6dl2dh1``."""
        if not isinstance(self.drop, DropNone):
            raise ImpossibleDropCombination()
        return self._merge_drops(lowest, highest)

    def _merge_drops(self, lowest: int, highest: int) -> DieGroup:
        check_drop(lowest + highest, self.count)
        keep = tuple(range(lowest, self.count - highest))
        return self.with_drop(DropCustom(keep=keep))

    def with_reroll(self, reroll: RerollNever | RerollIfAbove | RerollIfBelow) -> DieGroup:
        return self.model_copy(update={"reroll": reroll})

    def with_reroll_if_above(self, threshold: int, count: int) -> DieGroup:
        check_reroll_above(threshold, self.size)
        check_reroll_count(count, self.count)
        return self.with_reroll(RerollIfAbove(count=count, threshold=threshold))

    def with_reroll_if_below(self, threshold: int, count: int) -> DieGroup:
        check_reroll_below(threshold, self.size)
        check_reroll_count(count, self.count)
        return self.with_reroll(RerollIfBelow(count=count, threshold=threshold))

    def with_cutoff(
        self, cutoff: CutoffNone | CutoffMinimum | CutoffMaximum | CutoffBoth
    ) -> DieGroup:
        return self.model_copy(update={"cutoff": cutoff})

    def with_minimum_roll(self, minimum: int) -> DieGroup:
        check_cutoff_minimum(minimum, self.size)
        return self.with_cutoff(CutoffMinimum(n=minimum))

    def with_maximum_roll(self, maximum: int) -> DieGroup:
        check_cutoff_maximum(maximum, self.size)
        return self.with_cutoff(CutoffMaximum(n=maximum))

    def with_min_and_max_roll(self, minimum: int, maximum: int) -> DieGroup:
        """Clamp into ``[minimum, maximum]``; a d6 clamped to 2..5 behaves like 1d4+1."""
        check_cutoff_minimum(minimum, self.size)
        check_cutoff_maximum(maximum, self.size)
        if minimum > maximum:
            raise InvertedCutoffRange(minimum, maximum)
        return self.with_cutoff(CutoffBoth(minimum=minimum, maximum=maximum))


class Bonus(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["bonus"] = "bonus"
    bonus: int
    op: DiceOp = DiceOp.ADD

    @classmethod
    def plus(cls, n: int) -> Bonus:
        return cls(bonus=n, op=DiceOp.ADD)

    @classmethod
    def minus(cls, n: int) -> Bonus:
        return cls(bonus=n, op=DiceOp.SUB)

    @property
    def signed(self) -> int:
        return self.op.apply(0, self.bonus)

    def with_op(self, op: DiceOp) -> Bonus:
        return self.model_copy(update={"op": op})


DiceGroup = Annotated[Union[DieGroup, Bonus], Field(discriminator="kind")]
