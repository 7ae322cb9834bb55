"""Operator and clause variants attached to a die group.

Each clause family is a closed set of small frozen models tagged by ``kind``,
so a group's drop/reroll/cutoff fields validate and serialize as
discriminated unions.
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class DiceOp(str, Enum):
    ADD = "+"
    SUB = "-"

    def apply(self, acc: int, x: int) -> int:
        if self is DiceOp.SUB:
            return acc - x
        return acc + x


class _Clause(BaseModel):
    model_config = ConfigDict(frozen=True)


# -- Drop --


class DropNone(_Clause):
    kind: Literal["none"] = "none"

    def kept(self, count: int) -> int:
        return count


class DropLowest(_Clause):
    kind: Literal["lowest"] = "lowest"
    n: int

    def kept(self, count: int) -> int:
        return max(count - self.n, 0)


class DropHighest(_Clause):
    kind: Literal["highest"] = "highest"
    n: int

    def kept(self, count: int) -> int:
        return max(count - self.n, 0)


class DropCustom(_Clause):
    """Positions (into the ascending sorted rolls) that survive the drop."""

    kind: Literal["custom"] = "custom"
    keep: tuple[int, ...] = ()

    def kept(self, count: int) -> int:
        return len(self.keep)


Drop = Annotated[
    Union[DropNone, DropLowest, DropHighest, DropCustom],
    Field(discriminator="kind"),
]


# -- Reroll --


class RerollNever(_Clause):
    kind: Literal["never"] = "never"
    count: int = 0

    def qualifies(self, value: int) -> bool:
        return False


class RerollIfAbove(_Clause):
    """Reroll up to ``count`` dice showing strictly more than ``threshold``."""

    kind: Literal["above"] = "above"
    count: int
    threshold: int

    def qualifies(self, value: int) -> bool:
        return value > self.threshold


class RerollIfBelow(_Clause):
    """Reroll up to ``count`` dice showing strictly less than ``threshold``."""

    kind: Literal["below"] = "below"
    count: int
    threshold: int

    def qualifies(self, value: int) -> bool:
        return value < self.threshold


Reroll = Annotated[
    Union[RerollNever, RerollIfAbove, RerollIfBelow],
    Field(discriminator="kind"),
]


# -- Cutoff --


class CutoffNone(_Clause):
    kind: Literal["none"] = "none"

    def bounds(self, size: int) -> tuple[int, int]:
        return 1, size

    def clamp(self, value: int) -> int:
        return value


class CutoffMinimum(_Clause):
    kind: Literal["minimum"] = "minimum"
    n: int

    def bounds(self, size: int) -> tuple[int, int]:
        return self.n, size

    def clamp(self, value: int) -> int:
        return max(value, self.n)


class CutoffMaximum(_Clause):
    kind: Literal["maximum"] = "maximum"
    n: int

    def bounds(self, size: int) -> tuple[int, int]:
        return 1, self.n

    def clamp(self, value: int) -> int:
        return min(value, self.n)


class CutoffBoth(_Clause):
    kind: Literal["both"] = "both"
    minimum: int
    maximum: int

    def bounds(self, size: int) -> tuple[int, int]:
        return self.minimum, self.maximum

    def clamp(self, value: int) -> int:
        if value > self.maximum:
            return self.maximum
        if value < self.minimum:
            return self.minimum
        return value


Cutoff = Annotated[
    Union[CutoffNone, CutoffMinimum, CutoffMaximum, CutoffBoth],
    Field(discriminator="kind"),
]
