from __future__ import annotations

from dicebag.models.clauses import (
    CutoffBoth,
    CutoffMaximum,
    CutoffMinimum,
    CutoffNone,
    DiceOp,
    DropCustom,
    DropHighest,
    DropLowest,
    DropNone,
    RerollIfAbove,
    RerollIfBelow,
    RerollNever,
)
from dicebag.models.groups import Bonus, DiceGroup, DieGroup
from dicebag.models.bag import DiceBag
from dicebag.models.result import BonusResult, DieGroupResult, RollResult

__all__ = [
    "Bonus",
    "BonusResult",
    "CutoffBoth",
    "CutoffMaximum",
    "CutoffMinimum",
    "CutoffNone",
    "DiceBag",
    "DiceGroup",
    "DiceOp",
    "DieGroup",
    "DieGroupResult",
    "DropCustom",
    "DropHighest",
    "DropLowest",
    "DropNone",
    "RerollIfAbove",
    "RerollIfBelow",
    "RerollNever",
    "RollResult",
]
