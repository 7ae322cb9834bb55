"""Dice notation parser, roller and distribution builder."""
from __future__ import annotations

from dicebag.errors import ParseError
from dicebag.models import Bonus, DiceBag, DiceOp, DieGroup, RollResult
from dicebag.notation import format_bag, format_result
from dicebag.parsing.parser import parse

__all__ = [
    "Bonus",
    "DiceBag",
    "DiceOp",
    "DieGroup",
    "ParseError",
    "RollResult",
    "format_bag",
    "format_result",
    "parse",
]
