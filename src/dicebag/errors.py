"""Parse-time errors for dice notation.

Every error here is raised while turning text (or builder calls) into a
DiceBag. Rolling a bag that was built successfully never raises.
"""
from __future__ import annotations

from typing import Any


class ParseError(ValueError):
    """Base class for every dice notation error."""

    code = "ParseError"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"error_code": self.code, "message": self.message}


class InvalidCharacter(ParseError):
    code = "InvalidCharacter"

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"Input contained invalid character ({char}).")


class EmptyOrMissingGroup(ParseError):
    code = "EmptyOrMissingGroup"

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Input ({text}) contains an empty dice group.")


class NotDiceOrBonus(ParseError):
    code = "NotDiceOrBonus"

    def __init__(self, group: str) -> None:
        self.group = group
        super().__init__(f"Dice group ({group}) is neither dice nor bonus.")


class MisplacedExplosiveMarker(ParseError):
    code = "MisplacedExplosiveMarker"

    def __init__(self, group: str) -> None:
        self.group = group
        super().__init__(f"'!' must be the last character of a dice group, not in ({group}).")


class MalformedDiceBase(ParseError):
    code = "MalformedDiceBase"

    def __init__(self, group: str) -> None:
        self.group = group
        super().__init__(f"Dice group ({group}) must start with 'XdY' or 'dY'.")


class InvalidDieSize(ParseError):
    code = "InvalidDieSize"

    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(f"A die must have at least one side, not {size}.")


class ModifierMustStartWithLetter(ParseError):
    code = "ModifierMustStartWithLetter"

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"Modifiers must start with a letter but start with ({char}).")


class BonusCannotHaveModifiers(ParseError):
    code = "BonusCannotHaveModifiers"

    def __init__(self, group: str) -> None:
        self.group = group
        super().__init__(f"A bonus must not have modifiers ({group}).")


class MalformedModifierSequence(ParseError):
    code = "MalformedModifierSequence"

    def __init__(self, suffix: str) -> None:
        self.suffix = suffix
        super().__init__(f"Every modifier needs a numeric argument ({suffix}).")


class UnknownModifier(ParseError):
    code = "UnknownModifier"

    def __init__(self, modifier: str) -> None:
        self.modifier = modifier
        super().__init__(f"({modifier}) is not a valid modifier.")


class DuplicateDropClause(ParseError):
    code = "DuplicateDropClause"

    def __init__(self, pair: str) -> None:
        self.pair = pair
        super().__init__(f"Multiple ({pair}) clauses found.")


class ExcessiveDrop(ParseError):
    code = "ExcessiveDrop"

    def __init__(self, dropped: int, count: int) -> None:
        self.dropped = dropped
        self.count = count
        super().__init__(f"Dropping or keeping too many dice ({dropped} vs {count}).")


class ImpossibleDropCombination(ParseError):
    code = "ImpossibleDropCombination"

    def __init__(self) -> None:
        super().__init__("Drop clauses cannot be combined.")


class IncompleteRerollClause(ParseError):
    code = "IncompleteRerollClause"

    def __init__(self) -> None:
        super().__init__("A reroll clause needs both a count (rr) and a condition (ab/be).")


class DuplicateRerollClause(ParseError):
    code = "DuplicateRerollClause"

    def __init__(self, part: str) -> None:
        self.part = part
        super().__init__(f"Multiple reroll {part}s found.")


class ThresholdOutOfRange(ParseError):
    code = "ThresholdOutOfRange"

    def __init__(self, threshold: int, size: int) -> None:
        self.threshold = threshold
        self.size = size
        super().__init__(f"Reroll threshold {threshold} is out of range for a d{size}.")


class ExcessiveReroll(ParseError):
    code = "ExcessiveReroll"

    def __init__(self, rerolls: int, count: int) -> None:
        self.rerolls = rerolls
        self.count = count
        super().__init__(f"Re-rolling more dice than you have ({rerolls} vs {count}).")


class DuplicateCutoffClause(ParseError):
    code = "DuplicateCutoffClause"

    def __init__(self, which: str) -> None:
        self.which = which
        super().__init__(f"Multiple cutoff {which} clauses found.")


class InvalidCutoffBound(ParseError):
    code = "InvalidCutoffBound"

    def __init__(self, which: str, bound: int, size: int) -> None:
        self.which = which
        self.bound = bound
        self.size = size
        super().__init__(f"Cut-off {which} of {bound} is not possible for a d{size}.")


class InvertedCutoffRange(ParseError):
    code = "InvertedCutoffRange"

    def __init__(self, minimum: int, maximum: int) -> None:
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(f"Cut-off minimum {minimum} is bigger than maximum {maximum}.")
