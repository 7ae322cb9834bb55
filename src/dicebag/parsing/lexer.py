"""Tokenizer for dice notation.

Turns raw text into one ``GroupToken`` per additive group: either a bonus,
or a ``countdsize`` base plus the decoded two-letter modifiers that follow it.
"""
from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass, field
from enum import Enum

from dicebag.errors import (
    BonusCannotHaveModifiers,
    EmptyOrMissingGroup,
    InvalidCharacter,
    InvalidDieSize,
    MalformedDiceBase,
    MalformedModifierSequence,
    MisplacedExplosiveMarker,
    ModifierMustStartWithLetter,
    NotDiceOrBonus,
    UnknownModifier,
)
from dicebag.models.clauses import DiceOp

ALLOWED_CHARS = frozenset("+-dlkxhrbeam!n0123456789")


class ModifierKind(str, Enum):
    DROP_LOWEST = "dl"
    KEEP_HIGHEST = "kh"
    DROP_HIGHEST = "dh"
    KEEP_LOWEST = "kl"
    REROLL_COUNT = "rr"
    REROLL_ABOVE = "ab"
    REROLL_BELOW = "be"
    CUTOFF_MAXIMUM = "mx"
    CUTOFF_MINIMUM = "mn"


_CODES = {kind.value: kind for kind in ModifierKind}

_BONUS_RE = re.compile(r"\d+")
_D_NUMERIC_RE = re.compile(r"d\d")
_BASE_RE = re.compile(r"(\d*)d(\d+)")
_BONUS_WITH_MODIFIER_RE = re.compile(r"\d+(?:" + "|".join(_CODES) + r")")
_SPLIT_RE = re.compile(r"([+-])")
_LETTERS_RE = re.compile(r"[a-z]+")
_DIGITS_RE = re.compile(r"\d+")


@dataclass(frozen=True)
class Modifier:
    kind: ModifierKind
    value: int


@dataclass
class GroupToken:
    op: DiceOp
    text: str
    bonus: int | None = None
    count: int = 1
    size: int = 0
    explosive: bool = False
    modifiers: list[Modifier] = field(default_factory=list)

    @property
    def is_bonus(self) -> bool:
        return self.bonus is not None


def normalize(text: str) -> str:
    """Lowercase and drop whitespace and control characters."""
    return "".join(
        c for c in text.lower()
        if not c.isspace() and unicodedata.category(c) != "Cc"
    )


def validate_chars(text: str) -> None:
    for c in text:
        if c not in ALLOWED_CHARS:
            raise InvalidCharacter(c)


def split_groups(text: str) -> list[tuple[DiceOp, str]]:
    """Split on +/-; the first group is always added."""
    pieces = _SPLIT_RE.split(text)
    ops = [DiceOp.ADD] + [DiceOp(p) for p in pieces[1::2]]
    groups = pieces[0::2]
    for group in groups:
        if not group:
            raise EmptyOrMissingGroup(text)
    return list(zip(ops, groups))


def has_d_numeric(text: str) -> bool:
    return _D_NUMERIC_RE.search(text) is not None


def decode_modifiers(suffix: str) -> list[Modifier]:
    """Decode e.g. ``dl1dh2rr3be4`` into (code, number) pairs."""
    if not suffix:
        return []
    if not suffix[0].isalpha():
        raise ModifierMustStartWithLetter(suffix[0])

    codes = _LETTERS_RE.findall(suffix)
    numbers = _DIGITS_RE.findall(suffix)
    if len(codes) != len(numbers):
        raise MalformedModifierSequence(suffix)

    modifiers = []
    for code, number in zip(codes, numbers):
        kind = _CODES.get(code)
        if kind is None:
            raise UnknownModifier(code)
        modifiers.append(Modifier(kind, int(number)))
    return modifiers


def decode_group(op: DiceOp, text: str) -> GroupToken:
    if _BONUS_RE.fullmatch(text):
        return GroupToken(op=op, text=text, bonus=int(text))

    if not has_d_numeric(text):
        if _BONUS_WITH_MODIFIER_RE.match(text):
            raise BonusCannotHaveModifiers(text)
        raise NotDiceOrBonus(text)

    explosive = text.endswith("!")
    body = text[:-1] if explosive else text
    if "!" in body:
        raise MisplacedExplosiveMarker(text)

    m = _BASE_RE.match(body)
    if not m:
        raise MalformedDiceBase(text)
    count = int(m.group(1)) if m.group(1) else 1
    size = int(m.group(2))
    if size < 1:
        raise InvalidDieSize(size)

    return GroupToken(
        op=op,
        text=text,
        count=count,
        size=size,
        explosive=explosive,
        modifiers=decode_modifiers(body[m.end():]),
    )


def tokenize(text: str) -> list[GroupToken]:
    cleaned = normalize(text)
    validate_chars(cleaned)
    return [decode_group(op, group) for op, group in split_groups(cleaned)]
