"""Dice notation parser: text in, DiceBag out."""
from __future__ import annotations

import logging

from dicebag.models.bag import DiceBag
from dicebag.models.groups import Bonus, DieGroup
from dicebag.parsing.lexer import GroupToken, tokenize
from dicebag.parsing.resolver import resolve_modifiers

logger = logging.getLogger(__name__)


def build_group(token: GroupToken) -> DieGroup | Bonus:
    if token.is_bonus:
        return Bonus(bonus=token.bonus, op=token.op)
    die = DieGroup(
        size=token.size,
        count=token.count,
        op=token.op,
        explosive=token.explosive,
    )
    return resolve_modifiers(token.modifiers, die)


def parse(text: str) -> DiceBag:
    """Parse dice notation like '3d6dl1+4' or '15d20dl4dh3rr3ab4mn2mx18!'.

    Raises:
        ParseError: a subclass naming exactly what is wrong with ``text``.
    """
    groups = [build_group(token) for token in tokenize(text)]
    bag = DiceBag.from_dice(groups)
    logger.debug("Parsed %r into %d group(s), range %s.", text, len(groups), bag.range)
    return bag
