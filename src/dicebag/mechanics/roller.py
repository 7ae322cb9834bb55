"""Roll evaluator: one random sample of a dice bag, no I/O.

Steps per die group: roll (with explosions), reroll, clamp, drop, sum.
Parsing already rejected every combination these steps cannot handle, so
nothing here raises for a parsed bag.
"""
from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from dicebag.models.clauses import DropCustom, DropHighest, DropLowest
from dicebag.models.groups import Bonus, DieGroup
from dicebag.models.result import DieGroupResult, RollResult

if TYPE_CHECKING:
    from dicebag.models.bag import DiceBag

logger = logging.getLogger(__name__)

# Extra rolls allowed per exploding die; keeps "1d1!" from looping forever.
EXPLOSION_LIMIT = 100


def explode(size: int, rng: random.Random, limit: int = EXPLOSION_LIMIT) -> list[int]:
    """Roll one exploding die: every maximum face adds another roll."""
    rolls = [rng.randint(1, size)]
    while rolls[-1] == size:
        if len(rolls) > limit:
            logger.warning("Explosion chain on a d%d stopped after %d extra rolls.", size, limit)
            break
        rolls.append(rng.randint(1, size))
    return rolls


def roll_raw(die: DieGroup, rng: random.Random, limit: int = EXPLOSION_LIMIT) -> list[int]:
    if not die.explosive:
        return [rng.randint(1, die.size) for _ in range(die.count)]
    values: list[int] = []
    for _ in range(die.count):
        values.extend(explode(die.size, rng, limit))
    return values


def apply_reroll(values: list[int], die: DieGroup, rng: random.Random) -> list[int]:
    """Single left-to-right pass; a rerolled value is never looked at again."""
    out = list(values)
    rerolled = 0
    for i, value in enumerate(out):
        if rerolled >= die.reroll.count:
            break
        if die.reroll.qualifies(value):
            out[i] = rng.randint(1, die.size)
            rerolled += 1
    return out


def apply_cutoff(values: list[int], die: DieGroup) -> list[int]:
    return [die.cutoff.clamp(v) for v in values]


def apply_drop(values: list[int], die: DieGroup) -> list[int]:
    drop = die.drop
    if isinstance(drop, DropLowest):
        ordered = sorted(values, reverse=True)
        return ordered[: max(len(ordered) - drop.n, 0)]
    if isinstance(drop, DropHighest):
        ordered = sorted(values)
        return ordered[: max(len(ordered) - drop.n, 0)]
    if isinstance(drop, DropCustom):
        ordered = sorted(values)
        return [ordered[i] for i in drop.keep]
    return list(values)


def evaluate_die(die: DieGroup, rng: random.Random, limit: int = EXPLOSION_LIMIT) -> list[int]:
    """Surviving values of one die group after every clause has been applied."""
    values = roll_raw(die, rng, limit)
    values = apply_reroll(values, die, rng)
    values = apply_cutoff(values, die)
    return apply_drop(values, die)


def roll_bag(
    bag: DiceBag,
    rng: random.Random | None = None,
    explosion_limit: int = EXPLOSION_LIMIT,
) -> RollResult:
    """Roll every group of ``bag`` and return the full report."""
    rng = rng if rng is not None else random
    result = RollResult()
    for group in bag.dice:
        if isinstance(group, Bonus):
            result.add_bonus(group)
        else:
            survivors = evaluate_die(group, rng, explosion_limit)
            result.add_dice_result(DieGroupResult.from_rolls(group, survivors))
    return result


def sample_total(
    bag: DiceBag,
    rng: random.Random,
    explosion_limit: int = EXPLOSION_LIMIT,
) -> int:
    """Grand total of one roll, without building a report."""
    total = 0
    for group in bag.dice:
        if isinstance(group, Bonus):
            total += group.signed
        else:
            total = group.op.apply(total, sum(evaluate_die(group, rng, explosion_limit)))
    return total
