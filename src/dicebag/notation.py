"""Canonical notation text for bags, groups and roll results.

``format_bag(parse(text))`` always parses back to an equal bag. Bags built by
hand may use shapes notation cannot express (a leading subtraction, a custom
keep-set with gaps); those are rendered from the first and last kept position.
"""
from __future__ import annotations

from dicebag.models.bag import DiceBag
from dicebag.models.clauses import (
    CutoffBoth,
    CutoffMaximum,
    CutoffMinimum,
    DiceOp,
    DropCustom,
    DropHighest,
    DropLowest,
    RerollIfAbove,
    RerollIfBelow,
)
from dicebag.models.groups import Bonus, DieGroup
from dicebag.models.result import RollResult


def _drop_text(die: DieGroup) -> str:
    drop = die.drop
    if isinstance(drop, DropLowest):
        return f"dl{drop.n}"
    if isinstance(drop, DropHighest):
        return f"dh{drop.n}"
    if isinstance(drop, DropCustom) and drop.keep:
        # Both halves are written, even when one is zero, so it re-parses as custom.
        lowest = drop.keep[0]
        highest = die.count - drop.keep[-1] - 1
        return f"dl{lowest}dh{highest}"
    return ""


def _reroll_text(die: DieGroup) -> str:
    reroll = die.reroll
    if isinstance(reroll, RerollIfAbove):
        return f"rr{reroll.count}ab{reroll.threshold}"
    if isinstance(reroll, RerollIfBelow):
        return f"rr{reroll.count}be{reroll.threshold}"
    return ""


def _cutoff_text(die: DieGroup) -> str:
    cutoff = die.cutoff
    if isinstance(cutoff, CutoffMinimum):
        return f"mn{cutoff.n}"
    if isinstance(cutoff, CutoffMaximum):
        return f"mx{cutoff.n}"
    if isinstance(cutoff, CutoffBoth):
        return f"mn{cutoff.minimum}mx{cutoff.maximum}"
    return ""


def format_group(group: DieGroup | Bonus) -> str:
    """Notation for one group, without its operator."""
    if isinstance(group, Bonus):
        return str(group.bonus)
    text = f"{group.count}d{group.size}"
    text += _drop_text(group) + _reroll_text(group) + _cutoff_text(group)
    if group.explosive:
        text += "!"
    return text


def format_bag(bag: DiceBag) -> str:
    parts = []
    for i, group in enumerate(bag.dice):
        op = group.op.value
        if i == 0 and group.op is DiceOp.ADD:
            op = ""
        parts.append(op + format_group(group))
    return "".join(parts)


def format_result(result: RollResult) -> str:
    """One line per roll, e.g. ``4d6dl1 [6, 5, 3] = 14; bonus 2; total 16``."""
    parts = []
    for group_result in result.dice_groups:
        sign = "-" if group_result.dice.op is DiceOp.SUB else ""
        rolls = ", ".join(str(v) for v in group_result.results)
        parts.append(f"{sign}{format_group(group_result.dice)} [{rolls}] = {group_result.total}")
    if result.bonus.boni:
        parts.append(f"bonus {result.bonus.total}")
    parts.append(f"total {result.total}")
    return "; ".join(parts)
