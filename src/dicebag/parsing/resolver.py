"""Turns decoded modifiers into the drop/reroll/cutoff clauses of a die group."""
from __future__ import annotations

from typing import Sequence

from dicebag.errors import (
    DuplicateCutoffClause,
    DuplicateDropClause,
    DuplicateRerollClause,
    ExcessiveDrop,
    IncompleteRerollClause,
)
from dicebag.models.groups import (
    DieGroup,
    check_cutoff_maximum,
    check_cutoff_minimum,
    check_drop,
    check_reroll_above,
    check_reroll_below,
    check_reroll_count,
)
from dicebag.parsing.lexer import Modifier, ModifierKind

_LOWEST_SIDE = (ModifierKind.DROP_LOWEST, ModifierKind.KEEP_HIGHEST)
_HIGHEST_SIDE = (ModifierKind.DROP_HIGHEST, ModifierKind.KEEP_LOWEST)
_KEEPS = (ModifierKind.KEEP_HIGHEST, ModifierKind.KEEP_LOWEST)
_REROLL_CONDITIONS = (ModifierKind.REROLL_ABOVE, ModifierKind.REROLL_BELOW)


def resolve_drop(modifiers: Sequence[Modifier], die: DieGroup) -> DieGroup:
    """kh/kl are rewritten as dl/dh of ``count - n``; both sides merge at the end."""
    lowest: int | None = None
    highest: int | None = None
    for mod in modifiers:
        if mod.kind not in _LOWEST_SIDE and mod.kind not in _HIGHEST_SIDE:
            continue
        if mod.kind in _LOWEST_SIDE and lowest is not None:
            raise DuplicateDropClause("dl/kh")
        if mod.kind in _HIGHEST_SIDE and highest is not None:
            raise DuplicateDropClause("dh/kl")
        n = mod.value
        if mod.kind in _KEEPS:
            if n >= die.count:
                raise ExcessiveDrop(n, die.count)
            n = die.count - n
        check_drop(n, die.count)
        if mod.kind in _LOWEST_SIDE:
            lowest = n
        else:
            highest = n

    if lowest is not None and highest is not None:
        return die.with_drop_highest_and_lowest(lowest, highest)
    if lowest is not None:
        return die.with_drop_lowest(lowest)
    if highest is not None:
        return die.with_drop_highest(highest)
    return die


def resolve_reroll(modifiers: Sequence[Modifier], die: DieGroup) -> DieGroup:
    count: int | None = None
    threshold: int | None = None
    above = False
    for mod in modifiers:
        if mod.kind is ModifierKind.REROLL_COUNT:
            if count is not None:
                raise DuplicateRerollClause("count")
            check_reroll_count(mod.value, die.count)
            count = mod.value
        elif mod.kind in _REROLL_CONDITIONS:
            if threshold is not None:
                raise DuplicateRerollClause("condition")
            above = mod.kind is ModifierKind.REROLL_ABOVE
            if above:
                check_reroll_above(mod.value, die.size)
            else:
                check_reroll_below(mod.value, die.size)
            threshold = mod.value

    if count is None and threshold is None:
        return die
    if count is None or threshold is None:
        raise IncompleteRerollClause()
    if above:
        return die.with_reroll_if_above(threshold, count)
    return die.with_reroll_if_below(threshold, count)


def resolve_cutoff(modifiers: Sequence[Modifier], die: DieGroup) -> DieGroup:
    minimum: int | None = None
    maximum: int | None = None
    for mod in modifiers:
        if mod.kind is ModifierKind.CUTOFF_MAXIMUM:
            if maximum is not None:
                raise DuplicateCutoffClause("maximum")
            check_cutoff_maximum(mod.value, die.size)
            maximum = mod.value
        elif mod.kind is ModifierKind.CUTOFF_MINIMUM:
            if minimum is not None:
                raise DuplicateCutoffClause("minimum")
            check_cutoff_minimum(mod.value, die.size)
            minimum = mod.value

    if minimum is not None and maximum is not None:
        return die.with_min_and_max_roll(minimum, maximum)
    if minimum is not None:
        return die.with_minimum_roll(minimum)
    if maximum is not None:
        return die.with_maximum_roll(maximum)
    return die


def resolve_modifiers(modifiers: Sequence[Modifier], die: DieGroup) -> DieGroup:
    """Apply every modifier to ``die``, returning the finished group."""
    die = resolve_drop(modifiers, die)
    die = resolve_reroll(modifiers, die)
    return resolve_cutoff(modifiers, die)
