"""Tests for src/dicebag/mechanics/roller.py."""
from __future__ import annotations

import logging
import random

import pytest

from dicebag.mechanics.roller import (
    apply_cutoff,
    apply_drop,
    apply_reroll,
    explode,
    roll_bag,
    sample_total,
)
from dicebag.models import (
    CutoffBoth,
    DieGroup,
    DropCustom,
    DropHighest,
    DropLowest,
    RerollIfAbove,
    RerollIfBelow,
)
from dicebag.parsing import parse


class FixedRng:
    """Returns queued values from randint, ignoring the bounds."""

    def __init__(self, *values: int):
        self.values = list(values)

    def randint(self, a: int, b: int) -> int:
        return self.values.pop(0)


class TestRollBag:
    @pytest.mark.parametrize("text, total", [
        ("1d1", 1),
        ("5d1", 5),
        ("3d1+4", 7),
        ("3d1-4", -1),
        ("2d1-3d1", -1),
        ("7", 7),
    ])
    def test_one_sided_dice_are_deterministic(self, text, total, rng):
        result = parse(text).roll(rng)
        assert result.total == total

    @pytest.mark.parametrize("text", [
        "4d6", "4d6dl1", "8d10dl2dh2", "15d20dl4dh3rr3ab4mn2mx18", "2d8-3+1d4",
    ])
    def test_totals_inside_range(self, text, rng):
        bag = parse(text)
        low, high = bag.range
        for _ in range(300):
            total = bag.roll(rng).total
            assert low <= total <= high, f"{text} gave {total}"

    def test_full_modifier_chain_stays_in_range(self, rng):
        bag = parse("15d20dl4dh3rr3ab4mn2mx18")
        assert bag.range == (16, 144)
        totals = [sample_total(bag, rng) for _ in range(100_000)]
        assert 16 <= min(totals)
        assert max(totals) <= 144

    def test_extremes_are_reached(self, rng):
        bag = parse("4d6")
        seen = {sample_total(bag, rng) for _ in range(500_000)}
        assert 4 in seen
        assert 24 in seen

    def test_total_is_sum_of_parts(self, rng):
        result = parse("3d6-1d4+2-5").roll(rng)
        parts = sum(g.total for g in result.dice_groups)
        assert result.total == parts + result.bonus.total
        assert result.bonus.boni == [2, -5]
        assert result.bonus.total == -3

    def test_subtracted_group_total_is_negative(self, rng):
        result = parse("1d1-2d1").roll(rng)
        assert [g.total for g in result.dice_groups] == [1, -2]

    def test_kept_dice_count(self, rng):
        result = parse("12d20dl4dh3").roll(rng)
        assert len(result.dice_groups[0].results) == 5

    def test_module_random_used_by_default(self, seeded_rng):
        first = parse("10d20").roll().total
        random.seed(42)
        assert parse("10d20").roll().total == first

    def test_sample_total_matches_roll_bag(self):
        bag = parse("4d6dl1rr1be2mn2!-1d4+3")
        assert sample_total(bag, random.Random(7)) == roll_bag(bag, random.Random(7)).total

    def test_summary_is_plain_data(self, rng):
        summary = parse("2d1+3").roll(rng).summary()
        assert summary == {"groups": [2], "bonus": 3, "total": 5}


class TestExplode:
    def test_stops_on_non_maximum(self):
        assert explode(6, FixedRng(6, 6, 2)) == [6, 6, 2]

    def test_single_roll_when_not_maximum(self):
        assert explode(6, FixedRng(3)) == [3]

    def test_one_sided_die_is_capped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="dicebag.mechanics.roller"):
            rolls = explode(1, random.Random(0), limit=10)
        assert rolls == [1] * 11
        assert "stopped" in caplog.text

    def test_exploding_group_exceeds_plain_range(self, rng):
        bag = parse("1d1!")
        result = roll_bag(bag, rng, explosion_limit=5)
        assert result.total == 6
        assert result.total > bag.range[1]


class TestApplySteps:
    def test_reroll_below_bounded_by_count(self):
        die = DieGroup(size=6, count=4, reroll=RerollIfBelow(count=2, threshold=3))
        out = apply_reroll([1, 2, 1, 5], die, FixedRng(6, 4))
        assert out == [6, 4, 1, 5]

    def test_rerolled_value_not_rechecked(self):
        die = DieGroup(size=6, count=2, reroll=RerollIfAbove(count=2, threshold=4))
        out = apply_reroll([6, 1], die, FixedRng(5))
        assert out == [5, 1]

    def test_cutoff_clamps_both_sides(self):
        die = DieGroup(size=6, count=4, cutoff=CutoffBoth(minimum=2, maximum=5))
        assert apply_cutoff([1, 3, 6, 5], die) == [2, 3, 5, 5]

    def test_drop_lowest_keeps_highest_descending(self):
        die = DieGroup(size=6, count=4, drop=DropLowest(n=1))
        assert apply_drop([3, 6, 1, 4], die) == [6, 4, 3]

    def test_drop_highest_keeps_lowest_ascending(self):
        die = DieGroup(size=6, count=4, drop=DropHighest(n=2))
        assert apply_drop([3, 6, 1, 4], die) == [1, 3]

    def test_custom_keeps_positions(self):
        die = DieGroup(size=6, count=5, drop=DropCustom(keep=(1, 2, 3)))
        assert apply_drop([5, 1, 6, 2, 4], die) == [2, 4, 5]

    def test_no_drop_keeps_order(self):
        assert apply_drop([3, 1, 2], DieGroup.of(6, 3)) == [3, 1, 2]
