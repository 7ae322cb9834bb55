"""Tests for src/dicebag/app.py."""
from __future__ import annotations

import logging

import pytest
from rich.logging import RichHandler

from dicebag.app import DiceApp, _load_config, configure_logging
from dicebag.models import DiceBag


def lines(*items: str):
    it = iter(items)

    def read() -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


class TestConfig:
    def test_project_config_loads(self):
        config = _load_config()
        assert config["dice"]["default_expression"] == "1d20"
        assert config["distribution"]["default_rolls"] > 0

    def test_defaults_without_config(self):
        app = DiceApp(config={})
        assert app.default_expression == "1d20"
        assert app.default_rolls == 10_000
        assert app.explosion_limit == 100

    def test_values_from_config(self, dice_app):
        assert dice_app.default_expression == "1d1+2"
        assert dice_app.default_rolls == 200
        assert dice_app.explosion_limit == 10

    def test_configure_logging(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        try:
            configure_logging(verbose=True)
            assert root.level == logging.DEBUG
            assert any(isinstance(h, RichHandler) for h in root.handlers)
        finally:
            root.handlers[:] = handlers
            root.setLevel(level)


class TestDiceApp:
    def test_parse_ok(self, dice_app):
        assert isinstance(dice_app.parse("3d6"), DiceBag)

    def test_parse_error_is_reported_not_raised(self, dice_app, capsys):
        assert dice_app.parse("3d6dl9") is None
        assert "Could not parse" in capsys.readouterr().out

    def test_roll(self, dice_app):
        results = dice_app.roll("2d1+2", times=2)
        assert [r.total for r in results] == [4, 4]

    def test_roll_error(self, dice_app):
        assert dice_app.roll("2x1") == []

    def test_explosion_limit_from_config(self, dice_app):
        assert dice_app.roll("1d1!")[0].total == 11

    def test_show_range(self, dice_app):
        assert dice_app.show_range("5d6 - 10d10") == (-70, -5)
        assert dice_app.show_range("") is None

    def test_distribution_uses_default_rolls(self, dice_app):
        assert dice_app.distribution("1d1+1") == {2: 100.0}
        assert dice_app.distribution("1d1+1", counts=True) == {2: 200}
        assert dice_app.distribution("1d1+1", rolls=7, counts=True) == {2: 7}

    def test_plain_output_when_rolls_hidden(self, app_config, capsys):
        app_config["display"]["show_rolls"] = False
        DiceApp(config=app_config).roll("2d1")
        assert "2d1 = 2" in capsys.readouterr().out


class TestShell:
    def test_empty_line_rolls_default(self, dice_app, capsys):
        dice_app.shell(read_line=lines("", "quit"))
        assert "Total: 3" in capsys.readouterr().out

    @pytest.mark.parametrize("word", ["quit", "EXIT", "q"])
    def test_quit_words(self, dice_app, capsys, word):
        dice_app.shell(read_line=lines(word, "5d1"))
        assert "Total: 5" not in capsys.readouterr().out

    def test_keyboard_interrupt_leaves(self, dice_app):
        def interrupted() -> str:
            raise KeyboardInterrupt

        dice_app.shell(read_line=interrupted)
