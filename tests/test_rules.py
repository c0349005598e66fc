import random
from itertools import product

import pytest

from rps.data_types import Option, Outcome
from rps.rules import RULES, beats, draw_computer_choice, resolve_turn


class FixedUniform:
    def __init__(self, value):
        self.value = value

    def uniform(self, a, b):
        return self.value


class TestRules:
    def test_rules_form_a_cycle(self):
        assert set(RULES) == set(Option)
        assert set(RULES.values()) == set(Option)
        for option in Option:
            assert RULES[option] is not option
            assert RULES[RULES[RULES[option]]] is option

    def test_rules_are_read_only(self):
        with pytest.raises(TypeError):
            RULES[Option.STEIN] = Option.PAPIER

    def test_beats(self):
        assert beats(Option.SCHERE, Option.PAPIER)
        assert beats(Option.STEIN, Option.SCHERE)
        assert beats(Option.PAPIER, Option.STEIN)
        assert not beats(Option.PAPIER, Option.SCHERE)

    def test_all_valid_combinations(self):
        outcomes = [
            resolve_turn(user.value, computer)
            for user, computer in product(Option, Option)
        ]
        assert outcomes.count(Outcome.DRAW) == 3
        assert outcomes.count(Outcome.USER_WINS) == 3
        assert outcomes.count(Outcome.COMPUTER_WINS) == 3

    @pytest.mark.parametrize(
        "user, computer, expected",
        [
            ("schere", Option.STEIN, Outcome.COMPUTER_WINS),
            ("papier", Option.STEIN, Outcome.USER_WINS),
            ("stein", Option.STEIN, Outcome.DRAW),
            ("schere", Option.PAPIER, Outcome.USER_WINS),
            ("papier", Option.SCHERE, Outcome.COMPUTER_WINS),
        ],
    )
    def test_resolve_turn(self, user, computer, expected):
        assert resolve_turn(user, computer) is expected

    @pytest.mark.parametrize("computer", list(Option))
    def test_case_insensitive(self, computer):
        assert resolve_turn("SCHERE", computer) is resolve_turn("schere", computer)
        assert resolve_turn("ScHeRe", computer) is resolve_turn("schere", computer)

    @pytest.mark.parametrize("raw_input", ["günther", "", "schere ", "rock"])
    def test_invalid_input(self, raw_input):
        for computer in Option:
            assert resolve_turn(raw_input, computer) is Outcome.INVALID_INPUT


class TestDrawComputerChoice:
    def test_uniform_draw_covers_every_option(self):
        rng = random.Random(42)
        drawn = {draw_computer_choice(rng=rng) for _ in range(200)}
        assert drawn == set(Option)

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.0, Option.SCHERE),
            (0.49, Option.SCHERE),
            (0.5, Option.STEIN),
            (1.49, Option.STEIN),
            (1.5, Option.PAPIER),
            (2.0, Option.PAPIER),
        ],
    )
    def test_legacy_draw_rounds_half_up(self, value, expected):
        assert draw_computer_choice(rng=FixedUniform(value), legacy=True) is expected

    def test_legacy_draw_favors_the_middle(self):
        rng = random.Random(7)
        draws = [draw_computer_choice(rng=rng, legacy=True) for _ in range(6000)]
        assert draws.count(Option.STEIN) > draws.count(Option.SCHERE) * 1.5
        assert draws.count(Option.STEIN) > draws.count(Option.PAPIER) * 1.5
