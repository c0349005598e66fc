import logging
import math
import random
from types import MappingProxyType

from rps.data_types import Option, Outcome

logger = logging.getLogger(__name__)

# key beats value
RULES = MappingProxyType(
    {
        Option.SCHERE: Option.PAPIER,
        Option.STEIN: Option.SCHERE,
        Option.PAPIER: Option.STEIN,
    }
)

ALL_OPTIONS = list(Option)


def beats(option, other):
    return RULES[option] is other


def draw_computer_choice(rng=random, legacy=False):
    """
    Pick the computer's option.

    The default is a uniform draw over the three options. With `legacy` set,
    a continuous value in [0, 2] is rounded half up to an index, so the
    middle option (Stein) comes up twice as often as either endpoint.
    """
    if legacy:
        choice = ALL_OPTIONS[math.floor(rng.uniform(0, 2) + 0.5)]
    else:
        choice = rng.choice(ALL_OPTIONS)
    logger.debug(f"draw_computer_choice - {legacy=}, {choice=}")
    return choice


def resolve_turn(raw_input: str, computer_choice: Option) -> Outcome:
    user_choice = Option.parse(raw_input)
    if user_choice is None:
        return Outcome.INVALID_INPUT
    if user_choice is computer_choice:
        return Outcome.DRAW
    # a draw is already excluded, so one lookup decides the winner
    if beats(computer_choice, user_choice):
        return Outcome.COMPUTER_WINS
    return Outcome.USER_WINS
