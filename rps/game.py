import logging
import os
import random
import sys
from logging.handlers import RotatingFileHandler

from rps.data_types import Option, Outcome, Turn
from rps.messages import (
    AFFIRMATIVE,
    CHOICE_PROMPT,
    REPLAY_PROMPT,
    render_outcome,
)
from rps.rules import draw_computer_choice, resolve_turn
from rps.suggest import suggest_option
from rps.utils import prompt_user_input, render_text

logger = logging.getLogger("rps.game")


class Game:
    def __init__(self, logs=False, legacy_draw=None, rng=None):
        setup_logger(logs=logs)
        if legacy_draw is None:
            legacy_draw = bool(os.getenv("RPS_LEGACY_DRAW"))
        self.legacy_draw = legacy_draw
        self.rng = rng or random.Random()

    def prompt_choice(self):
        return prompt_user_input(CHOICE_PROMPT)

    def draw_computer_choice(self):
        return draw_computer_choice(rng=self.rng, legacy=self.legacy_draw)

    def resolve(self, raw_input):
        computer_choice = self.draw_computer_choice()
        outcome = resolve_turn(raw_input, computer_choice)
        turn = Turn(
            raw_input=raw_input,
            computer_choice=computer_choice,
            user_choice=Option.parse(raw_input),
        )
        logger.debug(f"{turn=}, {outcome=}")
        return turn, outcome

    def respond(self, turn, outcome):
        suggestion = None
        if outcome is Outcome.INVALID_INPUT:
            suggestion = suggest_option(turn.raw_input)
        render_text(
            render_outcome(
                outcome, turn.raw_input, turn.computer_choice, suggestion=suggestion
            )
        )

    def confirm_replay(self):
        answer = prompt_user_input(REPLAY_PROMPT)
        return answer.lower() == AFFIRMATIVE

    def play_turn(self):
        turn, outcome = self.resolve(self.prompt_choice())
        self.respond(turn, outcome)
        return outcome

    def run(self):
        try:
            while True:
                self.play_turn()
                if not self.confirm_replay():
                    break
        except Exception as e:
            logger.exception(f"Game.run: {e}")
            raise e
        logger.info("Game ended")
        return 0


def run():
    sys.exit(Game().run())


def run_debug():
    sys.exit(Game(logs=True).run())


def setup_logger(logs=False):
    log_file = os.getenv("RPS_LOG_FILE", "/tmp/rps.log")

    logger = logging.getLogger("rps")
    logger.setLevel(logging.DEBUG)
    if not logger.handlers:
        handler = RotatingFileHandler(
            log_file,
            mode="a",
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
            delay=0,
        )
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if logs and not any(
        isinstance(h, logging.StreamHandler) and h.stream is sys.stdout
        for h in logger.handlers
    ):
        # Console (stdout) handler
        console_handler = logging.StreamHandler(sys.stdout)
        console_formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)
    logger.info("**************** NEW SESSION STARTED ****************")

    return logger


if __name__ == "__main__":
    run()
