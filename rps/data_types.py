from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Option(Enum):
    SCHERE = "schere"
    STEIN = "stein"
    PAPIER = "papier"

    @classmethod
    def parse(cls, text: str) -> Optional["Option"]:
        try:
            return cls(text.lower())
        except ValueError:
            return None

    @property
    def display_name(self) -> str:
        return capitalize_first_letter(self.value)


class Outcome(Enum):
    DRAW = "draw"
    USER_WINS = "user_wins"
    COMPUTER_WINS = "computer_wins"
    INVALID_INPUT = "invalid_input"


@dataclass
class Turn:
    raw_input: str
    computer_choice: Option
    user_choice: Optional[Option] = None

    @property
    def normalized_input(self) -> str:
        return self.raw_input.lower()


def capitalize_first_letter(text: str) -> str:
    """
    Capitalize the first letter of `text` and leave the rest untouched.

    "stein" -> "Stein", "dr. Strange" -> "Dr. Strange"
    """
    return text[:1].upper() + text[1:]
