import logging
import re

from rapidfuzz import fuzz, process

from rps.data_types import Option

logger = logging.getLogger(__name__)


def normalize_answer(answer):
    """
    Normalize an answer for fuzzy comparison.
    Converts to lowercase and removes everything but letters.
    """
    return re.sub(r"[^a-zäöüß]", "", answer.lower())


def suggest_option(raw_input, threshold=60):
    """
    Find the option an invalid answer most likely meant.

    Parameters:
    - raw_input (str): The answer as the user typed it.
    - threshold (int): Minimum score for a match (0-100).

    Returns the closest Option, or None when nothing scores high enough.
    """
    normalized = normalize_answer(raw_input)
    if not normalized:
        return None
    match = process.extractOne(
        normalized,
        [option.value for option in Option],
        scorer=fuzz.ratio,
        score_cutoff=threshold,
    )
    logger.debug(f"suggest_option: {normalized=}, {match=}")
    if match is None:
        return None
    return Option(match[0])
