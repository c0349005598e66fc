import os
import sys
import time

TEXT_DELAY = float(os.getenv("RPS_TEXT_DELAY", "0.01"))


def slow_print(text, delay=None):
    """Function to print text slowly character by character."""
    if delay is None:
        delay = TEXT_DELAY
    for char in text:
        sys.stdout.write(char)
        sys.stdout.flush()
        if delay:
            time.sleep(delay)
    print()


def render_text(text):
    """Function to write one message to the terminal."""
    slow_print(text)


def prompt_user_input(text):
    return input(text)
