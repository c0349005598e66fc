from rps.data_types import Outcome

CHOICE_PROMPT = "\n✂️ Schere, 💎 Stein oder 🧻 Papier?\n\n"
REPLAY_PROMPT = "Noch einmal spielen? (Ja | Nein)\n\n"
AFFIRMATIVE = "ja"

INVALID_MESSAGE = '\n"{raw_input}" ist keine valide Option!\n'
SUGGESTION_MESSAGE = "Meintest du {option}?\n"
DRAW_MESSAGE = "\nUnentschieden!\n"
LOSS_MESSAGE = "\nDu hast gegen {option} verloren.\n"
WIN_MESSAGE = "\n🎉 Du hast gegen {option} gewonnen! 🎉\n"


def render_outcome(outcome, raw_input, computer_choice, suggestion=None):
    if outcome is Outcome.INVALID_INPUT:
        message = INVALID_MESSAGE.format(raw_input=raw_input)
        if suggestion is not None:
            message += SUGGESTION_MESSAGE.format(option=suggestion.display_name)
        return message
    if outcome is Outcome.DRAW:
        return DRAW_MESSAGE
    if outcome is Outcome.COMPUTER_WINS:
        return LOSS_MESSAGE.format(option=computer_choice.display_name)
    return WIN_MESSAGE.format(option=computer_choice.display_name)
