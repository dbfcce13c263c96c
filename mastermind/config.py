"""
Fixed game rules and the text shown to the player.
The rules are not configurable at runtime; change them here.
"""

NUM_OF_GUESSES = 10
CODE_LENGTH = 4
MIN_DIGIT = 1
MAX_DIGIT = 6

CORRECT_POSITION_CHAR = "+"
INCORRECT_POSITION_CHAR = "-"

# Console text
BANNER = "*****MASTERMIND*****"
TURNS_REMAINING = "Turns Remaining: {turns}\n"
PROMPT = "Input your guess and press enter:"
INVALID_GUESS_MESSAGE = (
    "Valid answer is between 1111 and 6666. Each digit ranges from 1 - 6."
)
RESULT_PREFIX = "RESULT: "
WON_MESSAGE = "YOU WON!"
LOST_MESSAGE = "YOU LOST!"
