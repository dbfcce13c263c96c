'''
Console Mastermind

Flow:
  banner -> (prompt -> read -> validate -> score) per turn -> YOU WON! / YOU LOST!

Invalid input is reported and the same turn is asked again; it never costs
an attempt. If stdin closes mid-game the game ends as lost.
'''

import io
import logging
import sys
from typing import Callable, Optional

from pydantic import ValidationError

from .config import (
    BANNER,
    INVALID_GUESS_MESSAGE,
    LOST_MESSAGE,
    PROMPT,
    TURNS_REMAINING,
    WON_MESSAGE,
)
from .random_code import generate_code
from .schemas import GuessInput
from .store import Game
from .types import Code, GameStatus

logger = logging.getLogger(__name__)

LineReader = Callable[[], str]
LineWriter = Callable[[str], None]


def read_guess(game: Game, read_line: LineReader, write: LineWriter) -> Optional[Code]:
    """
    Prompt until the player enters a valid guess.
    Returns None when there is no more input.
    """
    while True:
        write(TURNS_REMAINING.format(turns=game.attempts_left))
        write(PROMPT)

        try:
            line = read_line()
        except EOFError:
            logger.warning("Input closed with %d attempts left", game.attempts_left)
            return None
        except UnicodeDecodeError as err:
            logger.info("Rejected undecodable input: %s", err)
            write("\n" + INVALID_GUESS_MESSAGE)
            continue

        try:
            return GuessInput(raw=line).code
        except ValidationError:
            logger.info("Rejected guess %r", line)
            write("\n" + INVALID_GUESS_MESSAGE)


def play(
    secret: Optional[Code] = None,
    read_line: Optional[LineReader] = None,
    write: Optional[LineWriter] = None,
) -> GameStatus:
    read_line = read_line or input
    write = write or print
    if secret is None:
        secret = generate_code()
    game = Game(secret=secret)

    write(BANNER)

    while not game.is_over:
        attempt = read_guess(game, read_line, write)
        if attempt is None:
            game.abandon()
            break

        entry = game.guess(attempt)
        # A win ends the game straight away, without a RESULT line
        if game.status != "won":
            write(entry.message)

    write(WON_MESSAGE if game.status == "won" else LOST_MESSAGE)
    return game.status


def main() -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    # Undecodable bytes become U+FFFD and fail validation like any other bad line
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(errors="replace")
    try:
        play()
    except KeyboardInterrupt:
        sys.exit(130)

