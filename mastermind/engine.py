"""
Pure game logic (no console, no state).
We compute two feedback numbers for each guess:
- exact: how many positions hold the right digit (right number, right place)
- color_only: how many remaining guess digits appear at some other, still
  unclaimed position of the secret

Scoring is done in two passes that each return fresh (guess_index, secret_index)
pairs. A position on either side is claimed by at most one pair, so duplicate
digits are never counted twice.
"""

from typing import List, NamedTuple, Tuple

from .config import CORRECT_POSITION_CHAR, INCORRECT_POSITION_CHAR, RESULT_PREFIX
from .types import Code

Pair = Tuple[int, int]  # (guess index, secret index)


class Score(NamedTuple):
    exact: int
    color_only: int


def _check_lengths(secret: Code, guess: Code) -> int:
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ValueError("Secret and guess must be the same non-zero length.")
    return n


def exact_pairs(secret: Code, guess: Code) -> List[Pair]:
    """
    First pass. Example:
      secret = (1, 1, 2, 3)
      guess  = (1, 1, 1, 1)
      -> [(0, 0), (1, 1)]
    """
    n = _check_lengths(secret, guess)
    return [(i, i) for i in range(n) if guess[i] == secret[i]]


def color_only_pairs(secret: Code, guess: Code, claimed: List[Pair]) -> List[Pair]:
    """
    Second pass. Each unclaimed guess position takes the lowest-index unclaimed
    secret position holding the same digit, if there is one.
      secret = (1, 2, 3, 4)
      guess  = (1, 2, 4, 3)
      claimed = [(0, 0), (1, 1)]
      -> [(2, 3), (3, 2)]
    """
    n = _check_lengths(secret, guess)

    used_guess = {g for g, _ in claimed}
    used_secret = {s for _, s in claimed}

    pairs = []
    for i in range(n):
        if i in used_guess:
            continue
        for j in range(n):
            if j not in used_secret and guess[i] == secret[j]:
                pairs.append((i, j))
                used_secret.add(j)
                break
    return pairs


def match_pairs(secret: Code, guess: Code) -> Tuple[List[Pair], List[Pair]]:
    """Returns (exact pairs, color-only pairs)."""
    exact = exact_pairs(secret, guess)
    return exact, color_only_pairs(secret, guess, exact)


def score_guess(secret: Code, guess: Code) -> Score:
    """
    Example:
      secret = (1, 2, 3, 4)
      guess  = (1, 2, 4, 3)
      Returns Score(exact=2, color_only=2)
    """
    exact, color_only = match_pairs(secret, guess)
    return Score(exact=len(exact), color_only=len(color_only))


def is_win(secret: Code, guess: Code) -> bool:
    """
    Win = all digits match in order, for all positions.
    """
    n = len(secret)
    if n == 0 or len(guess) != n:
        return False
    return tuple(secret) == tuple(guess)


def format_result(score: Score) -> str:
    # 2 exact + 1 color-only -> "RESULT: ++-"
    return (
        RESULT_PREFIX
        + CORRECT_POSITION_CHAR * score.exact
        + INCORRECT_POSITION_CHAR * score.color_only
    )
