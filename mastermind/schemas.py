"""
Explicit validation of the player's guess.
- The raw console line goes into GuessInput; the validator rejects anything
  that is not exactly CODE_LENGTH digits, each between MIN_DIGIT and MAX_DIGIT.
- parse_guess / is_valid_guess wrap the model for callers that only want the
  parsed code or a yes/no answer.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .config import CODE_LENGTH, INVALID_GUESS_MESSAGE, MAX_DIGIT, MIN_DIGIT
from .types import Code

DECIMAL_DIGITS = "0123456789"


class GuessInput(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True)

    raw: str = Field(..., description="The line the player typed, e.g. '1234'")

    @field_validator("raw")
    @classmethod
    def validate_raw(cls, raw: str) -> str:
        """
        Valid means: exactly CODE_LENGTH characters, every character an ASCII
        decimal digit, every digit within MIN_DIGIT..MAX_DIGIT.
        The line terminator is not part of the guess; other whitespace is.
        """
        text = raw.rstrip("\r\n")

        if len(text) != CODE_LENGTH:
            raise ValueError(INVALID_GUESS_MESSAGE)

        for char in text:
            if char not in DECIMAL_DIGITS:
                raise ValueError(INVALID_GUESS_MESSAGE)
            if int(char) < MIN_DIGIT or int(char) > MAX_DIGIT:
                raise ValueError(INVALID_GUESS_MESSAGE)

        return text

    @property
    def code(self) -> Code:
        return tuple(int(char) for char in self.raw)


def parse_guess(text: str) -> Optional[Code]:
    """Returns the parsed code, or None when the text is not a valid guess."""
    try:
        return GuessInput(raw=text).code
    except ValidationError:
        return None


def is_valid_guess(text: str) -> bool:
    return parse_guess(text) is not None
