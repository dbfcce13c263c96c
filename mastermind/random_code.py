"""
Secret generator.
Draws each digit independently from the OS entropy source, so every process
gets a different code.
"""

import logging
from secrets import randbelow

from .config import CODE_LENGTH, MIN_DIGIT, MAX_DIGIT
from .types import Code

logger = logging.getLogger(__name__)


def generate_code(length: int = CODE_LENGTH) -> Code:
    if length <= 0:
        raise ValueError(f"Code length must be positive, got {length}.")

    # randbelow(6) gives 0..5, shift into MIN_DIGIT..MAX_DIGIT
    span = MAX_DIGIT - MIN_DIGIT + 1
    code = tuple(MIN_DIGIT + randbelow(span) for _ in range(length))

    logger.debug("Generated secret code %s", "".join(str(d) for d in code))
    return code
