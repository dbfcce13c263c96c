"""
Labels for clarity.
"""

from typing import Literal, Tuple

Digit = int  # 1 -> 6
Code = Tuple[Digit, ...]  # 4 digit secret or guess
GameStatus = Literal["in_progress", "won", "lost"]
