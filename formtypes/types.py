"""Core enumerations and constants for formtypes.

This module defines the fundamental values shared across the library:
- Confidence: Ordered strength of a guess produced by a type guesser
- FOUNDATIONAL_OPTIONS: Options every resolved type hierarchy must recognize
- DEFAULT_GUESSED_TYPE: Type used when no guesser has an opinion
"""

from enum import Enum
from typing import Tuple


class Confidence(int, Enum):
    """Strength of a guess.

    Guesses are compared by confidence; a higher member always wins over a
    lower one. Members compare as integers, so ``Confidence.LOW <
    Confidence.HIGH`` holds.

    Examples:
        >>> Confidence.MEDIUM > Confidence.LOW
        True
        >>> max(Confidence.HIGH, Confidence.MEDIUM)
        <Confidence.HIGH: 2>
    """
    LOW = 0
    MEDIUM = 1
    HIGH = 2
    VERY_HIGH = 3


# Every type hierarchy must know these options, otherwise the type cannot
# take part in data mapping and the guessing protocol.
FOUNDATIONAL_OPTIONS: Tuple[str, ...] = ("data", "required", "max_length")

DEFAULT_GUESSED_TYPE = "text"


__all__ = [
    "Confidence",
    "FOUNDATIONAL_OPTIONS",
    "DEFAULT_GUESSED_TYPE",
]
