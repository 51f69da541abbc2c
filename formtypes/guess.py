"""Guesses and guess arbitration.

Type guessers inspect a class attribute and return their opinion about the
form type and options that suit it. Every opinion carries a Confidence; when
several guessers answer, the most confident answer wins and, among equally
confident answers, the one seen first wins.

Usage:
    >>> from formtypes.guess import Guess, ValueGuess
    >>> from formtypes.types import Confidence
    >>> best = Guess.get_best_guess([
    ...     ValueGuess(10, Confidence.MEDIUM),
    ...     None,
    ...     ValueGuess(20, Confidence.HIGH),
    ... ])
    >>> best.value
    20
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, TypeVar

from typing_extensions import Protocol, runtime_checkable

from formtypes.types import Confidence

G = TypeVar("G", bound="Guess")


class Guess:
    """Base class for a guess with a confidence level."""

    confidence: Confidence

    def _normalize_confidence(self) -> None:
        # Guesses are frozen dataclasses, so bypass the frozen __setattr__
        if not isinstance(self.confidence, Confidence):
            object.__setattr__(self, "confidence", Confidence(self.confidence))

    @staticmethod
    def get_best_guess(guesses: Iterable[Optional[G]]) -> Optional[G]:
        """Return the guess with the highest confidence.

        ``None`` entries are skipped. When two guesses share the highest
        confidence, the earlier one is returned.

        Args:
            guesses: Guesses in the order their guessers were consulted

        Returns:
            The winning guess, or None if no guess was made
        """
        best: Optional[G] = None
        for guess in guesses:
            if guess is None:
                continue
            if best is None or guess.confidence > best.confidence:
                best = guess
        return best


@dataclass(frozen=True)
class TypeGuess(Guess):
    """Guess for the form type of an attribute, with options for that type.

    Attributes:
        type: Name of the guessed form type
        options: Options to pass to the guessed type
        confidence: Strength of the guess
    """
    type: str
    options: Dict[str, Any] = field(default_factory=dict)
    confidence: Confidence = Confidence.LOW

    def __post_init__(self):
        self._normalize_confidence()


@dataclass(frozen=True)
class ValueGuess(Guess):
    """Guess for a single option value.

    Attributes:
        value: The guessed value
        confidence: Strength of the guess
    """
    value: Any
    confidence: Confidence = Confidence.LOW

    def __post_init__(self):
        self._normalize_confidence()


@runtime_checkable
class FormTypeGuesserInterface(Protocol):
    """Guesses form types and options for attributes of a class.

    Every method may return None when the guesser has no opinion. Guessers
    may also provide ``guess_min_length``; guessers without it are skipped
    for that guess (see AbstractTypeGuesser).
    """

    def guess_type(self, cls: Any, property: str) -> Optional[TypeGuess]:
        ...

    def guess_required(self, cls: Any, property: str) -> Optional[ValueGuess]:
        ...

    def guess_max_length(self, cls: Any, property: str) -> Optional[ValueGuess]:
        ...


class AbstractTypeGuesser:
    """Base guesser without opinions; subclasses override what they can guess."""

    def guess_type(self, cls: Any, property: str) -> Optional[TypeGuess]:
        return None

    def guess_required(self, cls: Any, property: str) -> Optional[ValueGuess]:
        return None

    def guess_max_length(self, cls: Any, property: str) -> Optional[ValueGuess]:
        return None

    def guess_min_length(self, cls: Any, property: str) -> Optional[ValueGuess]:
        return None


class TypeGuesserChain:
    """Asks every guesser in order and keeps the most confident answer.

    Nested chains are flattened so that the consultation order is the order
    of the leaf guessers.

    Examples:
        >>> chain = TypeGuesserChain([])
        >>> chain.guess_type(object, "name") is None
        True
    """

    def __init__(self, guessers: Iterable[FormTypeGuesserInterface]):
        self._guessers: List[FormTypeGuesserInterface] = []
        for guesser in guessers:
            if isinstance(guesser, TypeGuesserChain):
                self._guessers.extend(guesser.guessers)
            else:
                self._guessers.append(guesser)

    @property
    def guessers(self) -> List[FormTypeGuesserInterface]:
        return list(self._guessers)

    def guess_type(self, cls: Any, property: str) -> Optional[TypeGuess]:
        return Guess.get_best_guess(g.guess_type(cls, property) for g in self._guessers)

    def guess_required(self, cls: Any, property: str) -> Optional[ValueGuess]:
        return Guess.get_best_guess(g.guess_required(cls, property) for g in self._guessers)

    def guess_max_length(self, cls: Any, property: str) -> Optional[ValueGuess]:
        return Guess.get_best_guess(g.guess_max_length(cls, property) for g in self._guessers)

    def guess_min_length(self, cls: Any, property: str) -> Optional[ValueGuess]:
        guesses = []
        for g in self._guessers:
            guess_min_length = getattr(g, "guess_min_length", None)
            if guess_min_length is not None:
                guesses.append(guess_min_length(cls, property))
        return Guess.get_best_guess(guesses)


__all__ = [
    "Guess",
    "TypeGuess",
    "ValueGuess",
    "FormTypeGuesserInterface",
    "AbstractTypeGuesser",
    "TypeGuesserChain",
]
