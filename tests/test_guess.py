"""Unit tests for guesses and guess arbitration."""

from unittest.mock import Mock

import pytest

from formtypes.guess import (
    AbstractTypeGuesser,
    FormTypeGuesserInterface,
    Guess,
    TypeGuess,
    TypeGuesserChain,
    ValueGuess,
)
from formtypes.types import Confidence


class TestConfidence:
    """Test confidence ordering."""

    def test_ordering(self):
        """Should order LOW < MEDIUM < HIGH < VERY_HIGH."""
        assert Confidence.LOW < Confidence.MEDIUM < Confidence.HIGH < Confidence.VERY_HIGH

    def test_guess_normalizes_integer_confidence(self):
        """Should convert plain integers to Confidence members."""
        guess = ValueGuess(10, 2)
        assert guess.confidence is Confidence.HIGH

    def test_guess_rejects_unknown_confidence(self):
        """Should reject integers outside the confidence scale."""
        with pytest.raises(ValueError):
            ValueGuess(10, 42)


class TestBestGuess:
    """Test the highest-confidence fold."""

    def test_returns_highest_confidence(self):
        """Should pick the most confident guess regardless of position."""
        low = ValueGuess(1, Confidence.LOW)
        high = ValueGuess(2, Confidence.HIGH)
        medium = ValueGuess(3, Confidence.MEDIUM)

        assert Guess.get_best_guess([low, high, medium]) is high

    def test_first_wins_on_equal_confidence(self):
        """Should keep the earlier guess when confidences are equal."""
        first = TypeGuess("text", {}, Confidence.MEDIUM)
        second = TypeGuess("password", {}, Confidence.MEDIUM)

        assert Guess.get_best_guess([first, second]) is first

    def test_none_never_overrides(self):
        """Should skip None entries wherever they appear."""
        low = ValueGuess(1, Confidence.LOW)
        assert Guess.get_best_guess([None, low, None]) is low

    def test_no_guesses(self):
        """Should return None when nobody guessed."""
        assert Guess.get_best_guess([]) is None
        assert Guess.get_best_guess([None, None]) is None


class TestTypeGuesserChain:
    """Test fan-out over several guessers."""

    def make_guesser(self, **returns):
        guesser = Mock(spec=AbstractTypeGuesser)
        for method in ("guess_type", "guess_required", "guess_max_length", "guess_min_length"):
            getattr(guesser, method).return_value = returns.get(method)
        return guesser

    def test_asks_every_guesser_once(self):
        """Should consult each guesser exactly once per guess."""
        first = self.make_guesser()
        second = self.make_guesser()
        chain = TypeGuesserChain([first, second])

        chain.guess_required("Author", "name")

        first.guess_required.assert_called_once_with("Author", "name")
        second.guess_required.assert_called_once_with("Author", "name")

    def test_selects_highest_confidence(self):
        """Should return the most confident answer across guessers."""
        medium = ValueGuess(15, Confidence.MEDIUM)
        high = ValueGuess(20, Confidence.HIGH)
        chain = TypeGuesserChain([
            self.make_guesser(guess_max_length=medium),
            self.make_guesser(guess_max_length=high),
        ])

        assert chain.guess_max_length("Author", "name") is high

    def test_flattens_nested_chains(self):
        """Should keep leaf guesser order when chains are nested."""
        a = self.make_guesser()
        b = self.make_guesser()
        c = self.make_guesser()
        chain = TypeGuesserChain([a, TypeGuesserChain([b, c])])

        assert chain.guessers == [a, b, c]

    def test_skips_guessers_without_min_length(self):
        """Should ask only the guessers that implement guess_min_length."""

        class NoMinLengthGuesser:
            def guess_type(self, cls, property):
                return None

            def guess_required(self, cls, property):
                return None

            def guess_max_length(self, cls, property):
                return None

        guess = ValueGuess(4, Confidence.LOW)
        chain = TypeGuesserChain([NoMinLengthGuesser(), self.make_guesser(guess_min_length=guess)])

        assert chain.guess_min_length("Author", "name") is guess

    def test_three_method_guesser_satisfies_protocol(self):
        """Should treat a guesser without guess_min_length as a guesser."""

        class NoMinLengthGuesser:
            def guess_type(self, cls, property):
                return None

            def guess_required(self, cls, property):
                return None

            def guess_max_length(self, cls, property):
                return None

        assert isinstance(NoMinLengthGuesser(), FormTypeGuesserInterface)
