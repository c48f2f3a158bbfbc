"""
Game Exceptions

Error taxonomy shared by the word bank, the feedback evaluator, the game
state machine and the renderers.
"""


class RapidWordleError(Exception):
    """Base class for all game errors."""


class InvalidGuessLength(RapidWordleError, ValueError):
    """Raised when a guess does not have the same length as the target word."""

    def __init__(self, guess_length: int, expected_length: int):
        self.guess_length = guess_length
        self.expected_length = expected_length
        super().__init__(
            f"Guess has {guess_length} letters, expected {expected_length}"
        )


class WordBankExhausted(RapidWordleError, LookupError):
    """Raised when no candidate word remains for the requested length."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Word bank exhausted for length {length}")


class RenderTargetMissing(RapidWordleError):
    """Raised by a renderer when its display target no longer exists."""
