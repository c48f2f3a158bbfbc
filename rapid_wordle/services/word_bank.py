"""
Word Bank

Remaining pool of target words, drawn without replacement.
"""

import random
from typing import Dict, List, Mapping, Optional, Sequence

from ..exceptions import WordBankExhausted


class WordBank:
    """
    Word pool keyed by word length.

    The configured table is copied on construction and on every refill, so
    drawing never mutates the caller's lists.
    """

    def __init__(self, words: Mapping[int, Sequence[str]], rng: Optional[random.Random] = None):
        self._validate(words)
        self._source = {length: list(candidates) for length, candidates in words.items()}
        self.rng = rng or random.Random()
        self._pool: Dict[int, List[str]] = {}
        self.refill()

    @staticmethod
    def _validate(words: Mapping[int, Sequence[str]]) -> None:
        for length, candidates in words.items():
            for word in candidates:
                if len(word) != length:
                    raise ValueError(f"Word '{word}' filed under length {length}")
                if not (word.isalpha() and word.islower()):
                    raise ValueError(f"Word '{word}' must be lowercase alphabetic")

    def refill(self) -> None:
        """Restore the pool to the configured table."""
        self._pool = {length: list(candidates) for length, candidates in self._source.items()}

    def draw(self, length: int) -> str:
        """
        Remove and return a uniformly random word of the given length.

        Raises:
            WordBankExhausted: If no word of that length remains
        """
        candidates = self._pool.get(length)
        if not candidates:
            raise WordBankExhausted(length)
        return candidates.pop(self.rng.randrange(len(candidates)))

    def remaining(self, length: int) -> int:
        return len(self._pool.get(length, []))

    def is_exhausted(self, length: int) -> bool:
        return self.remaining(length) == 0

    def lengths(self) -> List[int]:
        return sorted(self._source)
