"""
Feedback Evaluator

Classifies each letter of a guess against the target word.
"""

from typing import List, Optional

from ..exceptions import InvalidGuessLength
from ..models.game import LetterFeedback

_PATTERN_SYMBOLS = {
    LetterFeedback.CORRECT: 'G',
    LetterFeedback.PRESENT: 'Y',
    LetterFeedback.ABSENT: '-',
}


def evaluate_guess(guess: str, target: str) -> List[LetterFeedback]:
    """
    Two-pass evaluation that consumes target letters as they are matched.

    Exact matches are resolved first so that a repeated guess letter can
    never claim a target letter already used by a correctly placed one.

    Args:
        guess: Normalized guess
        target: Target word of the same length

    Returns:
        One LetterFeedback per guess position

    Raises:
        InvalidGuessLength: If guess and target lengths differ
    """
    if len(guess) != len(target):
        raise InvalidGuessLength(len(guess), len(target))

    result: List[Optional[LetterFeedback]] = [None] * len(guess)
    remaining: List[Optional[str]] = list(target)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == remaining[i]:
            result[i] = LetterFeedback.CORRECT
            remaining[i] = None

    # Second pass: present elsewhere or absent
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if letter in remaining:
            result[i] = LetterFeedback.PRESENT
            remaining[remaining.index(letter)] = None
        else:
            result[i] = LetterFeedback.ABSENT

    return result


def feedback_pattern(feedback: List[LetterFeedback]) -> str:
    """Compact string form of a feedback row, e.g. 'GY--G'."""
    return ''.join(_PATTERN_SYMBOLS[status] for status in feedback)
