"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class LetterFeedback(Enum):
    """Per-letter classification of a guess relative to the target word."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


class GamePhase(Enum):
    """Lifecycle phase of a single game."""
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


class EndReason(Enum):
    """Why a game moved to the ENDED phase."""
    TIME_UP = "time_up"
    WORD_BANK_EXHAUSTED = "word_bank_exhausted"
    ENDED_BY_PLAYER = "ended_by_player"


@dataclass
class GuessResult:
    """Outcome of a single guess submission."""
    accepted: bool
    guess: str
    feedback: List[LetterFeedback] = field(default_factory=list)
    correct: bool = False
    message: str = ""

    def to_dict(self) -> dict:
        return {
            'accepted': self.accepted,
            'guess': self.guess,
            'feedback': [status.value for status in self.feedback],
            'correct': self.correct,
            'message': self.message,
        }


@dataclass
class GameState:
    """Serializable snapshot of a game."""
    game_id: str
    phase: str
    score: int
    word_length: int
    time_limit: int
    time_remaining: int
    guesses: List[str]
    round_guesses: List[List[Tuple[str, str]]]  # (letter, feedback) pairs per row
    message: str = ""
    end_reason: Optional[str] = None
    answer: Optional[str] = None  # Only included when game is over
