"""
Game Service

Contains the timed game state machine and the per-session game registry.
"""

import logging
import random
import threading
import uuid
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from ..config.game_settings import (
    DEFAULT_TIME_LIMIT, POINTS_PER_LENGTH_STEP, START_WORD_LENGTH, WORD_LIST,
)
from ..exceptions import RenderTargetMissing, WordBankExhausted
from ..models.game import EndReason, GamePhase, GameState, GuessResult, LetterFeedback
from ..utils.game_logger import game_logger
from .clock import Clock, ScheduledTick, SocketIOClock
from .feedback import evaluate_guess, feedback_pattern
from .renderer import Renderer, SocketIORenderer
from .word_bank import WordBank

MSG_CORRECT = "Correct!"
MSG_TRY_AGAIN = "Try again."
MSG_INCORRECT_LENGTH = "Incorrect word length."
MSG_NOT_RUNNING = "Game is not running."
MSG_WORD_BANK_EXHAUSTED = "Word bank exhausted!"


def normalize_guess(guess: str) -> str:
    """Normalize player input to lowercase; whitespace counts toward the length."""
    return guess.lower()


class RapidWordleGame:
    """
    Timed word-guessing game for a single player.

    This class handles:
    - The IDLE -> RUNNING -> ENDED lifecycle
    - Target word selection from its own WordBank
    - Guess validation, evaluation and scoring
    - Issuing render commands after every transition

    start, tick, submit_guess and end hold the same lock, so a tick can
    never interleave with a guess.
    """

    def __init__(self,
                 word_bank: WordBank,
                 renderer: Renderer,
                 clock: Clock,
                 time_limit: int = DEFAULT_TIME_LIMIT,
                 start_length: int = START_WORD_LENGTH,
                 game_id: Optional[str] = None):
        if time_limit < 1:
            raise ValueError("Time limit must be at least one second")

        self.game_id = game_id or str(uuid.uuid4())
        self.word_bank = word_bank
        self.renderer = renderer
        self.clock = clock
        self.time_limit = time_limit
        self.start_length = start_length

        self.phase = GamePhase.IDLE
        self.score = 0
        self.word_length = start_length
        self.time_remaining = time_limit
        self.current_word = ""
        self.guesses: List[str] = []
        self.round_guesses: List[Tuple[str, List[LetterFeedback]]] = []
        self.message = ""
        self.end_reason: Optional[EndReason] = None

        self._tick_handle: Optional[ScheduledTick] = None
        self._lock = threading.RLock()

    @property
    def is_running(self) -> bool:
        return self.phase == GamePhase.RUNNING

    def start(self) -> GameState:
        """
        Start a fresh game (or restart a running one).

        Returns:
            GameState after the transition; ENDED if no starting word exists
        """
        with self._lock:
            if self.phase == GamePhase.RUNNING:
                self._stop_ticking()

            self.word_bank.refill()
            self.score = 0
            self.word_length = self.start_length
            self.time_remaining = self.time_limit
            self.guesses = []
            self.round_guesses = []
            self.current_word = ""
            self.message = ""
            self.end_reason = None
            self.phase = GamePhase.RUNNING

            game_logger.log_game_event(
                self.game_id, 'game_started',
                time_limit=self.time_limit, word_length=self.word_length
            )

            self._render('update_timer', self.time_remaining)
            self._render('update_score', self.score)
            self._render('show_feedback', self.message)
            self._render('build_grid', self.word_length)

            if self._load_new_word():
                self._schedule_tick()

            return self.get_state()

    def tick(self) -> None:
        """Advance the countdown by one second."""
        with self._lock:
            if self.phase != GamePhase.RUNNING:
                return

            self.time_remaining -= 1
            try:
                self._render('update_timer', self.time_remaining)
            finally:
                if self.time_remaining <= 0:
                    self._finish(EndReason.TIME_UP)

    def _schedule_tick(self) -> None:
        handle = None

        def on_tick():
            with self._lock:
                # Only the handle of the current run may advance the countdown
                if handle is None or handle.cancelled or handle is not self._tick_handle:
                    return
                self.tick()

        handle = self.clock.schedule(on_tick)
        self._tick_handle = handle

    def validate_guess(self, guess: str) -> Tuple[bool, str]:
        """
        Validates a normalized guess against the current game.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if self.phase != GamePhase.RUNNING:
            return False, MSG_NOT_RUNNING

        if len(guess) != self.word_length:
            return False, MSG_INCORRECT_LENGTH

        return True, ""

    def submit_guess(self, guess: str) -> GuessResult:
        """
        Processes a guess and updates game state.

        A rejected guess leaves score, guesses and the target word untouched.

        Args:
            guess: Raw player input

        Returns:
            GuessResult describing what happened
        """
        with self._lock:
            normalized_guess = normalize_guess(guess)

            is_valid, error = self.validate_guess(normalized_guess)
            if not is_valid:
                self._render('show_feedback', error)
                return GuessResult(accepted=False, guess=normalized_guess, message=error)

            self.guesses.append(normalized_guess)
            feedback = evaluate_guess(normalized_guess, self.current_word)
            row = len(self.round_guesses)
            self.round_guesses.append((normalized_guess, feedback))

            for column, (letter, status) in enumerate(zip(normalized_guess, feedback)):
                self._render('color_cell', row, column, letter, status)

            correct = normalized_guess == self.current_word
            game_logger.log_game_event(
                self.game_id, 'guess_submitted',
                guess=normalized_guess, pattern=feedback_pattern(feedback),
                correct=correct, score=self.score
            )

            if correct:
                self.score += 1
                if self.score % POINTS_PER_LENGTH_STEP == 0:
                    self.word_length += 1

                self.message = MSG_CORRECT
                self._render('update_score', self.score)
                self._render('show_feedback', self.message)

                self.round_guesses = []
                if self._load_new_word():
                    self._render('build_grid', self.word_length)
            else:
                self.message = MSG_TRY_AGAIN
                self._render('show_feedback', self.message)

            return GuessResult(
                accepted=True,
                guess=normalized_guess,
                feedback=feedback,
                correct=correct,
                message=self.message
            )

    def end(self, reason: EndReason = EndReason.ENDED_BY_PLAYER) -> int:
        """
        End the game from any phase.

        Returns:
            Final score
        """
        with self._lock:
            if self.phase != GamePhase.ENDED:
                self._finish(reason)
            return self.score

    def get_state(self) -> GameState:
        """Returns a snapshot of the game (the answer only once it has ended)."""
        with self._lock:
            answer = None
            if self.phase == GamePhase.ENDED and self.current_word:
                answer = self.current_word

            return GameState(
                game_id=self.game_id,
                phase=self.phase.value,
                score=self.score,
                word_length=self.word_length,
                time_limit=self.time_limit,
                time_remaining=self.time_remaining,
                guesses=self.guesses.copy(),
                round_guesses=[
                    [(letter, status.value) for letter, status in zip(guess, feedback)]
                    for guess, feedback in self.round_guesses
                ],
                message=self.message,
                end_reason=self.end_reason.value if self.end_reason else None,
                answer=answer
            )

    def _load_new_word(self) -> bool:
        """Draw the next target word; ends the game when the bank is empty."""
        try:
            self.current_word = self.word_bank.draw(self.word_length)
        except WordBankExhausted as e:
            game_logger.log_error(e, 'draw_word', self.game_id)
            self.current_word = ""
            self._finish(EndReason.WORD_BANK_EXHAUSTED)
            return False

        game_logger.log_game_event(
            self.game_id, 'word_drawn', level=logging.DEBUG,
            word=self.current_word, remaining=self.word_bank.remaining(self.word_length)
        )
        return True

    def _finish(self, reason: EndReason) -> None:
        self._stop_ticking()
        self.phase = GamePhase.ENDED
        self.end_reason = reason

        game_over = f"Game over! Your score: {self.score}"
        if reason == EndReason.WORD_BANK_EXHAUSTED:
            self.message = f"{MSG_WORD_BANK_EXHAUSTED} {game_over}"
        else:
            self.message = game_over

        game_logger.log_game_event(
            self.game_id, 'game_ended',
            reason=reason.value, score=self.score, word_length=self.word_length,
            guesses=len(self.guesses), time_remaining=self.time_remaining
        )
        self._render('show_feedback', self.message)

    def _stop_ticking(self) -> None:
        handle, self._tick_handle = self._tick_handle, None
        if handle is not None:
            handle.cancel()

    def _render(self, command: str, *args) -> None:
        try:
            getattr(self.renderer, command)(*args)
        except RenderTargetMissing as e:
            game_logger.log_warning('render', str(e), game_id=self.game_id, command=command)


class GameService:
    """
    Registry of games, one per connected browser session.

    Factories for the renderer and clock are injectable so the service can
    run without a live SocketIO server.
    """

    def __init__(self,
                 socketio=None,
                 word_table: Mapping[int, Sequence[str]] = None,
                 time_limit: int = DEFAULT_TIME_LIMIT,
                 tick_interval: float = 1.0,
                 word_seed: Optional[int] = None,
                 clock_factory: Callable[[], Clock] = None,
                 renderer_factory: Callable[[str], Renderer] = None):
        self.socketio = socketio
        self.word_table = word_table if word_table is not None else WORD_LIST
        self.time_limit = time_limit
        self.tick_interval = tick_interval
        self.word_seed = word_seed
        self.clock_factory = clock_factory or self._socketio_clock
        self.renderer_factory = renderer_factory or self._socketio_renderer
        self.games: Dict[str, RapidWordleGame] = {}
        self._lock = threading.Lock()

    def _socketio_clock(self) -> Clock:
        if self.socketio is None:
            raise RuntimeError("GameService needs a SocketIO instance or a clock_factory")
        return SocketIOClock(self.socketio, self.tick_interval)

    def _socketio_renderer(self, session_id: str) -> Renderer:
        if self.socketio is None:
            raise RuntimeError("GameService needs a SocketIO instance or a renderer_factory")
        return SocketIORenderer(self.socketio, session_id)

    def create_game(self, session_id: str) -> RapidWordleGame:
        """
        Creates the game for a session, replacing (and ending) any previous one.
        """
        rng = random.Random(self.word_seed)
        game = RapidWordleGame(
            word_bank=WordBank(self.word_table, rng),
            renderer=self.renderer_factory(session_id),
            clock=self.clock_factory(),
            time_limit=self.time_limit
        )

        with self._lock:
            previous = self.games.get(session_id)
            self.games[session_id] = game

        if previous is not None:
            previous.end()

        return game

    def get_game(self, session_id: str) -> Optional[RapidWordleGame]:
        return self.games.get(session_id)

    def get_or_create_game(self, session_id: str) -> RapidWordleGame:
        game = self.get_game(session_id)
        if game is None:
            game = self.create_game(session_id)
        return game

    def get_game_state(self, session_id: str) -> Optional[GameState]:
        game = self.get_game(session_id)
        return game.get_state() if game else None

    def remove_game(self, session_id: str) -> bool:
        """
        Ends and forgets the session's game.

        Returns:
            bool: True if a game was removed, False if not found
        """
        with self._lock:
            game = self.games.pop(session_id, None)

        if game is None:
            return False

        game.end()
        detach = getattr(game.renderer, 'detach', None)
        if detach is not None:
            detach()
        return True

    def active_games(self) -> int:
        return sum(1 for game in list(self.games.values()) if game.is_running)


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(socketio=None, **kwargs) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(socketio, **kwargs)
    return _game_service
