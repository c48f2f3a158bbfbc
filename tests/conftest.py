"""
Pytest configuration for Rapid Wordle tests.

Provides a manual clock and a recording renderer so the game state machine
can be driven tick by tick without a running SocketIO server.
"""

import os
import tempfile

# Keep test logs out of the working tree; must run before rapid_wordle is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='rapid_wordle_logs_'))

import random

import pytest

from rapid_wordle.exceptions import RenderTargetMissing
from rapid_wordle.services.clock import Clock, ScheduledTick
from rapid_wordle.services.game_service import GameService, RapidWordleGame
from rapid_wordle.services.renderer import Renderer
from rapid_wordle.services.word_bank import WordBank

SMALL_TABLE = {
    4: ["test", "play"],
    5: ["react", "frame"],
    6: ["design"],
}


class CountingTick(ScheduledTick):
    """ScheduledTick that remembers how often cancel() was called."""

    def __init__(self):
        super().__init__()
        self.cancel_calls = 0

    def cancel(self):
        self.cancel_calls += 1
        return super().cancel()


class ManualClock(Clock):
    """Clock whose ticks are fired explicitly by the test."""

    def __init__(self):
        self.scheduled = []

    def schedule(self, callback):
        handle = CountingTick()
        self.scheduled.append((handle, callback))
        return handle

    @property
    def handles(self):
        return [handle for handle, _ in self.scheduled]

    def active_handles(self):
        return [handle for handle in self.handles if not handle.cancelled]

    def fire(self, times=1):
        for _ in range(times):
            for handle, callback in list(self.scheduled):
                if not handle.cancelled:
                    callback()


class RecordingRenderer(Renderer):
    """Renderer double that keeps every command it receives."""

    def __init__(self):
        self.commands = []

    def send(self, command, payload):
        self.commands.append((command, payload))

    def of(self, command):
        return [payload for name, payload in self.commands if name == command]

    def clear(self):
        self.commands = []


class DetachedRenderer(Renderer):
    """Renderer whose display target is always gone."""

    def __init__(self):
        self.attempts = 0

    def send(self, command, payload):
        self.attempts += 1
        raise RenderTargetMissing(f"No display for '{command}'")


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def make_game(clock, renderer):
    """Factory for games over a small fixed word table."""
    def _make(words=None, time_limit=60, seed=0, game_renderer=None):
        bank = WordBank(words if words is not None else SMALL_TABLE, random.Random(seed))
        return RapidWordleGame(
            word_bank=bank,
            renderer=game_renderer or renderer,
            clock=clock,
            time_limit=time_limit,
            game_id="test-game"
        )
    return _make


@pytest.fixture
def game_service():
    clocks = []

    def clock_factory():
        new_clock = ManualClock()
        clocks.append(new_clock)
        return new_clock

    service = GameService(
        word_table=SMALL_TABLE,
        time_limit=5,
        word_seed=42,
        clock_factory=clock_factory,
        renderer_factory=lambda session_id: RecordingRenderer()
    )
    service.clocks = clocks
    return service
