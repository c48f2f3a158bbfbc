"""Tests for the timed game state machine."""

import threading

import pytest

from rapid_wordle.models.game import EndReason, GamePhase, LetterFeedback
from rapid_wordle.services.game_service import (
    MSG_CORRECT, MSG_INCORRECT_LENGTH, MSG_NOT_RUNNING, MSG_TRY_AGAIN,
)

from conftest import DetachedRenderer, SMALL_TABLE


def wrong_guess(game):
    """A guess of the right length that is not the target."""
    letters = "z" * game.word_length
    assert letters != game.current_word
    return letters


def test_new_game_is_idle(make_game):
    game = make_game()

    state = game.get_state()
    assert game.phase == GamePhase.IDLE
    assert state.phase == "idle"
    assert state.score == 0
    assert state.word_length == 4
    assert state.time_remaining == 60


def test_time_limit_must_be_positive(make_game):
    with pytest.raises(ValueError):
        make_game(time_limit=0)


def test_start_runs_game_and_schedules_tick(make_game, clock, renderer):
    game = make_game(time_limit=30)

    state = game.start()

    assert state.phase == "running"
    assert game.current_word in SMALL_TABLE[4]
    assert len(game.current_word) == game.word_length
    assert len(clock.active_handles()) == 1
    assert renderer.of('update_timer') == [{'seconds': 30}]
    assert renderer.of('update_score') == [{'score': 0}]
    assert renderer.of('build_grid') == [{'columns': 4}]


def test_wrong_length_guess_changes_nothing(make_game, renderer):
    game = make_game()
    game.start()
    target = game.current_word

    result = game.submit_guess("toolong")

    assert not result.accepted
    assert result.message == MSG_INCORRECT_LENGTH
    assert result.feedback == []
    assert game.score == 0
    assert game.guesses == []
    assert game.current_word == target
    assert renderer.of('show_feedback')[-1] == {'message': MSG_INCORRECT_LENGTH}


def test_guess_is_lowercased(make_game):
    game = make_game()
    game.start()

    result = game.submit_guess(game.current_word.upper())

    assert result.accepted
    assert result.correct
    assert game.score == 1


def test_surrounding_whitespace_counts_toward_length(make_game):
    game = make_game()
    game.start()
    target = game.current_word

    result = game.submit_guess(f"{target} ")

    assert not result.accepted
    assert result.message == MSG_INCORRECT_LENGTH
    assert game.score == 0
    assert game.guesses == []
    assert game.current_word == target


def test_wrong_guess_keeps_score_and_grows_grid_history(make_game, renderer):
    game = make_game()
    game.start()
    target = game.current_word

    first = game.submit_guess(wrong_guess(game))
    second = game.submit_guess(wrong_guess(game))

    assert first.accepted and not first.correct
    assert first.message == MSG_TRY_AGAIN
    assert first.feedback == [LetterFeedback.ABSENT] * 4
    assert second.accepted
    assert game.score == 0
    assert game.current_word == target
    assert game.guesses == ["zzzz", "zzzz"]

    rows = {payload['row'] for payload in renderer.of('color_cell')}
    assert rows == {0, 1}
    assert len(game.get_state().round_guesses) == 2


def test_color_cell_commands_carry_feedback(make_game, renderer):
    game = make_game(words={4: ["test"]})
    game.start()

    game.submit_guess("tset")

    cells = renderer.of('color_cell')
    assert cells == [
        {'row': 0, 'column': 0, 'letter': 't', 'feedback': 'correct'},
        {'row': 0, 'column': 1, 'letter': 's', 'feedback': 'present'},
        {'row': 0, 'column': 2, 'letter': 'e', 'feedback': 'present'},
        {'row': 0, 'column': 3, 'letter': 't', 'feedback': 'correct'},
    ]


def test_correct_guess_scores_and_starts_new_round(make_game, renderer):
    game = make_game()
    game.start()
    game.submit_guess(wrong_guess(game))
    first_target = game.current_word
    renderer.clear()

    result = game.submit_guess(first_target)

    assert result.correct
    assert result.message == MSG_CORRECT
    assert game.score == 1
    assert game.word_length == 4
    assert game.current_word != first_target
    assert game.current_word in SMALL_TABLE[4]
    assert game.get_state().round_guesses == []
    assert renderer.of('update_score') == [{'score': 1}]
    assert renderer.of('build_grid') == [{'columns': 4}]


def test_word_length_grows_every_two_points(make_game):
    words = {
        4: ["test", "play"],
        5: ["react", "frame"],
        6: ["design", "player"],
        7: ["browser"],
    }
    game = make_game(words=words)
    game.start()

    lengths = []
    for _ in range(5):
        game.submit_guess(game.current_word)
        lengths.append(game.word_length)

    assert game.score == 5
    assert lengths == [4, 5, 5, 6, 6]
    assert lengths == sorted(lengths)
    assert len(game.current_word) == game.word_length


def test_exhausted_bank_ends_game(make_game, clock):
    game = make_game()
    game.start()

    # Two words of length 4, two of length 5, one of length 6
    for _ in range(5):
        assert game.is_running
        game.submit_guess(game.current_word)

    state = game.get_state()
    assert game.phase == GamePhase.ENDED
    assert state.end_reason == EndReason.WORD_BANK_EXHAUSTED.value
    assert state.score == 5
    assert "Word bank exhausted" in state.message
    assert state.answer is None
    assert clock.handles[0].cancel_calls == 1


def test_start_with_empty_bank_ends_immediately(make_game, clock):
    game = make_game(words={5: ["react"]})

    state = game.start()

    assert state.phase == "ended"
    assert state.end_reason == "word_bank_exhausted"
    assert clock.handles == []


def test_ticks_drive_game_to_end(make_game, clock, renderer):
    game = make_game(time_limit=3)
    game.start()

    clock.fire(2)
    assert game.is_running
    assert game.time_remaining == 1

    clock.fire()
    assert game.phase == GamePhase.ENDED
    assert game.end_reason == EndReason.TIME_UP
    assert game.time_remaining == 0
    assert clock.handles[0].cancel_calls == 1
    assert renderer.of('update_timer')[-1] == {'seconds': 0}

    # Later ticks have no observable effect
    before = len(renderer.commands)
    game.tick()
    clock.fire()
    assert game.time_remaining == 0
    assert len(renderer.commands) == before


def test_two_second_game_without_guesses(make_game, renderer):
    game = make_game(time_limit=2)
    game.start()

    game.tick()
    game.tick()

    state = game.get_state()
    assert state.phase == "ended"
    assert state.score == 0
    assert state.message == "Game over! Your score: 0"
    assert state.answer in SMALL_TABLE[4]
    assert renderer.of('show_feedback')[-1] == {'message': "Game over! Your score: 0"}


def test_end_cancels_tick_once(make_game, clock):
    game = make_game()
    game.start()
    game.submit_guess(game.current_word)

    assert game.end() == 1
    assert game.end() == 1

    assert game.phase == GamePhase.ENDED
    assert game.end_reason == EndReason.ENDED_BY_PLAYER
    assert clock.handles[0].cancel_calls == 1


def test_end_from_idle(make_game, clock):
    game = make_game()

    assert game.end() == 0
    assert game.phase == GamePhase.ENDED
    assert clock.handles == []


def test_guess_outside_running_is_rejected(make_game):
    game = make_game()

    idle_result = game.submit_guess("test")
    game.start()
    game.end()
    ended_result = game.submit_guess("test")

    assert not idle_result.accepted
    assert idle_result.message == MSG_NOT_RUNNING
    assert not ended_result.accepted
    assert game.guesses == []


def test_restart_cancels_previous_tick_and_refills_bank(make_game, clock):
    game = make_game(time_limit=10)
    game.start()
    game.submit_guess(game.current_word)
    game.submit_guess(game.current_word)
    clock.fire(4)

    state = game.start()

    assert state.phase == "running"
    assert state.score == 0
    assert state.word_length == 4
    assert state.time_remaining == 10
    assert state.guesses == []
    assert game.word_bank.remaining(4) == 1
    assert game.word_bank.remaining(5) == 2
    first, second = clock.handles
    assert first.cancel_calls == 1
    assert not second.cancelled


def test_restart_after_end(make_game, clock):
    game = make_game(time_limit=1)
    game.start()
    clock.fire()
    assert game.phase == GamePhase.ENDED

    game.start()

    assert game.is_running
    assert len(clock.active_handles()) == 1


def test_answer_hidden_while_running(make_game):
    game = make_game()
    game.start()

    assert game.get_state().answer is None
    target = game.current_word
    game.end()
    assert game.get_state().answer == target


def test_missing_render_target_does_not_break_game(make_game):
    detached = DetachedRenderer()
    game = make_game(time_limit=2, game_renderer=detached)

    game.start()
    result = game.submit_guess(game.current_word)
    game.tick()
    game.tick()

    assert result.correct
    assert game.phase == GamePhase.ENDED
    assert game.score == 1
    assert detached.attempts > 0


def test_tick_from_previous_run_is_ignored_after_restart(make_game, clock):
    game = make_game(time_limit=10)
    game.start()
    old_handle, old_callback = clock.scheduled[0]

    game.start()
    # A tick already past its cancelled-check when the restart happened
    old_callback()

    assert old_handle.cancelled
    assert game.time_remaining == 10


def test_stale_tick_blocked_on_lock_during_restart(make_game, clock):
    game = make_game(time_limit=10)
    game.start()
    _, old_callback = clock.scheduled[0]
    fired = threading.Event()

    def stale_tick():
        fired.set()
        old_callback()

    with game._lock:
        worker = threading.Thread(target=stale_tick)
        worker.start()
        assert fired.wait(timeout=5)
        game.start()
    worker.join(timeout=5)

    assert not worker.is_alive()
    assert game.is_running
    assert game.time_remaining == 10

    clock.fire()
    assert game.time_remaining == 9
