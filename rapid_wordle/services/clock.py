"""
Clock

Periodic tick sources. The production clock runs as a Flask-SocketIO
background task so it works under every async mode SocketIO supports.
"""

from typing import Callable

from ..utils.game_logger import game_logger


class ScheduledTick:
    """Cancellable handle for a periodic tick."""

    def __init__(self):
        self.cancelled = False

    def cancel(self) -> bool:
        """
        Stop the tick. Returns False (and logs) when the handle was already
        cancelled.
        """
        if self.cancelled:
            game_logger.log_warning('cancel_tick', 'Tick cancelled more than once')
            return False
        self.cancelled = True
        return True


class Clock:
    """Base class for tick sources."""

    def schedule(self, callback: Callable[[], None]) -> ScheduledTick:
        raise NotImplementedError


class SocketIOClock(Clock):
    """Fires the callback every `interval` seconds on a SocketIO background task."""

    def __init__(self, socketio, interval: float = 1.0):
        self.socketio = socketio
        self.interval = interval

    def schedule(self, callback: Callable[[], None]) -> ScheduledTick:
        handle = ScheduledTick()
        self.socketio.start_background_task(self._run, handle, callback)
        return handle

    def _run(self, handle: ScheduledTick, callback: Callable[[], None]) -> None:
        while not handle.cancelled:
            self.socketio.sleep(self.interval)
            if handle.cancelled:
                break
            try:
                callback()
            except Exception as e:
                # Keep ticking; the countdown must still reach zero
                game_logger.log_error(e, 'tick')
