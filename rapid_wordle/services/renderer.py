"""
Render Commands

The game issues render commands through a Renderer. SocketIORenderer
forwards them to the owning browser session as `render` events.
"""

from typing import Any, Dict, Optional

from ..exceptions import RenderTargetMissing
from ..models.game import LetterFeedback


class Renderer:
    """
    Presentation interface used by the game state machine.

    Subclasses implement `send`; the named commands only shape payloads.
    """

    def send(self, command: str, payload: Dict[str, Any]) -> None:
        raise NotImplementedError

    def update_timer(self, seconds: int) -> None:
        self.send('update_timer', {'seconds': seconds})

    def update_score(self, score: int) -> None:
        self.send('update_score', {'score': score})

    def show_feedback(self, message: str) -> None:
        self.send('show_feedback', {'message': message})

    def build_grid(self, columns: int) -> None:
        """Clear the grid and prepare rows of `columns` cells."""
        self.send('build_grid', {'columns': columns})

    def color_cell(self, row: int, column: int, letter: str, feedback: LetterFeedback) -> None:
        self.send('color_cell', {
            'row': row,
            'column': column,
            'letter': letter,
            'feedback': feedback.value,
        })


class SocketIORenderer(Renderer):
    """Emits render commands to a single Socket.IO session."""

    def __init__(self, socketio, session_id: Optional[str]):
        self.socketio = socketio
        self.session_id = session_id

    def detach(self) -> None:
        """Called when the browser disconnects."""
        self.session_id = None

    def send(self, command: str, payload: Dict[str, Any]) -> None:
        if self.session_id is None:
            raise RenderTargetMissing(f"No session to render '{command}'")
        self.socketio.emit('render', {'command': command, **payload}, to=self.session_id)
