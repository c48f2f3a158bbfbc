"""
Game Logger Module for Rapid Wordle

This module provides structured logging for player input, server responses
and game events.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config import Config

# event_type -> get_log_stats counter
_STATS_BUCKETS = {
    'USER_ACTION': 'user_actions',
    'SERVER_RESPONSE_SUCCESS': 'server_responses',
    'SERVER_RESPONSE_ERROR': 'server_responses',
    'GAME_EVENT': 'game_events',
    'WARNING': 'warnings',
    'ERROR': 'errors',
}


class GameLogger:
    """
    Centralized logging system for the game server.

    Features:
    - Player action tracking per Socket.IO session
    - Server response logging
    - Game event logging (start, guesses, draws, end)
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO",
                 name: str = "rapid_wordle", console_level: int = logging.WARNING):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
        self.console_level = console_level

        self.logger = self._setup_logger(name)

    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self, name: str) -> logging.Logger:
        """
        One dated JSON-lines file for everything at `level`, plus the console
        for warnings and errors.
        """
        logger = logging.getLogger(name)
        logger.setLevel(self.level)
        logger.propagate = False

        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        file_handler = logging.FileHandler(self._log_file(), encoding='utf-8')
        file_handler.setLevel(self.level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

        console_handler = logging.StreamHandler()
        console_handler.setLevel(self.console_level)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        return logger

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          details: Dict[str, Any],
                          session_id: Optional[str] = None) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'session_id': session_id,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self,
                        session_id: Optional[str],
                        action: str,
                        game_id: Optional[str] = None,
                        **kwargs):
        """
        Log player input with full context.

        Args:
            session_id: Socket.IO session id, or the remote address for HTTP calls
            action: Type of action (e.g., 'start_game', 'submit_guess', 'get_state')
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {'game_id': game_id, **kwargs}
        log_message = self._create_log_entry('USER_ACTION', action, details, session_id)
        self.logger.info(log_message)

    def log_server_response(self,
                            session_id: Optional[str],
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            game_id: Optional[str] = None,
                            **kwargs):
        """
        Log server responses with full context.

        Args:
            session_id: Socket.IO session id, or the remote address for HTTP calls
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Data being returned to client
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {
            'game_id': game_id,
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, details, session_id)

        if success:
            self.logger.info(log_message)
        else:
            self.logger.error(log_message)

    def log_game_event(self,
                       game_id: Optional[str],
                       event: str,
                       level: int = logging.INFO,
                       **kwargs):
        """
        Log game-specific events (start, guesses, new words, game over).

        Args:
            game_id: Game identifier
            event: Type of game event (e.g., 'game_started', 'guess_submitted', 'game_ended')
            level: Logging level, DEBUG for events that reveal the target word
            **kwargs: Additional game details
        """
        details = {'game_id': game_id, **kwargs}
        log_message = self._create_log_entry('GAME_EVENT', event, details)
        self.logger.log(level, log_message)

    def log_warning(self, action: str, message: str, game_id: Optional[str] = None, **kwargs):
        """Log a recoverable problem that did not interrupt the game."""
        details = {'game_id': game_id, 'message': message, **kwargs}
        log_message = self._create_log_entry('WARNING', action, details)
        self.logger.warning(log_message)

    def log_error(self,
                  error: Exception,
                  action: str,
                  game_id: Optional[str] = None,
                  session_id: Optional[str] = None):
        """
        Log errors with full context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            game_id: Game identifier if applicable
            session_id: Session that triggered the action, if any
        """
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }

        log_message = self._create_log_entry('ERROR', action, details, session_id)
        self.logger.error(log_message)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Trim large or secret fields from response logs."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()

        if 'state' in sanitized and isinstance(sanitized['state'], dict):
            state = sanitized['state']
            sanitized['state'] = {
                'phase': state.get('phase'),
                'score': state.get('score'),
                'word_length': state.get('word_length'),
                'time_remaining': state.get('time_remaining'),
                'guesses_count': len(state.get('guesses', [])),
                'answer_revealed': state.get('answer') is not None
            }

        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Count today's entries per event type (useful for monitoring)."""
        log_file = self._log_file()
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            **{bucket: 0 for bucket in _STATS_BUCKETS.values()}
        }

        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if not line.strip():
                        continue
                    stats['total_entries'] += 1
                    bucket = _STATS_BUCKETS.get(self._event_type(line))
                    if bucket:
                        stats[bucket] += 1
        except OSError as e:
            return {'error': f'Failed to get stats: {str(e)}'}

        return stats

    @staticmethod
    def _event_type(line: str) -> Optional[str]:
        """event_type of a structured entry; None for plain-text lines."""
        _, _, message = line.rstrip('\n').partition(' | ')
        _, _, message = message.partition(' | ')
        try:
            entry = json.loads(message)
        except ValueError:
            return None
        return entry.get('event_type') if isinstance(entry, dict) else None


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
