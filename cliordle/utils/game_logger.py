"""
Game Logger Module for Cliordle

This module provides structured logging for player commands, game events
and errors. Entries go to a dated log file; warnings and errors are also
echoed to the console when LOG_TO_CONSOLE is set.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

from ..config.app_config import get_config


class GameLogger:
    """
    Centralized logging system for cliordle.

    Features:
    - Command tracking (play, settings, stats)
    - Game event logging (guesses, wins, losses)
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO", console: bool = False):
        self.log_dir = Path(log_dir).expanduser()
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = logging.getLevelName(level.upper())
        if not isinstance(self.level, int):
            self.level = logging.INFO
        # The CLI prints its own diagnostics; console echo is for debugging
        self.console = console

        # Setup main game logger
        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file handler."""
        logger = logging.getLogger('cliordle')
        logger.setLevel(self.level)
        logger.propagate = False

        # Prevent duplicate handlers
        if logger.handlers:
            for handler in list(logger.handlers):
                handler.close()
            logger.handlers.clear()

        # Create log file with date
        log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

        # File handler for detailed logs
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(self.level)

        file_formatter = logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

        if self.console:
            # Console handler for only important messages (WARNING and above)
            console_handler = logging.StreamHandler()
            console_handler.setLevel(logging.WARNING)
            console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
            logger.addHandler(console_handler)

        return logger

    def _create_log_entry(self, event_type: str, action: str, details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self, action: str, **kwargs):
        """
        Log a command issued by the player.

        Args:
            action: Type of action (e.g., 'play', 'settings', 'stats', 'submit_guess')
            **kwargs: Additional details to log
        """
        self.logger.info(self._create_log_entry('USER_ACTION', action, kwargs))

    def log_game_event(self, event: str, **kwargs):
        """
        Log game-specific events (wins, losses, etc.).

        Args:
            event: Type of game event (e.g., 'game_started', 'game_won', 'game_lost')
            **kwargs: Additional game details
        """
        self.logger.info(self._create_log_entry('GAME_EVENT', event, kwargs))

    def log_error(self, error: Exception, action: str, **kwargs):
        """
        Log errors with full context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
        """
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            **kwargs
        }
        self.logger.error(self._create_log_entry('ERROR', action, details))


# Global logger instance
_config = get_config()
game_logger = GameLogger(_config.LOG_DIR, _config.LOG_LEVEL, console=_config.LOG_TO_CONSOLE)
