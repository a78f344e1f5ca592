"""
Logging configuration for fetchpac.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import logging
import os
import sys
import threading
from typing import Optional, Dict, Any

from ..constants import DEBUG_ENV_VAR


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for terminal output."""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m',  # Magenta
        'RESET': '\033[0m'      # Reset
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        log_color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset_color = self.COLORS['RESET']

        # Color a copy so other handlers see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{log_color}{record.levelname}{reset_color}"

        return super().format(record)


_global_config: Optional[Dict[str, Any]] = None
_logger_instances: Dict[str, logging.Logger] = {}
_global_state_lock = threading.RLock()


def _debug_enabled() -> bool:
    if _global_config is not None:
        return bool(_global_config.get('debug_mode', False))
    return os.environ.get(DEBUG_ENV_VAR, '').strip().lower() in ('1', 'true', 'yes', 'on')


def _current_level() -> int:
    # Stdout belongs to the rendering; stderr only carries problems unless debugging
    return logging.DEBUG if _debug_enabled() else logging.WARNING


def set_global_config(config: Dict[str, Any]) -> None:
    """
    Set global logging configuration and re-level existing loggers.

    Args:
        config: Configuration dictionary, e.g. {'debug_mode': True}
    """
    global _global_config
    with _global_state_lock:
        _global_config = dict(config)
        level = _current_level()
        for logger in _logger_instances.values():
            logger.setLevel(level)
            for handler in logger.handlers:
                handler.setLevel(level)


def reset_global_config() -> None:
    """Drop any explicit configuration and fall back to the environment."""
    global _global_config
    with _global_state_lock:
        _global_config = None
        level = _current_level()
        for logger in _logger_instances.values():
            logger.setLevel(level)
            for handler in logger.handlers:
                handler.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger instance with thread safety.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    with _global_state_lock:
        if name in _logger_instances:
            return _logger_instances[name]

        level = _current_level()

        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers.clear()

        # Console handler (use stderr for logs)
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_formatter = ColoredFormatter(
            '%(levelname)s - %(name)s - %(message)s'
        )
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

        logger.propagate = False

        _logger_instances[name] = logger
        return logger
