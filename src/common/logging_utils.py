"""Logging utilities for consistent logger creation across the project.

This module provides a helper for creating loggers named after module paths
and a single place where the CLI installs its handlers.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

# Top-level loggers configured by configure_logging()
PROJECT_LOGGERS = ('shortcut_recorder', 'shortcut_detector', 'common')


def get_logger(name: str | None = None) -> logging.Logger:
    """Create or retrieve a logger with consistent naming.

    Module paths are used as logger names (e.g. 'shortcut_recorder.recorder'),
    so every logger hangs below one of PROJECT_LOGGERS.

    Args:
        name: Logger name. If None, the calling module's __name__ is used.

    Returns:
        logging.Logger: Logger instance

    Examples:
        >>> logger = get_logger('shortcut_recorder.recorder')
        >>> logger.info('Message')
    """
    if name is None:
        import inspect
        frame = inspect.currentframe()
        if frame is not None and frame.f_back is not None:
            name = frame.f_back.f_globals.get('__name__', 'shortcut_recorder')
        else:
            name = 'shortcut_recorder'

    return logging.getLogger(name)


class ISOFormatter(logging.Formatter):
    """Log formatter with ISO timestamp including milliseconds.

    Formats log messages as:
        <ISO-datetime-with-ms> <log-level> [<module>:<lineno>]: <message>
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with ISO timestamp."""
        timestamp = datetime.fromtimestamp(record.created).isoformat(timespec='milliseconds')
        message = f'{timestamp} {record.levelname} [{record.module}:{record.lineno}]: {record.getMessage()}'
        if record.exc_info:
            message += '\n' + self.formatException(record.exc_info)
        return message


def configure_logging(log_level: str = 'INFO', log_file: Path | None = None) -> None:
    """Install handlers on the project's top-level loggers.

    Console output goes to stderr so it never mixes with the CLI's stdout.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path of an additional log file
    """
    level = getattr(logging, log_level.upper())
    formatter = ISOFormatter()

    handlers: list[logging.Handler] = []
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        # Create parent directory if needed
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for name in PROJECT_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers.clear()
        for handler in handlers:
            logger.addHandler(handler)
        logger.propagate = False
