"""
Logging configuration for the example programs.

Example output goes to stdout, so log records are written to stderr to
keep the two streams apart.
"""
import logging
import os
import sys

# Loggers handed out by get_logger, so a later level change reaches all of them
_loggers = []


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (defaults to this module's name if not provided)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name or __name__)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()
    logger.setLevel(getattr(logging, log_level, logging.INFO))

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logger.level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)

    # Prevent propagation to root logger to avoid duplicate logs
    logger.propagate = False

    _loggers.append(logger)
    return logger


def set_log_level(level: str) -> None:
    """
    Apply a validated level (e.g. Config.log_level) to every logger
    created by get_logger and to its handlers.
    """
    for logger in _loggers:
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
