"""
Centralized Logging Configuration

One log format for the whole service, console output always, and an optional
daily-rotating file under LOG_DIR.

Usage:
    from placement_portal.logging_config import get_logger

    logger = get_logger(__name__)
    logger.info("Imported %d students", count)
"""

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
LOG_RETENTION_DAYS = 30
ROOT_LOGGER_NAME = 'placement_portal'


def configure_logging(level: str = 'INFO', log_dir: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for the rotating log file; console only when None

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    # Avoid adding duplicate handlers on reload
    if logger.handlers:
        return logger

    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(log_level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            filename=path / 'tpo_portal.log',
            when='midnight',
            interval=1,
            backupCount=LOG_RETENTION_DAYS,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the package namespace"""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{ROOT_LOGGER_NAME}.{name}')
