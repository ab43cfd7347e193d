"""
Logging setup for the rendering pipeline.

Every module logs through ``logging.getLogger(__name__)`` below the
``render_engine`` package logger. Nothing is configured at import time; the
command line calls ``setup_logging`` once per run.
"""

import logging
import os
import sys
import time
from contextlib import contextmanager
from datetime import date
from typing import Dict, Iterator, Optional, TextIO

ROOT_LOGGER_NAME = "render_engine"

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"


class LevelColorFormatter(logging.Formatter):
    """Console formatter that colors the level name with ANSI escapes."""

    RESET = '\033[0m'
    LEVEL_COLORS = {
        logging.DEBUG: '\033[34m',
        logging.INFO: '\033[32m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[1;31m',
    }

    def __init__(self, colored: bool = True, fmt: str = CONSOLE_FORMAT):
        super().__init__(fmt, datefmt='%H:%M:%S')
        self.colored = colored

    def formatMessage(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno)
        if not self.colored or color is None:
            return super().formatMessage(record)

        # The record is shared with other handlers, so the level name is restored
        plain = record.levelname
        record.levelname = f"{color}{plain}{self.RESET}"
        try:
            return super().formatMessage(record)
        finally:
            record.levelname = plain


def _level(name: str, fallback: int) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else fallback


def setup_logging(console_level: str = "INFO",
                  log_file: Optional[str] = None,
                  file_level: str = "DEBUG",
                  stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Configure the package logger for one command line run.

    Handlers left by an earlier call are replaced, so repeated runs in one
    process do not duplicate output. Colors are used only when the console
    stream is a terminal.

    Args:
        console_level: Level name for the console handler
        log_file: Optional path of a detailed log file; its directory is created
        file_level: Level name for the file handler
        stream: Console stream, stderr by default

    Returns:
        The configured ``render_engine`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream = stream or sys.stderr
    console = logging.StreamHandler(stream)
    console.setLevel(_level(console_level, logging.INFO))
    isatty = getattr(stream, 'isatty', None)
    console.setFormatter(LevelColorFormatter(colored=bool(isatty and isatty())))
    logger.addHandler(console)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(_level(file_level, logging.DEBUG))
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    logger.setLevel(min(handler.level for handler in logger.handlers))
    return logger


def default_log_file(day: Optional[date] = None) -> str:
    """Dated log path used when ``--log-file`` is given without a value."""
    day = day or date.today()
    return os.path.join(os.path.expanduser("~"), ".render_engine", "logs",
                        f"render_engine_{day.isoformat()}.log")


class StageTimer:
    """
    Wall-clock durations of named pipeline stages.

    Durations are kept in the order the stages finish, including stages that
    raised, and each one is logged at debug level.
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self.durations: Dict[str, float] = {}

    @contextmanager
    def stage(self, name: str) -> Iterator[None]:
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self.durations[name] = elapsed
            self.logger.debug(f"Stage {name} took {elapsed * 1000:.2f} ms")

    def reset(self) -> None:
        self.durations = {}

    def summary(self) -> str:
        """One line listing every stage and the total, in milliseconds."""
        stages = ", ".join(f"{name} {seconds * 1000:.2f} ms" for name, seconds in self.durations.items())
        total = sum(self.durations.values()) * 1000
        return f"{stages} (total {total:.2f} ms)"
