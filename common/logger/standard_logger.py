# common/logger/standard_logger.py

"""
Logger backed by the standard logging module with colored console output.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from colorama import Fore, Style, init as colorama_init

from .logger_interface import LoggerInterface, LogLevel

colorama_init()

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


class ColoredFormatter(logging.Formatter):
    """Formatter adding ANSI colors to the level name."""

    COLORS = {
        logging.DEBUG: Fore.CYAN,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.MAGENTA + Style.BRIGHT,
    }

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = self.COLORS.get(record.levelno)
        if not color:
            return message
        return f"{color}{message}{Style.RESET_ALL}"


class StandardLogger(LoggerInterface):
    """
    Wrapper around logging.Logger.

    Writes to stderr and optionally to a rotating log file. Handlers are
    attached once per logger name, so asking for the same logger twice does
    not duplicate output.
    """

    def __init__(
        self,
        name: str,
        level: LogLevel = LogLevel.INFO,
        console_level: Optional[LogLevel] = None,
        file_level: Optional[LogLevel] = None,
        use_colors: bool = True,
        log_file: Optional[str] = None,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
    ):
        super().__init__(name, level)
        self._logger = logging.getLogger(name)
        self._logger.setLevel(self._to_logging_level(level))
        self._logger.propagate = False

        if not self._logger.handlers:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(self._to_logging_level(console_level or level))
            formatter_cls = ColoredFormatter if use_colors else logging.Formatter
            console_handler.setFormatter(formatter_cls(DEFAULT_FORMAT))
            self._logger.addHandler(console_handler)

            if log_file:
                Path(log_file).parent.mkdir(parents=True, exist_ok=True)
                file_handler = RotatingFileHandler(
                    log_file,
                    maxBytes=max_bytes,
                    backupCount=backup_count,
                    encoding="utf-8",
                )
                file_handler.setLevel(self._to_logging_level(file_level or level))
                file_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
                self._logger.addHandler(file_handler)

    @staticmethod
    def _to_logging_level(level: LogLevel) -> int:
        return getattr(logging, LogLevel(level).value)

    def debug(self, message: str, *args, **kwargs) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs) -> None:
        self._logger.error(message, *args, **kwargs)

    def critical(self, message: str, *args, **kwargs) -> None:
        self._logger.critical(message, *args, **kwargs)

    def set_level(self, level: LogLevel) -> None:
        self.level = level
        self._logger.setLevel(self._to_logging_level(level))
