# common/logger/print_logger.py

"""
Minimal logger that prints to stdout. Useful for scripts and debugging.
"""

from datetime import datetime

from .logger_interface import LoggerInterface, LogLevel

_ORDER = [
    LogLevel.DEBUG,
    LogLevel.INFO,
    LogLevel.WARNING,
    LogLevel.ERROR,
    LogLevel.CRITICAL,
]


class PrintLogger(LoggerInterface):
    """Logger writing formatted lines with print()."""

    def _log(self, level: LogLevel, message: str, *args) -> None:
        if _ORDER.index(level) < _ORDER.index(LogLevel(self.level)):
            return
        if args:
            message = message % args
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        print(f"{timestamp} | {level.value:<8} | {self.name} | {message}")

    def debug(self, message: str, *args, **kwargs) -> None:
        self._log(LogLevel.DEBUG, message, *args)

    def info(self, message: str, *args, **kwargs) -> None:
        self._log(LogLevel.INFO, message, *args)

    def warning(self, message: str, *args, **kwargs) -> None:
        self._log(LogLevel.WARNING, message, *args)

    def error(self, message: str, *args, **kwargs) -> None:
        self._log(LogLevel.ERROR, message, *args)

    def critical(self, message: str, *args, **kwargs) -> None:
        self._log(LogLevel.CRITICAL, message, *args)

    def set_level(self, level: LogLevel) -> None:
        self.level = level
