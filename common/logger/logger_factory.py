# common/logger/logger_factory.py

"""
Factory for creating and caching loggers.
"""

from enum import Enum
from threading import Lock
from typing import Dict, Optional

from .logger_interface import LoggerInterface, LogLevel
from .print_logger import PrintLogger
from .standard_logger import StandardLogger


class LoggerType(str, Enum):
    """Available logger implementations."""

    STANDARD = "standard"
    PRINT = "print"


class LoggerFactory:
    """
    Creates loggers by type and keeps one instance per name.

    Usage:
        logger = LoggerFactory.get_logger(
            name="my-service", logger_type=LoggerType.STANDARD, level=LogLevel.INFO
        )
    """

    _loggers: Dict[str, LoggerInterface] = {}
    _lock = Lock()

    @staticmethod
    def create_logger(
        name: str,
        logger_type: LoggerType = LoggerType.STANDARD,
        level: LogLevel = LogLevel.INFO,
        **kwargs,
    ) -> LoggerInterface:
        """
        Create a new logger without caching it.

        Args:
            name: Logger name
            logger_type: Implementation to use
            level: Minimum log level
            **kwargs: Implementation specific options (console_level,
                file_level, use_colors, log_file)

        Returns:
            LoggerInterface: New logger instance
        """
        if logger_type == LoggerType.STANDARD:
            return StandardLogger(name=name, level=level, **kwargs)
        if logger_type == LoggerType.PRINT:
            return PrintLogger(name=name, level=level)
        raise ValueError(f"Unsupported logger type: {logger_type}")

    @classmethod
    def get_logger(
        cls,
        name: str,
        logger_type: LoggerType = LoggerType.STANDARD,
        level: LogLevel = LogLevel.INFO,
        console_level: Optional[LogLevel] = None,
        file_level: Optional[LogLevel] = None,
        use_colors: bool = True,
        log_file: Optional[str] = None,
    ) -> LoggerInterface:
        """Get a cached logger, creating it on first use."""
        with cls._lock:
            if name not in cls._loggers:
                kwargs = {}
                if logger_type == LoggerType.STANDARD:
                    kwargs = {
                        "console_level": console_level,
                        "file_level": file_level,
                        "use_colors": use_colors,
                        "log_file": log_file,
                    }
                cls._loggers[name] = cls.create_logger(
                    name=name, logger_type=logger_type, level=level, **kwargs
                )
            return cls._loggers[name]

    @classmethod
    def set_global_level(cls, level: LogLevel) -> None:
        """Apply a level to every cached logger."""
        with cls._lock:
            for logger in cls._loggers.values():
                logger.set_level(level)

    @classmethod
    def clear(cls) -> None:
        with cls._lock:
            cls._loggers.clear()
