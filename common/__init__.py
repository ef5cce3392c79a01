"""
Shared components for the feedback sentiment service.

Usage:
    from common.logger import LoggerFactory, LoggerType, LogLevel
"""

__version__ = "0.1.0"

from .logger import LoggerFactory, LoggerType, LogLevel

__all__ = [
    "__version__",
    "LoggerFactory",
    "LoggerType",
    "LogLevel",
]
