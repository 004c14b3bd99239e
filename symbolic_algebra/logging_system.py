"""
Logging System for the Symbolic Algebra Engine

This module provides a centralized logger with verbosity levels. The engine
itself only emits debug information on top-level calls and failures, so the
default level keeps the terminal quiet.
"""

import logging
import sys
from typing import Optional
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels for the engine"""
    SILENT = 0      # No output at all
    MINIMAL = 1     # Warnings and errors only
    MODERATE = 2    # General information
    DETAILED = 3    # Per-call information
    VERBOSE = 4     # All information including debug details


class SymbolicAlgebraLogger:
    """
    Centralized logger for the engine with level-aware filtering
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file

        # Create logger
        self.logger = logging.getLogger('symbolic_algebra')
        self.logger.setLevel(logging.DEBUG)
        self.logger.handlers.clear()  # Remove any existing handlers
        self.logger.propagate = False

        # Create formatter
        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        # Console handler; SILENT is enforced by the level checks below
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        # File handler (optional)
        if log_to_file:
            if log_file_path is None:
                log_file_path = f"symbolic_algebra_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def error(self, message: str, *args):
        """Errors - shown unless silent"""
        if self.log_level != LogLevel.SILENT:
            self.logger.error(message, *args)

    def warning(self, message: str, *args):
        """Warnings - shown from minimal level onwards"""
        if self._should_log(LogLevel.MINIMAL):
            self.logger.warning(message, *args)

    def detail(self, message: str, *args):
        """Per-call information"""
        if self._should_log(LogLevel.DETAILED):
            self.logger.info(message, *args)

    def debug(self, message: str, *args):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug("DEBUG: " + message, *args)

    def close(self):
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)


# Global logger instance
_global_logger: Optional[SymbolicAlgebraLogger] = None


def get_logger() -> SymbolicAlgebraLogger:
    """Get the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = SymbolicAlgebraLogger()
    return _global_logger


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> SymbolicAlgebraLogger:
    """Replace the global logger with a newly configured one"""
    global _global_logger
    if _global_logger is not None:
        _global_logger.close()
    _global_logger = SymbolicAlgebraLogger(log_level, log_to_file, log_file_path)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = SymbolicAlgebraLogger(log_level=level)
    else:
        _global_logger.log_level = level


# Convenience functions for common operations
def log_detail(message: str, *args):
    """Log per-call message; args are %-formatted only if the message is emitted"""
    get_logger().detail(message, *args)


def log_debug(message: str, *args):
    """Log debug message"""
    get_logger().debug(message, *args)
