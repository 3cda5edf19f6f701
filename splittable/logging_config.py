"""
Logging configuration for splittable

IndentLogger nests the debug trace of a partition run under its decision line.
"""

import io
import logging
import sys
from contextlib import contextmanager


class _Indent:
    """Indentation state shared by all IndentLogger instances"""

    _level = 0
    _branch = "├── "
    _pipe = "│   "

    @classmethod
    def increase(cls) -> None:
        cls._level += 1

    @classmethod
    def decrease(cls) -> None:
        if cls._level > 0:
            cls._level -= 1

    @classmethod
    def reset(cls) -> None:
        """Reset indentation state (useful for tests)"""
        cls._level = 0

    @classmethod
    def get_indent(cls) -> str:
        if cls._level == 0:
            return ""
        return cls._pipe * (cls._level - 1) + cls._branch


class IndentLogger:
    """Logger wrapper that prefixes messages with the current indentation"""

    def __init__(self, base_logger: logging.Logger) -> None:
        self._logger = base_logger

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(f"{self.indent}{msg}", *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._logger.info(f"{self.indent}{msg}", *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(f"{self.indent}{msg}", *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._logger.error(f"{self.indent}{msg}", *args, **kwargs)

    @property
    def indent(self) -> str:
        """Get current indentation string"""
        return _Indent.get_indent()

    @contextmanager
    def indent_block(self, initial_message: str | None = None):
        """
        Context manager for handling indentation blocks

        Args:
            initial_message: Optional message to log at block start
        """
        if initial_message:
            self.debug(initial_message)
        _Indent.increase()
        try:
            yield
        finally:
            _Indent.decrease()


def setup_logging(level=logging.INFO):
    """
    Configure logging for splittable

    Args:
        level: Logging level (default: INFO)

    Returns:
        IndentLogger: Configured logger with indentation support
    """
    base_logger = logging.getLogger("splittable")
    base_logger.setLevel(level)

    # Remove existing handlers
    base_logger.handlers = []

    # UTF-8 so the tree characters survive narrow console encodings
    stream = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", errors="replace")
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)8s %(message)s"))
    base_logger.addHandler(handler)

    return IndentLogger(base_logger)


logger = IndentLogger(logging.getLogger("splittable"))
