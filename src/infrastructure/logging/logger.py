"""Logging helpers for the portfolio engine.

Loggers write date-stamped files under ``<project>/logs/<subdir>`` and can
optionally echo to the console. ``AppLogger`` and ``UsageLogger`` are process
singletons exposed through ``get_app_logger`` and ``get_usage_logger``.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Callable

from src.utils.utils import get_project_root


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class LoggerBuilder:
    """Fluent builder for configured ``logging.Logger`` instances."""

    def __init__(self) -> None:
        self._name = "app"
        self._subdir = "app"
        self._prefix = "app_logs"
        self._console = False
        self._level = logging.INFO
        self._formatter_factory: Callable[[], logging.Formatter] = (
            self._default_formatter
        )
        self._file_handler_factory = self._default_file_handler
        self._console_handler_factory = self._default_console_handler

    def name(self, value: str) -> "LoggerBuilder":
        self._name = value
        return self

    def subdir(self, value: str) -> "LoggerBuilder":
        self._subdir = value
        return self

    def prefix(self, value: str) -> "LoggerBuilder":
        self._prefix = value
        return self

    def console(self, enabled: bool) -> "LoggerBuilder":
        self._console = enabled
        return self

    def level(self, value: int) -> "LoggerBuilder":
        self._level = value
        return self

    def formatter(
        self,
        factory: Callable[[], logging.Formatter],
    ) -> "LoggerBuilder":
        self._formatter_factory = factory
        return self

    def file_handler(self, factory) -> "LoggerBuilder":
        self._file_handler_factory = factory
        return self

    def console_handler(self, factory) -> "LoggerBuilder":
        self._console_handler_factory = factory
        return self

    def build(self) -> logging.Logger:
        """Build the logger, reusing handlers if it was already configured.

        Returns:
            logging.Logger: Configured logger instance.
        """
        logger = logging.getLogger(self._name)
        logger.setLevel(self._level)
        if logger.handlers:
            return logger

        log_dir = get_project_root() / "logs" / self._subdir
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / f"{self._today_stamp()}_{self._prefix}.log"

        fmt = self._formatter_factory()
        logger.addHandler(self._file_handler_factory(log_path, fmt))
        if self._console:
            logger.addHandler(self._console_handler_factory(fmt))
        logger.propagate = False
        return logger

    @staticmethod
    def _today_stamp() -> str:
        return date.today().strftime("%Y%m%d")

    @staticmethod
    def _default_formatter() -> logging.Formatter:
        return logging.Formatter(LOG_FORMAT)

    @staticmethod
    def _default_file_handler(
        path: Path,
        fmt: logging.Formatter,
    ) -> logging.FileHandler:
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler

    @staticmethod
    def _default_console_handler(
        fmt: logging.Formatter,
    ) -> logging.StreamHandler:
        handler = logging.StreamHandler()
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler


class Logger:
    """Singleton wrapper delegating to a built ``logging.Logger``."""

    _instance = None
    _subdir = "app"
    _prefix = "app_logs"
    _console = True

    def __new__(cls, name: str = "app"):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance.logger = (
                LoggerBuilder()
                .name(name)
                .subdir(cls._subdir)
                .prefix(cls._prefix)
                .console(cls._console)
                .build()
            )
            cls._instance = instance
        return cls._instance

    def info(self, message: str) -> None:
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)

    def debug(self, message: str) -> None:
        self.logger.debug(message)

    def critical(self, message: str) -> None:
        self.logger.critical(message)


class AppLogger(Logger):
    """Application logger for engine and use case events."""

    _instance = None


class UsageLogger(Logger):
    """Usage logger recording which reports were requested."""

    _instance = None
    _subdir = "usage"
    _prefix = "usage_logs"
    _console = False


def get_app_logger() -> AppLogger:
    """Return the application logger singleton."""
    return AppLogger("portfolio")


def get_usage_logger() -> UsageLogger:
    """Return the usage logger singleton."""
    return UsageLogger("portfolio.usage")


__all__ = [
    "LoggerBuilder",
    "Logger",
    "AppLogger",
    "UsageLogger",
    "get_app_logger",
    "get_usage_logger",
]
