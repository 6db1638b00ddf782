#!/usr/bin/env python3
"""
logging_manager.py
------------------
Rotating file logs for catalog builds, exports and command line runs.

Every DayOfLogger writes two files in its log directory:

    <component>.log   everything from DEBUG up, one line per event
    errors.log        errors with context and traceback

Warnings (and, in verbose mode, debug messages) are echoed to stderr.

Library code accepts ``logger: Optional[DayOfLogger] = None`` and calls
``safe_logger(logger).log_...`` so it never has to test for None.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s"
FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_DATEFMT = "%H:%M:%S"

MAX_BYTES = 10 * 1024 * 1024
BACKUP_COUNT = 5


def _with_details(tag: str, message: str, details: Optional[Dict[str, Any]]) -> str:
    if details:
        return f"{tag} - {message}: {json.dumps(details, default=str)}"
    return f"{tag} - {message}"


def format_cli_error(error: Exception) -> str:
    """One-line error message shown to command line users."""
    return f"❌ {type(error).__name__}: {error}"


class DayOfLogger:
    """
    Structured logger for one component.

    Attributes:
        log_dir: Directory holding the log files
        component_name: Logger name prefix and log file stem
        verbose: Whether debug messages reach the console
        main_logger: Operations, debug, info and warning messages
        error_logger: Errors only
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "dayof",
        max_bytes: int = MAX_BYTES,
        backup_count: int = BACKUP_COUNT,
        verbose: bool = False,
    ) -> None:
        """
        Args:
            log_dir: Directory for log files, created when missing
            component_name: e.g. 'dayof', 'loader', 'export'
            max_bytes: Size at which a log file rotates (default 10MB)
            backup_count: Rotated files kept per log (default 5)
            verbose: Echo debug messages to the console
        """
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self.verbose = verbose

        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.main_logger = self._build_logger(
            "operations", f"{component_name}.log", logging.DEBUG, console=True
        )
        self.error_logger = self._build_logger("errors", "errors.log", logging.ERROR)

    def _build_logger(
        self, suffix: str, file_name: str, level: int, console: bool = False
    ) -> logging.Logger:
        logger = logging.getLogger(f"{self.component_name}.{suffix}")
        logger.setLevel(level)
        # Replace handlers left by an earlier instance with the same name
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        file_handler = RotatingFileHandler(
            self.log_dir / file_name,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATEFMT))
        logger.addHandler(file_handler)

        if console:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(logging.DEBUG if self.verbose else logging.WARNING)
            console_handler.setFormatter(
                logging.Formatter(CONSOLE_FORMAT, datefmt=CONSOLE_DATEFMT)
            )
            logger.addHandler(console_handler)
        return logger

    def close(self) -> None:
        """Close and detach every handler owned by this logger."""
        for logger in (self.main_logger, self.error_logger):
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Record a completed operation (load, export, split) and its counters."""
        self.main_logger.info(f"OPERATION - {operation}: {json.dumps(details or {}, default=str)}")

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.debug(_with_details("DEBUG", message, details))

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.info(_with_details("INFO", message, details))

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.warning(_with_details("WARNING", message, details))

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        """
        Write an error, its context and the active traceback to errors.log.

        Args:
            error: Exception that occurred
            context: Where it happened (operation, slug, path, ...)
        """
        self.error_logger.error(f"ERROR - {type(error).__name__}: {error}")
        if context:
            context_str = ", ".join(f"{key}={value}" for key, value in context.items())
            self.error_logger.error(f"Context: {context_str}")
        self.error_logger.error(f"Traceback:\n{traceback.format_exc()}")

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log an error raised under a command and build its console message.

        Args:
            error: Exception to report
            context: Optional context; defaults to {"source": "cli"}
            show_traceback: Append the traceback to the returned message

        Returns:
            Message for stderr

        Examples:
            >>> logger.log_cli_error(CatalogLoadError("food.json: invalid JSON"))
            '❌ CatalogLoadError: food.json: invalid JSON'
        """
        self.log_error(error, context or {"source": "cli"})
        message = format_cli_error(error)
        if show_traceback:
            return f"{message}\n\n{traceback.format_exc()}"
        return message


class NullLogger:
    """Stand-in with the DayOfLogger interface that discards everything."""

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return format_cli_error(error)


_null_logger = NullLogger()


def safe_logger(logger: Optional[DayOfLogger]) -> DayOfLogger:
    """The given logger, or the shared NullLogger when it is None."""
    return logger if logger is not None else _null_logger  # type: ignore[return-value]


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Report a failed command and exit.

    The logger and verbose flag are taken from ctx.obj when present. Full
    details go to errors.log; stderr gets a one-line message, plus the
    traceback in verbose mode.

    Args:
        ctx: Click context
        error: Exception raised by the command
        operation: Command name, e.g. 'export'
        additional_context: Extra context such as the slug or output path
        exit_code: Process exit status (default 1)

    Note:
        Never returns.
    """
    obj = ctx.obj or {}
    context = {"operation": operation, **(additional_context or {})}
    message = safe_logger(obj.get("logger")).log_cli_error(
        error, context, show_traceback=obj.get("verbose", False)
    )
    click.echo(message, err=True)
    sys.exit(exit_code)
