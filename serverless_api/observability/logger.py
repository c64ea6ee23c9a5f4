"""
Structured logger.

Leveled, structured logging facade over the stdlib logging module with two
rendering modes: pretty (multi-line, optionally colored) for development and
compact (single line with inline JSON metadata) for log aggregation.

debug/info records go to stdout, warn/error records go to stderr.

Dependencies: logging (stdlib), pydantic
System role: Centralized logging configuration and request/performance helpers
"""

import json
import logging
import sys
import traceback
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, TextIO

from pydantic import BaseModel, Field, field_validator

from serverless_api.configs.base import LOG_LEVELS
from serverless_api.configs.settings import Settings

LEVEL_MAP = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}
LEVEL_NAMES = {number: name for name, number in LEVEL_MAP.items()}

SLOW_OPERATION_MS = 1000
MODERATE_OPERATION_MS = 100


class Colors:
    """ANSI escape codes used by the pretty formatter."""

    RESET = "\x1b[0m"
    BRIGHT = "\x1b[1m"
    DIM = "\x1b[2m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    BLUE = "\x1b[34m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"
    GRAY = "\x1b[90m"


LEVEL_COLORS = {
    "debug": Colors.GRAY,
    "info": Colors.BLUE,
    "warn": Colors.YELLOW,
    "error": Colors.RED,
}


class LoggerConfig(BaseModel):
    """Runtime configuration of a StructuredLogger."""

    level: str = Field(default="info", description="Minimum level that is emitted")
    pretty_print: bool = Field(default=False, description="Multi-line human output")
    colors: bool = Field(default=False, description="ANSI colors in pretty mode")
    include_stack: bool = Field(default=False, description="Attach stack traces to errors")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = str(value).strip().lower()
        if level == "warning":
            level = "warn"
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of: {', '.join(LOG_LEVELS)}")
        return level

    @classmethod
    def from_settings(cls, settings: Settings) -> "LoggerConfig":
        """
        Derive logger configuration from application settings.

        Development defaults to pretty, colored output with stack traces;
        production to compact output without them. The observability
        overrides win over the environment default.

        Args:
            settings: Application settings

        Returns:
            LoggerConfig: Configuration for the process logger
        """
        development = settings.is_development
        overrides = settings.observability
        pretty = overrides.pretty if overrides.pretty is not None else development
        colors = overrides.colors if overrides.colors is not None else development
        return cls(
            level=settings.log_level,
            pretty_print=pretty,
            colors=pretty and colors,
            include_stack=development,
        )


def _iso_timestamp(created: float) -> str:
    moment = datetime.fromtimestamp(created, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _scalar(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class PrettyFormatter(logging.Formatter):
    """Multi-line formatter with an indented metadata dump."""

    def __init__(self, colors: bool = False) -> None:
        super().__init__()
        self.colors = colors

    def colorize(self, text: str, color: str) -> str:
        if not self.colors:
            return text
        return f"{color}{text}{Colors.RESET}"

    def format_level(self, level: str) -> str:
        tag = f"[{level.upper():<5}]"
        return self.colorize(tag, LEVEL_COLORS[level])

    def pretty_print_object(self, obj: Mapping[str, Any], indent: int = 0) -> str:
        """
        Render a mapping as indented key: value lines.

        Nested mappings are indented one level deeper, sequences are
        rendered as bracketed comma-joined lists.
        """
        spaces = "  " * indent
        lines = []
        for key, value in obj.items():
            key_text = self.colorize(str(key), Colors.GREEN)
            if isinstance(value, Mapping):
                lines.append(f"{spaces}{key_text}:")
                nested = self.pretty_print_object(value, indent + 1)
                if nested:
                    lines.append(nested)
            elif isinstance(value, (list, tuple, set)):
                joined = ", ".join(_scalar(item) for item in value)
                lines.append(f"{spaces}{key_text}: [{joined}]")
            elif isinstance(value, str) and self.colors:
                quoted = self.colorize(f'"{value}"', Colors.YELLOW)
                lines.append(f"{spaces}{key_text}: {quoted}")
            else:
                lines.append(f"{spaces}{key_text}: {_scalar(value)}")
        return "\n".join(lines)

    def format(self, record: logging.LogRecord) -> str:
        level = LEVEL_NAMES.get(record.levelno, "info")
        timestamp = self.colorize(_iso_timestamp(record.created), Colors.DIM)
        output = f"{timestamp} {self.format_level(level)} {record.getMessage()}"

        meta = getattr(record, "meta", None)
        if meta:
            output += "\n" + self.colorize("📋 Metadata:", Colors.CYAN)
            output += "\n" + self.pretty_print_object(meta, 1)
        return output


class CompactFormatter(logging.Formatter):
    """Single-line formatter for machine ingestion."""

    def format(self, record: logging.LogRecord) -> str:
        level = LEVEL_NAMES.get(record.levelno, "info")
        output = f"[{_iso_timestamp(record.created)}] [{level.upper()}] {record.getMessage()}"

        meta = getattr(record, "meta", None)
        if meta:
            output += " " + json.dumps(meta, default=str, ensure_ascii=False)
        return output


def _below_warning(record: logging.LogRecord) -> bool:
    return record.levelno < logging.WARNING


class StructuredLogger:
    """
    Process logger with level filtering and pretty/compact rendering.

    One instance is created at start-up and passed by reference (stored on
    the application state and injected into routes).
    """

    def __init__(
        self,
        config: LoggerConfig | None = None,
        name: str = "serverless_api",
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        """
        Initialize logger and attach its stream handlers.

        Args:
            config: Logger configuration (defaults to compact, info level)
            name: Name of the underlying stdlib logger
            stdout: Stream for debug/info records (defaults to sys.stdout)
            stderr: Stream for warn/error records (defaults to sys.stderr)
        """
        self.config = config or LoggerConfig()
        # Not registered with logging.getLogger, so instances never share level or handlers
        self._logger = logging.Logger(name)
        self._logger.propagate = False

        self._stdout_handler = logging.StreamHandler(stdout or sys.stdout)
        self._stdout_handler.addFilter(_below_warning)
        self._stderr_handler = logging.StreamHandler(stderr or sys.stderr)
        self._stderr_handler.setLevel(logging.WARNING)

        self._logger.addHandler(self._stdout_handler)
        self._logger.addHandler(self._stderr_handler)
        self._apply_config()

    def _apply_config(self) -> None:
        self._logger.setLevel(LEVEL_MAP[self.config.level])
        if self.config.pretty_print:
            formatter: logging.Formatter = PrettyFormatter(colors=self.config.colors)
        else:
            formatter = CompactFormatter()
        self._stdout_handler.setFormatter(formatter)
        self._stderr_handler.setFormatter(formatter)

    def configure(self, **changes: Any) -> None:
        """
        Reconfigure the logger at runtime.

        Args:
            **changes: LoggerConfig fields to replace (level, pretty_print,
                colors, include_stack)

        Raises:
            pydantic.ValidationError: If a value is invalid
        """
        self.config = LoggerConfig.model_validate({**self.config.model_dump(), **changes})
        self._apply_config()

    def should_log(self, level: str) -> bool:
        return self._logger.isEnabledFor(LEVEL_MAP[level])

    def _log(self, level: str, message: str, meta: Mapping[str, Any] | None) -> None:
        if not self.should_log(level):
            return
        clean_meta = {key: value for key, value in (meta or {}).items() if value is not None}
        self._logger.log(LEVEL_MAP[level], message, extra={"meta": clean_meta})

    def debug(self, message: str, meta: Mapping[str, Any] | None = None) -> None:
        self._log("debug", message, meta)

    def info(self, message: str, meta: Mapping[str, Any] | None = None) -> None:
        self._log("info", message, meta)

    def warn(self, message: str, meta: Mapping[str, Any] | None = None) -> None:
        self._log("warn", message, meta)

    def error(
        self,
        message: str,
        error: Any = None,
        meta: Mapping[str, Any] | None = None,
    ) -> None:
        """
        Log an error with optional exception details.

        Exceptions contribute their name and message; the stack trace is
        only attached when include_stack is enabled (development).

        Args:
            message: Log message
            error: Exception instance or any JSON-friendly value
            meta: Additional context
        """
        error_meta = dict(meta or {})
        if isinstance(error, BaseException):
            details = {"name": type(error).__name__, "message": str(error)}
            if self.config.include_stack:
                details["stack"] = "".join(
                    traceback.format_exception(type(error), error, error.__traceback__)
                )
            error_meta["error"] = details
        elif error is not None:
            error_meta["error"] = error
        self._log("error", message, error_meta)

    def request(
        self,
        method: str,
        path: str,
        status_code: int,
        duration: float | None = None,
    ) -> None:
        """
        Log a completed HTTP request.

        Status codes of 400 and above are logged at warn, the rest at info.
        """
        meta = {
            "method": method,
            "path": path,
            "statusCode": status_code,
            "duration": f"{duration}ms" if duration is not None else None,
        }
        failed = status_code >= 400
        prefix = ("❌ " if failed else "✅ ") if self.config.pretty_print else ""
        message = f"{prefix}HTTP {status_code} - {method} {path}"
        if failed:
            self.warn(message, meta)
        else:
            self.info(message, meta)

    def success(self, message: str, meta: Mapping[str, Any] | None = None) -> None:
        prefix = "✨ " if self.config.pretty_print else ""
        self.info(f"{prefix}{message}", meta)

    def failure(
        self,
        message: str,
        error: Any = None,
        meta: Mapping[str, Any] | None = None,
    ) -> None:
        prefix = "💥 " if self.config.pretty_print else ""
        self.error(f"{prefix}{message}", error, meta)

    def performance(
        self,
        operation: str,
        duration: float,
        meta: Mapping[str, Any] | None = None,
    ) -> None:
        """
        Log an operation timing classified as slow, moderate or fast.

        Slow operations (over one second) are logged at warn.
        """
        if duration > SLOW_OPERATION_MS:
            classification = "slow"
        elif duration > MODERATE_OPERATION_MS:
            classification = "moderate"
        else:
            classification = "fast"

        performance_meta = {
            **(meta or {}),
            "operation": operation,
            "duration": f"{duration}ms",
            "performance": classification,
        }
        prefix = "⚡ " if self.config.pretty_print else ""
        if classification == "slow":
            self.warn(f"{prefix}Slow operation: {operation}", performance_meta)
        else:
            self.info(f"{prefix}Operation completed: {operation}", performance_meta)


def configure_logging(settings: Settings) -> StructuredLogger:
    """
    Build the process logger from settings.

    Args:
        settings: Application settings

    Returns:
        StructuredLogger: Logger to be shared by reference
    """
    # Requests are logged by RequestLoggingMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    return StructuredLogger(LoggerConfig.from_settings(settings))
