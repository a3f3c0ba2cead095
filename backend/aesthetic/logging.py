"""structlog setup shared by the API process and anything embedding the engine."""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

from aesthetic.config import Settings, settings as default_settings

_LOG_LEVEL_MAP: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Image payloads and raw model output must never land in a log line whole
MAX_FIELD_CHARS = 300


class _LogFileTee:
    """Stdout plus an append-only JSON-lines file.

    A file that can't be opened or written is dropped with a warning on
    stderr; stdout keeps working either way.
    """

    def __init__(self, path: str) -> None:
        self._path = path
        self._file: IO[str] | None = None
        try:
            self._file = open(path, "a")  # noqa: SIM115
        except OSError as exc:
            # structlog is not configured yet at this point
            print(
                f"WARNING: Could not open log file {path!r}: {exc}. Logging to stdout only.",
                file=sys.stderr,
            )

    def write(self, data: str) -> None:
        sys.stdout.write(data)
        self._to_file("write", data)

    def flush(self) -> None:
        sys.stdout.flush()
        self._to_file("flush")

    def _to_file(self, operation: str, data: str | None = None) -> None:
        if self._file is None:
            return
        try:
            if data is not None:
                self._file.write(data)
            self._file.flush()
        except (OSError, ValueError):
            self._file = None
            print(
                f"WARNING: Log file {operation} to {self._path!r} failed. File logging disabled.",
                file=sys.stderr,
            )


def clip_long_values(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Shorten oversized string fields in place of dropping them."""
    for key, value in event_dict.items():
        if isinstance(value, str) and len(value) > MAX_FIELD_CHARS:
            event_dict[key] = f"{value[:MAX_FIELD_CHARS]}... ({len(value)} chars)"
    return event_dict


def resolve_level(name: str) -> int:
    """Map a LOG_LEVEL string to a logging level, defaulting to INFO."""
    return _LOG_LEVEL_MAP.get(name.upper(), logging.INFO)


def configure_logging(config: Settings | None = None) -> None:
    """Console renderer in development, JSON lines everywhere else.

    Embedding callers pass their own ``Settings``; the API uses the module one.
    """
    config = config or default_settings
    renderer = (
        structlog.dev.ConsoleRenderer()
        if config.environment == "development"
        else structlog.processors.JSONRenderer()
    )
    output = _LogFileTee(config.log_file) if config.log_file else None

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            clip_long_values,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolve_level(config.log_level)),
        context_class=dict,
        # PrintLogger only calls write() and flush() on its file
        logger_factory=structlog.PrintLoggerFactory(file=output),  # type: ignore[arg-type]
        cache_logger_on_first_use=True,
    )
