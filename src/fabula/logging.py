"""Logging configuration for fabula.

Log lines go to stderr (or a file) so they never mix with the game text on
stdout.
"""

import sys
from dataclasses import is_dataclass
from pathlib import Path
from typing import Any

import structlog


def render_game_values_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Show actions, outcomes and tokens in their compact repr form."""
    for key, value in event_dict.items():
        if is_dataclass(value) and not isinstance(value, type):
            event_dict[key] = repr(value)
    return event_dict


def _level_to_int(level: str) -> int:
    levels = {
        "DEBUG": 10,
        "INFO": 20,
        "WARNING": 30,
        "ERROR": 40,
        "CRITICAL": 50,
    }
    return levels.get(level.upper(), 30)


def configure_logging(
    log_level: str = "WARNING",
    log_file: Path | None = None,
    json_logs: bool = False,
) -> None:
    """Configure structured logging for the application."""
    if log_file:
        output_stream = open(log_file, "a")
    else:
        output_stream = sys.stderr

    base_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        render_game_values_processor,
        structlog.processors.TimeStamper(
            fmt="iso" if json_logs else "%Y-%m-%d %H:%M:%S"
        ),
    ]

    if json_logs:
        processors = base_processors + [structlog.processors.JSONRenderer()]
    else:
        processors = base_processors + [
            structlog.dev.ConsoleRenderer(colors=output_stream.isatty())
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_level_to_int(log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output_stream),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger instance for a module."""
    return structlog.get_logger(name)
