"""Logging setup for the geotime CLI.

The library itself never configures logging. The CLI builds a
:class:`LoggingSettings` from its options and hands it to
:func:`configure_logging`, which installs two root handlers:

- a Rich console handler on stderr whose level follows ``-v``/``-q``;
- an optional "flight recorder": a ``MemoryHandler`` that keeps the most
  recent records at DEBUG granularity and writes them to a file only when
  something at WARNING or above happens (or on exit, if forced).

Records from other libraries are tagged with a short ``[name]`` prefix on the
console so they stand apart from geotime's own messages.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

from geotime.adapters.alphabets import ALPHABETS

if TYPE_CHECKING:
    from logging import Handler, Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "geotime"
BASE_LEVEL = logging.WARNING
LEVEL_STEP = 10

ConsoleColorSystem: TypeAlias = Literal[
    "auto", "standard", "256", "truecolor", "windows"
]

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


@dataclass(frozen=True)
class LoggingSettings:
    """Everything the CLI knows about how logging should behave."""

    verbose: int = 0
    quiet: int = 0
    debug: bool = False
    log_path: Path | None = None
    flight_recorder: bool = True
    flight_recorder_capacity: int = 2000
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)

    @property
    def console_level(self) -> int:
        """WARNING, moved one level per ``-v``/``-q``, clamped to DEBUG..CRITICAL."""
        level = BASE_LEVEL - LEVEL_STEP * self.verbose + LEVEL_STEP * self.quiet
        return max(logging.DEBUG, min(logging.CRITICAL, level))

    @property
    def recording(self) -> bool:
        """Whether a flight recorder will be installed."""
        return self.flight_recorder and self.log_path is not None


class LibraryPrefixFilter(logging.Filter):
    """Set ``record.prefix`` to ``"[top-level-name]"`` for non-geotime loggers.

    geotime's own records get an empty prefix. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == PROJECT_PREFIX or record.name.startswith(
            f"{PROJECT_PREFIX}."
        ):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.partition('.')[0]}]"
        return True


def build_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Return a Rich handler that writes to stderr.

    Args:
        level: Minimum level shown; ignored in debug mode, which shows DEBUG.
        debug_mode: Add timestamps, logger names and source locations.
        color: ``False`` disables ANSI styling, matching ``--no-color``.

    Returns:
        RichHandler: The configured handler.
    """
    color_system: ConsoleColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(LibraryPrefixFilter())
    return handler


def build_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Return a buffering handler that dumps its records to ``path``.

    The file is truncated when the handler is created, so it only ever holds
    the records of the latest run.

    Args:
        path: File that receives flushed records.
        capacity: Records kept in memory before an automatic flush.
        flush_level: Records at or above this level flush the buffer.
        flush_on_close: Also flush whatever is buffered on shutdown.

    Returns:
        MemoryHandler: Handler targeting a ``FileHandler`` on ``path``.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(settings: LoggingSettings, color: bool = True) -> list[Handler]:
    """Install geotime's handlers on the root logger.

    Replaces any existing root configuration. The root logger passes every
    record through; the handlers and per-logger levels do the filtering.

    Returns:
        list[Handler]: The installed handlers, console first.
    """
    handlers: list[Handler] = [
        build_console_handler(
            level=settings.console_level, debug_mode=settings.debug, color=color
        )
    ]
    if settings.recording and settings.log_path is not None:
        handlers.append(
            build_flight_recorder(
                settings.log_path,
                capacity=settings.flight_recorder_capacity,
                flush_on_close=settings.force_flush,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def log_startup(
    logger: Logger,
    settings: LoggingSettings,
    *,
    app_version: str,
    alphabet: str,
    handlers: list[Handler],
) -> None:
    """Log a one-line INFO summary followed by DEBUG diagnostics.

    The diagnostics cover the interpreter, platform, process, working
    directory, SQLAlchemy version, registered alphabets, handler types,
    flight-recorder settings and per-logger overrides. They mostly end up in
    the flight recorder, where they help when a run needs to be reported.
    """
    logger.info(
        "geotime %s - console=%s, flight-recorder=%s, alphabet=%s",
        app_version,
        logging.getLevelName(settings.console_level),
        "ON" if settings.recording else "OFF",
        alphabet,
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("SQLAlchemy: %s", sqlalchemy.__version__)
    logger.debug("Alphabets: %s", ", ".join(ALPHABETS))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if settings.recording:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            settings.log_path,
            settings.flight_recorder_capacity,
            settings.force_flush,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {
            name: logging.getLevelName(level)
            for name, level in settings.logger_levels.items()
        }
        or "<none>",
    )
