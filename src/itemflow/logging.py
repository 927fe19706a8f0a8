"""Logging helpers used by the ITEMFLOW CLI.

Console logging goes through Rich. An in-memory "flight recorder" buffers
records at DEBUG granularity and writes them to disk when something goes
wrong, so a failed load can be traced through every retry and fallback
afterwards. A filter tags third-party records with a short prefix.
"""

from __future__ import annotations

import logging
import sys
from importlib.metadata import version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from itemflow import config

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "itemflow"


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    Records from loggers outside the project get `record.prefix` set to a
    bracketed token like "[concurrent]"; project records get an empty prefix.
    Records are never dropped.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr. In debug mode it logs at DEBUG and shows
    timestamps, logger names and source locations; otherwise third-party
    records get a short prefix.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting.
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler suitable to attach to the root logger.
    """

    # keep in line with click-extra's --color / --no-color option
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None

    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = (
        "%(prefix)s %(message)s"
        if not debug_mode
        else "%(asctime)s %(threadName)s %(name)s: %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Configure and return an in-memory flight recorder backed by a file.

    Buffers up to `capacity` records and flushes them to `path` when a record
    at `flush_level` or higher is emitted (or on close if `flush_on_close`).

    Args:
        path: Destination file path for flushed records.
        capacity: Number of records to buffer in memory.
        flush_level: Level at or above which the buffer will be flushed.
        flush_on_close: If True, flush the buffer when the handler is closed.

    Returns:
        MemoryHandler: A memory-backed handler with a FileHandler target.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    log_path: Path | None,
    flight_capacity: int | None,
    logger_levels: dict[str, int],
    is_premium: bool,
    data_source: str,
) -> None:
    """Log a one-line summary and the loading setup at startup.

    The INFO line names the version, console level, flight-recorder state and
    user tier. DEBUG lines add the interpreter and CLI library versions, the
    fixture the lists load from, the retry policy and per-logger overrides,
    so a flight-recorder dump says how the lists were composed.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string to display.
        level: Effective console logging level (numeric).
        log_path: Flight-recorder output file, or None when it is disabled.
        flight_capacity: Capacity of the flight recorder buffer, or None.
        logger_levels: Mapping of logger names to their configured numeric levels.
        is_premium: Whether the lists are composed for a premium user.
        data_source: Where the fixture data is read from.
    """
    logger.info(
        "ITEMFLOW %s - console=%s, flight-recorder=%s, tier=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if log_path else "OFF",
        "premium" if is_premium else "standard",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Click: %s, Rich: %s", version("click"), version("rich"))
    logger.debug("Data: %s", data_source)
    logger.debug(
        "Retries: friends=%d, transfers=%d, cards=0; cache fallback=%s",
        config.FRIENDS_RETRY_COUNT,
        config.TRANSFERS_RETRY_COUNT,
        "on" if is_premium else "off",
    )
    if log_path:
        logger.debug("Flight recorder: path=%s, capacity=%s", log_path, flight_capacity)
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
    )
