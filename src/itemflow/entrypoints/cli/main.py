"""ITEMFLOW CLI entry point.

Defines the top-level ``itemflow`` command (via Click-Extra), configures
logging, and registers one subcommand per list.

Currently available commands
- ``itemflow friends``:  friends (network, cache fallback for premium users)
- ``itemflow sent``:     transfers sent by the user
- ``itemflow received``: transfers received by the user
- ``itemflow cards``:    cards

Examples
    $ itemflow --premium -v friends --failures 3
    $ itemflow --data fixture.json sent --select 1
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from itemflow import __version__, config
from itemflow.logging import config_console_handler, config_flight_recorder, log_startup

from .helpers.log_level_parser import parse_log_level
from .lists import CliState, cards, friends, received, sent

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """ITEMFLOW command-line interface.

    Loads the friends, transfers and cards lists through their composed
    loading strategies (retries, cache fallback for premium users) and prints
    them. Data comes from a JSON fixture; the bundled sample is used unless
    --data or ITEMFLOW_DATA_PATH points elsewhere.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, thread names and source locations).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("itemflow", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="ITEMFLOW_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="ITEMFLOW_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity (unaffected by -v/-q) "
        "and write them to --log-path when a WARNING/ERROR occurs, or on exit "
        "if --force-flush is set."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Force-flush the flight recorder buffer to --log-path on program exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight-recorder. Repeatable (e.g. -L itemflow.adapters=INFO) "
        "or via ITEMFLOW_LOGGER_LEVELS (comma/space list)."
    ),
    default=("concurrent.futures=WARNING",),
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--premium/--no-premium",
    "is_premium",
    is_flag=True,
    default=config.is_premium_from_env,
    help=(
        "Compose the lists for a premium user (friends fall back to the cache). "
        f"Defaults to the {config.PREMIUM_ENV_VAR} environment variable."
    ),
)
@click.option(
    "--data",
    "data_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=config.get_data_path,
    help=(
        "JSON fixture with friends, cached_friends, cards and transfers. "
        f"Defaults to {config.DATA_PATH_ENV_VAR}, then to the bundled sample."
    ),
)
@clickx.pass_context
def itemflow(  # pylint: disable=too-many-arguments, too-many-locals, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
    is_premium: bool,
    data_path: Path | None,
) -> None:
    """ITEMFLOW command-line interface."""

    # 0) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) console
    use_color = ctx.color is not False  # None or True => allow color
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    # 2) flight recorder
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # 3) root logger; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        log_path=log_path if flight_recorder else None,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        logger_levels=logger_levels,
        is_premium=is_premium,
        data_source=str(data_path or config.sample_data()),
    )

    ctx.obj = CliState(is_premium=is_premium, data_path=data_path)
    ctx.call_on_close(logging.shutdown)


itemflow.add_command(friends)
itemflow.add_command(sent)
itemflow.add_command(received)
itemflow.add_command(cards)
