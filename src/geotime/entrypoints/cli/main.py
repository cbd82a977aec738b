"""geotime CLI entry point.

Defines the top-level ``geotime`` command (via Click-Extra) and registers the
codec subcommands.

Currently available commands
- ``geotime encode`` / ``geotime decode``: convert between milliseconds and
  order-preserving text.
- ``geotime detect``: report which alphabets accept a string.
- ``geotime display``: render milliseconds for humans, beyond the calendar too.
- ``geotime now``: print the current time and its encoded form.
- ``geotime alphabets``: list the available alphabets.

Notes
- The CLI version is sourced from `geotime.__version__` and displayed
  automatically by Click-Extra (``--version``).

Examples
    $ geotime encode 0
    V000000000000000000000
    $ geotime decode --alphabet hex 80000000000000000000000000000064
    100
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from geotime import __version__, config
from geotime.domain.errors import UnknownAlphabetError
from geotime.logging import LoggingSettings, configure_logging, log_startup

from .codec_cmds import COMMANDS
from .helpers import parse_log_level

logger = logging.getLogger(__name__)


HELP = """geotime command-line interface.

    Encode 128-bit millisecond timestamps as fixed-length text whose plain
    string order matches time order, decode them back, and render values far
    outside the calendar range for humans.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  geotime alphabets   list the available encodings",
        f"  ${config.ALPHABET_ENV_VAR}    default alphabet",
        f"  ${config.DISPLAY_FORMAT_ENV_VAR}  default display pattern",
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
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
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("geotime", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="GEOTIME_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="GEOTIME_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    envvar="GEOTIME_FLIGHT_RECORDER",
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
    envvar="GEOTIME_FORCE_FLUSH_FLIGHT_RECORDER",
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
    envvar="GEOTIME_LOGGER_LEVEL",
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight-recorder. Repeatable (e.g. -L sqlalchemy=INFO) or via "
        "GEOTIME_LOGGER_LEVEL (comma/space list)."
    ),
    default=("sqlalchemy=WARNING",),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def geotime(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """geotime command-line interface."""
    settings = LoggingSettings(
        verbose=verbose_count,
        quiet=quiet_count,
        debug=debug,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_recorder_capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    # None or True => allow color
    handlers = configure_logging(settings, color=ctx.color is not False)

    # a bad GEOTIME_ALPHABET is reported by the subcommands that need it
    try:
        alphabet = config.get_default_alphabet()
    except UnknownAlphabetError:
        alphabet = "<invalid>"
    log_startup(
        logger,
        settings,
        app_version=__version__,
        alphabet=alphabet,
        handlers=handlers,
    )

    ctx.call_on_close(logging.shutdown)


for _command in COMMANDS:
    geotime.add_command(_command)
