"""geotime codec commands.

Thin wrappers that expose the order-preserving codecs and the display
formatter on the command line.

Behavior
- Results (encoded strings, millisecond values, rendered times) go to **stdout**;
  human-oriented notices go to **stderr** so output can be piped.
- ``--alphabet`` defaults to ``GEOTIME_ALPHABET`` (``lexical64`` when unset).
- ``--format`` defaults to ``GEOTIME_DISPLAY_FORMAT``.

Failure modes
- Undecodable text, out-of-range millisecond values or an unknown
  ``GEOTIME_ALPHABET`` → error line on stderr, exit code 1.

Notes
- Negative values must follow ``--`` so Click does not read them as options,
  e.g. ``geotime encode -- -1``.
"""

from __future__ import annotations

import logging
from typing import NoReturn

import click

from geotime import config
from geotime.bootstrap.codecs import CODECS, get_codec
from geotime.domain.errors import (
    ConversionError,
    DecodeError,
    RangeError,
    UnknownAlphabetError,
)
from geotime.domain.wide_time import WideTime

from .helpers import error, success, warn

logger = logging.getLogger(__name__)

ALPHABET_CHOICE = click.Choice(sorted(CODECS), case_sensitive=True)

OUT_OF_CALENDAR_MSG = "Outside the calendar range; showing an approximation."


def _fail(message: str) -> NoReturn:
    error(message)
    raise SystemExit(1)


def _resolve_alphabet(alphabet: str | None) -> str:
    if alphabet is not None:
        return alphabet
    try:
        return config.get_default_alphabet()
    except UnknownAlphabetError as e:
        _fail(f"{config.ALPHABET_ENV_VAR}: {e}")


def _wide_time(millis: int) -> WideTime:
    try:
        return WideTime.from_wide(millis)
    except RangeError as e:
        _fail(str(e))


alphabet_option = click.option(
    "--alphabet",
    "-a",
    type=ALPHABET_CHOICE,
    default=None,
    help=f"Alphabet for the text form [default: ${config.ALPHABET_ENV_VAR} or "
    f"{config.DEFAULT_ALPHABET}].",
)


@click.command()
@click.argument("millis", type=int)
@alphabet_option
def encode(millis: int, alphabet: str | None) -> None:
    """Encode MILLIS (milliseconds since the Unix epoch) as sortable text."""
    name = _resolve_alphabet(alphabet)
    text = get_codec(name).encode(_wide_time(millis))
    logger.debug("Encoded %s with %s", millis, name)
    click.echo(text)


@click.command()
@click.argument("text")
@alphabet_option
def decode(text: str, alphabet: str | None) -> None:
    """Decode TEXT back to milliseconds since the Unix epoch."""
    name = _resolve_alphabet(alphabet)
    try:
        wide_time = get_codec(name).decode(text)
    except DecodeError as e:
        logger.debug("Decode failed", exc_info=True)
        _fail(str(e))
    click.echo(wide_time.ms)


@click.command()
@click.argument("text")
def detect(text: str) -> None:
    """Report which alphabets can decode TEXT."""
    matches = 0
    for name, codec in sorted(CODECS.items()):
        try:
            wide_time = codec.decode(text)
        except DecodeError as e:
            logger.info("%s: %s", name, e.reason)
            continue
        matches += 1
        success(f"{name}: {wide_time!r}")
        click.echo(f"{name}\t{wide_time.ms}")
    if not matches:
        _fail(f"No alphabet can decode {text!r}.")


@click.command()
@click.argument("millis", type=int)
@click.option(
    "--format",
    "-f",
    "fmt",
    default=None,
    help=f"strftime pattern [default: ${config.DISPLAY_FORMAT_ENV_VAR} or "
    f"{config.DEFAULT_DISPLAY_FORMAT}].",
)
def display(millis: int, fmt: str | None) -> None:
    """Render MILLIS for humans, approximating values outside the calendar."""
    wide_time = _wide_time(millis)
    try:
        wide_time.to_instant()
    except (RangeError, ConversionError):
        warn(OUT_OF_CALENDAR_MSG)
    click.echo(wide_time.display(fmt or config.get_display_format()))


@click.command()
@alphabet_option
def now(alphabet: str | None) -> None:
    """Print the current time in milliseconds and its encoded form."""
    name = _resolve_alphabet(alphabet)
    wide_time = WideTime.now()
    click.echo(f"{wide_time.ms}\t{get_codec(name).encode(wide_time)}")


@click.command()
def alphabets() -> None:
    """List the available alphabets, their encoded lengths and symbols."""
    for name, codec in sorted(CODECS.items()):
        click.echo(f"{name:<10} {codec.length:>3}  {codec.alphabet.symbols}")


COMMANDS = (encode, decode, detect, display, now, alphabets)
