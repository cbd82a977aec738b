"""Terminal message helpers for the geotime CLI.

Small helpers for rendering user-visible lines with emoji→ASCII fallbacks.
Messages write to stderr so stdout carries only encoded values and other
machine-readable output.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
FAILURE = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    Re-queries Click's stderr stream on every call so redirected or replaced
    streams are honoured.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(pair: tuple[str, str]) -> str:
    """Return the emoji of ``pair`` when stderr can encode it, else its ASCII form."""
    emoji, fallback = pair
    return emoji if _supports_character(emoji) else fallback


def _emit(pair: tuple[str, str], msg: str, color: str) -> None:
    click.secho(f"{glyph(pair)}  {msg}", fg=color, bold=True, err=True)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  Outside the calendar range; showing an approximation.``
    """
    _emit(CAUTION, msg, "yellow")


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  lexical64: WideTime(0)``
    """
    _emit(SUCCESS, msg, "green")


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  Cannot decode 'xyz' as hex: illegal symbol 'x'.``
    """
    _emit(FAILURE, msg, "red")
