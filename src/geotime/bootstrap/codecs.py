"""Ready-made codecs, one per registered alphabet.

Examples:
    ```python
    >>> from geotime.domain.wide_time import WideTime
    >>> get_codec("lexical64").encode(WideTime(0))
    'V000000000000000000000'
    ```
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from geotime.adapters.alphabets import ALPHABETS
from geotime.domain.errors import UnknownAlphabetError
from geotime.domain.lexical import LexicalCodec

if TYPE_CHECKING:
    from collections.abc import Mapping

    from geotime.domain.wide_time import WideTime

__all__ = ["CODECS", "decode", "encode", "get_codec"]

CODECS: Mapping[str, LexicalCodec] = MappingProxyType(
    {name: LexicalCodec(alphabet) for name, alphabet in ALPHABETS.items()}
)


def get_codec(name: str) -> LexicalCodec:
    """Return the codec registered under ``name``.

    Raises:
        UnknownAlphabetError: If no alphabet is registered under ``name``.
    """
    try:
        return CODECS[name]
    except KeyError as e:
        raise UnknownAlphabetError(name, tuple(CODECS)) from e


def encode(wide_time: WideTime, alphabet: str) -> str:
    """Encode ``wide_time`` with the named alphabet."""
    return get_codec(alphabet).encode(wide_time)


def decode(text: str, alphabet: str) -> WideTime:
    """Decode ``text`` with the named alphabet."""
    return get_codec(alphabet).decode(text)
