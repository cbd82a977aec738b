"""Order-preserving text codec for ``WideTime`` values.

The signed value is moved into the unsigned range by flipping its sign bit
(``ms XOR 1 << 127`` on the two's-complement pattern), written as exactly 16
big-endian bytes, and handed to an :class:`~geotime.interfaces.alphabet.Alphabet`.
The fixed width matters: a minimal-length encoding would let a short large
value sort before a long small one.

Examples:
    ```python
    >>> from geotime.adapters.alphabets import HexAlphabet
    >>> LexicalCodec(HexAlphabet()).encode(WideTime(100))
    '80000000000000000000000000000064'
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from geotime.domain.errors import DecodeError
from geotime.domain.wide_time import WideTime

if TYPE_CHECKING:
    from geotime.interfaces.alphabet import Alphabet

__all__ = [
    "LEXICAL_BYTES",
    "LexicalCodec",
    "flip_sign",
    "from_lexical_bytes",
    "to_lexical_bytes",
    "unflip_sign",
]

LEXICAL_BYTES = 16
SIGN_BIT = 1 << 127
_WIDTH_MASK = (1 << 128) - 1


def flip_sign(ms: int) -> int:
    """Return the order-preserving unsigned 128-bit image of signed ``ms``."""
    return (ms & _WIDTH_MASK) ^ SIGN_BIT


def unflip_sign(unsigned: int) -> int:
    """Inverse of :func:`flip_sign`: recover the signed value."""
    pattern = unsigned ^ SIGN_BIT
    return pattern - (1 << 128) if pattern & SIGN_BIT else pattern


def to_lexical_bytes(wide_time: WideTime) -> bytes:
    """Return the fixed 16-byte, big-endian, sign-flipped form of ``wide_time``."""
    return flip_sign(wide_time.ms).to_bytes(LEXICAL_BYTES, "big")


def from_lexical_bytes(data: bytes, alphabet: str = "bytes") -> WideTime:
    """Rebuild a ``WideTime`` from its 16-byte sign-flipped form.

    Args:
        data: Exactly 16 bytes.
        alphabet: Name reported in the error when ``data`` is malformed.

    Raises:
        DecodeError: If ``data`` is not exactly 16 bytes long.
    """
    if len(data) != LEXICAL_BYTES:
        raise DecodeError(
            alphabet, data, f"expected {LEXICAL_BYTES} bytes, got {len(data)}"
        )
    return WideTime(unflip_sign(int.from_bytes(data, "big")))


class LexicalCodec:
    """Encode/decode ``WideTime`` values as fixed-length, sortable text.

    For a fixed alphabet, ``a < b`` if and only if ``encode(a) < encode(b)``,
    and ``decode(encode(t)) == t`` for every ``t``.
    """

    def __init__(self, alphabet: Alphabet) -> None:
        self._alphabet = alphabet
        self._length = alphabet.encoded_length(LEXICAL_BYTES)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._alphabet!r})"

    @property
    def alphabet(self) -> Alphabet:
        """The alphabet used for the text form."""
        return self._alphabet

    @property
    def name(self) -> str:
        """Registry name of the alphabet."""
        return self._alphabet.name

    @property
    def length(self) -> int:
        """Number of symbols in every encoded string."""
        return self._length

    def encode(self, wide_time: WideTime) -> str:
        """Encode ``wide_time`` as a fixed-length string."""
        return self._alphabet.encode(to_lexical_bytes(wide_time))

    def decode(self, text: str) -> WideTime:
        """Decode text produced by :meth:`encode`.

        Raises:
            DecodeError: On illegal symbols, a malformed length, non-canonical
                residual bits, or a payload other than 16 bytes.
        """
        return from_lexical_bytes(self._alphabet.decode(text), self.name)
