"""Textual alphabets for the order-preserving codec.

Every alphabet packs input bits most-significant first into symbols of
``log2(len(symbols))`` bits and zero-fills the residual bits of the final
symbol. Because each symbol table is strictly ascending in code-point order,
comparing encoded strings of equal length compares the underlying bytes.

Available alphabets:

| name        | symbols                                                | 16 bytes |
|-------------|--------------------------------------------------------|----------|
| `hex`       | `0-9a-f`                                               | 32       |
| `base32hex` | RFC 4648 extended hex `0-9A-V`, unpadded               | 26       |
| `geohash`   | `0123456789bcdefghjkmnpqrstuvwxyz`                     | 26       |
| `lexical64` | `0-9`, `=`, `A-Z`, `_`, `a-z`                          | 22       |

The symbol tables are wire formats; reordering any of them breaks sortability
of previously stored values.
"""

from __future__ import annotations

import base64
import binascii
import string

from geotime.domain.errors import DecodeError
from geotime.interfaces.alphabet import Alphabet

__all__ = [
    "ALPHABETS",
    "Base32HexAlphabet",
    "GeohashAlphabet",
    "HexAlphabet",
    "Lexical64Alphabet",
]

HEX_SYMBOLS = string.digits + "abcdef"
BASE32HEX_SYMBOLS = string.digits + "ABCDEFGHIJKLMNOPQRSTUV"
GEOHASH_SYMBOLS = "0123456789bcdefghjkmnpqrstuvwxyz"
LEXICAL64_SYMBOLS = (
    string.digits + "=" + string.ascii_uppercase + "_" + string.ascii_lowercase
)

# pylint: disable=too-few-public-methods


class _BitPackedAlphabet(Alphabet):
    """Shared mechanics: symbol validation, length rules, canonical decoding.

    Subclasses set ``NAME`` and ``SYMBOLS`` and may override ``_encode`` /
    ``_decode`` to delegate to a standard-library codec; the default hooks
    perform the bit packing directly.
    """

    NAME: str  # e.g., "hex", "lexical64", ...
    SYMBOLS: str  # ascending rank order

    def __init__(self) -> None:
        size = len(self.SYMBOLS)
        if size < 2 or size & (size - 1):
            raise ValueError(
                f"{self.NAME}: symbol count must be a power of two, got {size}"
            )
        if any(a >= b for a, b in zip(self.SYMBOLS, self.SYMBOLS[1:])):
            raise ValueError(
                f"{self.NAME}: symbols must be strictly ascending by code point"
            )
        self._bits = size.bit_length() - 1
        self._ranks = {symbol: rank for rank, symbol in enumerate(self.SYMBOLS)}

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    @property
    def name(self) -> str:
        return self.NAME

    @property
    def symbols(self) -> str:
        return self.SYMBOLS

    @property
    def bits_per_symbol(self) -> int:
        """Number of input bits carried by one symbol."""
        return self._bits

    def encoded_length(self, n_bytes: int) -> int:
        return -(-n_bytes * 8 // self._bits)

    def encode(self, data: bytes) -> str:
        return self._encode(bytes(data))

    def decode(self, text: str) -> bytes:
        if not isinstance(text, str):
            raise DecodeError(
                self.NAME, text, f"expected str, got {type(text).__name__}"
            )
        for symbol in text:
            if symbol not in self._ranks:
                raise DecodeError(self.NAME, text, f"illegal symbol {symbol!r}")
        n_bytes, residual = divmod(len(text) * self._bits, 8)
        if residual >= self._bits:
            raise DecodeError(self.NAME, text, f"invalid length {len(text)}")
        data = self._decode(text, n_bytes)
        if self._encode(data) != text:
            raise DecodeError(self.NAME, text, "non-zero residual bits")
        return data

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def _encode(self, data: bytes) -> str:
        length = self.encoded_length(len(data))
        value = int.from_bytes(data, "big") << (length * self._bits - len(data) * 8)
        mask = (1 << self._bits) - 1
        out = []
        for _ in range(length):
            out.append(self.SYMBOLS[value & mask])
            value >>= self._bits
        return "".join(reversed(out))

    def _decode(self, text: str, n_bytes: int) -> bytes:
        value = 0
        for symbol in text:
            value = (value << self._bits) | self._ranks[symbol]
        residual = len(text) * self._bits - n_bytes * 8
        return (value >> residual).to_bytes(n_bytes, "big")


class HexAlphabet(_BitPackedAlphabet):
    """Lowercase hexadecimal, two symbols per byte."""

    NAME = "hex"
    SYMBOLS = HEX_SYMBOLS

    def _encode(self, data: bytes) -> str:
        return data.hex()

    def _decode(self, text: str, n_bytes: int) -> bytes:
        return bytes.fromhex(text)


class Base32HexAlphabet(_BitPackedAlphabet):
    """RFC 4648 base 32 with extended hex alphabet, padding stripped.

    Padding is redundant here: the unpadded length already determines the
    byte count, and ``=`` would sort below the digits.
    """

    NAME = "base32hex"
    SYMBOLS = BASE32HEX_SYMBOLS

    def _encode(self, data: bytes) -> str:
        return base64.b32hexencode(data).decode("ascii").rstrip("=")

    def _decode(self, text: str, n_bytes: int) -> bytes:
        padded = text + "=" * (-len(text) % 8)
        try:
            return base64.b32hexdecode(padded)
        except binascii.Error as err:
            raise DecodeError(self.NAME, text, str(err)) from err


class GeohashAlphabet(_BitPackedAlphabet):
    """Geohash's 32 symbols: digits and lowercase letters without a, i, l, o."""

    NAME = "geohash"
    SYMBOLS = GEOHASH_SYMBOLS


class Lexical64Alphabet(_BitPackedAlphabet):
    """64 URL-safe symbols ordered so that code-point order equals rank order."""

    NAME = "lexical64"
    SYMBOLS = LEXICAL64_SYMBOLS


ALPHABETS: dict[str, Alphabet] = {
    alphabet.name: alphabet
    for alphabet in (
        HexAlphabet(),
        Base32HexAlphabet(),
        GeohashAlphabet(),
        Lexical64Alphabet(),
    )
}
