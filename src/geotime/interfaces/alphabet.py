"""Interface for textual alphabets used by the order-preserving codec."""

import abc


class Alphabet(abc.ABC):
    """Contract for a byte-to-text alphabet whose symbol order is its sort order.

    Implementations must satisfy, for byte strings ``a`` and ``b`` of equal
    length:

    - ``decode(encode(a)) == a``
    - ``a < b`` if and only if ``encode(a) < encode(b)``
    - ``len(encode(a))`` depends only on ``len(a)``

    ``decode`` must reject (never repair) text containing foreign symbols, a
    symbol count no whole number of bytes encodes to, or non-canonical residual
    bits.
    """

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Short registry name, e.g. ``"hex"``."""

    @property
    @abc.abstractmethod
    def symbols(self) -> str:
        """Output symbols in ascending rank order."""

    @abc.abstractmethod
    def encoded_length(self, n_bytes: int) -> int:
        """Number of symbols produced for ``n_bytes`` of input."""

    @abc.abstractmethod
    def encode(self, data: bytes) -> str:
        """Encode ``data`` to text."""

    @abc.abstractmethod
    def decode(self, text: str) -> bytes:
        """Decode ``text`` back to the original bytes."""
