"""The 128-bit millisecond timestamp value object.

A ``WideTime`` counts milliseconds from the Unix epoch (1970-01-01T00:00:00 UTC)
in a signed 128-bit integer, which spans far beyond anything a calendar
``datetime`` can hold. Narrowing back to 64-bit milliseconds or to a
``datetime`` is therefore fallible and raises a domain error when the value
does not fit.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import ClassVar

from geotime.domain.errors import ConversionError, RangeError

__all__ = ["EPOCH", "WideTime", "check_signed"]

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_US_PER_MS = 1_000
_US_PER_SECOND = 1_000_000
_SECONDS_PER_DAY = 86_400


def check_signed(value: int, bits: int) -> int:
    """Return ``value`` unchanged if it fits in a ``bits``-wide signed integer.

    Raises:
        TypeError: If ``value`` is not an ``int`` (``bool`` is rejected too).
        RangeError: If ``value`` is outside ``[-2**(bits-1), 2**(bits-1) - 1]``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")
    bound = 1 << (bits - 1)
    if not -bound <= value < bound:
        raise RangeError(value, bits)
    return value


@dataclass(frozen=True, order=True, repr=False)
class WideTime:
    """Immutable signed 128-bit count of milliseconds since the epoch.

    Equality, ordering and hashing are those of the wrapped integer.
    """

    ms: int

    BITS: ClassVar[int] = 128

    def __post_init__(self) -> None:
        check_signed(self.ms, self.BITS)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.ms})"

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_narrow(cls, n: int, bits: int = 64) -> WideTime:
        """Widen a 32- or 64-bit signed millisecond count."""
        if bits not in (32, 64):
            raise ValueError(f"narrow width must be 32 or 64 bits, got {bits}")
        return cls(check_signed(n, bits))

    @classmethod
    def from_wide(cls, n: int) -> WideTime:
        """Wrap a 128-bit signed millisecond count."""
        return cls(n)

    @classmethod
    def from_instant(cls, instant: datetime) -> WideTime:
        """Project a calendar instant onto milliseconds since the epoch.

        Naive datetimes are taken to be UTC. Precision finer than a millisecond
        is truncated toward zero.
        """
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        delta = instant - EPOCH
        micros = (
            delta.days * _SECONDS_PER_DAY + delta.seconds
        ) * _US_PER_SECOND + delta.microseconds
        millis = micros // _US_PER_MS if micros >= 0 else -(-micros // _US_PER_MS)
        return cls(millis)

    @classmethod
    def now(cls) -> WideTime:
        """Capture the current UTC wall-clock time."""
        return cls.from_instant(datetime.now(timezone.utc))

    # ------------------------------------------------------------------
    # Narrowing accessors
    # ------------------------------------------------------------------

    def to_millis(self) -> int:
        """Return the offset as a 64-bit signed millisecond count.

        Raises:
            RangeError: If the value does not fit in 64 bits.
        """
        return check_signed(self.ms, 64)

    def to_instant(self) -> datetime:
        """Return the offset as an aware UTC ``datetime``.

        Raises:
            RangeError: If the value does not fit in 64-bit milliseconds.
            ConversionError: If ``datetime`` cannot represent the instant.
        """
        millis = self.to_millis()
        # floor division keeps the sub-second part non-negative before the epoch
        seconds, remainder = divmod(millis, 1000)
        try:
            return EPOCH + timedelta(seconds=seconds, milliseconds=remainder)
        except OverflowError as err:
            raise ConversionError(millis) from err

    def display(self, fmt: str) -> str:
        """Render for humans; see :func:`geotime.domain.display.display`."""
        from geotime.domain.display import (  # pylint: disable=import-outside-toplevel
            display,
        )

        return display(self, fmt)
