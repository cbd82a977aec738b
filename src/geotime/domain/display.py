"""Best-effort human-readable rendering of ``WideTime`` values.

Rendering degrades through three tiers and never raises:

1. A calendar string via ``strftime`` when the value is a valid ``datetime``,
   or its ISO 8601 form when ``strftime`` rejects the pattern.
2. An abbreviated year count (``"299.87 M years from now"``) otherwise.
3. The raw value (``"WideTime(-1701...) ms ago"``) once the year count is too
   large to trust floating-point arithmetic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from geotime.domain.errors import ConversionError, RangeError
from geotime.utils.magnitude import format_magnitude

if TYPE_CHECKING:
    from geotime.domain.wide_time import WideTime

__all__ = ["MS_PER_APPROX_YEAR", "YEARS_CEILING", "display"]

# Rough order-of-magnitude year; intentionally 356 days.
MS_PER_APPROX_YEAR = 356 * 24 * 60 * 60 * 1000
YEARS_CEILING = 1e12

PAST = "ago"
FUTURE = "from now"


def display(wide_time: WideTime, fmt: str) -> str:
    """Render ``wide_time`` with ``fmt``, falling back to magnitude descriptions.

    Args:
        wide_time: The value to render.
        fmt: A ``strftime`` pattern used when the value is a calendar instant.

    Returns:
        str: The rendered text.
    """
    try:
        instant = wide_time.to_instant()
    except (RangeError, ConversionError):
        instant = None

    if instant is not None:
        try:
            return instant.strftime(fmt)
        except ValueError:
            # Patterns the C library cannot encode.
            return instant.isoformat()

    direction = PAST if wide_time.ms < 0 else FUTURE
    years = abs(float(wide_time.ms) / MS_PER_APPROX_YEAR)
    if years < YEARS_CEILING:
        return f"{format_magnitude(years)} years {direction}"
    return f"{wide_time!r} ms {direction}"
