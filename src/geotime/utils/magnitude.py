"""Metric-style magnitude abbreviation for large non-negative numbers.

Examples:
    ```python
    >>> format_magnitude(299_870_000.0)
    '299.87 M'
    >>> format_magnitude(12.0)
    '12.00'
    ```
"""

import math

SCALE_BASE = 1000.0
SUFFIXES = ("", "K", "M", "B", "T", "P", "E")


def format_magnitude(value: float, decimals: int = 2) -> str:
    """Abbreviate ``value`` with the largest fitting thousands suffix.

    Args:
        value: A finite, non-negative number.
        decimals: Digits after the decimal point.

    Returns:
        str: ``"<scaled> <suffix>"``, or just ``"<scaled>"`` below one thousand.

    Raises:
        ValueError: If ``value`` is negative, NaN or infinite.
    """
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"expected a finite non-negative number, got {value!r}")

    index = 0
    scaled = float(value)
    while scaled >= SCALE_BASE and index < len(SUFFIXES) - 1:
        scaled /= SCALE_BASE
        index += 1

    # 999.996 K prints as "1000.00 K"; carry it into the next suffix.
    if round(scaled, decimals) >= SCALE_BASE and index < len(SUFFIXES) - 1:
        scaled /= SCALE_BASE
        index += 1

    suffix = SUFFIXES[index]
    rendered = f"{scaled:.{decimals}f}"
    return f"{rendered} {suffix}" if suffix else rendered
