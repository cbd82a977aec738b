"""geotime

128-bit millisecond timestamps with fixed-length text encodings whose plain
string order matches time order, plus a display formatter that degrades
gracefully for values far outside the calendar range.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
