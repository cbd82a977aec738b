"""Configuration utilities for geotime.

This module centralizes small helpers and constants related to application
configuration. Values come from the environment so the CLI and library callers
share the same defaults.
"""

import os

from geotime.adapters.alphabets import ALPHABETS
from geotime.domain.errors import UnknownAlphabetError

ALPHABET_ENV_VAR = "GEOTIME_ALPHABET"  # pragma: no mutate
DISPLAY_FORMAT_ENV_VAR = "GEOTIME_DISPLAY_FORMAT"  # pragma: no mutate

DEFAULT_ALPHABET = "lexical64"
DEFAULT_DISPLAY_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"


def get_default_alphabet() -> str:
    """Get the default alphabet name from the environment.

    Returns:
        The value of `GEOTIME_ALPHABET`, or `lexical64` when unset or empty.

    Raises:
        UnknownAlphabetError: If `GEOTIME_ALPHABET` names no registered alphabet.
    """
    name = os.environ.get(ALPHABET_ENV_VAR) or DEFAULT_ALPHABET
    if name not in ALPHABETS:
        raise UnknownAlphabetError(name, tuple(ALPHABETS))
    return name


def get_display_format() -> str:
    """Get the default ``strftime`` pattern used for display.

    Returns:
        The value of `GEOTIME_DISPLAY_FORMAT`, or an ISO-8601-like pattern
        when unset or empty.
    """
    return os.environ.get(DISPLAY_FORMAT_ENV_VAR) or DEFAULT_DISPLAY_FORMAT
