"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class GeotimeError(Exception):
    """Base class for geotime errors."""


class RangeError(GeotimeError):
    """Raised when an integer does not fit in the requested signed width."""

    def __init__(self, value: int, bits: int) -> None:
        super().__init__(f"Value {value} does not fit in a {bits}-bit signed integer.")
        self.value = value
        self.bits = bits


class ConversionError(GeotimeError):
    """Raised when a millisecond offset cannot be represented as a datetime."""

    def __init__(self, millis: int) -> None:
        super().__init__(
            f"Millisecond offset {millis} is outside the range of a calendar datetime."
        )
        self.millis = millis


# ============================================================================
#                           Codec related errors
# ============================================================================


class DecodeError(GeotimeError):
    """Raised when encoded text is not a well-formed payload for its alphabet."""

    def __init__(self, alphabet: str, text: object, reason: str) -> None:
        super().__init__(f"Cannot decode {text!r} as {alphabet}: {reason}.")
        self.alphabet = alphabet
        self.text = text
        self.reason = reason


class UnknownAlphabetError(GeotimeError, KeyError):
    """Raised when an alphabet name is not registered."""

    def __init__(self, name: str, known: tuple[str, ...]) -> None:
        super().__init__(
            f"Unknown alphabet '{name}'. Expected one of: {', '.join(known)}."
        )
        self.name = name
        self.known = known

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])
