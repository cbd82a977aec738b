"""Fixtures for alphabet and codec contract tests."""

from collections.abc import Iterable

import pytest

from geotime.adapters.alphabets import (
    Base32HexAlphabet,
    GeohashAlphabet,
    HexAlphabet,
    Lexical64Alphabet,
)
from geotime.domain.lexical import LexicalCodec
from geotime.interfaces.alphabet import Alphabet


@pytest.fixture(scope="module", params=["hex", "base32hex", "geohash", "lexical64"])
def alphabet(request: pytest.FixtureRequest) -> Iterable[Alphabet]:
    """Return an Alphabet instance for the requested encoding.

    Module scoped: alphabets are stateless, and hypothesis tests reject
    function-scoped fixtures.

    Extend by adding new identifiers to `params` and branching below to
    construct the corresponding alphabet.
    """
    match request.param:
        case "hex":
            yield HexAlphabet()
        case "base32hex":
            yield Base32HexAlphabet()
        case "geohash":
            yield GeohashAlphabet()
        case "lexical64":
            yield Lexical64Alphabet()
        case _:
            raise ValueError(f"unknown alphabet: {request.param}")


@pytest.fixture(scope="module")
def lexical_codec(alphabet: Alphabet) -> LexicalCodec:  # pylint: disable=redefined-outer-name
    """Wrap the current alphabet in a codec."""
    return LexicalCodec(alphabet)
