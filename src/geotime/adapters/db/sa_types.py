"""Custom SQLAlchemy types for geotime.

``LexicalWideTime`` stores a ``WideTime`` as its fixed-length lexical string so
that ``ORDER BY`` and range predicates on the column follow numeric order.
String comparison must be by code point, so PostgreSQL columns are declared
with the ``"C"`` collation; SQLite's default ``BINARY`` collation already
compares that way.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator

from geotime.adapters.alphabets import ALPHABETS
from geotime.config import DEFAULT_ALPHABET
from geotime.domain.errors import UnknownAlphabetError
from geotime.domain.lexical import LexicalCodec
from geotime.domain.wide_time import WideTime

if TYPE_CHECKING:
    from sqlalchemy.engine.interfaces import Dialect

__all__ = ["CODE_POINT_COLLATIONS", "LexicalWideTime"]

# Backends whose default collation is locale-aware; others compare by code point.
CODE_POINT_COLLATIONS = {"postgresql": "C"}


class LexicalWideTime(TypeDecorator[WideTime]):  # pylint: disable=too-many-ancestors
    """``WideTime`` column persisted as order-preserving text.

    Args:
        alphabet: Registered alphabet name used for the stored text.

    Raises:
        UnknownAlphabetError: If ``alphabet`` is not registered.
    """

    impl = String
    cache_ok = True

    def __init__(self, alphabet: str = DEFAULT_ALPHABET) -> None:
        if alphabet not in ALPHABETS:
            raise UnknownAlphabetError(alphabet, tuple(ALPHABETS))
        self.alphabet = alphabet
        self._codec = LexicalCodec(ALPHABETS[alphabet])
        super().__init__(self._codec.length)

    def load_dialect_impl(self, dialect: Dialect) -> Any:
        collation = CODE_POINT_COLLATIONS.get(dialect.name)
        return dialect.type_descriptor(String(self._codec.length, collation=collation))

    def process_bind_param(self, value: WideTime | None, dialect: Dialect) -> Any:
        if value is None:
            return None
        if not isinstance(value, WideTime):
            raise TypeError(
                f"LexicalWideTime expects WideTime values, got {type(value).__name__}"
            )
        return self._codec.encode(value)

    def process_result_value(self, value: Any, dialect: Dialect) -> WideTime | None:
        if value is None:
            return None
        return self._codec.decode(value)

    # make pylint happy

    def process_literal_param(self, value: WideTime | None, dialect: Dialect) -> Any:
        # just reuse bind logic for literal rendering
        return self.process_bind_param(value, dialect)

    @property
    def python_type(self) -> type[WideTime]:
        return WideTime
