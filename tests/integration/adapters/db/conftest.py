"""SQLite fixtures for column-type integration tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
import sqlalchemy as sa
from sqlalchemy.engine import URL

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


@pytest.fixture
def sqlite_engine_file(tmp_path: Path) -> Iterator[Engine]:
    """File-backed SQLite engine, one database file per test.

    Yields:
        Engine: SQLAlchemy engine pointing at a temp file DB.
    """
    url = URL.create("sqlite+pysqlite", database=str(tmp_path / "test.db"))
    engine = sa.create_engine(url)
    yield engine
    engine.dispose()
