"""
In-memory SQLite data context for the product store.

``AppDbContext`` owns a named in-memory database opened in SQLite's
shared-cache mode.  Every connection made through the same URI sees the
same tables, so the context keeps one anchor connection open for its
whole lifetime; when the anchor is closed the store disappears.  Nothing
is ever written to disk.

The schema is created when the context is opened.  Rows only enter the
store through ``seed``; request handling never writes.
"""

import json
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Mapping, Union

from northwind_api.app.schemas.product import ProductSeed

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS products (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    price REAL NOT NULL
);
"""


def memory_uri(name: str) -> str:
    """Return the SQLite URI of the shared in-memory database ``name``."""
    return f"file:{name}?mode=memory&cache=shared"


class AppDbContext:
    """Owns the in-memory product store and exposes query access."""

    def __init__(self, name: str = "NorthwindDb") -> None:
        self.name = name
        self.uri = memory_uri(name)
        self._anchor = sqlite3.connect(self.uri, uri=True)
        self._anchor.executescript(SCHEMA)
        self._closed = False
        logger.info("Opened in-memory product store %r", name)

    @property
    def closed(self) -> bool:
        return self._closed

    def connect(self) -> sqlite3.Connection:
        """Open a new connection to the store.

        Rows are returned as ``sqlite3.Row`` objects so columns can be
        read by name.  The caller is responsible for closing it.
        """
        if self._closed:
            raise RuntimeError(f"Product store {self.name!r} is closed")
        conn = sqlite3.connect(self.uri, uri=True)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor, committing on success and always closing the connection."""
        conn = self.connect()
        try:
            yield conn.cursor()
            conn.commit()
        finally:
            conn.close()

    def products(self) -> List[sqlite3.Row]:
        """Return every stored product row ordered by id."""
        with self.cursor() as cursor:
            return cursor.execute("SELECT id, name, price FROM products ORDER BY id").fetchall()

    def seed(self, products: Iterable[Union[ProductSeed, Mapping[str, Any]]]) -> int:
        """Insert ``products`` in a single transaction.

        Items may be ``ProductSeed`` instances or plain mappings.  A
        missing ``id`` is assigned by SQLite.  Raises ``ValueError`` if
        an item is malformed or an id is already taken; in that case
        nothing from the batch is stored.
        """
        items = []
        for p in products:
            if isinstance(p, ProductSeed):
                items.append(p)
            elif isinstance(p, Mapping):
                items.append(ProductSeed(**p))
            else:
                raise ValueError(f"Cannot seed product store {self.name!r} with {p!r}")
        conn = self.connect()
        try:
            with conn:
                conn.executemany(
                    "INSERT INTO products (id, name, price) VALUES (?, ?, ?)",
                    [(p.id, p.name, p.price) for p in items],
                )
        except sqlite3.IntegrityError as exc:
            raise ValueError(f"Cannot seed product store {self.name!r}: {exc}") from exc
        finally:
            conn.close()
        logger.info("Seeded %d products into %r", len(items), self.name)
        return len(items)

    def close(self) -> None:
        """Close the anchor connection, discarding the store."""
        if self._closed:
            return
        self._anchor.close()
        self._closed = True
        logger.info("Closed in-memory product store %r", self.name)

    def __enter__(self) -> "AppDbContext":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.close()
        return False


def load_seed_file(path: Union[str, Path]) -> List[ProductSeed]:
    """Read a JSON array of product objects from ``path``.

    Raises ``ValueError`` if the file is not valid JSON, is not an array
    or contains entries that are not product objects.
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Seed file {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise ValueError(f"Seed file {path} must contain a JSON array")
    seeds = []
    for item in data:
        if not isinstance(item, dict):
            raise ValueError(f"Seed file {path} contains a non-object entry: {item!r}")
        seeds.append(ProductSeed(**item))
    return seeds
