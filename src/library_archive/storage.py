"""
Archive file persistence for library-archive.

The catalog is written to a SQLite database file: one row per item in
``catalog_items`` (ordered by ``position``) and a small ``archive_meta``
table recording the format version.
"""

import logging
import sqlite3
from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING

from .errors import MalformedArchiveError, PersistenceError
from .models import CatalogItem, item_from_dict

if TYPE_CHECKING:
    from .archive import CatalogArchive

logger = logging.getLogger(__name__)

FORMAT_VERSION = "1"

SCHEMA = """
CREATE TABLE IF NOT EXISTS archive_meta (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS catalog_items (
    position INTEGER PRIMARY KEY,
    kind TEXT NOT NULL,
    isbn TEXT NOT NULL,
    title TEXT NOT NULL,
    publication_year INTEGER NOT NULL,

    -- book fields
    author TEXT,
    genre TEXT,
    num_pages INTEGER,

    -- magazine fields
    issue_number INTEGER,
    periodicity TEXT,

    CHECK (kind IN ('book', 'magazine')),
    CHECK (kind <> 'book' OR (author IS NOT NULL AND genre IS NOT NULL AND num_pages IS NOT NULL)),
    CHECK (kind <> 'magazine' OR (issue_number IS NOT NULL AND periodicity IS NOT NULL))
);
"""

ITEM_COLUMNS = (
    "kind",
    "isbn",
    "title",
    "publication_year",
    "author",
    "genre",
    "num_pages",
    "issue_number",
    "periodicity",
)


class ArchiveStorage:
    """Reads and writes the catalog item sequence to one archive file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _connect(self, read_only: bool = False) -> sqlite3.Connection:
        if read_only:
            # mode=ro never creates the file
            conn = sqlite3.connect(f"{self.path.resolve().as_uri()}?mode=ro", uri=True)
        else:
            conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        return conn

    def save(self, items: Iterable[CatalogItem]) -> None:
        """
        Replace the file's contents with the given items, in order.

        Raises PersistenceError if the file cannot be written.
        """
        rows = []
        for position, item in enumerate(items):
            data = item.to_dict()
            rows.append((position, *(data.get(column) for column in ITEM_COLUMNS)))

        try:
            conn = self._connect()
        except sqlite3.Error as e:
            raise PersistenceError("save", self.path, e) from e

        try:
            conn.executescript(SCHEMA)
            with conn:
                conn.execute("DELETE FROM catalog_items")
                conn.executemany(
                    f"""
                    INSERT INTO catalog_items (position, {", ".join(ITEM_COLUMNS)})
                    VALUES ({", ".join("?" * (len(ITEM_COLUMNS) + 1))})
                    """,
                    rows,
                )
                conn.executemany(
                    "INSERT OR REPLACE INTO archive_meta (key, value) VALUES (?, ?)",
                    [
                        ("format_version", FORMAT_VERSION),
                        ("saved_ts", datetime.now(UTC).isoformat()),
                    ],
                )
        except (sqlite3.Error, OSError, OverflowError, UnicodeEncodeError) as e:
            # OverflowError: int beyond 64 bits; UnicodeEncodeError: lone surrogate
            raise PersistenceError("save", self.path, e) from e
        finally:
            conn.close()

        logger.info(f"Saved {len(rows)} item(s) to {self.path}")

    def load(self) -> list[CatalogItem]:
        """
        Read the full item sequence from the file.

        Raises PersistenceError if the file is missing or unreadable, and
        MalformedArchiveError if it does not hold a valid item sequence.
        """
        if not self.path.is_file():
            raise PersistenceError("load", self.path, "file not found")

        try:
            conn = self._connect(read_only=True)
        except sqlite3.Error as e:
            raise PersistenceError("load", self.path, e) from e

        try:
            meta = conn.execute(
                "SELECT value FROM archive_meta WHERE key = 'format_version'"
            ).fetchone()
            cursor = conn.execute(
                f"SELECT {', '.join(ITEM_COLUMNS)} FROM catalog_items ORDER BY position ASC"
            )
            rows = [dict(row) for row in cursor.fetchall()]
        except sqlite3.OperationalError as e:
            # "no such table/column": a SQLite file, but not an archive
            if str(e).startswith("no such"):
                raise MalformedArchiveError("load", self.path, e) from e
            raise PersistenceError("load", self.path, e) from e
        except sqlite3.DatabaseError as e:
            # Not a SQLite file at all
            raise MalformedArchiveError("load", self.path, e) from e
        finally:
            conn.close()

        if meta is None or meta["value"] != FORMAT_VERSION:
            found = meta["value"] if meta else None
            raise MalformedArchiveError(
                "load", self.path, f"unsupported format version {found!r}"
            )

        try:
            items = [item_from_dict(row) for row in rows]
        except (KeyError, ValueError) as e:
            raise MalformedArchiveError("load", self.path, e) from e

        logger.info(f"Loaded {len(items)} item(s) from {self.path}")
        return items


def save_archive(archive: "CatalogArchive", path: Path) -> None:
    """Write every item of an archive to ``path``."""
    ArchiveStorage(path).save(archive.items())


def load_archive(path: Path) -> list[CatalogItem]:
    """Read the item sequence stored at ``path``."""
    return ArchiveStorage(path).load()
