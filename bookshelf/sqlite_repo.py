"""Book repository backed by SQLite."""

from __future__ import annotations

import sqlite3
import sys
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from bookshelf.model import (
    Book,
    BookId,
    BookName,
    BookNotFound,
    BookRepository,
    DatabaseError,
    DomainError,
    ValidationError,
)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS books (
    id TEXT PRIMARY KEY NOT NULL,
    name TEXT NOT NULL,
    created_at DATETIME NOT NULL,
    updated_at DATETIME NOT NULL
)
"""

_COLUMNS = "id, name, created_at"


def ensure_schema(connection: sqlite3.Connection) -> None:
    """Create the books table if it does not exist."""
    with connection:
        connection.execute(_SCHEMA)


def _format_time(moment: datetime) -> str:
    return moment.isoformat(sep=" ")


def book_from_row(row: Any) -> Book:
    """Build a book from an (id, name, created_at) row or mapping."""
    if isinstance(row, Mapping):
        raw_id, raw_name, raw_created = row.get("id"), row.get("name"), row.get("created_at")
    else:
        raw_id, raw_name, raw_created = row

    if raw_id is None:
        raise DatabaseError("Missing id")
    try:
        book_id = BookId.from_string(raw_id)
    except ValidationError:
        raise DatabaseError("Invalid UUID format") from None

    if raw_name is None:
        raise DatabaseError("Missing name")
    name = BookName(raw_name)

    if raw_created is None:
        raise DatabaseError("Missing name")
    if isinstance(raw_created, datetime):
        created_at = raw_created
    else:
        try:
            created_at = datetime.fromisoformat(str(raw_created))
        except ValueError:
            raise DatabaseError("Invalid created_at format") from None

    return Book(id=book_id, name=name, created_at=created_at)


class SqliteBookRepository(BookRepository):
    """Repository storing books in the ``books`` table."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection

    def find(self, book_id: BookId) -> Book:
        try:
            row = self._connection.execute(
                f"SELECT {_COLUMNS} FROM books WHERE id = ?", (str(book_id),)
            ).fetchone()
        except sqlite3.Error as err:
            raise DatabaseError(f"Failed to find book: {err}") from err
        if row is None:
            raise BookNotFound(book_id)
        return book_from_row(row)

    def list(self) -> list[Book]:
        try:
            rows = self._connection.execute(
                f"SELECT {_COLUMNS} FROM books ORDER BY created_at DESC"
            ).fetchall()
        except sqlite3.Error as err:
            print(f"Database error in list: {err}", file=sys.stderr)
            return []

        books = []
        for row in rows:
            try:
                books.append(book_from_row(row))
            except DomainError:
                continue
        return books

    def save(self, book: Book) -> None:
        stamp = _format_time(book.created_at)
        try:
            with self._connection:
                self._connection.execute(
                    "INSERT INTO books (id, name, created_at, updated_at) VALUES (?, ?, ?, ?)",
                    (str(book.id), book.name.value, stamp, stamp),
                )
        except sqlite3.Error as err:
            raise DatabaseError(f"Failed to save book: {err}") from err

    def update(self, book: Book) -> None:
        try:
            with self._connection:
                self._connection.execute(
                    "UPDATE books SET name = ? WHERE id = ?",
                    (book.name.value, str(book.id)),
                )
        except sqlite3.Error as err:
            raise DatabaseError(f"Failed to update book: {err}") from err

    def delete(self, book_id: BookId) -> None:
        try:
            with self._connection:
                self._connection.execute("DELETE FROM books WHERE id = ?", (str(book_id),))
        except sqlite3.Error as err:
            raise DatabaseError(f"Failed to delete book: {err}") from err