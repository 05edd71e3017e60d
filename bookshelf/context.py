"""Application wiring: which repository backs the book use case."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

from bookshelf.memory import BookRepositoryOnMemory
from bookshelf.sqlite_repo import SqliteBookRepository
from bookshelf.usecase import BookUsecase


@dataclass
class Context:
    """Services shared by request handlers."""

    book_usecase: BookUsecase

    @classmethod
    def init(cls) -> Context:
        """A context backed by an in-memory repository with sample books."""
        return cls(BookUsecase(BookRepositoryOnMemory()))

    @classmethod
    def init_with_db(cls, connection: sqlite3.Connection) -> Context:
        """A context backed by the given SQLite connection."""
        return cls(BookUsecase(SqliteBookRepository(connection)))