"""In-memory book repository."""

from __future__ import annotations

import threading
from collections.abc import Iterable

from bookshelf.model import Book, BookId, BookName, BookNotFound, BookRepository


class BookRepositoryOnMemory(BookRepository):
    """Thread-safe repository holding books in a list."""

    def __init__(self, books: Iterable[Book] | None = None) -> None:
        if books is None:
            books = [
                Book.new(BookName("Sample Book 1")),
                Book.new(BookName("Sample Book 2")),
            ]
        self._books = list(books)
        self._lock = threading.Lock()

    def list(self) -> list[Book]:
        with self._lock:
            return list(self._books)

    def save(self, book: Book) -> None:
        with self._lock:
            self._books.append(book)

    def find(self, book_id: BookId) -> Book:
        with self._lock:
            for book in self._books:
                if book.id == book_id:
                    return book
        raise BookNotFound(book_id)

    def update(self, book: Book) -> None:
        with self._lock:
            for pos, current in enumerate(self._books):
                if current.id == book.id:
                    self._books[pos] = book
                    return
        raise BookNotFound(book.id)

    def delete(self, book_id: BookId) -> None:
        with self._lock:
            remaining = [book for book in self._books if book.id != book_id]
            removed = len(remaining) < len(self._books)
            self._books = remaining
        if not removed:
            raise BookNotFound(book_id)