"""Application service for managing books."""

from __future__ import annotations

from dataclasses import dataclass

from bookshelf.model import Book, BookId, BookName, BookRepository, DomainError


@dataclass(frozen=True)
class CreateBookInput:
    """Data needed to create a book."""

    name: str


@dataclass(frozen=True)
class UpdateBookInput:
    """Data needed to rename a book."""

    name: str


class BookCreationError(Exception):
    """A book could not be created from the given input."""

    def __init__(self, message: str = "error") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class BookUsecase:
    """Book operations on top of a repository."""

    def __init__(self, repository: BookRepository) -> None:
        self._repository = repository

    def get_books(self) -> list[Book]:
        return self._repository.list()

    def get_book(self, book_id: str) -> Book:
        return self._repository.find(BookId.from_string(book_id))

    def create_book(self, data: CreateBookInput) -> None:
        """Create a book; storage failures are ignored, bad names are not."""
        try:
            name = BookName(data.name)
        except DomainError:
            raise BookCreationError("error") from None
        try:
            self._repository.save(Book.new(name))
        except DomainError:
            pass

    def update_book(self, book_id: str, data: UpdateBookInput) -> None:
        existing = self._repository.find(BookId.from_string(book_id))
        new_name = BookName(data.name)
        self._repository.update(existing.update_name(new_name))

    def delete_book(self, book_id: str) -> None:
        self._repository.delete(BookId.from_string(book_id))