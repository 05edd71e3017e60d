"""Book domain model: value objects, entity, errors and the repository contract."""

from __future__ import annotations

import json
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from datetime import datetime, timezone

MAX_NAME_BYTES = 255


class DomainError(Exception):
    """Base class for every error raised by the book domain."""


class InvalidBookName(DomainError):
    """A book name failed validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Invalid book name: {self.message}"


class BookNotFound(DomainError):
    """No book exists with the given id."""

    def __init__(self, book_id: BookId) -> None:
        super().__init__(book_id)
        self.book_id = book_id

    def __str__(self) -> str:
        return f"Book not found: {self.book_id!r}"


class ValidationError(DomainError):
    """Input could not be validated."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__(self.errors)

    def __str__(self) -> str:
        return f"Validation errors: {json.dumps(self.errors)}"


class DatabaseError(DomainError):
    """The storage backend failed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Database error: {self.message}"


class BookName:
    """A validated, trimmed book name."""

    __slots__ = ("_value",)

    def __init__(self, name: str) -> None:
        if not name.strip():
            raise InvalidBookName("Name cannot be empty")
        if len(name.encode("utf-8")) > MAX_NAME_BYTES:
            raise InvalidBookName("Name cannot exceed 255 characters")
        self._value = name.strip()

    @property
    def value(self) -> str:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BookName):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"BookName({self._value!r})"

    def __str__(self) -> str:
        return self._value


@dataclass(frozen=True, repr=False)
class BookId:
    """Identifier of a book, backed by a UUID."""

    value: uuid.UUID

    @staticmethod
    def new() -> BookId:
        """Return a fresh random id."""
        return BookId(uuid.uuid4())

    @staticmethod
    def from_string(text: str) -> BookId:
        """Parse an id from its textual form."""
        if not isinstance(text, str):
            raise ValidationError(["Invalid UUID format"])
        try:
            return BookId(uuid.UUID(text))
        except ValueError:
            raise ValidationError(["Invalid UUID format"]) from None

    def __repr__(self) -> str:
        return f"BookId({self.value})"

    def __str__(self) -> str:
        return str(self.value)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


@dataclass(frozen=True)
class Book:
    """A book with its id, name and naive-UTC creation time."""

    id: BookId
    name: BookName
    created_at: datetime

    @staticmethod
    def new(name: BookName) -> Book:
        """Create a book with a fresh id, stamped with the current time."""
        return Book(id=BookId.new(), name=name, created_at=_utc_now())

    def update_name(self, new_name: BookName) -> Book:
        """Return a copy of this book with a different name."""
        return replace(self, name=new_name)


class BookRepository(ABC):
    """Storage for books."""

    @abstractmethod
    def find(self, book_id: BookId) -> Book:
        """Return the book with this id or raise BookNotFound."""

    @abstractmethod
    def list(self) -> list[Book]:
        """Return every stored book."""

    @abstractmethod
    def save(self, book: Book) -> None:
        """Store a new book."""

    @abstractmethod
    def update(self, book: Book) -> None:
        """Replace a stored book with the same id."""

    @abstractmethod
    def delete(self, book_id: BookId) -> None:
        """Remove the book with this id."""