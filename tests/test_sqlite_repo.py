import sqlite3
from datetime import datetime, timedelta

import pytest

from bookshelf.model import Book, BookId, BookName, BookNotFound, DatabaseError, InvalidBookName
from bookshelf.sqlite_repo import SqliteBookRepository, book_from_row, ensure_schema


@pytest.fixture
def connection():
    conn = sqlite3.connect(":memory:")
    ensure_schema(conn)
    yield conn
    conn.close()


@pytest.fixture
def repo(connection):
    return SqliteBookRepository(connection)


def make_book(name, created_at):
    return Book(id=BookId.new(), name=BookName(name), created_at=created_at)


def test_save_and_find_round_trip(repo):
    book = Book.new(BookName("Sample Book 1"))
    repo.save(book)
    assert repo.find(book.id) == book


def test_list_is_newest_first(repo):
    base = datetime(2024, 1, 1, 12, 0, 0)
    old = make_book("old", base)
    new = make_book("new", base + timedelta(seconds=1, microseconds=500))
    repo.save(old)
    repo.save(new)
    assert repo.list() == [new, old]


def test_list_without_table_is_empty():
    repo = SqliteBookRepository(sqlite3.connect(":memory:"))
    assert repo.list() == []


def test_list_skips_invalid_rows(connection, repo):
    book = Book.new(BookName("Sample Book 1"))
    repo.save(book)
    with connection:
        connection.execute(
            "INSERT INTO books (id, name, created_at, updated_at) VALUES (?, ?, ?, ?)",
            ("bad-id", "x", "2024-01-01 00:00:00", "2024-01-01 00:00:00"),
        )
    assert repo.list() == [book]


def test_find_missing_raises(repo):
    missing = BookId.new()
    with pytest.raises(BookNotFound) as info:
        repo.find(missing)
    assert info.value.book_id == missing


def test_save_duplicate_raises(repo):
    book = Book.new(BookName("Sample Book 1"))
    repo.save(book)
    with pytest.raises(DatabaseError) as info:
        repo.save(book)
    assert info.value.message.startswith("Failed to save book: ")


def test_update_changes_name(repo):
    book = Book.new(BookName("Sample Book 1"))
    repo.save(book)
    repo.update(book.update_name(BookName("Sample Book 2")))
    found = repo.find(book.id)
    assert found.name.value == "Sample Book 2"
    assert found.created_at == book.created_at


def test_delete_removes_row(repo):
    book = Book.new(BookName("Sample Book 1"))
    repo.save(book)
    repo.delete(book.id)
    assert repo.list() == []


def test_write_without_table_raises():
    repo = SqliteBookRepository(sqlite3.connect(":memory:"))
    with pytest.raises(DatabaseError) as info:
        repo.delete(BookId.new())
    assert info.value.message.startswith("Failed to delete book: ")


def test_book_from_row_accepts_mapping():
    book_id = BookId.new()
    stamp = datetime(2024, 5, 6, 7, 8, 9)
    book = book_from_row({"id": str(book_id), "name": " Sample Book 1 ", "created_at": stamp})
    assert book == Book(id=book_id, name=BookName("Sample Book 1"), created_at=stamp)


@pytest.mark.parametrize(
    "row, message",
    [
        ((None, "x", "2024-01-01 00:00:00"), "Missing id"),
        (("nope", "x", "2024-01-01 00:00:00"), "Invalid UUID format"),
        ((None, None, None), "Missing id"),
    ],
)
def test_book_from_row_errors(row, message):
    with pytest.raises(DatabaseError) as info:
        book_from_row(row)
    assert info.value.message == message


def test_book_from_row_missing_name_and_time():
    book_id = str(BookId.new())
    with pytest.raises(DatabaseError) as info:
        book_from_row((book_id, None, "2024-01-01 00:00:00"))
    assert info.value.message == "Missing name"
    with pytest.raises(DatabaseError):
        book_from_row((book_id, "x", None))


def test_book_from_row_invalid_name():
    with pytest.raises(InvalidBookName):
        book_from_row((str(BookId.new()), "   ", "2024-01-01 00:00:00"))