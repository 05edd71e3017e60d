from unittest import mock

import pytest
from flask import Flask

from bookshelf.app import create_app, home, main, method_override, setup_database
from bookshelf.context import Context
from bookshelf.memory import BookRepositoryOnMemory
from bookshelf.model import Book, BookName
from bookshelf.usecase import BookUsecase


@pytest.fixture
def book():
    return Book.new(BookName("Dune"))


@pytest.fixture
def context(book):
    return Context(BookUsecase(BookRepositoryOnMemory([book])))


@pytest.fixture
def client(context):
    return create_app(context).test_client()


@pytest.mark.parametrize(
    "method, query, expected",
    [
        ("POST", "_method=Delete", "DELETE"),
        ("POST", "_method=Put", "PUT"),
        ("GET", "_method=Delete", "GET"),
        ("POST", "", "POST"),
        ("POST", "a=1&_method=Put", "POST"),
        ("POST", "_method=Patch", "POST"),
    ],
)
def test_method_override(method, query, expected):
    assert method_override(method, query) == expected


def test_home():
    assert "<a href=books >books</a>" in home().get_data(as_text=True)


def test_list_route(client):
    response = client.get("/books")
    assert response.status_code == 200
    assert "Dune" in response.get_data(as_text=True)


def test_default_context_has_samples():
    body = create_app().test_client().get("/books").get_data(as_text=True)
    assert "Sample Book 1" in body


def test_create_page_reads_error_cookie(client):
    response = client.get("/books/create", headers={"Cookie": "error=error"})
    assert "<div>error</div>" in response.get_data(as_text=True)


def test_create_route(client, context):
    response = client.post("/books/create", data={"name": "Emma"})
    assert response.status_code == 303
    assert response.headers["Location"].endswith("/books")
    assert len(context.book_usecase.get_books()) == 2


def test_create_route_missing_field(client):
    assert client.post("/books/create", data={}).status_code == 400


def test_edit_route(client, book):
    body = client.get(f"/books/{book.id}").get_data(as_text=True)
    assert "value='Dune'" in body


def test_update_via_override(client, context, book):
    response = client.post(f"/books/{book.id}?_method=Put", data={"name": "Emma"})
    assert response.status_code == 303
    assert context.book_usecase.get_book(str(book.id)).name.value == "Emma"


def test_delete_via_override(client, context, book):
    response = client.post(f"/books/{book.id}?_method=Delete")
    assert response.status_code == 303
    assert context.book_usecase.get_books() == []


def test_plain_post_to_book_not_allowed(client):
    assert client.post("/books/anything").status_code == 405


def test_api_routes(client, context):
    assert client.get("/api/books").get_json() == {"name": ""}
    assert client.post("/api/books", json={"name": "Emma"}).status_code == 200
    assert client.post("/api/books", json={"name": ""}).status_code == 400
    assert len(context.book_usecase.get_books()) == 2


def test_setup_database(tmp_path):
    connection = setup_database(tmp_path / "books.sqlite3")
    tables = connection.execute(
        "SELECT name FROM sqlite_master WHERE type='table'"
    ).fetchall()
    assert ("books",) in tables
    connection.close()


def test_main_runs_server(tmp_path, capsys):
    with mock.patch.object(Flask, "run") as run:
        main(["--database", str(tmp_path / "db.sqlite3"), "--port", "5001"])
    assert run.call_args.kwargs == {"host": "localhost", "port": 5001}
    assert "running on http://localhost:5001" in capsys.readouterr().out
    assert (tmp_path / "db.sqlite3").exists()