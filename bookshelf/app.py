"""The web application: routes, method override and the server entry point."""

from __future__ import annotations

import argparse
import sqlite3
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from flask import Flask, Response, abort, request

from bookshelf import api, html, pages
from bookshelf.context import Context
from bookshelf.sqlite_repo import ensure_schema

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 5000
DEFAULT_DATABASE = "./database.sqlite3"

_HOME = """
    <div>
        <ul>
            <li>
                <a href=books >books</a>
            </li>
        </ul>
    </div>
    """

_OVERRIDES = {"Delete": "DELETE", "Put": "PUT"}


def home() -> Response:
    """The landing page."""
    return html.html_response(_HOME)


def method_override(method: str, query: str) -> str:
    """Turn POST with a query of exactly ``_method=Put|Delete`` into PUT or DELETE."""
    parts = query.split("_method=")
    if method == "POST" and len(parts) == 2 and parts[0] == "" and parts[1] in _OVERRIDES:
        return _OVERRIDES[parts[1]]
    return method


def setup_database(path: str | Path) -> sqlite3.Connection:
    """Open the database at ``path`` and make sure the schema exists."""
    connection = sqlite3.connect(str(path), check_same_thread=False)
    ensure_schema(connection)
    return connection


class _MethodOverride:
    def __init__(self, wsgi_app: Callable[..., Iterable[bytes]]) -> None:
        self._wsgi_app = wsgi_app

    def __call__(self, environ: dict[str, Any], start_response: Callable[..., Any]):
        environ["REQUEST_METHOD"] = method_override(
            environ.get("REQUEST_METHOD", "GET"), environ.get("QUERY_STRING", "")
        )
        return self._wsgi_app(environ, start_response)


def _form_name() -> str:
    name = request.form.get("name")
    if name is None:
        abort(400)
    return name


def create_app(context: Context | None = None) -> Flask:
    """Build the application around ``context`` (in-memory when omitted)."""
    if context is None:
        context = Context.init()
    app = Flask(__name__)
    app.wsgi_app = _MethodOverride(app.wsgi_app)

    app.add_url_rule("/", "home", home, methods=["GET"])
    app.add_url_rule("/books", "list_books", lambda: pages.list_books(context), methods=["GET"])
    app.add_url_rule(
        "/books/create",
        "create_page",
        lambda: pages.create_page(request.cookies.get("error")),
        methods=["GET"],
    )
    app.add_url_rule(
        "/books/create",
        "create_book",
        lambda: pages.create(context, _form_name()),
        methods=["POST"],
    )
    app.add_url_rule(
        "/books/<book_id>",
        "edit_page",
        lambda book_id: pages.edit_page(context, book_id),
        methods=["GET"],
    )
    app.add_url_rule(
        "/books/<book_id>",
        "update_book",
        lambda book_id: pages.update(context, book_id, _form_name()),
        methods=["PUT"],
    )
    app.add_url_rule(
        "/books/<book_id>",
        "delete_book",
        lambda book_id: pages.delete(context, book_id),
        methods=["DELETE"],
    )
    app.add_url_rule("/api/books", "api_index", api.index, methods=["GET"])
    app.add_url_rule(
        "/api/books",
        "api_post",
        lambda: api.post(context, request.get_json(silent=True)),
        methods=["POST"],
    )
    return app


def main(argv: list[str] | None = None) -> None:
    """Open the database and serve the application."""
    parser = argparse.ArgumentParser(description="Serve the bookshelf web application.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--database", default=DEFAULT_DATABASE)
    args = parser.parse_args(argv)

    print(f"running on http://{args.host}:{args.port}")
    connection = setup_database(args.database)
    app = create_app(Context.init_with_db(connection))
    app.run(host=args.host, port=args.port)