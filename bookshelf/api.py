"""JSON API handlers for books."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from flask import Response

from bookshelf.context import Context
from bookshelf.model import DomainError
from bookshelf.usecase import BookCreationError, CreateBookInput, UpdateBookInput


def _json(value: Any, status: int = 200) -> Response:
    return Response(json.dumps(value), status=status, mimetype="application/json")


def _name(payload: Any) -> str | None:
    if isinstance(payload, Mapping) and isinstance(payload.get("name"), str):
        return payload["name"]
    return None


def index() -> Response:
    """A placeholder document with an empty name."""
    return _json({"name": ""})


def post(context: Context, payload: Any) -> Response:
    """Create a book from ``{"name": ...}``; 400 on bad input."""
    name = _name(payload)
    if name is None:
        return _json(None, 400)
    try:
        context.book_usecase.create_book(CreateBookInput(name=name))
    except BookCreationError:
        return _json(None, 400)
    return _json(None)


def put(context: Context, book_id: str, payload: Any) -> Response:
    """Rename a book from ``{"name": ...}``; 400 on any failure."""
    name = _name(payload)
    if name is None:
        return _json(None, 400)
    try:
        context.book_usecase.update_book(book_id, UpdateBookInput(name=name))
    except DomainError:
        return _json(None, 400)
    return _json(None)


def delete(context: Context, book_id: str) -> Response:
    """Delete a book; 400 on any failure."""
    try:
        context.book_usecase.delete_book(book_id)
    except DomainError:
        return _json(None, 400)
    return _json(None)