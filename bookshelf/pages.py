"""HTML page handlers for browsing and editing books."""

from __future__ import annotations

from flask import Response

from bookshelf import html
from bookshelf.context import Context
from bookshelf.model import Book, DomainError
from bookshelf.usecase import BookCreationError, CreateBookInput, UpdateBookInput

_LIST_HEADER = """
    <div style=display:flex;gap:16px;>
        <a href=/>back</a>
        <a href=/books/create>create</a>
    </div>"""


def book_row(book: Book) -> str:
    """The table cells describing one book."""
    path = f"/books/{book.id}"
    return f"""
        <td>{book.id}</td>
        <td>{book.name.value}</td>
        <td>{html.link(path, "edit")}</td>
        <td>{html.delete_form(path, "")}</td>
        """


def list_books(context: Context) -> Response:
    """The page listing every book."""
    books = context.book_usecase.get_books()
    table = html.table(["id", "name", "edit", "delete"], books, book_row)
    return html.html_response(_LIST_HEADER + table)


def create_page(error: str | None) -> Response:
    """The creation form, showing and then clearing any stored error."""
    body = f"<div>{error or ''}</div>"
    form = html.post_form("/books/create", html.text_input("name", ""))
    return html.flush(body + form, "error")


def edit_page(context: Context, book_id: str) -> Response:
    """The edit form for one book, or 'ng' when it cannot be loaded."""
    try:
        book = context.book_usecase.get_book(book_id)
    except DomainError:
        return html.html_response("ng")
    return html.html_response(
        html.put_form(f"/books/{book.id}", html.text_input("name", book.name.value))
    )


def create(context: Context, name: str) -> Response:
    """Create a book and redirect to the list, carrying any error in a cookie."""
    try:
        context.book_usecase.create_book(CreateBookInput(name=name))
    except BookCreationError as err:
        return html.redirect_with_error("/books", str(err))
    return html.redirect("/books")


def update(context: Context, book_id: str, name: str) -> Response:
    """Rename a book; always redirect to the list."""
    try:
        context.book_usecase.update_book(book_id, UpdateBookInput(name=name))
    except DomainError:
        pass
    return html.redirect("/books")


def delete(context: Context, book_id: str) -> Response:
    """Delete a book; always redirect to the list."""
    try:
        context.book_usecase.delete_book(book_id)
    except DomainError:
        pass
    return html.redirect("/books")