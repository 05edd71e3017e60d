"""HTML fragments and HTTP responses shared by the page handlers."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum
from typing import TypeVar

from flask import Response

T = TypeVar("T")

STYLE = """
    <style>
        ul,li, form { margin:0; }
        label { display: grid; width: fit-content; }
        label + div:has(button) { padding-top: 8px; }
        .flex { display: flex; }
        .grid { display: grid; }
    </style>
    """


def html_response(body: str) -> Response:
    """Return a 200 HTML response with the shared stylesheet prepended."""
    return Response(STYLE + body, status=200, mimetype="text/html")


def flush(body: str, name: str) -> Response:
    """Like html_response, but also expire the cookie called ``name``."""
    response = html_response(body)
    response.headers.add("Set-Cookie", f"{name}=''; Max-Age=0")
    return response


def required(value: str) -> None:
    """Raise ValueError('required') if the value is empty."""
    if not value:
        raise ValueError("required")


class _Method(Enum):
    POST = "Post"
    PUT = "Put"
    DELETE = "Delete"


def _form(method: _Method, action: str, content: str) -> str:
    if method is not _Method.POST:
        action = f"{action}?_method={method.value}"
    return f"""
        <form action={action} method=POST>
            {content}
            <div>
                <button type=submit> submit </button>
            </div>
        </form>
    """


def post_form(action: str, content: str) -> str:
    """A form submitted with POST."""
    return _form(_Method.POST, action, content)


def put_form(action: str, content: str) -> str:
    """A POST form that the server treats as PUT."""
    return _form(_Method.PUT, action, content)


def delete_form(action: str, content: str) -> str:
    """A POST form that the server treats as DELETE."""
    return _form(_Method.DELETE, action, content)


def text_input(field_id: str, value: str) -> str:
    """A labelled text input whose id and name are ``field_id``."""
    return f"""<label for={field_id}>
            {field_id}
            <input id={field_id} name={field_id} value='{value}' />
        </label>
    """


def link(href: str, text: str) -> str:
    """An anchor element."""
    return f"<a href={href} >{text}</a>"


def t_head(headers: Iterable[str]) -> str:
    """Table header cells, one per header."""
    return "".join(f"<th>{header}</td>" for header in headers)


def t_data(bodies: Iterable[T], render: Callable[[T], str]) -> str:
    """Table rows, each rendered by ``render``."""
    return "".join(f"<tr>{render(body)}</tr>" for body in bodies)


def table(headers: Iterable[str], bodies: Iterable[T], render: Callable[[T], str]) -> str:
    """A full table with a header row and one row per body."""
    return f"""
    <table>
        <thead>
            <tr>{t_head(headers)}</tr>
        </thead>
        <tbody>
            {t_data(bodies, render)}
        </tbody>
    </table>
    """


def redirect(to: str) -> Response:
    """A 303 See Other response to ``to``."""
    return Response(status=303, headers={"Location": to})


def redirect_with_error(to: str, error: str) -> Response:
    """A 303 redirect that also stores ``error`` in the error cookie."""
    response = redirect(to)
    response.headers.add("Set-Cookie", "error=" + str(error))
    return response