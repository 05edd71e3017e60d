# bookshelf

A small web application for keeping a list of books. It serves plain HTML
pages for listing, creating, editing and deleting books, along with a small
JSON API. Books are kept in an SQLite database.

## Installing

```
pip install .
```

## Running

```
bookshelf
```

The server listens on `http://localhost:5000` and stores its data in
`./database.sqlite3`. The `books` table is created on start-up if it does
not exist. Options:

- `--host` — address to listen on (default `localhost`)
- `--port` — port to listen on (default `5000`)
- `--database` — path of the SQLite file (default `./database.sqlite3`)

The server is Flask's built-in development server.

## Pages

| Method | Path              | What it does                          |
|--------|-------------------|---------------------------------------|
| GET    | `/`               | Home page with a link to the books    |
| GET    | `/books`          | Table of all books                    |
| GET    | `/books/create`   | Form for a new book                   |
| POST   | `/books/create`   | Creates a book, then redirects        |
| GET    | `/books/<id>`     | Edit form for one book                |
| PUT    | `/books/<id>`     | Renames a book, then redirects        |
| DELETE | `/books/<id>`     | Deletes a book, then redirects        |

HTML forms can only send `POST`. A `POST` whose query string is exactly
`_method=Put` or `_method=Delete` is treated as `PUT` or `DELETE`, which is
how the edit and delete forms work.

A book name must not be blank and may be at most 255 bytes long in UTF-8;
surrounding whitespace is trimmed. When creating a book with an invalid name,
the redirect sets an `error` cookie, which the creation form shows once and
then clears. Failed edits and deletions redirect to the list without a
message; an edit page for an unknown or malformed id shows `ng`.

## JSON API

| Method | Path         | Body               | Reply                                 |
|--------|--------------|--------------------|---------------------------------------|
| GET    | `/api/books` |                    | `{"name": ""}`                        |
| POST   | `/api/books` | `{"name": "Dune"}` | `null`, status 200, or 400 if invalid |

`bookshelf.api` also has `put(context, book_id, payload)` and
`delete(context, book_id)` handlers, but `create_app` does not route them.

## Using it from Python

```python
from bookshelf.context import Context
from bookshelf.usecase import CreateBookInput
from bookshelf.app import create_app

context = Context.init()  # in-memory store with two sample books
context.book_usecase.create_book(CreateBookInput(name="Dune"))
for book in context.book_usecase.get_books():
    print(book.id, book.name)

app = create_app(context)  # a Flask application
```

`Context.init_with_db(connection)` builds the same thing on top of an
`sqlite3` connection; `bookshelf.app.setup_database(path)` opens one and
prepares the schema.

Errors are raised as subclasses of `bookshelf.model.DomainError`
(`InvalidBookName`, `BookNotFound`, `ValidationError`, `DatabaseError`);
`BookUsecase.create_book` raises `bookshelf.usecase.BookCreationError` for an
invalid name.

## What it does not do

- There is no authentication; anyone who can reach the server can change
  the list.
- `bookshelf.user` holds a user model and an in-memory user repository, but
  users are not stored in the database and have no pages or API.
- The database schema is only created, never migrated.

## Tests

```
pip install .[test]
pytest
```