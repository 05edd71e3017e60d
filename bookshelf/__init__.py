"""A small web application for keeping a list of books, with HTML pages and a JSON API."""

__version__ = "0.1.0"