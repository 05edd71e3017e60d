[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bookshelf"
version = "0.1.0"
description = "A small web application for keeping a list of books, with HTML pages and a JSON API"
requires-python = ">=3.10"
keywords = ["books", "flask", "crud", "sqlite", "web"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]
dependencies = [
    "flask>=2.2",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
bookshelf = "bookshelf.app:main"

[tool.hatch.build.targets.wheel]
packages = ["bookshelf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
