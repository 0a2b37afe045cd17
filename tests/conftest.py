"""
Shared test fixtures and utilities for the jsonlookup test suite.
"""

import copy

import pytest

BOOKSTORE = {
    "store": {
        "book": [
            {
                "category": "reference",
                "author": "Nigel Rees",
                "title": "Sayings of the Century",
                "price": 8.95,
            },
            {
                "category": "fiction",
                "author": "Evelyn Waugh",
                "title": "Sword of Honour",
                "price": 12.99,
            },
            {
                "category": "fiction",
                "author": "Herman Melville",
                "title": "Moby Dick",
                "isbn": "0-553-21311-3",
                "price": 8.99,
            },
            {
                "category": "fiction",
                "author": "J. R. R. Tolkien",
                "title": "The Lord of the Rings",
                "isbn": "0-395-19395-8",
                "price": 22.99,
            },
        ],
        "bicycle": {"color": "red", "price": 19.95},
    },
    "expensive": 10,
}


@pytest.fixture
def bookstore():
    """Fresh copy of the bookstore document used throughout the suite.

    Usage:
        def test_something(bookstore):
            assert lookup(bookstore, "$.expensive") == 10
    """
    return copy.deepcopy(BOOKSTORE)


@pytest.fixture
def books(bookstore):
    """The book list of the bookstore document."""
    return bookstore["store"]["book"]
