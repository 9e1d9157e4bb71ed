"""Tests for the DuckDB-backed local book catalog."""

import duckdb
import pytest

from bookcover_matcher import BookLookupResult, DuckDBCatalog


@pytest.fixture
def catalog():
    connection = duckdb.connect()
    connection.execute(
        "CREATE TABLE books (id INTEGER, title VARCHAR, author VARCHAR, thumbnail_url VARCHAR)"
    )
    connection.execute(
        """
        INSERT INTO books VALUES
            (2, 'Dune', 'Frank Herbert', 'dune.jpg'),
            (1, 'Mistborn', 'Brandon Sanderson', NULL),
            (3, 'Elantris', 'Brandon Sanderson', NULL)
        """
    )
    yield DuckDBCatalog(connection=connection)
    connection.close()


class TestDuckDBCatalog:
    """Tests for catalog lookups."""

    def test_find_by_id(self, catalog):
        assert catalog.find_by_id(2) == BookLookupResult(
            id=2, title="Dune", author="Frank Herbert", thumbnail_url="dune.jpg"
        )

    def test_find_by_unknown_id(self, catalog):
        assert catalog.find_by_id(99) is None

    def test_find_by_titles_ignores_case(self, catalog):
        books = catalog.find_by_titles_or_authors(["DUNE"], [])

        assert [book.id for book in books] == [2]
        assert books[0].is_local

    def test_find_by_authors_orders_by_id(self, catalog):
        books = catalog.find_by_titles_or_authors([], ["brandon sanderson"])

        assert [book.title for book in books] == ["Mistborn", "Elantris"]

    def test_title_or_author(self, catalog):
        books = catalog.find_by_titles_or_authors(["Dune"], ["Brandon Sanderson"])

        assert [book.id for book in books] == [1, 2, 3]

    def test_empty_input_returns_nothing(self, catalog):
        assert catalog.find_by_titles_or_authors([], []) == []
        assert catalog.find_by_titles_or_authors([""], [""]) == []

    def test_opens_database_file_read_only(self, tmp_path):
        database_path = tmp_path / "catalog.duckdb"
        with duckdb.connect(str(database_path)) as connection:
            connection.execute(
                "CREATE TABLE books (id INTEGER, title VARCHAR, author VARCHAR, thumbnail_url VARCHAR)"
            )
            connection.execute("INSERT INTO books VALUES (5, 'Emma', 'Jane Austen', NULL)")

        catalog = DuckDBCatalog(database_path=database_path)
        try:
            assert catalog.find_by_id(5).title == "Emma"
            with pytest.raises(duckdb.Error):
                catalog.connection.execute("DELETE FROM books")
        finally:
            catalog.close()

    def test_requires_path_or_connection(self):
        with pytest.raises(ValueError):
            DuckDBCatalog()
