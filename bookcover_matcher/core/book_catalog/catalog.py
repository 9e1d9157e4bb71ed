import duckdb

from bookcover_matcher             import ModuleLogger
from bookcover_matcher.core.models import BookLookupResult
from pathlib                       import Path
from typing                        import Iterable

logger = ModuleLogger('catalog')()

class DuckDBCatalog:
    """
    Local book catalog stored in a DuckDB table with columns
    (id INTEGER, title VARCHAR, author VARCHAR, thumbnail_url VARCHAR).

    Only ever reads; a database path is opened read-only.
    """
    COLUMNS = 'id, title, author, thumbnail_url'

    def __init__(
        self,
        database_path : Path | None                      = None,
        connection    : duckdb.DuckDBPyConnection | None = None,
        table_name    : str                              = 'books'
    ):
        """
        Args:
            database_path : Path to a DuckDB database file
            connection    : Existing connection to use instead of opening database_path
            table_name    : Name of the books table
        """
        if connection is None and database_path is None:
            raise ValueError("Either database_path or connection is required")

        self.connection = connection or duckdb.connect(str(database_path), read_only = True)
        self.table_name = table_name

    def find_by_id(self, book_id: int) -> BookLookupResult | None:
        rows = self.query(f"SELECT {self.COLUMNS} FROM {self.table_name} WHERE id = ?", [book_id])
        return rows[0] if rows else None

    def find_by_titles_or_authors(self, titles: Iterable[str], authors: Iterable[str]) -> list[BookLookupResult]:
        """
        Finds books whose title or author equals any given value, ignoring case.

        Returns:
            Matching books in ascending id order
        """
        titles  = sorted({title.lower() for title in titles if title})
        authors = sorted({author.lower() for author in authors if author})

        clauses = []
        if titles:
            clauses.append(f"lower(title) IN ({', '.join('?' * len(titles))})")
        if authors:
            clauses.append(f"lower(author) IN ({', '.join('?' * len(authors))})")
        if not clauses:
            return []

        books = self.query(
            f"SELECT {self.COLUMNS} FROM {self.table_name} WHERE {' OR '.join(clauses)} ORDER BY id",
            [*titles, *authors]
        )
        logger.info(f"Local catalog matched {len(books)} books")
        return books

    def query(self, sql: str, parameters: list) -> list[BookLookupResult]:
        """
        Runs a query on a cursor of its own so the catalog can be read from worker threads.
        """
        cursor = self.connection.cursor()
        try:
            rows = cursor.execute(sql, parameters).fetchall()
        finally:
            cursor.close()

        return [
            BookLookupResult(id = book_id, title = title, author = author, thumbnail_url = thumbnail_url)
            for book_id, title, author, thumbnail_url in rows
        ]

    def close(self):
        self.connection.close()
