from bookcover_matcher.core.models import BookLookupResult
from typing                        import Iterable, Protocol

class BookCatalog(Protocol):
    """
    Read-only access to books already known to the surrounding application.
    """

    def find_by_id(self, book_id: int) -> BookLookupResult | None:
        ...

    def find_by_titles_or_authors(self, titles: Iterable[str], authors: Iterable[str]) -> list[BookLookupResult]:
        ...
