from bookcover_matcher.core.models import BookLookupResult
from typing                        import Protocol

class BookLookupProvider(Protocol):
    """
    Searches for candidate books matching free text read from a cover.
    """

    async def search_books_by_text(self, query: str) -> list[BookLookupResult]:
        ...
