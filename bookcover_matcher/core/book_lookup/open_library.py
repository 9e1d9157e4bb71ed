import httpx

from bookcover_matcher               import ModuleLogger
from bookcover_matcher.core.errors   import BookLookupError
from bookcover_matcher.core.models   import BookLookupResult
from bookcover_matcher.core.settings import OpenLibrarySettings
from typing                          import Any

logger = ModuleLogger('open_library')()

class OpenLibraryLookup:
    """
    Book lookup backed by the OpenLibrary search API.

    Failed searches are logged and reported as no candidates; this provider never retries.
    """
    SEARCH_FIELDS  = 'title,author_name,cover_i'
    UNKNOWN_TITLE  = 'Unknown Title'
    UNKNOWN_AUTHOR = 'Unknown Author'

    def __init__(
        self,
        settings : OpenLibrarySettings | None = None,
        client   : httpx.AsyncClient | None   = None
    ):
        """
        Args:
            settings : Endpoint URLs, result limit and timeout
            client   : Optional shared AsyncClient (a short-lived one is opened per search otherwise)
        """
        self.settings = settings or OpenLibrarySettings()
        self.client   = client

    async def search_books_by_text(self, query: str) -> list[BookLookupResult]:
        """
        Searches OpenLibrary with free text.

        Args:
            query : Space-separated words read from a cover

        Returns:
            Candidates in OpenLibrary's relevance order; empty on any failure
        """
        if not query.strip():
            return []

        try:
            payload = await self.fetch_search_results(query)
        except BookLookupError as e:
            logger.warning(f"OpenLibrary search failed for '{query}': {e}")
            return []

        docs    = payload.get('docs') or []
        results = [self.to_lookup_result(doc) for doc in docs]
        logger.info(f"OpenLibrary returned {len(results)} results for '{query}'")
        return results

    async def fetch_search_results(self, query: str) -> dict[str, Any]:
        """
        Raises:
            BookLookupError : On transport errors, non-2xx responses or invalid JSON
        """
        params = {
            'q'      : query,
            'limit'  : self.settings.result_limit,
            'fields' : self.SEARCH_FIELDS
        }

        try:
            if self.client is not None:
                response = await self.client.get(self.settings.search_url, params = params)
            else:
                async with httpx.AsyncClient(timeout = self.settings.timeout_seconds) as client:
                    response = await client.get(self.settings.search_url, params = params)

            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            raise BookLookupError(str(e) or type(e).__name__) from e
        except ValueError as e:
            raise BookLookupError(f"Invalid JSON in OpenLibrary response: {e}") from e

        if not isinstance(payload, dict):
            raise BookLookupError("Unexpected OpenLibrary response shape")
        return payload

    def to_lookup_result(self, doc: dict[str, Any]) -> BookLookupResult:
        authors  = doc.get('author_name') or []
        cover_id = doc.get('cover_i')

        return BookLookupResult(
            title         = doc.get('title') or self.UNKNOWN_TITLE,
            author        = authors[0] if authors else self.UNKNOWN_AUTHOR,
            thumbnail_url = self.settings.cover_url.format(cover_id = cover_id) if cover_id is not None else None
        )
