import asyncio

from bookcover_matcher                    import ModuleLogger
from bookcover_matcher.core.book_catalog  import BookCatalog
from bookcover_matcher.core.book_lookup   import BookLookupProvider
from bookcover_matcher.core.match_scorer  import BookMatchScorer
from bookcover_matcher.core.models        import (
    BookLookupResult,
    CoverAnalysisResponse,
    CoverAnalysisSuccess,
    MatchCandidate
)
from bookcover_matcher.core.ocr_provider  import OcrProvider
from bookcover_matcher.core.settings      import MatcherSettings
from bookcover_matcher.core.title_filter  import TitleTextFilter
from typing                               import Sequence

logger = ModuleLogger('cover_matcher')()

class CoverMatchOrchestrator:
    """
    Identifies the book on a cover image.

    OCR text is searched through the lookup provider, local catalog entries are merged in
    ahead of external results, and every candidate is scored against the words read from
    the cover. When a search yields nothing, the query is sharpened to its most prominent
    words and retried.
    """

    def __init__(
        self,
        ocr_provider    : OcrProvider,
        lookup_provider : BookLookupProvider,
        catalog         : BookCatalog | None     = None,
        scorer          : BookMatchScorer | None = None,
        title_filter    : TitleTextFilter | None = None,
        settings        : MatcherSettings | None = None
    ):
        """
        Args:
            ocr_provider    : Engine producing CoverAnalysisResults from image bytes
            lookup_provider : Source of candidate books for a text query
            catalog         : Optional read-only local catalog preferred on ties
            scorer          : Candidate scorer (defaults to BookMatchScorer())
            title_filter    : Filter used for sharpening retries (defaults to TitleTextFilter())
            settings        : Result limit, attempt count and score floor
        """
        self.ocr_provider    = ocr_provider
        self.lookup_provider = lookup_provider
        self.catalog         = catalog
        self.scorer          = scorer or BookMatchScorer()
        self.title_filter    = title_filter or TitleTextFilter()
        self.settings        = settings or MatcherSettings()

    async def analyze(
        self,
        image_bytes  : bytes,
        content_type : str,
        request_id   : str = ''
    ) -> CoverAnalysisResponse:
        """
        Runs OCR on a cover and matches the result against candidate books.

        An OCR failure returns immediately without any lookup. Cancellation propagates
        from whichever external call is in flight.

        Args:
            image_bytes  : Raw image data
            content_type : MIME type of the image
            request_id   : Correlation id used only in log lines

        Returns:
            CoverAnalysisResponse with ranked matches and at most one exact match
        """
        analysis = await self.ocr_provider.analyze_cover_image(image_bytes, content_type)

        if not analysis.is_success:
            logger.warning(f"Cover analysis failed [request_id={request_id}]: {analysis.reason}")
            return CoverAnalysisResponse(analysis = analysis)

        ranked      = await self.search_for_matching_books(analysis, request_id)
        exact_match = self.select_exact_match(ranked)
        local_count = sum(1 for match in ranked if match.is_local)

        logger.info(
            f"Cover analysis completed [request_id={request_id}, ocr_lines={len(analysis.raw_lines)}, "
            f"total_matches={len(ranked)}, local_matches={local_count}, "
            f"external_matches={len(ranked) - local_count}, exact_match={exact_match is not None}]"
        )

        return CoverAnalysisResponse(
            analysis      = analysis,
            matched_books = tuple(ranked[:self.settings.max_results]),
            exact_match   = exact_match
        )

    # -------------------- Searching --------------------

    async def search_for_matching_books(
        self,
        analysis   : CoverAnalysisSuccess,
        request_id : str
    ) -> list[MatchCandidate]:
        """
        Searches with the filtered words, retrying with sharpened words while nothing matches.
        """
        ocr_words     = [word.text for word in analysis.extracted_words]
        current_words = list(analysis.extracted_words)
        query_words   = list(analysis.filtered_words)
        max_attempts  = self.settings.max_lookup_attempts

        for attempt in range(1, max_attempts + 1):
            if not query_words:
                break

            ranked = await self.search_attempt(query_words, ocr_words, request_id, attempt)
            if ranked or attempt == max_attempts:
                return ranked

            sharpened = self.title_filter.sharpen_search_words(current_words)
            if sharpened == current_words:
                break

            current_words = sharpened
            query_words   = [word.text for word in self.title_filter.limit_search_words(sharpened)]

        return []

    async def search_attempt(
        self,
        query_words : Sequence[str],
        ocr_words   : Sequence[str],
        request_id  : str,
        attempt     : int
    ) -> list[MatchCandidate]:
        query = ' '.join(query_words)
        logger.info(
            f"Search attempt {attempt}/{self.settings.max_lookup_attempts} "
            f"[request_id={request_id}, words={len(query_words)}, text_length={len(query)}]"
        )

        external   = await self.lookup_provider.search_books_by_text(query)
        candidates = await self.merge_with_local_catalog(external)
        ranked     = self.rank_candidates(candidates, ocr_words)

        logger.info(
            f"Search results [request_id={request_id}, attempt={attempt}, "
            f"raw_results={len(external)}, scored_results={len(ranked)}]"
        )
        return ranked

    async def merge_with_local_catalog(self, external: Sequence[BookLookupResult]) -> list[BookLookupResult]:
        """
        Puts local catalog books matching the external titles or authors first and drops
        external results duplicating a local title.
        """
        if self.catalog is None or not external:
            return list(external)

        local = await asyncio.to_thread(
            self.catalog.find_by_titles_or_authors,
            [book.title for book in external],
            [book.author for book in external]
        )
        local_titles = {book.title.lower() for book in local}

        return [*local, *(book for book in external if book.title.lower() not in local_titles)]

    # -------------------- Scoring --------------------

    def rank_candidates(
        self,
        candidates : Sequence[BookLookupResult],
        ocr_words  : Sequence[str]
    ) -> list[MatchCandidate]:
        """
        Scores candidates and keeps those above the score floor, best first.
        Equal scores keep their candidate order.
        """
        scored = [self.scorer.score_candidate(ocr_words, candidate) for candidate in candidates]
        kept   = [
            match for match in scored
            if match.score > 0 and match.score >= self.settings.min_match_score
        ]
        return sorted(kept, key = lambda match: match.score, reverse = True)

    @staticmethod
    def select_exact_match(ranked: Sequence[MatchCandidate]) -> BookLookupResult | None:
        """
        Picks the exact match: a local book with the lowest id if any, else the first exact candidate.
        """
        exact = [match for match in ranked if match.is_exact]
        if not exact:
            return None

        local = [match for match in exact if match.is_local]
        if local:
            return min(local, key = lambda match: match.candidate.id).candidate
        return exact[0].candidate
