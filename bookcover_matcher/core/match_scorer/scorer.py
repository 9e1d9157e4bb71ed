from bookcover_matcher.core.models   import BookLookupResult, MatchCandidate
from bookcover_matcher.core.settings import ScorerSettings
from rapidfuzz                       import utils as fuzz_utils
from typing                          import Iterable

class BookMatchScorer:
    """
    Scores a candidate book by the fraction of its title and author words found in the OCR text.

    Matching is exact on normalised tokens; there is no fuzzy or edit-distance matching, so a
    score of 1.0 means every candidate word was read off the cover.
    """

    def __init__(self, settings: ScorerSettings | None = None):
        """
        Args:
            settings : Scorer settings (defaults to ScorerSettings())
        """
        self.settings = settings or ScorerSettings()

    def normalize_words(self, words: Iterable[str], min_length: int = 1) -> set[str]:
        """
        Lowercases, strips punctuation and drops tokens shorter than min_length.
        """
        return {
            token
            for word in words
            for token in fuzz_utils.default_process(word).split()
            if len(token) >= min_length
        }

    def score(self, extracted_words: Iterable[str], candidate_words: Iterable[str]) -> float:
        """
        Computes |extracted ∩ candidate| / |candidate| over the normalised word sets.

        min_word_length only trims OCR noise from the extracted words. Every candidate word
        counts, so a short title word missing from the cover keeps the score below 1.0.

        Args:
            extracted_words : Words read from the cover
            candidate_words : Words of a candidate's title and author

        Returns:
            Coverage score in [0, 1]; 0 when either set is empty after normalisation
        """
        extracted = self.normalize_words(extracted_words, self.settings.min_word_length)
        candidate = self.normalize_words(candidate_words)

        if not extracted or not candidate:
            return 0.0

        return len(extracted & candidate) / len(candidate)

    @staticmethod
    def is_exact_match(score: float) -> bool:
        return score == 1.0

    def score_candidate(self, extracted_words: Iterable[str], candidate: BookLookupResult) -> MatchCandidate:
        return MatchCandidate(
            candidate = candidate,
            score     = self.score(extracted_words, candidate.title_and_author_words)
        )
