from dataclasses import asdict, dataclass
from typing      import Any

# -------------------- OCR Output --------------------

@dataclass(frozen = True)
class ExtractedWord:
    """
    A single recognised word tagged with the text size of the line it came from.
    """
    text   : str
    height : float = 0.0  # 0 when no bounding-box data was available

@dataclass(frozen = True)
class OcrLine:
    """
    One reading-order line of OCR text.
    """
    text         : str
    bounding_box : tuple[float, ...] | None = None  # [x0,y0, x1,y1, x2,y2, x3,y3] as TL, TR, BR, BL

    @property
    def words(self) -> list[str]:
        return self.text.split()

# -------------------- Cover Analysis Result --------------------

@dataclass(frozen = True)
class CoverAnalysisSuccess:
    """
    OCR succeeded. Holds the filtered words with their sizes, the search query
    words derived from them, and the unfiltered line texts.
    """
    extracted_words : tuple[ExtractedWord, ...] = ()
    filtered_words  : tuple[str, ...]           = ()
    raw_lines       : tuple[str, ...]           = ()

    @property
    def is_success(self) -> bool:
        return True

@dataclass(frozen = True)
class CoverAnalysisFailure:
    """
    OCR failed; the reason is suitable for display.
    """
    reason : str

    @property
    def is_success(self) -> bool:
        return False

CoverAnalysisResult = CoverAnalysisSuccess | CoverAnalysisFailure

# -------------------- Book Candidates --------------------

@dataclass(frozen = True)
class BookLookupResult:
    """
    A candidate book. An id means the book is already in the local catalog.
    """
    title         : str
    author        : str
    id            : int | None = None
    thumbnail_url : str | None = None

    @property
    def is_local(self) -> bool:
        return self.id is not None

    @property
    def title_and_author_words(self) -> list[str]:
        return f"{self.title} {self.author}".split()

@dataclass(frozen = True)
class MatchCandidate:
    """
    A candidate paired with its coverage score in [0, 1].
    """
    candidate : BookLookupResult
    score     : float

    @property
    def is_exact(self) -> bool:
        return self.score == 1.0

    @property
    def is_local(self) -> bool:
        return self.candidate.is_local

# -------------------- Orchestrator Output --------------------

@dataclass(frozen = True)
class CoverAnalysisResponse:
    """
    Final outcome of analysing one cover image.
    """
    analysis      : CoverAnalysisResult
    matched_books : tuple[MatchCandidate, ...] = ()
    exact_match   : BookLookupResult | None    = None

    def to_dict(self) -> dict[str, Any]:
        """
        Converts the response to plain JSON-serialisable data.
        """
        if isinstance(self.analysis, CoverAnalysisSuccess):
            analysis = {
                'is_success'     : True,
                'extracted_text' : ' '.join(self.analysis.filtered_words),
                'filtered_words' : list(self.analysis.filtered_words),
                'raw_lines'      : list(self.analysis.raw_lines)
            }
        else:
            analysis = {
                'is_success'    : False,
                'error_message' : self.analysis.reason
            }

        return {
            'analysis'      : analysis,
            'matched_books' : [
                {**asdict(match.candidate), 'score': match.score}
                for match in self.matched_books
            ],
            'exact_match'   : asdict(self.exact_match) if self.exact_match else None
        }
