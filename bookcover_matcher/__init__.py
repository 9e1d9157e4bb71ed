"""
Book Cover Matcher
Identifies the book on a photographed cover from OCR text and candidate book metadata.
"""

__version__ = '0.1.0'

from bookcover_matcher.core.utils           import Utils
from bookcover_matcher.core.module_logger   import ModuleLogger
from bookcover_matcher.core.settings        import Settings, load_settings
from bookcover_matcher.core.errors          import BookCoverMatcherError, BookLookupError, OcrEngineError
from bookcover_matcher.core.models          import (
    BookLookupResult,
    CoverAnalysisFailure,
    CoverAnalysisResponse,
    CoverAnalysisResult,
    CoverAnalysisSuccess,
    ExtractedWord,
    MatchCandidate,
    OcrLine
)
from bookcover_matcher.core.line_geometry   import LineGeometry
from bookcover_matcher.core.tsv_parser      import TsvLineParser
from bookcover_matcher.core.title_filter    import TitleTextFilter
from bookcover_matcher.core.match_scorer    import BookMatchScorer
from bookcover_matcher.core.ocr_provider    import OcrProvider, TesseractOcrProvider
from bookcover_matcher.core.book_lookup     import BookLookupProvider, OpenLibraryLookup
from bookcover_matcher.core.book_catalog    import BookCatalog, DuckDBCatalog
from bookcover_matcher.core.image_validator import CoverImageValidator, ValidationResult
from bookcover_matcher.core.cover_matcher   import CoverMatchOrchestrator

__all__ = [
    'Utils',
    'ModuleLogger',
    'Settings',
    'load_settings',
    'BookCoverMatcherError',
    'BookLookupError',
    'OcrEngineError',
    'BookLookupResult',
    'CoverAnalysisFailure',
    'CoverAnalysisResponse',
    'CoverAnalysisResult',
    'CoverAnalysisSuccess',
    'ExtractedWord',
    'MatchCandidate',
    'OcrLine',
    'LineGeometry',
    'TsvLineParser',
    'TitleTextFilter',
    'BookMatchScorer',
    'OcrProvider',
    'TesseractOcrProvider',
    'BookLookupProvider',
    'OpenLibraryLookup',
    'BookCatalog',
    'DuckDBCatalog',
    'CoverImageValidator',
    'ValidationResult',
    'CoverMatchOrchestrator'
]
