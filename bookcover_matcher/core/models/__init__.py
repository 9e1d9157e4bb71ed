"""
Request-scoped value types shared by the parser, filter, scorer and orchestrator.
"""

from .models import (
    BookLookupResult,
    CoverAnalysisFailure,
    CoverAnalysisResponse,
    CoverAnalysisResult,
    CoverAnalysisSuccess,
    ExtractedWord,
    MatchCandidate,
    OcrLine
)

__all__ = [
    'BookLookupResult',
    'CoverAnalysisFailure',
    'CoverAnalysisResponse',
    'CoverAnalysisResult',
    'CoverAnalysisSuccess',
    'ExtractedWord',
    'MatchCandidate',
    'OcrLine'
]
