"""Shared fixtures and builders for the Book Cover Matcher tests."""

from unittest.mock import AsyncMock

import pytest

from bookcover_matcher import (
    BookLookupResult,
    CoverAnalysisFailure,
    CoverAnalysisSuccess,
    ExtractedWord,
)

TSV_HEADER = "level\tpage_num\tblock_num\tpar_num\tline_num\tword_num\tleft\ttop\twidth\theight\tconf\ttext"


def build_word_row(page, block, par, line, word, left, top, width, height, conf, text):
    """Build a level-5 (word) TSV row."""
    return f"5\t{page}\t{block}\t{par}\t{line}\t{word}\t{left}\t{top}\t{width}\t{height}\t{conf:.6f}\t{text}"


def build_tsv(*rows):
    """Join a header and data rows into TSV text."""
    return "\n".join([TSV_HEADER, *rows])


def ocr_success(*words, height=0.0):
    """A successful OCR result whose extracted and filtered words are the given words."""
    return CoverAnalysisSuccess(
        extracted_words=tuple(ExtractedWord(text=w, height=height) for w in words),
        filtered_words=tuple(words),
        raw_lines=tuple(words),
    )


@pytest.fixture
def ocr_provider():
    """OCR provider stub; set `ocr_provider.analyze_cover_image.return_value` per test."""
    provider = AsyncMock()
    provider.analyze_cover_image.return_value = CoverAnalysisFailure(reason="not configured")
    return provider


@pytest.fixture
def lookup_provider():
    """Book lookup stub returning no candidates unless configured."""
    provider = AsyncMock()
    provider.search_books_by_text.return_value = []
    return provider


@pytest.fixture
def mistborn():
    return BookLookupResult(title="Mistborn", author="Brandon Sanderson")
