"""
Exception taxonomy for Book Cover Matcher.

Provider errors are raised inside a provider and mapped to a result at its boundary;
callers of the orchestrator only ever see results or cancellation.
"""

class BookCoverMatcherError(Exception):
    """
    Base class for Book Cover Matcher errors.
    """

class OcrEngineError(BookCoverMatcherError):
    """
    The OCR engine could not produce text for an image: binary missing or crashed,
    timeout, or undecodable image data.
    """

class BookLookupError(BookCoverMatcherError):
    """
    A book lookup provider could not complete a search.
    """
