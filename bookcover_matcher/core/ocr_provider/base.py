from abc                                  import ABC, abstractmethod
from bookcover_matcher                    import ModuleLogger
from bookcover_matcher.core.errors        import OcrEngineError
from bookcover_matcher.core.models        import (
    CoverAnalysisFailure,
    CoverAnalysisResult,
    CoverAnalysisSuccess,
    OcrLine
)
from bookcover_matcher.core.title_filter  import TitleTextFilter
from typing                               import Sequence

logger = ModuleLogger('ocr_provider')()

class OcrProvider(ABC):
    """
    Base class for OCR engines.

    Subclasses only read lines from an image; this class filters them into title/author
    words and reports engine errors as CoverAnalysisFailure instead of raising.
    Cancellation is never intercepted.
    """
    engine_name = 'OCR'

    def __init__(self, title_filter: TitleTextFilter | None = None):
        """
        Args:
            title_filter : Filter applied to recognised lines (defaults to TitleTextFilter())
        """
        self.title_filter = title_filter or TitleTextFilter()

    async def analyze_cover_image(self, image_bytes: bytes, content_type: str) -> CoverAnalysisResult:
        """
        Recognises the text on a cover image.

        Args:
            image_bytes  : Raw image data
            content_type : MIME type of the image

        Returns:
            CoverAnalysisSuccess with the filtered words, or CoverAnalysisFailure with a reason
        """
        try:
            ocr_lines = await self.read_lines(image_bytes, content_type)
        except (OcrEngineError, OSError) as e:
            logger.error(f"{self.engine_name} failed to analyse cover image: {e}")
            return CoverAnalysisFailure(reason = str(e) or f"{self.engine_name} failed")

        return self.build_result(ocr_lines)

    def build_result(self, ocr_lines: Sequence[OcrLine]) -> CoverAnalysisSuccess:
        extracted_words = self.title_filter.extract_filtered_text(ocr_lines)
        search_words    = self.title_filter.limit_search_words(extracted_words)

        logger.info(
            f"Cover analysis complete. Filtered words: {len(search_words)}/{len(extracted_words)} "
            f"from {len(ocr_lines)} lines"
        )

        return CoverAnalysisSuccess(
            extracted_words = tuple(extracted_words),
            filtered_words  = tuple(word.text for word in search_words),
            raw_lines       = tuple(line.text for line in ocr_lines)
        )

    @abstractmethod
    async def read_lines(self, image_bytes: bytes, content_type: str) -> list[OcrLine]:
        """
        Runs the engine and returns the recognised lines in reading order.

        Raises:
            OcrEngineError : If the engine cannot produce text for the image
        """
