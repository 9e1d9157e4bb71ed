import asyncio
import cv2
import numpy as np

from bookcover_matcher                   import ModuleLogger
from bookcover_matcher.core.errors       import OcrEngineError
from bookcover_matcher.core.models       import OcrLine
from bookcover_matcher.core.settings     import EasyOcrSettings
from bookcover_matcher.core.title_filter import TitleTextFilter
from easyocr                             import Reader
from typing                              import Any, Sequence

from .base import OcrProvider

logger = ModuleLogger('easyocr')()

class EasyOcrProvider(OcrProvider):
    """
    Runs an EasyOCR Reader over the decoded image. EasyOCR already returns line-level
    detections with four-corner boxes, so no TSV parsing is involved.
    """
    engine_name = 'EasyOCR'

    def __init__(
        self,
        settings     : EasyOcrSettings | None = None,
        title_filter : TitleTextFilter | None = None,
        reader       : Any | None             = None
    ):
        """
        Args:
            settings     : Languages, GPU flag, decoder and confidence floor
            title_filter : Filter applied to recognised lines
            reader       : Optional pre-built easyocr.Reader (built from settings when omitted)
        """
        super().__init__(title_filter = title_filter)
        self.settings = settings or EasyOcrSettings()
        self.reader   = reader or Reader(
            lang_list = list(self.settings.language_list),
            gpu       = self.settings.gpu_enabled
        )

    @staticmethod
    def decode_image(image_bytes: bytes) -> np.ndarray:
        """
        Decodes image bytes into a BGR array.

        Raises:
            OcrEngineError : If the data is empty or not a decodable image
        """
        if not image_bytes:
            raise OcrEngineError("No image data provided")

        try:
            image = cv2.imdecode(np.frombuffer(image_bytes, dtype = np.uint8), cv2.IMREAD_COLOR)
        except cv2.error as e:
            raise OcrEngineError(f"Could not decode image: {e}") from e

        if image is None:
            raise OcrEngineError("Could not decode image data")
        return image

    async def read_lines(self, image_bytes: bytes, content_type: str) -> list[OcrLine]:
        image = self.decode_image(image_bytes)

        try:
            ocr_results = await asyncio.to_thread(
                self.reader.readtext,
                image[..., ::-1],
                decoder = self.settings.decoder,
                detail  = 1
            )
        except (RuntimeError, ValueError, cv2.error) as e:
            raise OcrEngineError(f"EasyOCR failed: {e}") from e

        lines = [
            self.to_ocr_line(coordinates, text)
            for coordinates, text, confidence in ocr_results
            if text.strip() and confidence >= self.settings.min_confidence
        ]
        logger.debug(f"EasyOCR recognised {len(lines)} of {len(ocr_results)} detections")
        return lines

    @staticmethod
    def to_ocr_line(coordinates: Sequence[Sequence[float]], text: str) -> OcrLine:
        """
        Flattens EasyOCR's [[x, y] * 4] corners (TL, TR, BR, BL) into an 8-point polygon.
        """
        polygon = tuple(float(value) for point in coordinates for value in point)
        return OcrLine(
            text         = text.strip(),
            bounding_box = polygon if len(polygon) == 8 else None
        )
