"""
OCR engines that turn cover images into CoverAnalysisResults.

EasyOcrProvider lives in ocr_provider.easyocr_provider and is imported on demand,
since loading EasyOCR pulls in its deep-learning runtime.
"""

from .base      import OcrProvider
from .tesseract import TesseractOcrProvider

__all__ = ['OcrProvider', 'TesseractOcrProvider']
