"""
Parsing of Tesseract TSV output into reading-order text lines.
"""

from .parser import TsvLineParser, TsvWord

__all__ = ['TsvLineParser', 'TsvWord']
