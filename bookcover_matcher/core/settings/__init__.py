"""
Typed configuration for every Book Cover Matcher component.
"""

from .settings import (
    EasyOcrSettings,
    ImageSettings,
    MatcherSettings,
    OpenLibrarySettings,
    ScorerSettings,
    Settings,
    SharpenSettings,
    TesseractSettings,
    TitleFilterSettings,
    load_settings
)

__all__ = [
    'EasyOcrSettings',
    'ImageSettings',
    'MatcherSettings',
    'OpenLibrarySettings',
    'ScorerSettings',
    'Settings',
    'SharpenSettings',
    'TesseractSettings',
    'TitleFilterSettings',
    'load_settings'
]
