from .base         import BookLookupProvider
from .open_library import OpenLibraryLookup

__all__ = ['BookLookupProvider', 'OpenLibraryLookup']
