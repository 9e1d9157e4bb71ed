from .base    import BookCatalog
from .catalog import DuckDBCatalog

__all__ = ['BookCatalog', 'DuckDBCatalog']
