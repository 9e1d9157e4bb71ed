from .utils import Utils

__all__ = ['Utils']
