from .filter import HeightTier, TitleTextFilter

__all__ = ['HeightTier', 'TitleTextFilter']
