from .scorer import BookMatchScorer

__all__ = ['BookMatchScorer']
