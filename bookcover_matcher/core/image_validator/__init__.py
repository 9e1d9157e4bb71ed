from .validator import CoverImageValidator, ValidationResult

__all__ = ['CoverImageValidator', 'ValidationResult']
