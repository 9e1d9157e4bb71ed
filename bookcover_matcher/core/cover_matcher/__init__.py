"""
End-to-end cover matching: OCR, candidate lookup, scoring and exact-match selection.
"""

from .orchestrator import CoverMatchOrchestrator

__all__ = ['CoverMatchOrchestrator']
