"""Accessibility rules.

This sub-package provides:
- The catalog of selectable tests and predefined suites
- Per-element rule evaluation
- Pairwise duplicate, overlap and spacing analysis
"""

from .catalog import ALL_TESTS, IMAGE_TESTS, INTERACTIVE_TESTS, LABEL_TESTS, A11yTest
from .engine import RuleEngine
from .pairwise import PairKey, PairwiseAnalyzer

__all__ = [
    "A11yTest",
    "ALL_TESTS",
    "IMAGE_TESTS",
    "INTERACTIVE_TESTS",
    "LABEL_TESTS",
    "PairKey",
    "PairwiseAnalyzer",
    "RuleEngine",
]
