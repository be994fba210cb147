"""Accessibility rule evaluation and snapshot regression checks for UI element trees."""

from .core import A11yConfig, Finding, FindingReporter, PytestSink, RecordingSink, Severity, config
from .core.checker import A11yChecker
from .elements import ElementDescriptor, ElementType, Frame, Trait
from .rules import ALL_TESTS, IMAGE_TESTS, INTERACTIVE_TESTS, LABEL_TESTS, A11yTest
from .snapshot import SnapshotRecorder, SnapshotStorage

__version__ = "0.1.0"

__all__ = [
    "A11yChecker",
    "A11yConfig",
    "A11yTest",
    "ALL_TESTS",
    "ElementDescriptor",
    "ElementType",
    "Finding",
    "FindingReporter",
    "Frame",
    "IMAGE_TESTS",
    "INTERACTIVE_TESTS",
    "LABEL_TESTS",
    "PytestSink",
    "RecordingSink",
    "Severity",
    "SnapshotRecorder",
    "SnapshotStorage",
    "Trait",
    "config",
]
