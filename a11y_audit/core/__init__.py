"""Core components of the a11y-ui-audit framework."""

from .config import A11yConfig, config
from .findings import Finding, Severity, SourceLocation
from .logger import Logger, log
from .reporter import (
    A11yAssertionError,
    A11yWarning,
    FindingReporter,
    FindingSink,
    PytestSink,
    RecordingSink,
)

__all__ = [
    "A11yAssertionError",
    "A11yConfig",
    "A11yWarning",
    "Finding",
    "FindingReporter",
    "FindingSink",
    "Logger",
    "PytestSink",
    "RecordingSink",
    "Severity",
    "SourceLocation",
    "config",
    "log",
]
