"""Finding reporting for test-framework integration.

The reporter is the only component that talks to a test framework. Rules,
the pairwise analyzer and the snapshot differ only ever produce
:class:`~a11y_audit.core.findings.Finding` values.
"""

from __future__ import annotations

import warnings
from typing import List, Optional, Protocol

from .findings import Finding
from .logger import log


class A11yWarning(UserWarning):
    """Warning category used for non-fatal accessibility findings."""


class A11yAssertionError(AssertionError):
    """Raised when an evaluation recorded at least one failure."""

    def __init__(self, failures: List[Finding]):
        self.failures = list(failures)
        details = "\n\n".join(failure.describe() for failure in self.failures)
        super().__init__(f"{len(self.failures)} accessibility failure(s):\n\n{details}")


class FindingSink(Protocol):
    """Consumer of findings, typically bound to a test framework."""

    def record(self, finding: Finding) -> None:
        ...

    def finish(self) -> None:
        ...


class RecordingSink:
    """Sink that keeps every finding in memory."""

    def __init__(self) -> None:
        self.findings: List[Finding] = []

    def record(self, finding: Finding) -> None:
        self.findings.append(finding)

    def finish(self) -> None:
        return None

    @property
    def failures(self) -> List[Finding]:
        return [finding for finding in self.findings if finding.is_failure]

    @property
    def warnings(self) -> List[Finding]:
        return [finding for finding in self.findings if not finding.is_failure]

    @property
    def failed(self) -> bool:
        return any(finding.is_failure for finding in self.findings)

    def clear(self) -> None:
        self.findings.clear()


class PytestSink(RecordingSink):
    """Sink for pytest: warnings surface in the summary, failures fail the test."""

    def record(self, finding: Finding) -> None:
        super().record(finding)
        if not finding.is_failure:
            warnings.warn(A11yWarning(finding.describe()), stacklevel=2)

    def finish(self) -> None:
        failures = self.failures
        self.clear()
        if failures:
            raise A11yAssertionError(failures)


class FindingReporter:
    """Logs findings and forwards them to a sink."""

    def __init__(self, sink: Optional[FindingSink] = None) -> None:
        """Initialize the reporter.

        Args:
            sink: Destination for findings. Defaults to an in-memory sink.
        """
        self.sink: FindingSink = sink if sink is not None else RecordingSink()
        self.warning_count = 0
        self.failure_count = 0

    def report(self, finding: Finding) -> None:
        """Log a finding and hand it to the sink."""
        if finding.is_failure:
            self.failure_count += 1
        else:
            self.warning_count += 1
        log.log_finding(finding)
        self.sink.record(finding)

    def report_all(self, findings: List[Finding]) -> None:
        for finding in findings:
            self.report(finding)

    def finish(self) -> None:
        """Close the current evaluation; the sink may raise for failures."""
        self.sink.finish()
