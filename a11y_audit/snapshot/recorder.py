"""Snapshot capture for regression detection.

Each capture serializes the current screen, loads the stored baseline under a
key derived from the test suite, the test function and an invocation counter,
and compares the two. A missing baseline is created, not failed.
"""

from __future__ import annotations

import os
from typing import Any, Callable, List, Optional, Sequence

from ..core.config import A11yConfig
from ..core.config import config as default_config
from ..core.findings import Finding, SourceLocation
from ..core.logger import log
from ..core.reporter import FindingReporter
from ..elements.models import ElementDescriptor
from .codec import SnapshotCodec
from .differ import SnapshotDiffer
from .storage import SnapshotStorage, snapshot_filename


def from_test_node(node: Any) -> tuple[str, str]:
    """Derive ``(suite, test_name)`` from a pytest node."""
    path = getattr(node, "path", None) or getattr(node, "fspath", "")
    suite = os.path.splitext(os.path.basename(str(path)))[0]
    return suite, node.name


class SnapshotRecorder:
    """Captures snapshots and compares them with stored baselines."""

    def __init__(
        self,
        storage: Optional[SnapshotStorage] = None,
        reporter: Optional[FindingReporter] = None,
        config: Optional[A11yConfig] = None,
    ) -> None:
        """Initialize the recorder."""
        self.config = config or default_config
        self.codec = storage.codec if storage is not None else SnapshotCodec()
        self.storage = storage or SnapshotStorage(
            self.config.snapshot_reference_dir,
            self.config.snapshot_output_dir,
            self.codec,
        )
        self.reporter = reporter or FindingReporter()
        self.differ = SnapshotDiffer(self.config, self.codec)
        self.current_suite = ""
        self.current_function = ""
        self.called_in_function = 0

    def next_filename(self, suite: str, test_name: str) -> str:
        """Advance the invocation counter and return the storage key."""
        if suite == self.current_suite and test_name == self.current_function:
            self.called_in_function += 1
        else:
            self.current_suite = suite
            self.current_function = test_name
            self.called_in_function = 0
        return snapshot_filename(suite, test_name, self.called_in_function)

    def capture(
        self,
        elements: Sequence[ElementDescriptor],
        suite: str,
        test_name: str,
        location: Optional[SourceLocation] = None,
    ) -> List[Finding]:
        """Snapshot ``elements`` and compare them against the baseline.

        Returns:
            The reported findings.
        """
        if location is None:
            location = SourceLocation.from_caller()
        elements = list(elements)
        filename = self.next_filename(suite, test_name)
        document = self.codec.to_document(elements, filename)

        baseline = self.storage.load(filename)
        if baseline is None:
            findings = [self._create_baseline(document)]
        else:
            findings = self.differ.diff(baseline, document, elements, regenerate=self.storage.save)

        located = [finding.at(location) for finding in findings]
        self.reporter.report_all(located)
        self.reporter.finish()
        return located

    def capture_from(
        self,
        provider: Callable[[], Sequence[ElementDescriptor]],
        suite: str,
        test_name: str,
        location: Optional[SourceLocation] = None,
    ) -> List[Finding]:
        """Pull elements from an element provider and capture them."""
        return self.capture(provider(), suite, test_name, location or SourceLocation.from_caller())

    def _create_baseline(self, document) -> Finding:
        path = self.storage.save(document)
        if path:
            log.info(f"Created reference snapshot {path}")
            return Finding.warning(
                "No reference snapshot. Generated new snapshot.",
                reason=f"Check {path}",
            )
        return Finding.failure(
            "No reference snapshot. Unable to create new reference",
            reason=self.storage.last_error,
        )

    def reset(self) -> None:
        """Forget the invocation counter."""
        self.current_suite = ""
        self.current_function = ""
        self.called_in_function = 0
