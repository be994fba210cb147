"""Positional comparison of a baseline snapshot against a fresh capture.

Records are matched by index only. Inserting or removing an element shifts
every later index, which shows up as a cascade of field mismatches.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from ..core.config import A11yConfig
from ..core.config import config as default_config
from ..core.findings import Finding
from ..elements.models import ElementDescriptor
from .codec import SnapshotCodec
from .models import SnapshotDocument, SnapshotFrame, SnapshotRecord

# Persists a replacement baseline, returning where it was written or None.
Regenerator = Callable[[SnapshotDocument], Optional[str]]

_FRAME_FIELDS = ("x", "y", "width", "height")


def _printable(value: float) -> str:
    return f"{value:.2f}"


class SnapshotDiffer:
    """Compares two snapshot documents field by field."""

    def __init__(
        self,
        config: Optional[A11yConfig] = None,
        codec: Optional[SnapshotCodec] = None,
    ) -> None:
        self.config = config or default_config
        self.codec = codec or SnapshotCodec()

    def diff(
        self,
        baseline: SnapshotDocument,
        current: SnapshotDocument,
        elements: Optional[Sequence[ElementDescriptor]] = None,
        regenerate: Optional[Regenerator] = None,
    ) -> List[Finding]:
        """Compare ``current`` against ``baseline``.

        Args:
            baseline: Previously stored reference document.
            current: Freshly captured document.
            elements: Descriptors behind ``current``, attached to findings.
            regenerate: Writes ``current`` as the new baseline when the
                reference is outdated.

        Returns:
            Findings for every mismatch, or the single outdated-baseline finding.
        """
        if self.codec.is_outdated(baseline):
            return [self._outdated(baseline, current, regenerate)]

        findings: List[Finding] = []
        if len(baseline.snapshot) != len(current.snapshot):
            findings.append(
                Finding.failure(
                    "Snapshots contain a different number of items. This screen has changed",
                    reason=f"Reference: {len(baseline.snapshot)}. Snapshot: {len(current.snapshot)}",
                )
            )

        for index, (reference, captured) in enumerate(zip(baseline.snapshot, current.snapshot)):
            implicated = self._implicated(elements, index)
            findings.extend(self.compare_records(reference, captured, implicated))
        return findings

    def compare_records(
        self,
        reference: SnapshotRecord,
        captured: SnapshotRecord,
        elements: Sequence[ElementDescriptor] = (),
    ) -> List[Finding]:
        """Compare one record pair; every mismatched field is its own finding."""
        findings = []
        if reference.label != captured.label:
            findings.append(
                Finding.failure(
                    "Label does not match reference snapshot",
                    elements,
                    f"Reference: {reference.label}. Snapshot: {captured.label}",
                )
            )

        if reference.type != captured.type:
            findings.append(
                Finding.failure(
                    "Type does not match reference snapshot",
                    elements,
                    f"Reference: {reference.type}. Snapshot: {captured.type}",
                )
            )

        if set(reference.traits) != set(captured.traits):
            findings.append(
                Finding.failure(
                    "Traits do not match reference snapshot",
                    elements,
                    f"Reference: {', '.join(sorted(reference.traits))}. "
                    f"Snapshot: {', '.join(sorted(captured.traits))}",
                )
            )

        if reference.enabled != captured.enabled:
            findings.append(
                Finding.failure(
                    "Enabled status does not match reference snapshot",
                    elements,
                    f"Reference: {reference.enabled}. Snapshot: {captured.enabled}",
                )
            )

        findings.extend(self.compare_frames(reference.frame, captured.frame, elements))
        return findings

    def compare_frames(
        self,
        reference: SnapshotFrame,
        captured: SnapshotFrame,
        elements: Sequence[ElementDescriptor] = (),
    ) -> List[Finding]:
        tolerance = self.config.float_comparison_tolerance
        findings = []
        for name in _FRAME_FIELDS:
            expected = getattr(reference, name)
            actual = getattr(captured, name)
            if abs(expected - actual) > tolerance:
                findings.append(
                    Finding.failure(
                        "Frame does not match reference snapshot",
                        elements,
                        f"Reference {name}: {_printable(expected)}. Snapshot {name}: {_printable(actual)}",
                    )
                )
        return findings

    def _outdated(
        self,
        baseline: SnapshotDocument,
        current: SnapshotDocument,
        regenerate: Optional[Regenerator],
    ) -> Finding:
        path = regenerate(current) if regenerate is not None else None
        if path:
            return Finding.warning(
                "Reference snapshot is outdated. Generated new snapshot. "
                "Check for regressions before replacing as reference.",
                reason=f"Reference version: {baseline.version}. Current version: {current.version}. "
                f"New snapshot: {path}",
            )
        return Finding.failure(
            "Reference snapshot is outdated. Unable to create new reference",
            reason=f"Reference version: {baseline.version}. Current version: {current.version}",
        )

    @staticmethod
    def _implicated(
        elements: Optional[Sequence[ElementDescriptor]],
        index: int,
    ) -> Sequence[ElementDescriptor]:
        if elements is None or index >= len(elements):
            return ()
        return (elements[index],)
