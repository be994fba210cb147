"""Pairwise analysis of controls within one evaluation pass.

The analyzer accumulates duplicate-label groups, overlapping controls and
closely spaced controls while the caller walks every pair of elements, then
flushes one finding per duplicate group and per classified pair.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from loguru import logger

from ..core.config import A11yConfig
from ..core.config import config as default_config
from ..core.findings import Finding
from ..elements.models import ElementDescriptor, Trait
from .catalog import ALL_TESTS, A11yTest


@dataclass(frozen=True, order=True)
class PairKey:
    """Order-independent key for an unordered pair of element ids."""
    first: str
    second: str

    @classmethod
    def of(cls, id_a: str, id_b: str) -> PairKey:
        if id_b < id_a:
            id_a, id_b = id_b, id_a
        return cls(id_a, id_b)


class PairwiseAnalyzer:
    """Per-pass accumulator for header, duplicate, overlap and spacing state.

    One instance serves one pass at a time; call :meth:`reset` before each
    independent pass.
    """

    def __init__(
        self,
        config: Optional[A11yConfig] = None,
        tests: Iterable[A11yTest] = ALL_TESTS,
    ) -> None:
        """Initialize the analyzer."""
        self.config = config or default_config
        self.tests = frozenset(tests)
        self.has_header = False
        self.duplicated_items: Dict[str, Dict[str, ElementDescriptor]] = {}
        self.overlapped_controls: Dict[PairKey, tuple[ElementDescriptor, ElementDescriptor]] = {}
        self.close_controls: Dict[PairKey, tuple[ElementDescriptor, ElementDescriptor]] = {}

    def reset(self, tests: Optional[Iterable[A11yTest]] = None) -> None:
        """Clear all accumulated state, optionally switching the selected tests."""
        if tests is not None:
            self.tests = frozenset(tests)
        self.has_header = False
        self.duplicated_items.clear()
        self.overlapped_controls.clear()
        self.close_controls.clear()
        logger.debug("Pairwise analyzer state reset")

    # ------------------------------------------------------------------
    # Accumulation
    # ------------------------------------------------------------------

    def observe(self, element: ElementDescriptor) -> None:
        """Record screen-level facts about a single element."""
        if not self.has_header and element.has_trait(Trait.HEADER):
            self.has_header = True

    def compare(self, element1: ElementDescriptor, element2: ElementDescriptor) -> None:
        """Classify one pair of elements."""
        if not element1.is_control or not element2.is_control or element1.id == element2.id:
            return
        if A11yTest.DUPLICATED in self.tests:
            self._duplicated_labels(element1, element2)
        if A11yTest.CONTROL_OVERLAP in self.tests or A11yTest.CONTROL_SPACING in self.tests:
            self._control_spacing(element1, element2)

    def analyze(self, elements: List[ElementDescriptor]) -> None:
        """Observe every element and compare every unordered pair once."""
        for index, element in enumerate(elements):
            self.observe(element)
            for other in elements[index + 1:]:
                self.compare(element, other)

    def _duplicated_labels(self, element1: ElementDescriptor, element2: ElementDescriptor) -> None:
        if not element1.label or element1.label != element2.label:
            return
        group = self.duplicated_items.setdefault(element1.label, {})
        group.setdefault(element1.id, element1)
        group.setdefault(element2.id, element2)

    def _control_spacing(self, element1: ElementDescriptor, element2: ElementDescriptor) -> None:
        key = PairKey.of(element1.id, element2.id)
        if key in self.overlapped_controls or key in self.close_controls:
            return

        if element1.frame.intersects(element2.frame):
            # Overlapping pairs are never also reported as close
            if A11yTest.CONTROL_OVERLAP in self.tests:
                self.overlapped_controls[key] = (element1, element2)
            return

        if A11yTest.CONTROL_SPACING not in self.tests:
            return

        expanded = element1.frame.expanded(self.config.control_padding())
        if expanded.intersects(element2.frame):
            self.close_controls[key] = (element1, element2)

    # ------------------------------------------------------------------
    # End of pass
    # ------------------------------------------------------------------

    def check_header(self) -> List[Finding]:
        if self.has_header:
            return []
        return [Finding.failure("Screen has no element with a header trait.")]

    def flush(self) -> List[Finding]:
        """Return the accumulated duplicate, overlap and spacing findings."""
        findings = [
            Finding.warning("Elements have duplicated labels.", list(group.values()))
            for group in self.duplicated_items.values()
        ]
        findings.extend(
            Finding.failure("Controls are overlapping.", list(pair))
            for pair in self.overlapped_controls.values()
        )
        findings.extend(
            Finding.warning("Controls are closely spaced.", list(pair))
            for pair in self.close_controls.values()
        )
        return findings
