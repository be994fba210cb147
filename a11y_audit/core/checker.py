"""Accessibility checker service.

``A11yChecker`` runs one evaluation pass over the elements of a screen:
single-element rules first, then every unordered pair of elements, then the
screen-level header check. Findings are stamped with the caller's source
location and handed to the reporter.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Sequence

from ..elements.models import ElementDescriptor
from ..rules.catalog import ALL_TESTS, A11yTest
from ..rules.engine import RuleEngine
from ..rules.pairwise import PairwiseAnalyzer
from .config import A11yConfig
from .config import config as default_config
from .findings import Finding, SourceLocation
from .logger import log
from .reporter import FindingReporter

ElementProvider = Callable[[], Sequence[ElementDescriptor]]


class A11yChecker:
    """Evaluates accessibility rules against captured UI elements."""

    def __init__(
        self,
        config: Optional[A11yConfig] = None,
        reporter: Optional[FindingReporter] = None,
    ) -> None:
        """Initialize the checker.

        Args:
            config: Rule thresholds and word lists. Defaults to the global config.
            reporter: Destination for findings. Defaults to an in-memory reporter.
        """
        self.config = config or default_config
        self.config.validate_config()
        self.reporter = reporter or FindingReporter()
        self.engine = RuleEngine(self.config)

    # ------------------------------------------------------------------
    # Evaluation passes
    # ------------------------------------------------------------------

    def audit(
        self,
        elements: Iterable[ElementDescriptor],
        tests: Iterable[A11yTest] = ALL_TESTS,
        location: Optional[SourceLocation] = None,
        analyzer: Optional[PairwiseAnalyzer] = None,
    ) -> List[Finding]:
        """Run one evaluation pass and report every finding.

        Args:
            elements: Elements of the screen, in provider order.
            tests: Tests to run.
            location: Source location findings are reported against.
                Defaults to the caller of this method.
            analyzer: Pairwise analyzer to use. It is reset before the pass.

        Returns:
            All findings of the pass, in reporting order.
        """
        if location is None:
            location = SourceLocation.from_caller()
        selected = frozenset(tests)
        screen = list(elements)

        if analyzer is None:
            analyzer = PairwiseAnalyzer(self.config, selected)
        else:
            analyzer.reset(selected)

        findings: List[Finding] = []
        for element in screen:
            findings.extend(self.engine.evaluate(element, selected))

        analyzer.analyze(screen)
        if A11yTest.HEADER in selected:
            findings.extend(analyzer.check_header())
        findings.extend(analyzer.flush())

        return self._report(findings, location, element_count=len(screen))

    def check_all(
        self,
        elements: Iterable[ElementDescriptor],
        location: Optional[SourceLocation] = None,
    ) -> List[Finding]:
        """Run the full catalog against ``elements``."""
        return self.audit(elements, ALL_TESTS, location or SourceLocation.from_caller())

    def check_all_on_screen(
        self,
        provider: ElementProvider,
        tests: Iterable[A11yTest] = ALL_TESTS,
        location: Optional[SourceLocation] = None,
    ) -> List[Finding]:
        """Pull the current elements from ``provider`` and audit them."""
        elements = list(provider())
        log.debug(f"Element provider returned {len(elements)} elements")
        return self.audit(elements, tests, location or SourceLocation.from_caller())

    # ------------------------------------------------------------------
    # Individual checks
    # ------------------------------------------------------------------

    def check_valid_size(self, element: ElementDescriptor) -> List[Finding]:
        return self._single(self.engine.minimum_size(element))

    def check_valid_label(self, element: ElementDescriptor) -> List[Finding]:
        return self._single(self.engine.label_presence(element))

    def check_interactive_label(self, element: ElementDescriptor) -> List[Finding]:
        return self._single(self.engine.button_label(element))

    def check_image_label(self, element: ElementDescriptor) -> List[Finding]:
        return self._single(self.engine.image_label(element))

    def check_label_length(self, element: ElementDescriptor) -> List[Finding]:
        return self._single(self.engine.label_length(element))

    def check_interactive_size(self, element: ElementDescriptor) -> List[Finding]:
        return self._single(self.engine.minimum_interactive_size(element))

    def _single(self, findings: List[Finding]) -> List[Finding]:
        # Two frames up: _single -> check_* -> caller
        location = SourceLocation.from_caller(depth=2)
        return self._report(findings, location, element_count=1)

    def _report(
        self,
        findings: List[Finding],
        location: Optional[SourceLocation],
        element_count: int,
    ) -> List[Finding]:
        located = [finding.at(location) for finding in findings]
        self.reporter.report_all(located)

        failures = sum(1 for finding in located if finding.is_failure)
        log.log_pass_summary(element_count, len(located) - failures, failures)

        self.reporter.finish()
        return located
