"""Single-element accessibility rules.

Every rule is a pure function of one element and the configuration. Rules
return findings rather than raising, and no rule suppresses another: all
applicable rules run for every element.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional

from ..core.config import A11yConfig
from ..core.config import config as default_config
from ..core.findings import Finding
from ..elements.models import TEXT_ENTRY_TYPES, ElementDescriptor, ElementType, Trait
from .catalog import ALL_TESTS, A11yTest
from .text import contains_word, contains_words, is_uppercased


def _printable(value: float) -> str:
    return f"{value:.2f}"


class RuleEngine:
    """Evaluates the per-element rule catalog."""

    def __init__(self, config: Optional[A11yConfig] = None) -> None:
        self.config = config or default_config
        self._rules: Dict[A11yTest, Callable[[ElementDescriptor], List[Finding]]] = {
            A11yTest.MINIMUM_SIZE: self.minimum_size,
            A11yTest.MINIMUM_INTERACTIVE_SIZE: self.minimum_interactive_size,
            A11yTest.LABEL_PRESENCE: self.label_presence,
            A11yTest.BUTTON_LABEL: self.button_label,
            A11yTest.IMAGE_LABEL: self.image_label,
            A11yTest.LABEL_LENGTH: self.label_length,
            A11yTest.IMAGE_TRAIT: self.image_trait,
            A11yTest.BUTTON_TRAIT: self.button_trait,
            A11yTest.CONFLICTING_TRAITS: self.conflicting_traits,
            A11yTest.DISABLED: self.disabled,
        }

    def evaluate(
        self,
        element: ElementDescriptor,
        tests: Iterable[A11yTest] = ALL_TESTS,
    ) -> List[Finding]:
        """Run every selected single-element rule against ``element``."""
        selected = set(tests)
        findings: List[Finding] = []
        for test, rule in self._rules.items():
            if test in selected:
                findings.extend(rule(element))
        return findings

    # ------------------------------------------------------------------
    # Size
    # ------------------------------------------------------------------

    def _size_findings(
        self,
        element: ElementDescriptor,
        minimum: float,
        tall_message: str,
        wide_message: str,
        make: Callable[..., Finding],
    ) -> List[Finding]:
        tolerance = self.config.float_comparison_tolerance
        findings = []
        height = element.frame.height
        if height - minimum < -tolerance:
            findings.append(
                make(
                    tall_message,
                    [element],
                    f"Minimum height: {minimum:g}. Current height: {_printable(height)}",
                )
            )
        width = element.frame.width
        if width - minimum < -tolerance:
            findings.append(
                make(
                    wide_message,
                    [element],
                    f"Minimum width: {minimum:g}. Current width: {_printable(width)}",
                )
            )
        return findings

    def minimum_size(self, element: ElementDescriptor) -> List[Finding]:
        if element.should_ignore:
            return []
        return self._size_findings(
            element,
            self.config.min_size,
            "Element may not be tall enough.",
            "Element may not be wide enough.",
            Finding.warning,
        )

    def minimum_interactive_size(self, element: ElementDescriptor) -> List[Finding]:
        if not element.is_control:
            return []
        if not self.config.interactive_size_all_controls and not element.is_interactive:
            return []
        return self._size_findings(
            element,
            self.config.min_interactive_size,
            "Interactive element not tall enough.",
            "Interactive element not wide enough.",
            Finding.failure,
        )

    # ------------------------------------------------------------------
    # Labels
    # ------------------------------------------------------------------

    def label_presence(self, element: ElementDescriptor) -> List[Finding]:
        """Label must be meaningful and not shouted."""
        if element.should_ignore or element.type is ElementType.CELL:
            return []

        findings = []
        label = element.label
        if element.placeholder and not label:
            findings.append(
                Finding.failure(
                    f'No label for element with placeholder "{element.placeholder}".',
                    [element],
                )
            )
        elif len(label) <= self.config.min_meaningful_length:
            findings.append(
                Finding.warning(
                    "Label may not be meaningful.",
                    [element],
                    f"Minimum length: {self.config.min_meaningful_length}",
                )
            )

        if is_uppercased(label):
            findings.append(Finding.warning("Label is uppercased.", [element]))
        return findings

    def label_length(self, element: ElementDescriptor) -> List[Finding]:
        if element.should_ignore or element.type in (ElementType.STATIC_TEXT, ElementType.TEXT_VIEW):
            return []
        if len(element.label) <= self.config.max_label_length:
            return []
        return [
            Finding.warning(
                "Label may be too long.",
                [element],
                f"Max length: {self.config.max_label_length}",
            )
        ]

    def button_label(self, element: ElementDescriptor) -> List[Finding]:
        """Control labels should be short, descriptive and free of their own type."""
        if not element.is_control:
            return []

        label = element.label
        findings = [
            Finding.failure(
                "Button label may not be descriptive.",
                [element],
                f"Offending word: {phrase}",
            )
            for phrase in contains_words(label, self.config.nondescriptive_phrases)
        ]

        if contains_word(label, "button"):
            findings.append(
                Finding.failure(
                    "Button should not contain the word 'button' in the accessibility label.",
                    [element],
                )
            )

        if label and not label[0].isupper():
            findings.append(Finding.failure("Buttons should begin with a capital letter.", [element]))

        if "." in label:
            findings.append(
                Finding.failure("Button accessibility labels shouldn't contain punctuation.", [element])
            )

        findings.extend(self._type_redundant_wording(element))
        return findings

    def _type_redundant_wording(self, element: ElementDescriptor) -> List[Finding]:
        label = element.label
        findings = []
        if element.type in TEXT_ENTRY_TYPES and contains_word(label, "field"):
            findings.append(
                Finding.failure("Text fields should not include their type in the label.", [element])
            )

        if (element.type is ElementType.LINK or element.has_trait(Trait.LINK)) and contains_word(label, "link"):
            findings.append(
                Finding.failure("Links should not include their type in the label.", [element])
            )

        if element.type is ElementType.SLIDER or element.has_trait(Trait.ADJUSTABLE):
            for word in ("adjustable", "slider"):
                if contains_word(label, word):
                    findings.append(
                        Finding.failure(
                            "Adjustable elements should not include their type in the label.",
                            [element],
                            f"Offending word: {word}",
                        )
                    )
        return findings

    def image_label(self, element: ElementDescriptor) -> List[Finding]:
        """Image labels should describe content, not the medium or the file."""
        if element.type is not ElementType.IMAGE:
            return []

        findings = []
        nouns = contains_words(element.label, self.config.image_nouns)
        if nouns:
            findings.append(
                Finding.failure(
                    "Images should not contain image words in the accessibility label.",
                    [element],
                    f"Offending words: {', '.join(nouns)}",
                )
            )

        tokens = contains_words(element.label, self.config.filename_tokens)
        if tokens:
            findings.append(
                Finding.failure(
                    "Image file name is used as the accessibility label.",
                    [element],
                    f"Offending words: {', '.join(tokens)}",
                )
            )
        return findings

    # ------------------------------------------------------------------
    # Traits and state
    # ------------------------------------------------------------------

    def image_trait(self, element: ElementDescriptor) -> List[Finding]:
        if element.type is not ElementType.IMAGE or element.has_trait(Trait.IMAGE):
            return []
        return [Finding.failure("Image should have Image trait.", [element])]

    def button_trait(self, element: ElementDescriptor) -> List[Finding]:
        if element.type is not ElementType.BUTTON:
            return []
        if element.has_trait(Trait.BUTTON) or element.has_trait(Trait.LINK):
            return []
        return [Finding.failure("Button should have Button or Link trait.", [element])]

    def conflicting_traits(self, element: ElementDescriptor) -> List[Finding]:
        traits = element.traits
        findings = []
        if {Trait.BUTTON, Trait.LINK} <= traits:
            findings.append(
                Finding.failure("Elements shouldn't have both Button and Link traits.", [element])
            )
        if {Trait.STATIC_TEXT, Trait.UPDATES_FREQUENTLY} <= traits:
            findings.append(
                Finding.failure(
                    "Elements shouldn't have both Static Text and Updates Frequently traits.",
                    [element],
                )
            )
        return findings

    def disabled(self, element: ElementDescriptor) -> List[Finding]:
        if not element.is_control or element.enabled:
            return []
        return [Finding.warning("Element disabled.", [element])]
