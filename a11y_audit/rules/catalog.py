"""Catalog of accessibility tests and predefined test suites."""

from __future__ import annotations

from enum import Enum


class A11yTest(Enum):
    """Individually selectable accessibility tests."""
    MINIMUM_SIZE = "minimum_size"
    MINIMUM_INTERACTIVE_SIZE = "minimum_interactive_size"
    LABEL_PRESENCE = "label_presence"
    BUTTON_LABEL = "button_label"
    IMAGE_LABEL = "image_label"
    LABEL_LENGTH = "label_length"
    HEADER = "header"
    IMAGE_TRAIT = "image_trait"
    BUTTON_TRAIT = "button_trait"
    CONFLICTING_TRAITS = "conflicting_traits"
    DISABLED = "disabled"
    DUPLICATED = "duplicated"
    CONTROL_SPACING = "control_spacing"
    CONTROL_OVERLAP = "control_overlap"


ALL_TESTS = frozenset(A11yTest)

IMAGE_TESTS = frozenset(
    {
        A11yTest.MINIMUM_SIZE,
        A11yTest.LABEL_PRESENCE,
        A11yTest.IMAGE_LABEL,
        A11yTest.LABEL_LENGTH,
        A11yTest.IMAGE_TRAIT,
    }
)

# Valid for any interactive element: buttons, cells, switches, text fields.
# Many stock platform controls fail these.
INTERACTIVE_TESTS = frozenset(
    {
        A11yTest.MINIMUM_INTERACTIVE_SIZE,
        A11yTest.LABEL_PRESENCE,
        A11yTest.BUTTON_LABEL,
        A11yTest.LABEL_LENGTH,
        A11yTest.DUPLICATED,
    }
)

# Valid for any text element: labels, text views.
LABEL_TESTS = frozenset({A11yTest.MINIMUM_SIZE, A11yTest.LABEL_PRESENCE})
