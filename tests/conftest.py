from __future__ import annotations

import itertools

import pytest

from a11y_audit.core.config import A11yConfig
from a11y_audit.elements import ElementDescriptor, ElementType, Frame, Trait


@pytest.fixture
def config() -> A11yConfig:
    return A11yConfig(
        _env_file=None,
        min_size=14,
        min_interactive_size=44,
        min_meaningful_length=2,
        max_label_length=40,
        float_comparison_tolerance=0.1,
        device_idiom="phone",
        phone_control_padding=8,
        tablet_control_padding=12,
    )


@pytest.fixture
def make_element():
    counter = itertools.count()

    def _make(
        label: str = "Continue",
        type: ElementType = ElementType.BUTTON,
        traits=(Trait.BUTTON,),
        frame=(0, 0, 100, 50),
        enabled: bool = True,
        placeholder=None,
        accessible: bool = True,
        id=None,
    ) -> ElementDescriptor:
        return ElementDescriptor(
            label=label,
            type=type,
            traits=frozenset(traits),
            frame=Frame(*frame),
            enabled=enabled,
            placeholder=placeholder,
            accessible=accessible,
            id=id if id is not None else f"el-{next(counter):03d}",
        )

    return _make
