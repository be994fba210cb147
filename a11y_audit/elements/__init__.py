"""UI element model.

This sub-package provides the immutable element descriptors handed over by
an element provider, along with the derived predicates used to scope rules.
"""

from .models import ElementDescriptor, ElementType, Frame, Trait

__all__ = [
    "ElementDescriptor",
    "ElementType",
    "Frame",
    "Trait",
]
