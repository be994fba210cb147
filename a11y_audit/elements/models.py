"""Data models describing UI elements captured from an accessibility tree."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Optional

from loguru import logger


@dataclass(frozen=True, slots=True)
class Frame:
    """Axis-aligned rectangle (x, y, width, height) in screen coordinates."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Frame size cannot be negative: {self.width}x{self.height}")

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    def intersects(self, other: Frame) -> bool:
        """True when the two rectangles share a region of non-zero area.

        Rectangles that only touch along an edge do not intersect.
        """
        return (
            self.x < other.max_x
            and other.x < self.max_x
            and self.y < other.max_y
            and other.y < self.max_y
        )

    def expanded(self, padding: float) -> Frame:
        """Return a copy grown by ``padding`` in every direction."""
        return Frame(
            x=self.x - padding,
            y=self.y - padding,
            width=self.width + padding * 2,
            height=self.height + padding * 2,
        )

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Return frame as ``(x, y, width, height)`` tuple."""
        return self.x, self.y, self.width, self.height


class ElementType(Enum):
    """Element types reported by the accessibility tree."""
    IMAGE = "image"
    BUTTON = "button"
    CELL = "cell"
    STATIC_TEXT = "staticText"
    TEXT_VIEW = "textView"
    TEXT_FIELD = "textField"
    SEARCH_FIELD = "searchField"
    SECURE_TEXT_FIELD = "secureTextField"
    LINK = "link"
    SLIDER = "slider"
    SWITCH = "switch"
    TOGGLE = "toggle"
    STEPPER = "stepper"
    SEGMENTED_CONTROL = "segmentedControl"
    PICKER = "picker"
    KEY = "key"
    OTHER = "other"

    @classmethod
    def from_name(cls, name: str) -> ElementType:
        """Look up a type by its wire name; unknown names map to OTHER."""
        try:
            return cls(name)
        except ValueError:
            return cls.OTHER


class Trait(Enum):
    """Capability tags describing an element's role."""
    BUTTON = "button"
    LINK = "link"
    IMAGE = "image"
    HEADER = "header"
    STATIC_TEXT = "staticText"
    UPDATES_FREQUENTLY = "updatesFrequently"
    ADJUSTABLE = "adjustable"
    SEARCH_FIELD = "searchField"
    SELECTED = "selected"
    NOT_ENABLED = "notEnabled"
    KEYBOARD_KEY = "keyboardKey"
    SUMMARY_ELEMENT = "summaryElement"
    PLAYS_SOUND = "playsSound"
    STARTS_MEDIA_SESSION = "startsMediaSession"
    ALLOWS_DIRECT_INTERACTION = "allowsDirectInteraction"
    CAUSES_PAGE_TURN = "causesPageTurn"
    TAB_BAR = "tabBar"


TEXT_ENTRY_TYPES = frozenset(
    {
        ElementType.TEXT_FIELD,
        ElementType.SECURE_TEXT_FIELD,
        ElementType.SEARCH_FIELD,
        ElementType.TEXT_VIEW,
    }
)

CONTROL_TYPES = TEXT_ENTRY_TYPES | {
    ElementType.BUTTON,
    ElementType.CELL,
    ElementType.LINK,
    ElementType.SLIDER,
    ElementType.SWITCH,
    ElementType.TOGGLE,
    ElementType.STEPPER,
    ElementType.SEGMENTED_CONTROL,
    ElementType.PICKER,
    ElementType.KEY,
}

INTERACTIVE_TRAITS = frozenset(
    {
        Trait.BUTTON,
        Trait.LINK,
        Trait.ADJUSTABLE,
        Trait.SEARCH_FIELD,
        Trait.KEYBOARD_KEY,
        Trait.ALLOWS_DIRECT_INTERACTION,
    }
)

# Cells are controls but only count as interactive through their traits.
INTERACTIVE_TYPES = CONTROL_TYPES - {ElementType.CELL}


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True, slots=True)
class ElementDescriptor:
    """Immutable description of one UI element during an evaluation pass."""

    label: str = ""
    type: ElementType = ElementType.OTHER
    traits: frozenset[Trait] = frozenset()
    frame: Frame = Frame(0.0, 0.0, 0.0, 0.0)
    enabled: bool = True
    placeholder: Optional[str] = None
    accessible: bool = True
    id: str = field(default_factory=_new_id)

    def __post_init__(self) -> None:
        # Traits are a set; accept any iterable from the provider
        if not isinstance(self.traits, frozenset):
            object.__setattr__(self, "traits", frozenset(self.traits))

    @property
    def should_ignore(self) -> bool:
        """Elements the provider marked as not accessible."""
        return not self.accessible

    @property
    def is_control(self) -> bool:
        return self.type in CONTROL_TYPES

    @property
    def is_interactive(self) -> bool:
        return self.type in INTERACTIVE_TYPES or bool(self.traits & INTERACTIVE_TRAITS)

    def has_trait(self, trait: Trait) -> bool:
        return trait in self.traits

    def trait_names(self) -> list[str]:
        """Sorted trait names, the stable serialized form."""
        return sorted(trait.value for trait in self.traits)

    def summary(self) -> str:
        """Short human readable description used in finding messages."""
        return f'"{self.label}" ({self.type.value})'

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ElementDescriptor:
        """Build a descriptor from a raw provider payload.

        Raises:
            ValueError: If the payload is malformed.
        """
        from ..utils.validation import validate_element_payload

        valid, error = validate_element_payload(data)
        if not valid:
            raise ValueError(error)

        frame = data.get("frame") or {}
        kwargs: dict[str, Any] = {
            "label": data.get("label") or "",
            "type": ElementType.from_name(str(data.get("type", "other"))),
            "traits": _traits_from_names(data.get("traits") or []),
            "frame": Frame(
                x=float(frame.get("x", 0.0)),
                y=float(frame.get("y", 0.0)),
                width=float(frame.get("width", 0.0)),
                height=float(frame.get("height", 0.0)),
            ),
            "enabled": bool(data.get("enabled", True)),
            "placeholder": data.get("placeholder"),
            "accessible": bool(data.get("accessible", True)),
        }
        if data.get("id") is not None:
            kwargs["id"] = str(data["id"])
        return cls(**kwargs)


def _traits_from_names(names: Iterable[str]) -> frozenset[Trait]:
    known = {trait.value: trait for trait in Trait}
    traits = set()
    for name in names:
        if name in known:
            traits.add(known[name])
        else:
            logger.debug(f"Dropping unknown trait: {name}")
    return frozenset(traits)
