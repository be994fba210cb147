"""Finding values produced by rules and snapshot comparison."""

from __future__ import annotations

import inspect
import os
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Sequence

from ..elements.models import ElementDescriptor


class Severity(Enum):
    """How a finding affects the enclosing test."""
    WARNING = "warning"
    FAILURE = "failure"


@dataclass(frozen=True)
class SourceLocation:
    """File and line a finding is reported against."""
    file: str
    line: int

    @classmethod
    def from_caller(cls, depth: int = 1) -> Optional[SourceLocation]:
        """Capture the location of the code calling into the public API.

        ``depth`` counts frames above the function calling this method.
        """
        frame = inspect.currentframe()
        try:
            target = frame.f_back if frame is not None else None
            for _ in range(depth):
                if target is None:
                    break
                target = target.f_back
            if target is None:
                return None
            return cls(file=target.f_code.co_filename, line=target.f_lineno)
        finally:
            del frame

    def __str__(self) -> str:
        return f"{os.path.basename(self.file)}:{self.line}"


@dataclass(frozen=True)
class Finding:
    """One rule or diff outcome."""
    message: str
    severity: Severity
    elements: tuple[ElementDescriptor, ...] = ()
    reason: Optional[str] = None
    location: Optional[SourceLocation] = None

    @classmethod
    def warning(
        cls,
        message: str,
        elements: Sequence[ElementDescriptor] = (),
        reason: Optional[str] = None,
    ) -> Finding:
        return cls(message, Severity.WARNING, tuple(elements), reason)

    @classmethod
    def failure(
        cls,
        message: str,
        elements: Sequence[ElementDescriptor] = (),
        reason: Optional[str] = None,
    ) -> Finding:
        return cls(message, Severity.FAILURE, tuple(elements), reason)

    @property
    def is_failure(self) -> bool:
        return self.severity is Severity.FAILURE

    def at(self, location: Optional[SourceLocation]) -> Finding:
        """Return a copy reported against ``location``."""
        if location is None:
            return self
        return replace(self, location=location)

    def describe(self) -> str:
        """Render the finding as multi-line text for logs and test output."""
        lines = [self.message]
        if self.reason:
            lines.append(self.reason)
        for element in self.elements:
            lines.append(f"Element: {element.summary()}")
        if self.location is not None:
            lines.append(f"At: {self.location}")
        return "\n".join(lines)
