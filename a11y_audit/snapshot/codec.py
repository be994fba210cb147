"""Serialize element descriptors into versioned snapshot documents."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, List, Optional

from pydantic import ValidationError

from ..elements.models import ElementDescriptor
from .models import (
    CURRENT_VERSION,
    SchemaVersion,
    SnapshotDocument,
    SnapshotFrame,
    SnapshotRecord,
)

__all__ = ["SnapshotCodec", "SnapshotDecodeError", "SnapshotError"]


class SnapshotError(Exception):
    """Base class for snapshot infrastructure errors."""


class SnapshotDecodeError(SnapshotError):
    """Raised when stored snapshot data cannot be decoded."""


def to_record(element: ElementDescriptor) -> SnapshotRecord:
    """Project one descriptor onto its persisted fields."""
    x, y, width, height = element.frame.as_tuple()
    return SnapshotRecord(
        label=element.label,
        type=element.type.value,
        traits=element.trait_names(),
        enabled=element.enabled,
        frame=SnapshotFrame(x=x, y=y, width=width, height=height),
    )


class SnapshotCodec:
    """Encodes and decodes snapshot documents for one schema version."""

    def __init__(self, version: SchemaVersion = CURRENT_VERSION) -> None:
        self.version = version

    def to_document(
        self,
        elements: Iterable[ElementDescriptor],
        filename: str,
        generated: Optional[datetime] = None,
    ) -> SnapshotDocument:
        """Build a document from elements, keeping their order."""
        records: List[SnapshotRecord] = [to_record(element) for element in elements]
        return SnapshotDocument(
            filename=filename,
            version=str(self.version),
            generated=generated or datetime.now(timezone.utc),
            snapshot=records,
        )

    def encode(self, document: SnapshotDocument) -> str:
        """Render a document as pretty-printed JSON."""
        return document.model_dump_json(indent=2)

    def decode(self, text: str) -> SnapshotDocument:
        """Parse stored JSON into a document.

        Stale documents decode normally; use :meth:`is_outdated` to tell.

        Raises:
            SnapshotDecodeError: If the JSON, its fields or its version are invalid.
        """
        try:
            document = SnapshotDocument.model_validate_json(text)
        except ValidationError as e:
            raise SnapshotDecodeError(f"Unable to decode snapshot: {e}") from e
        return document

    def is_outdated(self, document: SnapshotDocument) -> bool:
        """True when the document predates this codec's schema version."""
        return document.schema_version() < self.version
