"""Pydantic models for the persisted snapshot document."""

from __future__ import annotations

from datetime import datetime
from typing import List, NamedTuple

from pydantic import BaseModel, Field, field_validator


class SchemaVersion(NamedTuple):
    """Dotted ``wrapper.record`` schema version, compared numerically."""
    wrapper: int
    record: int

    @classmethod
    def parse(cls, text: str) -> SchemaVersion:
        """Parse ``"1.2"`` into ``SchemaVersion(1, 2)``.

        Raises:
            ValueError: If the text is not two dot-separated integers.
        """
        parts = str(text).strip().split(".")
        if len(parts) != 2 or not all(part.isdigit() for part in parts):
            raise ValueError(f"Invalid snapshot version: {text!r}")
        return cls(int(parts[0]), int(parts[1]))

    def __str__(self) -> str:
        return f"{self.wrapper}.{self.record}"


WRAPPER_VERSION = 1
RECORD_SCHEMA_VERSION = 2
CURRENT_VERSION = SchemaVersion(WRAPPER_VERSION, RECORD_SCHEMA_VERSION)


class SnapshotFrame(BaseModel):
    """Element frame stored at full precision."""
    x: float
    y: float
    width: float
    height: float


class SnapshotRecord(BaseModel):
    """Serializable projection of one element."""
    label: str
    type: str
    traits: List[str] = Field(default_factory=list)
    enabled: bool
    frame: SnapshotFrame


class SnapshotDocument(BaseModel):
    """Versioned container of records; record order is the comparison key."""
    filename: str
    version: str
    generated: datetime
    snapshot: List[SnapshotRecord] = Field(default_factory=list)

    @field_validator("version")
    @classmethod
    def _check_version(cls, value: str) -> str:
        SchemaVersion.parse(value)
        return value

    def schema_version(self) -> SchemaVersion:
        return SchemaVersion.parse(self.version)
