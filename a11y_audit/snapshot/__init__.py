"""Snapshot capture and regression comparison.

This sub-package provides:
- Versioned snapshot documents and their JSON codec
- Positional comparison against a stored baseline
- File-system storage and the per-test capture recorder
"""

from .codec import SnapshotCodec, SnapshotDecodeError, SnapshotError
from .differ import SnapshotDiffer
from .models import CURRENT_VERSION, SchemaVersion, SnapshotDocument, SnapshotFrame, SnapshotRecord
from .recorder import SnapshotRecorder, from_test_node
from .storage import SnapshotStorage, SnapshotStorageError, snapshot_filename

__all__ = [
    "CURRENT_VERSION",
    "SchemaVersion",
    "SnapshotCodec",
    "SnapshotDecodeError",
    "SnapshotDiffer",
    "SnapshotDocument",
    "SnapshotError",
    "SnapshotFrame",
    "SnapshotRecord",
    "SnapshotRecorder",
    "SnapshotStorage",
    "SnapshotStorageError",
    "from_test_node",
    "snapshot_filename",
]
