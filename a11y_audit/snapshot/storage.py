"""File-system storage for snapshot baselines."""

from __future__ import annotations

import os
from typing import Optional

from ..core.logger import log
from ..utils.file_utils import load_text, save_text
from ..utils.validation import sanitize_snapshot_filename
from .codec import SnapshotCodec, SnapshotDecodeError, SnapshotError
from .models import SnapshotDocument

SNAPSHOT_EXTENSION = ".json"


class SnapshotStorageError(SnapshotError):
    """Raised when a snapshot cannot be written."""


def snapshot_filename(suite: str, test_name: str, counter: int) -> str:
    """Derive the storage key for one capture.

    ``counter`` distinguishes repeated captures from the same test function.
    """
    return sanitize_snapshot_filename(f"{suite}-{test_name}-{counter}") + SNAPSHOT_EXTENSION


class SnapshotStorage:
    """Reads baselines from a reference directory, writes new ones to an output directory."""

    def __init__(
        self,
        reference_dir: str,
        output_dir: Optional[str] = None,
        codec: Optional[SnapshotCodec] = None,
    ) -> None:
        self.reference_dir = reference_dir
        self.output_dir = output_dir or reference_dir
        self.codec = codec or SnapshotCodec()
        self.last_error: Optional[str] = None

    def reference_path(self, filename: str) -> str:
        return os.path.join(self.reference_dir, filename)

    def output_path(self, filename: str) -> str:
        return os.path.join(self.output_dir, filename)

    def load(self, filename: str) -> Optional[SnapshotDocument]:
        """Load a baseline.

        Returns:
            The document, or None when it is missing or cannot be parsed.
        """
        path = self.reference_path(filename)
        text = load_text(path)
        if text is None:
            log.log_snapshot_event("MISSING", filename, {"path": path})
            return None

        try:
            document = self.codec.decode(text)
        except SnapshotDecodeError as e:
            log.warning(f"Ignoring unreadable snapshot {path}: {e}")
            return None

        log.log_snapshot_event("LOADED", filename, {"version": document.version, "records": len(document.snapshot)})
        return document

    def write(self, document: SnapshotDocument) -> str:
        """Encode and write a document to the output directory.

        Raises:
            SnapshotStorageError: If encoding or writing fails.
        """
        path = self.output_path(document.filename)
        try:
            text = self.codec.encode(document)
        except ValueError as e:
            raise SnapshotStorageError(f"Unable to encode snapshot: {e}") from e
        try:
            save_text(text, path)
        except OSError as e:
            raise SnapshotStorageError(f"Unable to write snapshot to disk: {e}") from e
        return path

    def save(self, document: SnapshotDocument) -> Optional[str]:
        """Write a document, returning its path or None on failure."""
        self.last_error = None
        try:
            path = self.write(document)
        except SnapshotStorageError as e:
            self.last_error = str(e)
            log.error(f"Failed to save snapshot {document.filename}: {e}")
            return None

        log.log_snapshot_event("SAVED", document.filename, {"path": path})
        return path
