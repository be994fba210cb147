"""Utility functions for a11y-ui-audit.

This sub-package provides utility functions for:
- File and path operations
- Element payload validation and snapshot key sanitizing
"""

from .file_utils import ensure_directory, load_text, save_text
from .validation import sanitize_snapshot_filename, validate_element_payload, validate_frame

__all__ = [
    "ensure_directory",
    "load_text",
    "save_text",
    "sanitize_snapshot_filename",
    "validate_element_payload",
    "validate_frame",
]
