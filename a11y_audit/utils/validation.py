"""Validation utility functions for a11y-ui-audit."""

from __future__ import annotations

import re
from typing import Any, Dict, Tuple

from ..core.logger import log

# Characters never allowed in a snapshot storage key
_FORBIDDEN_FILENAME_CHARS = re.compile(r'[()<>:"/\\|?*\s]')


def validate_frame(frame: Any) -> Tuple[bool, str]:
    """Validate a raw frame payload.

    Args:
        frame: Mapping with x, y, width and height.

    Returns:
        Tuple of (is_valid, error_message).
    """
    if not isinstance(frame, dict):
        return False, "Frame must be a dictionary"

    for key in ("x", "y", "width", "height"):
        if key not in frame:
            return False, f"Frame missing '{key}' field"
        value = frame[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False, f"Frame '{key}' must be a number"

    if frame["width"] < 0 or frame["height"] < 0:
        return False, "Frame width and height cannot be negative"

    return True, ""


def validate_element_payload(payload: Dict[str, Any]) -> Tuple[bool, str]:
    """Validate an element payload produced by an element provider.

    Args:
        payload: Element dictionary to validate.

    Returns:
        Tuple of (is_valid, error_message).
    """
    if not isinstance(payload, dict):
        return False, "Element must be a dictionary"

    label = payload.get("label", "")
    if label is not None and not isinstance(label, str):
        return False, "Element label must be a string"

    placeholder = payload.get("placeholder")
    if placeholder is not None and not isinstance(placeholder, str):
        return False, "Element placeholder must be a string"

    if "type" in payload and not isinstance(payload["type"], str):
        return False, "Element type must be a string"

    traits = payload.get("traits") or []
    if isinstance(traits, str) or not isinstance(traits, (list, tuple, set, frozenset)):
        return False, "Element traits must be a list of names"

    if not all(isinstance(name, str) for name in traits):
        return False, "Element trait names must be strings"

    if "frame" in payload:
        valid, error = validate_frame(payload["frame"])
        if not valid:
            return False, error

    if "enabled" in payload and not isinstance(payload["enabled"], bool):
        return False, "Element enabled flag must be a boolean"

    return True, ""


def sanitize_snapshot_filename(filename: str) -> str:
    """Sanitize a snapshot storage key for safe file system usage.

    Forbidden characters are stripped and underscores become hyphens.

    Args:
        filename: Original filename, without extension.

    Returns:
        Sanitized filename.
    """
    sanitized = _FORBIDDEN_FILENAME_CHARS.sub("", filename)
    sanitized = sanitized.replace("_", "-")

    # Remove leading/trailing dots
    sanitized = sanitized.strip(".")

    if not sanitized:
        log.warning(f"Snapshot filename '{filename}' sanitized to nothing")
        sanitized = "unnamed-snapshot"

    # Leave room for the extension
    if len(sanitized) > 250:
        sanitized = sanitized[:250]

    return sanitized
