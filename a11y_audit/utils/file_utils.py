"""File utility functions for a11y-ui-audit."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from ..core.logger import log


def ensure_directory(directory_path: str) -> str:
    """Ensure a directory exists, creating it if necessary.

    Args:
        directory_path: Path to the directory.

    Returns:
        Absolute path to the directory.
    """
    path = Path(directory_path).resolve()
    path.mkdir(parents=True, exist_ok=True)
    return str(path)


def save_text(text: str, filepath: str) -> None:
    """Write text to a file, creating parent directories.

    Raises:
        OSError: If the file cannot be written.
    """
    directory = os.path.dirname(filepath)
    if directory:
        ensure_directory(directory)

    with open(filepath, "w", encoding="utf-8") as f:
        f.write(text)

    log.debug(f"Data saved to {filepath}")


def load_text(filepath: str) -> Optional[str]:
    """Load a text file.

    Args:
        filepath: Path to the file.

    Returns:
        File contents or None if the file is missing or unreadable.
    """
    try:
        if not os.path.exists(filepath):
            log.debug(f"File not found: {filepath}")
            return None

        with open(filepath, "r", encoding="utf-8") as f:
            data = f.read()

        log.debug(f"Data loaded from {filepath}")
        return data

    except (OSError, UnicodeDecodeError) as e:
        log.error(f"Failed to load {filepath}: {e}")
        return None
