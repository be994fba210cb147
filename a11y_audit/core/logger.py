"""a11y-ui-audit structured logging system."""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING, Any

from loguru import logger

from .config import config

if TYPE_CHECKING:
    from .findings import Finding


class Logger:
    """Structured logging system for the accessibility audit framework."""

    def __init__(self, name: str = "a11y") -> None:
        """Initialize and configure a *Loguru* logger instance."""
        self.name = name
        self._setup_logger()

    def _setup_logger(self) -> None:
        """Configure the logger with proper formatting and handlers."""
        # Remove default handler
        logger.remove()

        # ------------------------------------------------------------------
        # Console handler
        # ------------------------------------------------------------------
        console_format = (
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level:<8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        )

        logger.add(
            sys.stderr,
            format=console_format,
            level=config.log_level,
            colorize=True,
        )

        if not config.log_dir:
            return

        # ------------------------------------------------------------------
        # File handlers
        # ------------------------------------------------------------------
        os.makedirs(config.log_dir, exist_ok=True)
        file_format = (
            "{time:YYYY-MM-DD HH:mm:ss} | {level:<8} | "
            "{name}:{function}:{line} | {message}"
        )

        logger.add(
            os.path.join(config.log_dir, "a11y_{time:YYYY-MM-DD}.log"),
            format=file_format,
            level="DEBUG",
            rotation="1 day",
            retention="30 days",
            compression="zip",
        )

        # Separate error log
        logger.add(
            os.path.join(config.log_dir, "errors_{time:YYYY-MM-DD}.log"),
            format=file_format,
            level="ERROR",
            rotation="1 day",
            retention="90 days",
            compression="zip",
        )

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message."""
        logger.info(f"[{self.name}] {message}", **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message."""
        logger.debug(f"[{self.name}] {message}", **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message."""
        logger.warning(f"[{self.name}] {message}", **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log error message."""
        logger.error(f"[{self.name}] {message}", **kwargs)

    def log_finding(self, finding: "Finding") -> None:
        """Log a finding at the level matching its severity."""
        msg = f"A11Y {finding.severity.value.upper()}: {finding.describe()}"
        if finding.is_failure:
            self.error(msg)
        else:
            self.warning(msg)

    def log_pass_summary(self, element_count: int, warnings: int, failures: int) -> None:
        """Log the outcome of one evaluation pass."""
        self.info(
            f"EVALUATION PASS: {element_count} elements | "
            f"{warnings} warnings, {failures} failures"
        )

    def log_snapshot_event(self, event: str, filename: str, details: dict[str, Any] | None = None) -> None:
        """Log snapshot storage activity."""
        message = f"SNAPSHOT {event}: {filename}"
        if details:
            message += f" | Details: {details}"
        self.debug(message)


# Global logger instance
log = Logger()
