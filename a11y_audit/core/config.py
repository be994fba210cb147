"""Configuration management for the a11y-ui-audit framework."""

import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Load environment variables
load_dotenv()

DEVICE_IDIOMS = ("phone", "tablet")


class A11yConfig(BaseSettings):
    """Configuration class for accessibility rule evaluation and snapshots."""

    # Size rules
    min_size: int = Field(default=14, ge=0, description="Minimum width/height for any element")
    min_interactive_size: int = Field(default=44, ge=0, description="Minimum width/height for interactive controls")
    interactive_size_all_controls: bool = Field(
        default=False,
        description="Apply the interactive size rule to every control, not only interactive ones",
    )

    # Label rules
    min_meaningful_length: int = Field(default=2, ge=0, description="Labels must be longer than this")
    max_label_length: int = Field(default=40, ge=0)

    # Geometry
    float_comparison_tolerance: float = Field(default=0.1, gt=0, description="Absorbs sub-pixel rounding")
    device_idiom: str = Field(default="phone", description="phone or tablet")
    phone_control_padding: float = Field(default=8, ge=0)
    tablet_control_padding: float = Field(default=12, ge=0)

    # Word lists (English defaults, replaceable per locale)
    nondescriptive_phrases: List[str] = Field(default=["click here", "tap here", "more"])
    image_nouns: List[str] = Field(default=["image", "picture", "graphic", "icon", "photo"])
    filename_tokens: List[str] = Field(
        default=["_", "-", "png", "jpg", "jpeg", "pdf", "avci", "heic", "heif", "svg"]
    )

    # Snapshot storage
    snapshot_reference_dir: str = Field(default="snapshots")
    snapshot_output_dir: str = Field(default=os.path.join("snapshots", "generated"))

    # Framework Configuration
    log_level: str = Field(default="INFO")
    log_dir: Optional[str] = Field(default=None, description="Enables rotated file logs when set")

    class Config:
        """Pydantic configuration for environment loading."""

        env_file = ".env"
        env_prefix = "A11Y_"
        case_sensitive = False
        extra = "ignore"

    def validate_config(self) -> bool:
        """Validate configuration values."""
        if self.min_size < 0 or self.min_interactive_size < 0:
            raise ValueError("Minimum sizes cannot be negative")

        if self.min_meaningful_length < 0 or self.max_label_length < 0:
            raise ValueError("Label length limits cannot be negative")

        if self.float_comparison_tolerance <= 0:
            raise ValueError("Float comparison tolerance must be positive")

        if self.phone_control_padding < 0 or self.tablet_control_padding < 0:
            raise ValueError("Control padding cannot be negative")

        if self.device_idiom not in DEVICE_IDIOMS:
            raise ValueError(f"Invalid device idiom. Must be one of: {list(DEVICE_IDIOMS)}")

        return True

    def control_padding(self) -> float:
        """Padding used by the control spacing check for the configured idiom."""
        if self.device_idiom == "tablet":
            return self.tablet_control_padding
        return self.phone_control_padding


# Global configuration instance
config = A11yConfig()
