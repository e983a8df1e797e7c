"""Configuration objects and constants for the image pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_API_BASE = "https://ghibliapi.vercel.app"
DEFAULT_ENCODER = "cwebp"

# Not exposed on the command line.
WEBP_QUALITY = 60

SOURCE_EXTENSION = "jpg"
TARGET_EXTENSION = "webp"
PUBLIC_PREFIX = "/images"
PLACEHOLDER_IMAGE = f"{PUBLIC_PREFIX}/placeholder.{TARGET_EXTENSION}"

# Heuristics for the summary; the original JPG sizes are never measured.
ORIGINAL_SIZE_FACTOR = 2.7
SAVINGS_FACTOR = 1.7
SAVINGS_PERCENT = 63

DEFAULT_IMAGES_DIR = Path("public") / "images"
DEFAULT_MAPPING_FILE = Path("lib") / "image-mapping.json"


@dataclass
class PipelineConfig:
    """Paths and endpoints used by a single pipeline run."""

    images_dir: Path
    mapping_file: Path
    api_base: str = DEFAULT_API_BASE
    encoder: str = DEFAULT_ENCODER
    timeout: Optional[float] = None

    @classmethod
    def from_root(cls, root: Path, **overrides) -> "PipelineConfig":
        """Build a config using the site layout under ``root``."""
        return cls(
            images_dir=root / DEFAULT_IMAGES_DIR,
            mapping_file=root / DEFAULT_MAPPING_FILE,
            **overrides,
        )

    def temp_path(self, film_id: str, role: str) -> Path:
        return self.images_dir / f"{film_id}-{role}.{SOURCE_EXTENSION}"

    def output_path(self, film_id: str, role: str) -> Path:
        return self.images_dir / f"{film_id}-{role}.{TARGET_EXTENSION}"

    def public_path(self, film_id: str, role: str) -> str:
        """Site-relative path recorded in the mapping file."""
        return f"{PUBLIC_PREFIX}/{film_id}-{role}.{TARGET_EXTENSION}"
