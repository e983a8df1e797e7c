"""Resolve film ids to the optimized images listed in the mapping file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from .config import DEFAULT_MAPPING_FILE, PLACEHOLDER_IMAGE
from .models import ImageRole

logger = logging.getLogger("ghibli_assets")


class ImageLookup:
    """Read-only view over a mapping file."""

    def __init__(self, mapping: Dict[str, Dict[str, str]]):
        self.mapping = mapping

    @classmethod
    def from_file(cls, path: Path) -> "ImageLookup":
        """Load ``path``; a missing file yields an empty lookup."""
        if not path.exists():
            logger.warning("Image mapping %s not found; using placeholders", path)
            return cls({})
        with path.open("r", encoding="utf-8") as handle:
            return cls(json.load(handle))

    def _get(self, film_id: str, role: ImageRole, fallback: str) -> str:
        entry = self.mapping.get(film_id) or {}
        return entry.get(role.value) or fallback

    def get_film_poster(self, film_id: str, fallback: str = PLACEHOLDER_IMAGE) -> str:
        return self._get(film_id, ImageRole.POSTER, fallback)

    def get_film_banner(self, film_id: str, fallback: str = PLACEHOLDER_IMAGE) -> str:
        return self._get(film_id, ImageRole.BANNER, fallback)


_default_lookup: Optional[ImageLookup] = None


def default_lookup() -> ImageLookup:
    global _default_lookup
    if _default_lookup is None:
        _default_lookup = ImageLookup.from_file(DEFAULT_MAPPING_FILE)
    return _default_lookup


def get_film_poster(film_id: str, fallback: str = PLACEHOLDER_IMAGE) -> str:
    return default_lookup().get_film_poster(film_id, fallback)


def get_film_banner(film_id: str, fallback: str = PLACEHOLDER_IMAGE) -> str:
    return default_lookup().get_film_banner(film_id, fallback)
