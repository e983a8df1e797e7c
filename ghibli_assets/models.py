"""Data models used throughout the image pipeline."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .errors import FilmListError


class ImageRole(str, Enum):
    """Artwork kinds downloaded for each film, in processing order."""

    POSTER = "poster"
    BANNER = "banner"

    @property
    def film_field(self) -> str:
        return "image" if self is ImageRole.POSTER else "movie_banner"


@dataclass
class Film:
    """Film record as returned by the films endpoint."""

    id: str
    title: str
    image: Optional[str] = None
    movie_banner: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Film":
        if not isinstance(data, Mapping) or not data.get("id"):
            raise FilmListError(f"Unexpected film record: {data!r}")
        return cls(
            id=str(data["id"]),
            title=str(data.get("title") or data["id"]),
            image=data.get("image") or None,
            movie_banner=data.get("movie_banner") or None,
        )

    def url_for(self, role: ImageRole) -> Optional[str]:
        return getattr(self, role.film_field)


@dataclass
class ImageResult:
    """Outcome of downloading and converting a single image."""

    film_id: str
    role: ImageRole
    public_path: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.public_path is not None


@dataclass
class PipelineResult:
    """Everything produced by one run of the pipeline."""

    films: List[Film]
    results: List[ImageResult] = field(default_factory=list)
    mapping: Dict[str, Dict[str, str]] = field(default_factory=dict)

    @property
    def downloaded_count(self) -> int:
        return sum(1 for result in self.results if result.ok)

    @property
    def expected_count(self) -> int:
        return len(self.films) * len(ImageRole)

    @property
    def failures(self) -> List[ImageResult]:
        return [result for result in self.results if not result.ok]


@dataclass
class SizeSummary:
    """Output directory size with heuristic estimates of the original size."""

    total_bytes: int
    estimated_original_bytes: float
    estimated_savings_bytes: float
