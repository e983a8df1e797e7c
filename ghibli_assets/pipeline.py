"""High-level orchestration: fetch films, download artwork, write the mapping."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

import requests

from .api import fetch_films
from .config import (
    ORIGINAL_SIZE_FACTOR,
    SAVINGS_FACTOR,
    SAVINGS_PERCENT,
    WEBP_QUALITY,
    PipelineConfig,
)
from .encoder import convert_to_webp, ensure_encoder
from .errors import ConversionError, DownloadError
from .images import download_image
from .models import Film, ImageResult, ImageRole, PipelineResult, SizeSummary

logger = logging.getLogger("ghibli_assets")


def process_image(
    session: requests.Session,
    config: PipelineConfig,
    film: Film,
    role: ImageRole,
) -> ImageResult:
    """Download and convert one image, reporting failure instead of raising."""
    url = film.url_for(role)
    temp_path = config.temp_path(film.id, role.value)
    output_path = config.output_path(film.id, role.value)

    logger.info("  Downloading %s...", role.value)
    try:
        download_image(session, url, temp_path, timeout=config.timeout)
        convert_to_webp(temp_path, output_path, WEBP_QUALITY, config.encoder)
    except (DownloadError, ConversionError) as exc:
        logger.error("  Failed to process %s: %s", role.value, exc)
        return ImageResult(film_id=film.id, role=role, error=str(exc))
    return ImageResult(
        film_id=film.id,
        role=role,
        public_path=config.public_path(film.id, role.value),
    )


def process_film(
    session: requests.Session,
    config: PipelineConfig,
    film: Film,
) -> List[ImageResult]:
    """Process the poster, then the banner; roles without a URL are skipped."""
    logger.info("Processing: %s", film.title)
    results = []
    for role in ImageRole:
        if not film.url_for(role):
            logger.debug("  No %s for %s", role.value, film.id)
            continue
        results.append(process_image(session, config, film, role))
    return results


def build_entry(results: List[ImageResult]) -> Dict[str, str]:
    return {result.role.value: result.public_path for result in results if result.ok}


def write_mapping(mapping: Dict[str, Dict[str, str]], path: Path) -> Path:
    """Overwrite ``path`` with the pretty-printed mapping."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(mapping, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info("Image mapping saved to: %s", path)
    return path


def summarize_directory(images_dir: Path) -> SizeSummary:
    """Sum the size of every file in ``images_dir``.

    The original size and savings are estimates derived from fixed factors,
    not measurements of the downloaded files.
    """
    total = sum(entry.stat().st_size for entry in images_dir.iterdir() if entry.is_file())
    return SizeSummary(
        total_bytes=total,
        estimated_original_bytes=total * ORIGINAL_SIZE_FACTOR,
        estimated_savings_bytes=total * SAVINGS_FACTOR,
    )


def format_summary(result: PipelineResult, summary: SizeSummary) -> str:
    total_kb = summary.total_bytes / 1024
    lines = [
        "Summary:",
        f"   Images downloaded: {result.downloaded_count}/{result.expected_count}",
        f"   Total size (WebP): {total_kb:.2f} KB",
        f"   Estimated original size (JPG): ~{summary.estimated_original_bytes / 1024:.2f} KB",
        f"   Estimated savings: ~{summary.estimated_savings_bytes / 1024:.2f} KB ({SAVINGS_PERCENT}%)",
    ]
    return "\n".join(lines)


def run_pipeline(
    config: PipelineConfig,
    session: Optional[requests.Session] = None,
) -> PipelineResult:
    """Run every stage once, start to finish.

    Raises ``EncoderNotFoundError`` before any network activity when the
    encoder is missing, and ``FilmListError`` when the film list cannot be
    fetched. Per-image failures are recorded in the result.
    """
    ensure_encoder(config.encoder)
    config.images_dir.mkdir(parents=True, exist_ok=True)

    session = session or requests.Session()
    logger.info("Fetching films from API...")
    films = fetch_films(session, config.api_base, timeout=config.timeout)
    logger.info("Found %d films", len(films))

    result = PipelineResult(films=films)
    for film in films:
        film_results = process_film(session, config, film)
        result.results.extend(film_results)
        result.mapping[film.id] = build_entry(film_results)

    write_mapping(result.mapping, config.mapping_file)
    if result.failures:
        logger.warning("%d image(s) could not be processed", len(result.failures))
    return result
