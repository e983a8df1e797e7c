"""Wrappers around the external ``cwebp`` encoder."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import List

from .config import DEFAULT_ENCODER, WEBP_QUALITY
from .errors import ConversionError, EncoderNotFoundError

logger = logging.getLogger("ghibli_assets")

INSTALL_HINT = "Install webp tools (macOS: brew install webp, Linux: apt-get install webp)"


def ensure_encoder(name: str = DEFAULT_ENCODER) -> str:
    """Return the resolved encoder path or raise if it is not installed."""
    resolved = shutil.which(name)
    if resolved is None:
        raise EncoderNotFoundError(f"{name} not found. {INSTALL_HINT}")
    logger.debug("Using encoder %s", resolved)
    return resolved


def build_command(
    source: Path,
    destination: Path,
    quality: int = WEBP_QUALITY,
    encoder: str = DEFAULT_ENCODER,
) -> List[str]:
    return [encoder, "-q", str(quality), str(source), "-o", str(destination)]


def convert_to_webp(
    source: Path,
    destination: Path,
    quality: int = WEBP_QUALITY,
    encoder: str = DEFAULT_ENCODER,
) -> Path:
    """Transcode ``source`` into ``destination`` and delete the source.

    On failure the source file is left where it is.
    """
    command = build_command(source, destination, quality, encoder)
    try:
        subprocess.run(command, check=True, capture_output=True, text=True, errors="replace")
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
        raise ConversionError(f"Failed to convert {source}: {detail}") from exc
    except OSError as exc:
        raise ConversionError(f"Failed to run {encoder}: {exc}") from exc

    try:
        source.unlink()
    except OSError as exc:
        raise ConversionError(f"Converted {source} but could not remove it: {exc}") from exc
    logger.info("Converted to WebP: %s", destination.name)
    return destination
