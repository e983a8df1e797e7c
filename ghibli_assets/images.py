"""Image downloading utilities."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import requests

from .errors import DownloadError

logger = logging.getLogger("ghibli_assets")

CHUNK_SIZE = 64 * 1024


def download_image(
    session: requests.Session,
    url: str,
    destination: Path,
    timeout: Optional[float] = None,
) -> Path:
    """Stream ``url`` into ``destination``.

    On any failure ``destination`` is removed, including a stale file left
    there by an earlier run.
    """
    try:
        with session.get(url, stream=True, timeout=timeout) as resp:
            if resp.status_code != 200:
                raise DownloadError(f"Failed to download {url}: {resp.status_code}")
            with destination.open("wb") as handle:
                for chunk in resp.iter_content(chunk_size=CHUNK_SIZE):
                    if chunk:
                        handle.write(chunk)
    except DownloadError:
        destination.unlink(missing_ok=True)
        raise
    except (requests.RequestException, OSError) as exc:
        destination.unlink(missing_ok=True)
        raise DownloadError(f"Failed to download {url}: {exc}") from exc

    logger.debug("Downloaded %s -> %s", url, destination)
    return destination
