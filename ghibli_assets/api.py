"""Thin helpers around the Studio Ghibli API."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import requests

from .config import DEFAULT_API_BASE
from .errors import FilmListError
from .models import Film

logger = logging.getLogger("ghibli_assets")

COLLECTION_NAMES = {"people", "locations", "species", "vehicles", "films"}


def fetch_films(
    session: requests.Session,
    api_base: str = DEFAULT_API_BASE,
    timeout: Optional[float] = None,
) -> List[Film]:
    """Fetch every film record; any failure is fatal to the caller."""
    url = f"{api_base.rstrip('/')}/films"
    try:
        resp = session.get(url, timeout=timeout)
        resp.raise_for_status()
        payload = resp.json()
    except requests.RequestException as exc:
        raise FilmListError(f"Failed to fetch films from {url}: {exc}") from exc
    except ValueError as exc:
        raise FilmListError(f"Films response from {url} is not JSON") from exc

    if not isinstance(payload, list):
        raise FilmListError(
            f"Expected a list of films from {url}, got {type(payload).__name__}"
        )
    return [Film.from_dict(item) for item in payload]


def fetch_resource(
    session: requests.Session,
    url: str,
    timeout: Optional[float] = None,
) -> Optional[Any]:
    """Fetch a single API resource, returning ``None`` on any failure."""
    try:
        resp = session.get(url, timeout=timeout)
        resp.raise_for_status()
        return resp.json()
    except (requests.RequestException, ValueError) as exc:
        logger.error("Error fetching %s: %s", url, exc)
        return None


def fetch_film(
    session: requests.Session,
    film_id: str,
    api_base: str = DEFAULT_API_BASE,
    timeout: Optional[float] = None,
) -> Optional[Film]:
    data = fetch_resource(session, f"{api_base.rstrip('/')}/films/{film_id}", timeout)
    if data is None:
        return None
    try:
        return Film.from_dict(data)
    except FilmListError as exc:
        logger.error("Error parsing film %s: %s", film_id, exc)
        return None


def is_valid_resource_url(url: Optional[str]) -> bool:
    """Return True when ``url`` points at one resource rather than a collection."""
    if not url or not isinstance(url, str):
        return False
    parts = [part for part in url.split("/") if part]
    if not parts:
        return False
    return parts[-1] not in COLLECTION_NAMES


def extract_id_from_url(url: str) -> str:
    """Return the last path segment of a resource URL."""
    parts = url.split("/")
    return parts[-1] or (parts[-2] if len(parts) > 1 else "")
