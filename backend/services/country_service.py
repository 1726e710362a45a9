import asyncio
import json
import logging
from pathlib import Path

import httpx
from pydantic import ValidationError

from config import settings
from models.country import ALL_REGIONS, Country, FilterCriterion
from utils.text import SEARCH_NOTICE, normalize, sanitize_search

logger = logging.getLogger(__name__)

_client: httpx.AsyncClient | None = None


class CatalogError(Exception):
    pass


class FetchError(CatalogError):
    """The dataset could not be fetched or parsed."""


class NotFoundError(CatalogError):
    def __init__(self, name: str):
        super().__init__(f'Country with name "{name}" not found!')
        self.name = name


def get_client() -> httpx.AsyncClient:
    global _client
    if _client is None:
        _client = httpx.AsyncClient(timeout=settings.fetch_timeout_seconds)
    return _client


async def close_client():
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


async def _read_remote(url: str, client: httpx.AsyncClient) -> str:
    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.error("Dataset request to %s failed: %s", url, e.response.status_code)
        raise FetchError(f"Failed to fetch JSON: {e.response.reason_phrase}") from e
    except httpx.HTTPError as e:
        logger.error("Dataset request to %s failed: %s", url, e)
        raise FetchError(f"Failed to fetch JSON: {e}") from e
    return response.text


def _read_local(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        logger.error("Dataset %s is not UTF-8: %s", path, e)
        raise FetchError("Dataset is not valid JSON") from e
    except OSError as e:
        logger.error("Cannot read dataset %s: %s", path, e)
        raise FetchError(f"Failed to fetch JSON: {path.name} is not readable") from e


def _parse(raw: str) -> list[Country]:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.error("Dataset is not valid JSON: %s", e)
        raise FetchError("Dataset is not valid JSON") from e

    if not isinstance(data, list):
        logger.error("Dataset root is %s, expected a list", type(data).__name__)
        raise FetchError("Dataset must be a JSON array of countries")

    try:
        return [Country(**c) for c in data]
    except (TypeError, ValidationError) as e:
        logger.error("Dataset contains an invalid country record: %s", e)
        raise FetchError("Dataset contains an invalid country record") from e


async def fetch_dataset(client: httpx.AsyncClient | None = None) -> list[Country]:
    """Load every country, fresh on each call.

    Reads ``settings.dataset_url`` when configured, otherwise the local
    ``settings.data_path`` file. Any failure surfaces as ``FetchError``.
    """
    if settings.dataset_url:
        raw = await _read_remote(settings.dataset_url, client or get_client())
    else:
        raw = await asyncio.to_thread(_read_local, Path(settings.data_path))
    countries = _parse(raw)
    logger.debug("Loaded %d countries", len(countries))
    return countries


def filter_countries(countries: list[Country], criterion: FilterCriterion) -> list[Country]:
    target = normalize(criterion.value)

    if criterion.mode == "region":
        if target == ALL_REGIONS:
            return list(countries)
        return [c for c in countries if normalize(c.region) == target]

    return [c for c in countries if normalize(c.name).startswith(target)]


def criterion_from_params(search: str | None, region: str | None) -> tuple[FilterCriterion, str]:
    """Build the active criterion from request parameters.

    Search text is sanitized first; the returned notice is non-empty when that
    removed characters. Raises ``ValueError`` when both parameters are given.
    A blank region means no region was picked.
    """
    if region is not None and not region.strip():
        region = None
    if search is not None and region is not None:
        raise ValueError("Filter by either search or region, not both")
    if search is not None:
        value, changed = sanitize_search(search)
        return FilterCriterion.search(value), SEARCH_NOTICE if changed else ""
    if region is not None:
        return FilterCriterion.region(region.strip()), ""
    return FilterCriterion.all(), ""


def find_by_name(countries: list[Country], name: str) -> Country | None:
    return next((c for c in countries if c.name == name), None)


def require_by_name(countries: list[Country], name: str) -> Country:
    country = find_by_name(countries, name)
    if country is None:
        raise NotFoundError(name)
    return country


def list_regions(countries: list[Country]) -> list[str]:
    seen: set[str] = set()
    regions: list[str] = []
    for c in countries:
        key = normalize(c.region)
        if key and key not in seen:
            seen.add(key)
            regions.append(c.region)
    return regions
