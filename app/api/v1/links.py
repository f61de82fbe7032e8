"""Canonical resource URIs for hypermedia links and Location headers."""
from typing import Optional
from urllib.parse import quote

from app.config import settings


def city_uri(base_url: str, city_id: str, base_path: Optional[str] = None) -> str:
    """Absolute URI of a single city resource.

    >>> city_uri("http://example.com/", "paris", "/cities")
    'http://example.com/cities/paris'
    """
    if base_path is None:
        base_path = settings.cities_base_path
    return f"{str(base_url).rstrip('/')}{base_path}/{quote(city_id, safe='')}"
