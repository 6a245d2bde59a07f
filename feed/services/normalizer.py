"""Map provider-specific raw articles onto the canonical ``Article``."""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping

from feed.models.domain import Article


UNKNOWN_SOURCE = "Unknown"


def _first(item: Mapping[str, Any], *keys: str) -> str:
    for key in keys:
        value = item.get(key)
        if value:
            return str(value)
    return ""


def _source_name(item: Mapping[str, Any]) -> str:
    source = item.get("source")
    if isinstance(source, Mapping):
        source = source.get("name")
    if source:
        return str(source)
    return UNKNOWN_SOURCE


def normalize_article(item: Mapping[str, Any]) -> Article:
    if not isinstance(item, Mapping):
        item = {}
    source_name = _source_name(item)
    return Article(
        title=_first(item, "title"),
        description=_first(item, "description", "snippet"),
        image_url=_first(item, "urlToImage", "image_url"),
        url=_first(item, "url"),
        author=_first(item, "author") or source_name,
        published_at=_first(item, "publishedAt", "published_at"),
        source_name=source_name,
    )


def normalize_articles(items: Iterable[Mapping[str, Any]]) -> List[Article]:
    """One-to-one, order preserving; nothing is dropped or deduplicated."""
    return [normalize_article(item) for item in items]
