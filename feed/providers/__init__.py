"""Provider adapters keyed by ``NEWS_PROVIDER``."""

from __future__ import annotations

from typing import Optional

from feed.settings import FeedSettings, get_settings

from .base import ProviderAdapter
from .news_api import NewsAPIAdapter
from .the_news_api import TheNewsAPIAdapter


def get_adapter(name: Optional[str] = None, settings: Optional[FeedSettings] = None) -> ProviderAdapter:
    cfg = settings or get_settings()
    provider = (name or cfg.news_provider).strip().lower()
    if provider == NewsAPIAdapter.name:
        return NewsAPIAdapter(cfg.news_api_endpoint)
    if provider == TheNewsAPIAdapter.name:
        return TheNewsAPIAdapter(cfg.the_news_api_endpoint)
    raise ValueError(f"지원하지 않는 프로바이더입니다: {provider}")


__all__ = ["NewsAPIAdapter", "ProviderAdapter", "TheNewsAPIAdapter", "get_adapter"]
