"""Paginated news headline feed."""

from .errors import FeedError, FetchError, ProviderError, TransportError  # noqa: F401
from .models.domain import Article, FeedState, FeedStatus, FilterParams  # noqa: F401
from .services.controller import FeedController, create_feed  # noqa: F401
from .settings import FeedSettings, get_settings, reset_settings_cache  # noqa: F401

__all__ = [
    "Article",
    "FeedController",
    "FeedError",
    "FeedSettings",
    "FeedState",
    "FeedStatus",
    "FetchError",
    "FilterParams",
    "ProviderError",
    "TransportError",
    "create_feed",
    "get_settings",
    "reset_settings_cache",
]
