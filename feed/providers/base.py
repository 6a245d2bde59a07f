"""Provider adapter abstraction.

Each upstream news API differs only in how a query is spelled and where the
items, total and error live in the response; the feed logic itself is shared.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from feed.models.domain import FilterParams, RawArticle


class ProviderAdapter(ABC):
    """Capability set consumed by the resolver."""

    name: str

    def __init__(self, endpoint: str):
        self.endpoint = endpoint

    @abstractmethod
    def build_query(self, params: FilterParams, page: int, include_locale: bool) -> Dict[str, Any]:
        """Return query parameters for ``page``; no validation of ``params``."""

    @abstractmethod
    def is_error(self, payload: Dict[str, Any]) -> bool:
        """True when the payload carries a provider error indicator."""

    @abstractmethod
    def error_message(self, payload: Dict[str, Any]) -> Optional[str]:
        """Human readable error from an error payload, if any."""

    @abstractmethod
    def extract_items(self, payload: Dict[str, Any]) -> List[RawArticle]:
        ...

    @abstractmethod
    def extract_total(self, payload: Dict[str, Any]) -> Optional[int]:
        ...


def _as_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return None


def _as_list(value: Any) -> List[RawArticle]:
    if isinstance(value, list):
        return value
    return []
