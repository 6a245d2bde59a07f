"""NewsAPI (newsapi.org) top-headlines adapter."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from feed.models.domain import FilterParams, RawArticle

from .base import ProviderAdapter, _as_int, _as_list


class NewsAPIAdapter(ProviderAdapter):
    """``{status, totalResults, articles[]}`` 형태의 응답을 다룬다.

    오류 응답은 ``{"status": "error", "code": ..., "message": ...}``.
    """

    name = "news_api"

    def build_query(self, params: FilterParams, page: int, include_locale: bool) -> Dict[str, Any]:
        query: Dict[str, Any] = {
            "apiKey": params.api_key.get_secret_value(),
            "category": params.category,
            "pageSize": params.page_size,
            "page": page,
        }
        if params.language:
            query["language"] = params.language
        if include_locale and params.country:
            query["country"] = params.country
        return query

    def is_error(self, payload: Dict[str, Any]) -> bool:
        return payload.get("status") != "ok"

    def error_message(self, payload: Dict[str, Any]) -> Optional[str]:
        message = payload.get("message")
        return str(message) if message else None

    def extract_items(self, payload: Dict[str, Any]) -> List[RawArticle]:
        return _as_list(payload.get("articles"))

    def extract_total(self, payload: Dict[str, Any]) -> Optional[int]:
        return _as_int(payload.get("totalResults"))
