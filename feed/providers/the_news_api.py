"""TheNewsAPI (thenewsapi.com) top-stories adapter."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from feed.models.domain import FilterParams, RawArticle

from .base import ProviderAdapter, _as_int, _as_list


class TheNewsAPIAdapter(ProviderAdapter):
    """``{meta: {found, returned, limit, page}, data[]}`` 형태의 응답을 다룬다.

    오류 응답은 ``{"error": {"code": ..., "message": ...}}``.
    """

    name = "the_news_api"

    def build_query(self, params: FilterParams, page: int, include_locale: bool) -> Dict[str, Any]:
        query: Dict[str, Any] = {
            "api_token": params.api_key.get_secret_value(),
            "categories": params.category,
            "limit": params.page_size,
            "page": page,
        }
        if params.language:
            query["language"] = params.language
        if include_locale and params.country:
            query["locale"] = params.country
        return query

    def is_error(self, payload: Dict[str, Any]) -> bool:
        return bool(payload.get("error"))

    def error_message(self, payload: Dict[str, Any]) -> Optional[str]:
        error = payload.get("error")
        if isinstance(error, dict):
            message = error.get("message") or error.get("code")
            return str(message) if message else None
        if error:
            return str(error)
        return None

    def extract_items(self, payload: Dict[str, Any]) -> List[RawArticle]:
        return _as_list(payload.get("data"))

    def extract_total(self, payload: Dict[str, Any]) -> Optional[int]:
        meta = payload.get("meta")
        if not isinstance(meta, dict):
            return None
        return _as_int(meta.get("found"))
