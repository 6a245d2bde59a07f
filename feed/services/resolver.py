"""Page fetch with a single regional fallback."""

from __future__ import annotations

from typing import Any, Dict, Optional

from feed.errors import EmptyRegionRecoverable, FetchError, ProviderError
from feed.models.domain import FilterParams, ResolvedPage
from feed.providers.base import ProviderAdapter
from feed.services.transport import TransportFn
from feed.utils.logging import get_logger


FALLBACK_NOTICE = "Showing global headlines because no articles were found for your selected region."
FIRST_PAGE_ERROR = "Unable to fetch news headlines"
LOAD_MORE_ERROR = "Unable to load more headlines"

logger = get_logger(__name__)


class HeadlineResolver:
    """Issues provider requests for one ``FilterParams``.

    A localized request that succeeds with zero items is retried once without
    the locale; failures are never retried.
    """

    def __init__(self, params: FilterParams, adapter: ProviderAdapter, transport: TransportFn):
        self.params = params
        self.adapter = adapter
        self._transport = transport

    async def resolve(self, page: int, include_locale: Optional[bool] = None) -> ResolvedPage:
        use_locale = bool(self.params.country)
        if include_locale is not None:
            use_locale = use_locale and include_locale

        try:
            return await self._fetch(page, use_locale)
        except EmptyRegionRecoverable:
            logger.info(
                "resolve.fallback",
                extra={"provider": self.adapter.name, "page": page, "country": self.params.country},
            )
        resolved = await self._fetch(page, False)
        resolved.notice = FALLBACK_NOTICE
        return resolved

    async def _fetch(self, page: int, include_locale: bool) -> ResolvedPage:
        query = self.adapter.build_query(self.params, page, include_locale)
        logger.debug(
            "resolve.request",
            extra={"provider": self.adapter.name, "page": page, "include_locale": include_locale},
        )
        try:
            payload: Dict[str, Any] = await self._transport(self.adapter.endpoint, query)
        except FetchError as exc:
            logger.warning("resolve.error", extra={"provider": self.adapter.name, "page": page, "error": str(exc)})
            raise
        if self.adapter.is_error(payload):
            default = FIRST_PAGE_ERROR if page <= 1 else LOAD_MORE_ERROR
            message = self.adapter.error_message(payload) or default
            logger.warning("resolve.error", extra={"provider": self.adapter.name, "page": page, "error": message})
            raise ProviderError(message)

        items = self.adapter.extract_items(payload)
        if not items and include_locale:
            raise EmptyRegionRecoverable(f"no items for locale {self.params.country}")
        return ResolvedPage(
            items=items,
            reported_total=self.adapter.extract_total(payload),
            used_locale=include_locale,
        )
