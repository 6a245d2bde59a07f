"""Feed controller: initial load, infinite-scroll paging and staleness.

상태 전이: idle → loading → ready | error, ready → loading_more → ready | error.
필터가 바뀌면 generation을 올리고 상태를 버린 뒤 다시 refresh 한다. 진행 중이던
요청의 응답은 도착 시점에 generation을 비교해 폐기한다 (요청 자체는 취소하지 않음).
"""

from __future__ import annotations

from typing import Callable, Optional

from feed.errors import FetchError
from feed.models.domain import FeedState, FeedStatus, FilterParams
from feed.providers import get_adapter
from feed.providers.base import ProviderAdapter
from feed.services.normalizer import normalize_articles
from feed.services.resolver import FALLBACK_NOTICE, HeadlineResolver
from feed.services.transport import HttpTransport, TransportFn
from feed.settings import FeedSettings, get_settings
from feed.utils.logging import get_logger


ProgressFn = Callable[[int], None]

logger = get_logger(__name__)


class FeedController:
    """Owns one ``FeedState``; a single logical caller drives it."""

    def __init__(
        self,
        params: FilterParams,
        adapter: ProviderAdapter,
        transport: TransportFn,
        *,
        progress: Optional[ProgressFn] = None,
        owned_transport: Optional[HttpTransport] = None,
    ):
        self._adapter = adapter
        self._transport = transport
        self._owned_transport = owned_transport
        self._progress = progress
        self._params = params
        self._resolver = HeadlineResolver(params, adapter, transport)
        self._state = FeedState()

    async def __aenter__(self) -> "FeedController":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owned_transport is not None:
            await self._owned_transport.aclose()

    @property
    def params(self) -> FilterParams:
        return self._params

    def get_state(self) -> FeedState:
        return self._state.model_copy(deep=True)

    async def update_filters(self, params: FilterParams) -> FeedState:
        """Discard everything fetched so far and reload page 1 for ``params``."""
        self._params = params
        self._resolver = HeadlineResolver(params, self._adapter, self._transport)
        self._state = FeedState(generation=self._state.generation + 1)
        return await self.refresh()

    async def refresh(self) -> FeedState:
        state = self._state
        state.generation += 1
        generation = state.generation
        state.status = FeedStatus.LOADING
        state.is_loading = True
        state.error = None
        self._report(10)
        logger.info("feed.refresh.start", extra=self._log_fields(page=1))

        try:
            resolved = await self._resolver.resolve(1)
        except FetchError as exc:
            if self._is_stale(generation):
                return self.get_state()
            # prior articles stay; error is authoritative for the caller
            state.error = str(exc)
            state.status = FeedStatus.ERROR
            state.is_loading = False
            logger.warning("feed.refresh.failed", extra=self._log_fields(page=1, error=str(exc)))
            self._report(100)
            return self.get_state()

        if self._is_stale(generation):
            logger.info("feed.refresh.stale", extra=self._log_fields(page=1, stale_generation=generation))
            return self.get_state()
        self._report(30)

        articles = normalize_articles(resolved.items)
        self._report(70)
        returned = len(articles)
        reported = resolved.reported_total
        state.articles = articles
        state.current_page = 1
        state.total_available = reported if reported is not None else returned
        state.can_load_more = (reported is not None and reported > returned) or returned == self._params.page_size
        state.locale_fallback = resolved.notice is not None
        state.notice = resolved.notice
        state.status = FeedStatus.READY
        state.is_loading = False
        logger.info(
            "feed.refresh.done",
            extra=self._log_fields(
                page=1,
                returned=returned,
                total_available=state.total_available,
                can_load_more=state.can_load_more,
                locale_fallback=state.locale_fallback,
            ),
        )
        self._report(100)
        return self.get_state()

    async def fetch_next(self) -> FeedState:
        """Append the next page; no-op unless the feed is ready with more to load."""
        state = self._state
        if state.status is not FeedStatus.READY or not state.can_load_more:
            logger.debug("feed.fetch_next.skipped", extra=self._log_fields(status=state.status.value))
            return self.get_state()

        generation = state.generation
        next_page = state.current_page + 1
        state.status = FeedStatus.LOADING_MORE
        state.is_loading = True
        logger.info("feed.fetch_next.start", extra=self._log_fields(page=next_page))

        # once page 1 fell back to global headlines, keep paging globally
        include_locale = False if state.locale_fallback else None
        try:
            resolved = await self._resolver.resolve(next_page, include_locale=include_locale)
        except FetchError as exc:
            if self._is_stale(generation):
                return self.get_state()
            state.error = str(exc)
            state.can_load_more = False
            state.status = FeedStatus.ERROR
            state.is_loading = False
            logger.warning("feed.fetch_next.failed", extra=self._log_fields(page=next_page, error=str(exc)))
            return self.get_state()

        if self._is_stale(generation):
            logger.info("feed.fetch_next.stale", extra=self._log_fields(page=next_page, stale_generation=generation))
            return self.get_state()

        articles = normalize_articles(resolved.items)
        appended = len(articles)
        state.articles.extend(articles)
        state.current_page = next_page
        if resolved.reported_total is not None:
            state.total_available = resolved.reported_total
        else:
            state.total_available += appended
        if appended == 0:
            state.can_load_more = False
        else:
            state.can_load_more = (
                state.total_available > len(state.articles) or appended == self._params.page_size
            )
        if resolved.notice is not None:
            state.locale_fallback = True
        state.notice = FALLBACK_NOTICE if state.locale_fallback else None
        state.status = FeedStatus.READY
        state.is_loading = False
        logger.info(
            "feed.fetch_next.done",
            extra=self._log_fields(
                page=next_page,
                returned=appended,
                accumulated=len(state.articles),
                can_load_more=state.can_load_more,
            ),
        )
        return self.get_state()

    def _is_stale(self, generation: int) -> bool:
        return generation != self._state.generation

    def _report(self, percent: int) -> None:
        if self._progress is None:
            return
        try:
            self._progress(percent)
        except Exception:
            logger.exception("feed.progress.error", extra={"percent": percent})

    def _log_fields(self, **fields):
        base = {
            "provider": self._adapter.name,
            "category": self._params.category,
            "country": self._params.country,
            "generation": self._state.generation,
        }
        base.update(fields)
        return base


def create_feed(
    params: FilterParams,
    progress: Optional[ProgressFn] = None,
    *,
    adapter: Optional[ProviderAdapter] = None,
    transport: Optional[TransportFn] = None,
    settings: Optional[FeedSettings] = None,
) -> FeedController:
    """Build a controller; without ``transport`` an owned ``HttpTransport`` is created."""
    owned: Optional[HttpTransport] = None
    if adapter is None or transport is None:
        cfg = settings or get_settings()
        if adapter is None:
            adapter = get_adapter(settings=cfg)
        if transport is None:
            owned = HttpTransport(timeout_s=float(cfg.news_api_timeout_seconds))
            transport = owned
    return FeedController(params, adapter, transport, progress=progress, owned_transport=owned)
