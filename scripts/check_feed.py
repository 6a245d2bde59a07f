"""Quick headline feed smoke test.

Usage:
  python scripts/check_feed.py -c technology --country us -n 5 --pages 2

Reads configuration from .env via pydantic settings. Requires NEWS_API_KEY.
Loads the first page (plus further pages when asked) and prints a summary.
"""

from __future__ import annotations

import argparse
import asyncio
from typing import Any, Dict, List, Optional

from feed.models.domain import FeedState, FilterParams
from feed.services.controller import create_feed
from feed.settings import get_settings
from feed.utils.logging import configure_from_settings


async def _run(params: FilterParams, pages: int) -> FeedState:
    async with create_feed(params) as feed:
        state = await feed.refresh()
        while state.error is None and state.can_load_more and state.current_page < pages:
            state = await feed.fetch_next()
        return state


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Headline feed smoke test")
    parser.add_argument("-c", "--category", default=None, help="Category (default: NEWS_DEFAULT_CATEGORY)")
    parser.add_argument("--country", default=None, help="Country/locale; pass '' for global headlines")
    parser.add_argument("--page-size", type=int, default=None, help="Page size (default: NEWS_DEFAULT_PAGE_SIZE)")
    parser.add_argument("--pages", type=int, default=1, help="Pages to load (default: 1)")
    parser.add_argument("-n", "--top", type=int, default=5, help="Print top N items (default: 5)")
    args = parser.parse_args(argv)

    cfg = get_settings()
    configure_from_settings(cfg)
    overrides: Dict[str, Any] = {}
    if args.category is not None:
        overrides["category"] = args.category
    if args.country is not None:
        overrides["country"] = args.country
    if args.page_size is not None:
        overrides["page_size"] = args.page_size
    try:
        params = FilterParams.from_settings(cfg, **overrides)
    except ValueError as exc:
        print(f"Config error: {exc}")
        return 2

    print(
        "Config:",
        {
            "provider": cfg.news_provider,
            "category": params.category,
            "country": params.country,
            "page_size": params.page_size,
        },
    )
    state = asyncio.run(_run(params, max(1, args.pages)))
    if state.error:
        print(f"Fetch error: {state.error}")
        return 3
    if state.notice:
        print(f"Notice: {state.notice}")
    print(
        f"Loaded {len(state.articles)} articles over {state.current_page} page(s); "
        f"total={state.total_available} more={state.can_load_more}"
    )
    for idx, article in enumerate(state.articles[: args.top], start=1):
        print(f"{idx}. [{article.source_name}] {article.title[:120]}\n   {article.url}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
