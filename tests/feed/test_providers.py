import pytest

from feed.models.domain import FilterParams
from feed.providers import NewsAPIAdapter, TheNewsAPIAdapter, get_adapter
from feed.settings import FeedSettings


def _params(**overrides):
    values = {"category": "business", "country": "in", "page_size": 8, "api_key": "key-1"}
    values.update(overrides)
    return FilterParams(**values)


def test_news_api_query_with_locale():
    adapter = NewsAPIAdapter("https://newsapi.org/v2/top-headlines")

    query = adapter.build_query(_params(language="en"), 3, include_locale=True)

    assert query == {
        "apiKey": "key-1",
        "category": "business",
        "pageSize": 8,
        "page": 3,
        "language": "en",
        "country": "in",
    }


def test_news_api_query_without_locale_drops_country():
    adapter = NewsAPIAdapter("https://newsapi.org/v2/top-headlines")

    query = adapter.build_query(_params(), 1, include_locale=False)

    assert "country" not in query
    assert "language" not in query


def test_query_builder_passes_invalid_values_through():
    adapter = NewsAPIAdapter("https://newsapi.org/v2/top-headlines")

    query = adapter.build_query(_params(category="", page_size=0, country=None), 1, include_locale=True)

    assert query["category"] == ""
    assert query["pageSize"] == 0
    assert "country" not in query


def test_news_api_payload_accessors():
    adapter = NewsAPIAdapter("https://newsapi.org/v2/top-headlines")
    ok = {"status": "ok", "totalResults": 34, "articles": [{"title": "a"}]}
    error = {"status": "error", "code": "apiKeyInvalid", "message": "Your API key is invalid."}

    assert adapter.is_error(ok) is False
    assert adapter.extract_items(ok) == [{"title": "a"}]
    assert adapter.extract_total(ok) == 34
    assert adapter.is_error(error) is True
    assert adapter.error_message(error) == "Your API key is invalid."
    assert adapter.extract_items(error) == []
    assert adapter.extract_total({"status": "ok"}) is None


def test_the_news_api_query():
    adapter = TheNewsAPIAdapter("https://api.thenewsapi.com/v1/news/top")

    localized = adapter.build_query(_params(), 2, include_locale=True)
    global_ = adapter.build_query(_params(), 2, include_locale=False)

    assert localized == {"api_token": "key-1", "categories": "business", "limit": 8, "page": 2, "locale": "in"}
    assert "locale" not in global_


def test_the_news_api_payload_accessors():
    adapter = TheNewsAPIAdapter("https://api.thenewsapi.com/v1/news/top")
    ok = {"meta": {"found": 120, "returned": 1, "limit": 3, "page": 1}, "data": [{"title": "b"}]}
    error = {"error": {"code": "invalid_api_token", "message": "Invalid API token."}}

    assert adapter.is_error(ok) is False
    assert adapter.extract_items(ok) == [{"title": "b"}]
    assert adapter.extract_total(ok) == 120
    assert adapter.extract_total({"data": []}) is None
    assert adapter.extract_total({"meta": {"found": "n/a"}}) is None
    assert adapter.is_error(error) is True
    assert adapter.error_message(error) == "Invalid API token."


def test_get_adapter_uses_settings():
    settings = FeedSettings(NEWS_PROVIDER="the_news_api", THE_NEWS_API_ENDPOINT="https://example.com/top")

    adapter = get_adapter(settings=settings)

    assert isinstance(adapter, TheNewsAPIAdapter)
    assert adapter.endpoint == "https://example.com/top"
    assert isinstance(get_adapter("news_api", settings=settings), NewsAPIAdapter)
    with pytest.raises(ValueError):
        get_adapter("bing", settings=settings)
