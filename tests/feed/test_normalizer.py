from feed.models.domain import Article
from feed.services.normalizer import normalize_articles


def test_shape_b_article_normalizes():
    raw = {
        "title": "T",
        "snippet": "S",
        "image_url": "u",
        "url": "x",
        "source": "Src",
        "published_at": "2024-01-01",
    }

    (article,) = normalize_articles([raw])

    assert article == Article(
        title="T",
        description="S",
        image_url="u",
        url="x",
        author="Src",
        published_at="2024-01-01",
        source_name="Src",
    )


def test_shape_a_article_normalizes():
    raw = {
        "source": {"id": "bbc-news", "name": "BBC News"},
        "author": "Jane Doe",
        "title": "Markets rally",
        "description": "Stocks climb",
        "url": "https://bbc.co.uk/1",
        "urlToImage": "https://bbc.co.uk/1.jpg",
        "publishedAt": "2024-05-01T10:00:00Z",
        "content": None,
    }

    (article,) = normalize_articles([raw])

    assert article.author == "Jane Doe"
    assert article.source_name == "BBC News"
    assert article.image_url == "https://bbc.co.uk/1.jpg"
    assert article.published_at == "2024-05-01T10:00:00Z"
    assert article.description == "Stocks climb"


def test_description_prefers_description_over_snippet():
    (article,) = normalize_articles([{"description": "long", "snippet": "short", "source": "S"}])

    assert article.description == "long"


def test_missing_fields_become_empty_strings():
    (article,) = normalize_articles([{"source": {"id": None, "name": None}, "author": None, "title": None}])

    assert article.source_name == "Unknown"
    assert article.author == "Unknown"
    assert article.title == ""
    assert article.description == ""
    assert article.image_url == ""
    assert article.url == ""
    assert article.published_at == ""


def test_order_preserved_and_nothing_dropped():
    raws = [{"title": "a", "url": "https://x/1"}, {"title": "a", "url": "https://x/1"}, "garbage", {"title": "c"}]

    articles = normalize_articles(raws)

    assert [a.title for a in articles] == ["a", "a", "", "c"]
    assert articles[2].source_name == "Unknown"
