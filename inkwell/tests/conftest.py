"""Shared fixtures for inkwell tests."""

from datetime import datetime, timezone

import pytest


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Reset all module-level singletons and caches between tests."""
    yield

    # 1. Settings LRU cache
    from inkwell.config import get_settings

    get_settings.cache_clear()

    # 2. In-memory article collection
    import inkwell.services.article_store as store_mod

    store_mod._articles = None

    # 3. Rendered content cache
    import inkwell.routers.articles as articles_mod

    articles_mod._render_cache = None


@pytest.fixture
def mock_settings(monkeypatch):
    """Provide a Settings object with safe test defaults."""
    from inkwell.config import Settings, get_settings

    test_settings = Settings(
        articles_file="",
        mock_latency_ms=0,
        posts_per_page=9,
        related_limit=3,
        render_cache_ttl=60,
        render_cache_size=16,
    )

    get_settings.cache_clear()
    monkeypatch.setattr("inkwell.config.get_settings", lambda: test_settings)

    # Patch get_settings in every module that imports it directly
    for mod_path in [
        "inkwell.logging_config",
        "inkwell.services.article_store",
        "inkwell.routers.articles",
    ]:
        monkeypatch.setattr(f"{mod_path}.get_settings", lambda: test_settings)

    return test_settings


def make_article(
    id=1,
    title="Untitled",
    body="",
    published=True,
    created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    author_name="John Doe",
    read_time_minutes=None,
    tags=(),
):
    """Build an Article with sensible defaults for listing tests."""
    from inkwell.models.article import Article, Author

    return Article(
        id=id,
        title=title,
        body=body,
        published=published,
        created_at=created_at,
        author=Author(id=1, name=author_name),
        read_time_minutes=read_time_minutes,
        tags=list(tags),
    )


@pytest.fixture
def article_factory():
    return make_article
