"""In-memory article store backed by a JSON data file.

Stands in for a real backend: articles are loaded once from the bundled
mock data (or ``settings.articles_file``) and kept in process memory.  Posts
created from the editor dashboard are appended to that list and are lost on
restart.
"""

import asyncio
import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError

from inkwell.config import get_settings
from inkwell.models.article import Article, ArticleDraft, ArticleId
from inkwell.services.listing import estimate_read_time

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
DEFAULT_ARTICLES_FILE = DATA_DIR / "articles.json"

# Lazy singleton, lives for the process lifetime
_articles: list[Article] | None = None


def _articles_path() -> Path:
    settings = get_settings()
    if settings.articles_file:
        return Path(settings.articles_file)
    return DEFAULT_ARTICLES_FILE


def load_articles(path: Path) -> list[Article]:
    """Read and validate an article collection from *path*.

    Raises ValueError when two articles share an id.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        # Handle both list format and dict format ({"articles": [...]})
        if isinstance(data, dict):
            data = data.get("articles", [])
        articles = [Article(**a) for a in data]
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error("Could not load articles from %s: %s", path, e)
        raise

    seen: set[ArticleId] = set()
    for article in articles:
        if article.id in seen:
            raise ValueError(f"Duplicate article id {article.id!r} in {path}")
        seen.add(article.id)

    logger.info("Loaded %d articles from %s", len(articles), path)
    return articles


def _get_collection() -> list[Article]:
    """Return the shared article list, loading it on first use."""
    global _articles
    if _articles is None:
        _articles = load_articles(_articles_path())
    return _articles


async def _simulate_latency() -> None:
    delay_ms = get_settings().mock_latency_ms
    if delay_ms > 0:
        await asyncio.sleep(delay_ms / 1000)


async def get_articles() -> list[Article]:
    """Return a snapshot of every article, published or not."""
    await _simulate_latency()
    return list(_get_collection())


async def get_article(article_id: ArticleId) -> Article | None:
    """Look up one article by id.

    Path parameters arrive as strings, so an integer id also matches its
    decimal string form.
    """
    await _simulate_latency()
    key = str(article_id)
    for article in _get_collection():
        if article.id == article_id or str(article.id) == key:
            return article
    return None


def _next_id(articles: list[Article]) -> int:
    int_ids = [a.id for a in articles if isinstance(a.id, int)]
    return max(int_ids, default=0) + 1


async def add_article(draft: ArticleDraft) -> Article:
    """Create a post from an editor draft and add it to the collection."""
    articles = _get_collection()
    article = Article(
        id=_next_id(articles),
        title=draft.title,
        body=draft.body,
        published=draft.publish,
        created_at=datetime.now(timezone.utc),
        author=draft.author,
        thumbnail=draft.thumbnail or None,
        read_time_minutes=draft.read_time_minutes or estimate_read_time(draft.body),
        tags=list(draft.tags),
    )
    articles.append(article)
    logger.info(
        "Created %s article %s: %s",
        "published" if article.published else "draft",
        article.id,
        article.title[:50],
    )
    return article


def article_count() -> int:
    """Number of articles currently held, without simulated latency."""
    return len(_get_collection())
