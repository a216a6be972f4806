"""Article listing, detail, and creation endpoints."""

import hashlib
import logging

from fastapi import APIRouter, HTTPException, Path, Query
from fastapi.responses import HTMLResponse

from inkwell.config import get_settings
from inkwell.models.article import (
    Article,
    ArticleDetail,
    ArticleDraft,
    ArticlePage,
    ArticleSummary,
    time_ago,
)
from inkwell.models.content import BlockNode
from inkwell.services.article_store import add_article, get_article, get_articles
from inkwell.services.cache import TTLCache
from inkwell.services.html_renderer import render_html
from inkwell.services.listing import (
    InvalidQuery,
    ListingQuery,
    page_window,
    query_articles,
    related_articles,
)
from inkwell.services.renderer import MalformedInput, render_markup

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/articles", tags=["articles"])

_ID_PATTERN = r"^[a-zA-Z0-9_-]+$"

# Rendered nodes keyed by (article id, body digest); lazy singleton
_render_cache: TTLCache | None = None


def _get_render_cache() -> TTLCache:
    global _render_cache
    if _render_cache is None:
        settings = get_settings()
        _render_cache = TTLCache(
            ttl=settings.render_cache_ttl, max_size=settings.render_cache_size
        )
    return _render_cache


def _rendered_content(article: Article) -> list[BlockNode]:
    """Render an article body, reusing a cached result while the body is unchanged."""
    digest = hashlib.sha256(article.body.encode("utf-8")).hexdigest()
    key = (str(article.id), digest)
    cache = _get_render_cache()
    nodes = cache.get(key)
    if nodes is None:
        try:
            nodes = render_markup(article.body)
        except MalformedInput as e:
            logger.warning("Article %s has malformed content: %s", article.id, e)
            raise HTTPException(status_code=422, detail=str(e)) from e
        cache.set(key, nodes)
    return nodes


async def _get_published_article(article_id: str) -> Article:
    article = await get_article(article_id)
    if not article or not article.published:
        raise HTTPException(status_code=404, detail="Article not found")
    return article


@router.get("", response_model=ArticlePage)
async def list_articles(
    search: str = Query(
        default="",
        max_length=200,
        description="Case-insensitive match against title, body, and author",
    ),
    sort: str = Query(
        default="newest",
        description="One of newest, oldest, popular, title",
    ),
    page: int = Query(default=1, description="1-based page number"),
    tag: str | None = Query(default=None, description="Only articles with this tag"),
):
    """Get one page of published articles."""
    settings = get_settings()
    query = ListingQuery(
        search=search.strip(),
        sort=sort,
        page=page,
        page_size=settings.posts_per_page,
        tag=tag,
    )
    articles = await get_articles()
    try:
        result = query_articles(articles, query)
    except InvalidQuery as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    return ArticlePage(
        articles=[a.summary() for a in result.articles],
        total=result.total_matched,
        total_pages=result.total_pages,
        page=result.page,
        page_size=result.page_size,
        page_numbers=page_window(result.page, result.total_pages),
    )


@router.post("", response_model=Article, status_code=201)
async def create_article(draft: ArticleDraft):
    """Publish a post or save it as a draft from the editor dashboard."""
    try:
        render_markup(draft.body)
    except MalformedInput as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return await add_article(draft)


@router.get("/{article_id}", response_model=ArticleDetail)
async def get_article_detail(
    article_id: str = Path(..., pattern=_ID_PATTERN, max_length=200),
):
    """Get a single published article with its rendered content."""
    article = await _get_published_article(article_id)
    content = _rendered_content(article)
    related = related_articles(
        await get_articles(), article.id, limit=get_settings().related_limit
    )
    return ArticleDetail(
        article=ArticleSummary(**article.model_dump(exclude={"body"})),
        content=content,
        formatted_date=article.created_at.strftime("%B %d, %Y"),
        time_ago=time_ago(article.created_at),
        related=[a.summary() for a in related],
    )


@router.get("/{article_id}/html")
async def get_article_html(
    article_id: str = Path(..., pattern=_ID_PATTERN, max_length=200),
):
    """Serve the article body as an escaped HTML fragment."""
    article = await _get_published_article(article_id)
    return HTMLResponse(content=render_html(_rendered_content(article)))
