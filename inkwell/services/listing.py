"""Article listing engine: filter, sort, and paginate an article collection.

Everything here is a pure function of its arguments: the article sequence is
never mutated and repeated calls with the same inputs return equal results.
"""

import math
import re
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from inkwell.models.article import Article, ArticleId

SORT_KEYS = ("newest", "oldest", "popular", "title")

PAGE_WINDOW_SIZE = 5
READ_CHARS_PER_MINUTE = 200

_TAG_RE = re.compile(r"<[^>]*>")


class InvalidQuery(Exception):
    """The listing query cannot be served (bad sort key, page, or page size)."""

    pass


@dataclass(frozen=True)
class ListingQuery:
    """Listing request state, threaded in by the caller."""

    search: str = ""
    sort: str = "newest"
    page: int = 1
    page_size: int = 9
    tag: str | None = None


@dataclass
class ListingResult:
    """One page of matching articles plus pagination metadata."""

    articles: list[Article] = field(default_factory=list)
    total_matched: int = 0
    total_pages: int = 1
    page: int = 1
    page_size: int = 9


def _id_key(article_id: ArticleId) -> tuple[int, Any]:
    # Integer ids order before string ids; within a kind, natural order.
    if isinstance(article_id, int):
        return (0, article_id)
    return (1, article_id)


def _timestamp(created_at: datetime) -> float:
    return created_at.timestamp()


_SORTERS: dict[str, Callable[[Article], tuple]] = {
    "newest": lambda a: (-_timestamp(a.created_at), _id_key(a.id)),
    "oldest": lambda a: (_timestamp(a.created_at), _id_key(a.id)),
    "popular": lambda a: (
        -(a.read_time_minutes or 0),
        -_timestamp(a.created_at),
        _id_key(a.id),
    ),
    "title": lambda a: (a.title, _id_key(a.id)),
}


def validate_query(query: ListingQuery) -> None:
    """Raise InvalidQuery unless the sort key and page numbers are usable."""
    if query.sort not in _SORTERS:
        raise InvalidQuery(
            f"Unknown sort key {query.sort!r}; expected one of {', '.join(SORT_KEYS)}"
        )
    if query.page < 1:
        raise InvalidQuery(f"Page must be a positive integer, got {query.page}")
    if query.page_size < 1:
        raise InvalidQuery(
            f"Page size must be a positive integer, got {query.page_size}"
        )


def matches(article: Article, search: str = "", tag: str | None = None) -> bool:
    """Return True if *article* is public and matches the search term and tag."""
    if not article.published:
        return False

    if tag:
        tag_lower = tag.lower()
        if tag_lower not in [t.lower() for t in article.tags]:
            return False

    if not search:
        return True
    search_lower = search.lower()
    return (
        search_lower in article.title.lower()
        or search_lower in article.body.lower()
        or search_lower in article.author.name.lower()
    )


def count_pages(total_matched: int, page_size: int) -> int:
    """Number of pages for *total_matched* items; an empty listing has one page."""
    return max(1, math.ceil(total_matched / page_size))


def query_articles(articles: Iterable[Article], query: ListingQuery) -> ListingResult:
    """Filter, sort, and paginate *articles* according to *query*.

    A page past the end is not clamped: the result holds an empty slice and
    the real page count so the caller can decide what to show.
    """
    validate_query(query)

    filtered = [a for a in articles if matches(a, query.search, query.tag)]
    ordered = sorted(filtered, key=_SORTERS[query.sort])

    total = len(ordered)
    start = (query.page - 1) * query.page_size
    page = ordered[start : start + query.page_size]

    return ListingResult(
        articles=page,
        total_matched=total,
        total_pages=count_pages(total, query.page_size),
        page=query.page,
        page_size=query.page_size,
    )


def page_window(
    current: int, total_pages: int, size: int = PAGE_WINDOW_SIZE
) -> list[int]:
    """Page numbers shown by the pager: at most *size*, centred on *current*."""
    total_pages = max(1, total_pages)
    if total_pages <= size:
        return list(range(1, total_pages + 1))

    current = min(max(current, 1), total_pages)
    half = size // 2
    if current <= half + 1:
        first = 1
    elif current >= total_pages - half:
        first = total_pages - size + 1
    else:
        first = current - half
    return list(range(first, first + size))


def related_articles(
    articles: Sequence[Article], current_id: ArticleId, limit: int = 3
) -> list[Article]:
    """Other published articles in source order, for the "related" rail."""
    related = [a for a in articles if a.published and a.id != current_id]
    return related[:limit]


def estimate_read_time(body: str) -> int:
    """Rough read time in minutes, as the editor dashboard shows it."""
    chars = len(_TAG_RE.sub("", body))
    return max(1, math.ceil(chars / READ_CHARS_PER_MINUTE))
