"""Article data models."""

import re
from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator

from inkwell.models.content import BlockNode

ArticleId = int | str


class Author(BaseModel):
    """Article author as shown on cards and bylines."""

    id: int
    name: str = Field(..., min_length=1)
    email: str | None = None
    bio: str | None = None
    avatar: str | None = None


class ArticleSummary(BaseModel):
    """Article metadata for listing display (no body)."""

    id: ArticleId
    title: str = Field(..., min_length=1)
    published: bool
    created_at: datetime
    author: Author
    thumbnail: str | None = None
    read_time_minutes: int | None = Field(default=None, gt=0)
    tags: list[str] = []

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        """Naive timestamps are treated as UTC so every comparison is aware."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @field_validator("tags")
    @classmethod
    def _dedupe_tags(cls, value: list[str]) -> list[str]:
        seen: set[str] = set()
        tags = []
        for tag in value:
            if tag not in seen:
                seen.add(tag)
                tags.append(tag)
        return tags


class Article(ArticleSummary):
    """Full article data, including the raw markup body."""

    body: str = ""

    def summary(self, excerpt_length: int = 160) -> "ArticleCard":
        """Return the listing card for this article."""
        return ArticleCard(
            **self.model_dump(exclude={"body"}),
            excerpt=make_excerpt(self.body, excerpt_length),
        )


class ArticleCard(ArticleSummary):
    """Listing entry: metadata plus a short plain-text excerpt."""

    excerpt: str = ""


class ArticlePage(BaseModel):
    """One page of the article listing."""

    articles: list[ArticleCard]
    total: int
    total_pages: int
    page: int
    page_size: int
    page_numbers: list[int] = []


class ArticleDetail(BaseModel):
    """Single article view with rendered content and related posts."""

    article: ArticleSummary
    content: list[BlockNode]
    formatted_date: str
    time_ago: str = ""
    related: list[ArticleCard] = []


class ArticleDraft(BaseModel):
    """Editor dashboard submission for a new post."""

    title: str = Field(..., min_length=5, max_length=100)
    body: str = Field(..., min_length=50)
    author: Author
    tags: list[str] | str = []
    thumbnail: str | None = None
    read_time_minutes: int | None = Field(default=None, gt=0)
    publish: bool = False

    @field_validator("tags")
    @classmethod
    def _split_tags(cls, value: list[str] | str) -> list[str]:
        """Accept the dashboard's comma-separated tag field as well as a list."""
        if isinstance(value, str):
            value = value.split(",")
        return [t.strip() for t in value if t.strip()]


_LINE_PREFIX_RE = re.compile(r"^(?:#{1,3} |- |\d+\. )")
# Asterisks touching a word are emphasis markers; a lone " * " is kept
_EMPHASIS_RE = re.compile(r"\*+(?=\S)|(?<=\S)\*+")


def make_excerpt(body: str, length: int = 160) -> str:
    """Collapse a markup body into a single line of at most *length* chars."""
    lines = []
    in_fence = False
    for line in body.splitlines():
        line = line.strip()
        if line.startswith("```"):
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        lines.append(_LINE_PREFIX_RE.sub("", line).strip())
    text = " ".join(part for part in lines if part).replace("`", "")
    text = _EMPHASIS_RE.sub("", text)
    if len(text) <= length:
        return text
    return text[:length].rsplit(" ", 1)[0].rstrip(",.;:") + "…"


def time_ago(then: datetime, now: datetime | None = None) -> str:
    """Describe *then* relative to *now*, e.g. "3 days ago" or "in 2 hours".

    Buckets follow the byline on the article page: minutes under 45,
    hours under a day, days under 30, months under a year, then years.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    if then.tzinfo is None:
        then = then.replace(tzinfo=timezone.utc)
    seconds = (now - then).total_seconds()
    future = seconds < 0
    seconds = abs(seconds)
    minutes = round(seconds / 60)
    days = seconds / 86400

    if seconds < 30:
        distance = "less than a minute"
    elif minutes < 2:
        distance = "1 minute"
    elif minutes < 45:
        distance = f"{minutes} minutes"
    elif minutes < 90:
        distance = "about 1 hour"
    elif minutes < 24 * 60:
        distance = f"about {round(minutes / 60)} hours"
    elif days < 1.75:
        distance = "1 day"
    elif days < 30:
        distance = f"{round(days)} days"
    elif days < 45:
        distance = "about 1 month"
    elif days < 60:
        distance = "about 2 months"
    elif days < 365:
        distance = f"{int(days // 30)} months"
    else:
        years, rest = divmod(int(days // 30), 12)
        years = max(years, 1)
        if rest < 3:
            distance = f"about {years} year{'s' if years > 1 else ''}"
        elif rest < 9:
            distance = f"over {years} year{'s' if years > 1 else ''}"
        else:
            distance = f"almost {years + 1} years"
    return f"in {distance}" if future else f"{distance} ago"
