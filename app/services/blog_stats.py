"""
Summary statistics over a list of blogs.

Every function here is pure: it reads an ordered sequence of blog-like
objects, never mutates it and never touches storage. Inputs may be mappings
(JSON payloads) or attribute objects (``BlogDB`` rows); each is normalised to
a ``BlogRecord`` once, on the way in.

Ties are always resolved in favour of whatever appears first in the input.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from math import isfinite
from typing import Any


def _coerce_likes(value: Any) -> int:
    # bool is an int subclass, but True likes makes no sense
    if isinstance(value, bool) or not isinstance(value, int | float):
        return 0
    if isinstance(value, float):
        return int(value) if isfinite(value) else 0
    return value


def _coerce_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass(frozen=True, slots=True)
class BlogRecord:
    """One blog entry as seen by the aggregations."""

    title: str = ""
    author: str = ""
    url: str = ""
    likes: int = 0

    @classmethod
    def from_source(cls, source: Any) -> "BlogRecord":
        """
        Build a record from a mapping or an object with blog attributes.

        Missing or malformed text fields become ``""``; missing, ``None`` or
        non-numeric ``likes`` become ``0``. Extra fields are ignored.
        """
        if isinstance(source, BlogRecord):
            return source
        if isinstance(source, Mapping):
            get = source.get
        else:
            def get(name: str) -> Any:
                return getattr(source, name, None)

        return cls(
            title=_coerce_text(get("title")),
            author=_coerce_text(get("author")),
            url=_coerce_text(get("url")),
            likes=_coerce_likes(get("likes")),
        )


@dataclass(frozen=True, slots=True)
class FavoriteSummary:
    title: str
    author: str
    likes: int


@dataclass(frozen=True, slots=True)
class AuthorBlogCount:
    author: str
    blogs: int


@dataclass(frozen=True, slots=True)
class AuthorLikesTotal:
    author: str
    likes: int


def to_records(blogs: Iterable[Any]) -> list[BlogRecord]:
    """Normalise every entry of ``blogs`` into a ``BlogRecord``, keeping order."""
    return [BlogRecord.from_source(blog) for blog in blogs]


def _group_totals(records: list[BlogRecord], *, weight_by_likes: bool) -> dict[str, int]:
    # dicts keep first-insertion order, which is what the tie-break relies on
    totals: dict[str, int] = {}
    for record in records:
        amount = record.likes if weight_by_likes else 1
        totals[record.author] = totals.get(record.author, 0) + amount
    return totals


def _first_maximum(totals: dict[str, int]) -> tuple[str, int]:
    items = iter(totals.items())
    best_author, best_total = next(items)
    for author, total in items:
        if total > best_total:
            best_author, best_total = author, total
    return best_author, best_total


def total_likes(blogs: Iterable[Any]) -> int:
    """
    Sum the likes of every blog.

    >>> total_likes([])
    0
    >>> total_likes([{"likes": 7}, {"likes": 5}, {}])
    12
    """
    return sum(record.likes for record in to_records(blogs))


def favorite_blog(blogs: Iterable[Any]) -> FavoriteSummary | None:
    """
    Return the most liked blog, or ``None`` when there are no blogs.

    The running favourite is only replaced by a strictly higher like count,
    so among equally liked blogs the earliest one wins.
    """
    records = to_records(blogs)
    if not records:
        return None

    favorite = records[0]
    for record in records[1:]:
        if record.likes > favorite.likes:
            favorite = record

    return FavoriteSummary(title=favorite.title, author=favorite.author, likes=favorite.likes)


def most_blogs(blogs: Iterable[Any]) -> AuthorBlogCount | None:
    """Return the author with the most blogs, or ``None`` when there are no blogs."""
    records = to_records(blogs)
    if not records:
        return None

    author, count = _first_maximum(_group_totals(records, weight_by_likes=False))
    return AuthorBlogCount(author=author, blogs=count)


def most_likes(blogs: Iterable[Any]) -> AuthorLikesTotal | None:
    """
    Return the author whose blogs gathered the most likes in total.

    Returns ``None`` when there are no blogs. When every author sits at zero
    likes the first author in the input is reported with ``likes=0``.
    """
    records = to_records(blogs)
    if not records:
        return None

    author, likes = _first_maximum(_group_totals(records, weight_by_likes=True))
    return AuthorLikesTotal(author=author, likes=likes)
