# tests/services/test_blog_stats.py
"""Tests for app/services/blog_stats.py module."""

from types import SimpleNamespace

import pytest

from app.services.blog_stats import (
    AuthorBlogCount,
    AuthorLikesTotal,
    BlogRecord,
    FavoriteSummary,
    favorite_blog,
    most_blogs,
    most_likes,
    to_records,
    total_likes,
)


class TestBlogRecord:
    """Tests for BlogRecord normalisation."""

    def test_from_mapping(self) -> None:
        record = BlogRecord.from_source({"title": "t", "author": "a", "url": "u", "likes": 4})
        assert record == BlogRecord(title="t", author="a", url="u", likes=4)

    def test_from_attribute_object(self) -> None:
        """ORM rows and other attribute objects are read the same way as mappings."""
        source = SimpleNamespace(title="t", author="a", url="u", likes=9, id="ignored")
        assert BlogRecord.from_source(source) == BlogRecord(title="t", author="a", url="u", likes=9)

    def test_missing_fields_default(self) -> None:
        assert BlogRecord.from_source({}) == BlogRecord(title="", author="", url="", likes=0)

    @pytest.mark.parametrize("likes", [None, "12", True, float("nan"), [3]])
    def test_malformed_likes_become_zero(self, likes: object) -> None:
        assert BlogRecord.from_source({"likes": likes}).likes == 0

    def test_float_likes_truncated(self) -> None:
        assert BlogRecord.from_source({"likes": 4.0}).likes == 4

    def test_existing_record_returned_unchanged(self) -> None:
        record = BlogRecord(title="t", likes=1)
        assert BlogRecord.from_source(record) is record

    def test_to_records_keeps_order(self, four_blogs: list[dict[str, object]]) -> None:
        records = to_records(four_blogs)
        assert [r.title for r in records] == ["hello", "bye", "cat", "dog"]


class TestTotalLikes:
    """Tests for total_likes."""

    def test_empty_list_is_zero(self) -> None:
        assert total_likes([]) == 0

    def test_single_blog_equals_its_likes(self) -> None:
        assert total_likes([{"title": "only", "author": "x", "likes": 5}]) == 5

    def test_six_blogs(self, six_blogs: list[dict[str, object]]) -> None:
        assert total_likes(six_blogs) == 36

    def test_order_independent(self, six_blogs: list[dict[str, object]]) -> None:
        assert total_likes(list(reversed(six_blogs))) == total_likes(six_blogs)

    def test_missing_likes_count_as_zero(self) -> None:
        assert total_likes([{"likes": 7}, {"title": "no likes"}, {"likes": None}]) == 7

    def test_accepts_generator(self, six_blogs: list[dict[str, object]]) -> None:
        assert total_likes(blog for blog in six_blogs) == 36

    def test_input_not_mutated(self, six_blogs: list[dict[str, object]]) -> None:
        snapshot = [dict(blog) for blog in six_blogs]
        total_likes(six_blogs)
        assert six_blogs == snapshot


class TestFavoriteBlog:
    """Tests for favorite_blog."""

    def test_empty_list_is_none(self) -> None:
        assert favorite_blog([]) is None

    def test_six_blogs(self, six_blogs: list[dict[str, object]]) -> None:
        assert favorite_blog(six_blogs) == FavoriteSummary(
            title="Canonical string reduction",
            author="Edsger W. Dijkstra",
            likes=12,
        )

    def test_first_of_equally_liked_wins(self) -> None:
        blogs = [
            {"title": "a", "author": "x", "likes": 3},
            {"title": "b", "author": "y", "likes": 9},
            {"title": "c", "author": "z", "likes": 9},
        ]
        assert favorite_blog(blogs) == FavoriteSummary(title="b", author="y", likes=9)

    def test_all_zero_likes_returns_first(self) -> None:
        blogs = [{"title": "a", "author": "x"}, {"title": "b", "author": "y", "likes": 0}]
        assert favorite_blog(blogs) == FavoriteSummary(title="a", author="x", likes=0)

    def test_projection_drops_url(self, six_blogs: list[dict[str, object]]) -> None:
        favorite = favorite_blog(six_blogs)
        assert favorite is not None
        assert not hasattr(favorite, "url")


class TestMostBlogs:
    """Tests for most_blogs."""

    def test_empty_list_is_none(self) -> None:
        assert most_blogs([]) is None

    def test_four_blogs(self, four_blogs: list[dict[str, object]]) -> None:
        assert most_blogs(four_blogs) == AuthorBlogCount(author="Aziz", blogs=2)

    def test_six_blogs(self, six_blogs: list[dict[str, object]]) -> None:
        assert most_blogs(six_blogs) == AuthorBlogCount(author="Robert C. Martin", blogs=3)

    def test_tie_goes_to_first_author(self) -> None:
        blogs = [
            {"author": "x"},
            {"author": "y"},
            {"author": "y"},
            {"author": "x"},
        ]
        assert most_blogs(blogs) == AuthorBlogCount(author="x", blogs=2)

    def test_empty_author_is_a_group(self) -> None:
        blogs = [{"author": ""}, {"author": ""}, {"author": "x"}]
        assert most_blogs(blogs) == AuthorBlogCount(author="", blogs=2)


class TestMostLikes:
    """Tests for most_likes."""

    def test_empty_list_is_none(self) -> None:
        assert most_likes([]) is None

    def test_four_blogs(self, four_blogs: list[dict[str, object]]) -> None:
        assert most_likes(four_blogs) == AuthorLikesTotal(author="Aziz", likes=3356)

    def test_six_blogs(self, six_blogs: list[dict[str, object]]) -> None:
        assert most_likes(six_blogs) == AuthorLikesTotal(author="Edsger W. Dijkstra", likes=17)

    def test_tie_goes_to_first_author(self) -> None:
        blogs = [
            {"author": "x", "likes": 4},
            {"author": "y", "likes": 10},
            {"author": "x", "likes": 6},
        ]
        assert most_likes(blogs) == AuthorLikesTotal(author="x", likes=10)

    def test_all_zero_likes_returns_first_author(self) -> None:
        blogs = [{"author": "x"}, {"author": "y", "likes": 0}]
        assert most_likes(blogs) == AuthorLikesTotal(author="x", likes=0)

    def test_works_on_attribute_objects(self, four_blogs: list[dict[str, object]]) -> None:
        rows = [SimpleNamespace(**blog) for blog in four_blogs]
        assert most_likes(rows) == AuthorLikesTotal(author="Aziz", likes=3356)
