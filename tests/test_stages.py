"""Tests for query pipeline stages.

Each stage is pure and tested on its own.
"""

from datetime import date

import pytest

from vidcat.catalog.stages import (
    collation_key,
    count_pages,
    filter_by_date,
    filter_by_search,
    filter_by_tags,
    paginate,
    sort_videos,
)


def ids(videos):
    return [v.id for v in videos]


class TestFilterByTags:
    """Test tag filter (AND semantics)."""

    def test_no_tags_returns_all_in_load_order(self, index):
        """Empty tags select every record."""
        assert ids(filter_by_tags(index, [])) == ["v1", "v2", "v3", "v4", "v5", "v6"]

    def test_single_tag(self, index):
        """One tag selects its bucket."""
        assert ids(filter_by_tags(index, ["go"])) == ["v1", "v4", "v5"]

    def test_multiple_tags_intersect(self, index):
        """Records must carry every tag."""
        assert ids(filter_by_tags(index, ["go", "tutorial"])) == ["v1", "v5"]

    def test_tag_order_does_not_change_set(self, index):
        """[A, B] and [B, A] select the same records."""
        ab = set(ids(filter_by_tags(index, ["go", "tutorial"])))
        ba = set(ids(filter_by_tags(index, ["tutorial", "go"])))
        assert ab == ba

    def test_unknown_tag_is_empty(self, index):
        """Unknown tag selects nothing."""
        assert filter_by_tags(index, ["nonexistent"]) == []

    def test_unknown_second_tag_is_empty(self, index):
        """Unknown tag anywhere in the list selects nothing."""
        assert filter_by_tags(index, ["go", "nonexistent"]) == []

    def test_disjoint_tags_are_empty(self, index):
        """Tags with no common record select nothing."""
        assert filter_by_tags(index, ["go", "cooking"]) == []


class TestFilterByDate:
    """Test inclusive day-boundary date filter."""

    def test_no_bounds_is_noop(self, sample_videos):
        """No dates keep everything."""
        assert filter_by_date(sample_videos) == sample_videos

    def test_end_date_includes_last_second_of_day(self, sample_videos):
        """23:59:59 on the end date is included."""
        result = filter_by_date(sample_videos, end_date=date(2024, 1, 5))
        assert ids(result) == ["v1", "v2", "v6"]

    def test_start_date_includes_midnight(self, sample_videos):
        """00:00:00 on the start date is included."""
        result = filter_by_date(sample_videos, start_date=date(2024, 1, 6))
        assert ids(result) == ["v3", "v4", "v5"]

    def test_start_date_excludes_previous_day(self, sample_videos):
        """Records before the start day are dropped."""
        result = filter_by_date(sample_videos, start_date=date(2024, 1, 1))
        assert "v6" not in ids(result)

    def test_both_bounds(self, sample_videos):
        """Both bounds together select the closed day range."""
        result = filter_by_date(
            sample_videos, start_date=date(2024, 1, 5), end_date=date(2024, 1, 6)
        )
        assert ids(result) == ["v1", "v2", "v3"]

    def test_same_day_range(self, sample_videos):
        """start == end selects that whole day."""
        result = filter_by_date(
            sample_videos, start_date=date(2024, 1, 5), end_date=date(2024, 1, 5)
        )
        assert ids(result) == ["v1", "v2"]

    def test_inverted_range_is_empty(self, sample_videos):
        """start after end selects nothing."""
        result = filter_by_date(
            sample_videos, start_date=date(2024, 2, 1), end_date=date(2024, 1, 1)
        )
        assert result == []


class TestFilterBySearch:
    """Test case-insensitive title search."""

    @pytest.mark.parametrize("query", ["go", "GO", "Go", "gO"])
    def test_case_insensitive(self, make_video, query):
        """"Intro to Go" matches any casing of "go"."""
        videos = [make_video("x", "Intro to Go")]
        assert ids(filter_by_search(videos, query)) == ["x"]

    def test_substring_match(self, sample_videos):
        """Matches anywhere in the title."""
        assert ids(filter_by_search(sample_videos, "bread")) == ["v2"]

    def test_empty_query_is_noop(self, sample_videos):
        """Empty query keeps everything."""
        assert filter_by_search(sample_videos, "") == sample_videos

    def test_no_match(self, sample_videos):
        """Unmatched query yields nothing."""
        assert filter_by_search(sample_videos, "zebra") == []

    def test_preserves_order(self, sample_videos):
        """Input order is kept."""
        assert ids(filter_by_search(sample_videos, "go")) == ["v1", "v4", "v5"]


class TestSortVideos:
    """Test sort orders and tie-breaking."""

    def test_none_keeps_order(self, sample_videos):
        """No sort keeps input order."""
        assert sort_videos(sample_videos, None) == sample_videos

    def test_date_asc(self, sample_videos):
        """Oldest first."""
        assert ids(sort_videos(sample_videos, "date-asc")) == ["v6", "v1", "v2", "v3", "v4", "v5"]

    def test_date_desc(self, sample_videos):
        """Newest first."""
        assert ids(sort_videos(sample_videos, "date-desc")) == ["v5", "v4", "v3", "v2", "v1", "v6"]

    def test_alpha_asc_ignores_case(self, make_video):
        """apple sorts before Banana."""
        videos = [make_video("b", "Banana"), make_video("a", "apple")]
        assert [v.title for v in sort_videos(videos, "alpha-asc")] == ["apple", "Banana"]

    def test_alpha_desc(self, make_video):
        """Reverse alphabetical."""
        videos = [make_video("a", "apple"), make_video("b", "Banana"), make_video("c", "cherry")]
        assert [v.title for v in sort_videos(videos, "alpha-desc")] == [
            "cherry",
            "Banana",
            "apple",
        ]

    def test_alpha_accents_sort_with_base_letter(self, make_video):
        """Accented letters sort next to their base letter."""
        videos = [make_video("1", "zoo"), make_video("2", "éclair"), make_video("3", "apple")]
        assert [v.title for v in sort_videos(videos, "alpha-asc")] == ["apple", "éclair", "zoo"]

    def test_date_ties_broken_by_id(self, make_video):
        """Equal timestamps order by id ascending in both directions."""
        ts = "2024-01-01T00:00:00Z"
        videos = [make_video(video_id, created_at=ts) for video_id in ("c", "a", "b")]
        assert ids(sort_videos(videos, "date-asc")) == ["a", "b", "c"]
        assert ids(sort_videos(videos, "date-desc")) == ["a", "b", "c"]

    def test_title_ties_broken_by_id(self, make_video):
        """Identical titles order by id ascending."""
        videos = [make_video("z", "Same"), make_video("m", "Same")]
        assert ids(sort_videos(videos, "alpha-asc")) == ["m", "z"]
        assert ids(sort_videos(videos, "alpha-desc")) == ["m", "z"]

    def test_does_not_mutate_input(self, sample_videos):
        """Sorting returns a new list."""
        before = list(sample_videos)
        sort_videos(sample_videos, "alpha-asc")
        assert sample_videos == before


class TestCollationKey:
    """Test the title collation key."""

    def test_case_folds(self):
        """Case differences collapse in the primary key."""
        assert collation_key("Apple")[0] == collation_key("apple")[0]

    def test_total_order_on_case_variants(self):
        """Case variants still compare unequal."""
        assert collation_key("Apple") != collation_key("apple")


class TestPagination:
    """Test page counting and slicing."""

    @pytest.mark.parametrize(
        "total,size,expected",
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 10, 3), (5, 1, 5)],
    )
    def test_count_pages(self, total, size, expected):
        """Pages = ceil(total / size)."""
        assert count_pages(total, size) == expected

    def test_slices_window(self):
        """Page n covers [(n-1)*size, n*size)."""
        assert paginate(list(range(25)), 3, 10) == [20, 21, 22, 23, 24]
        assert paginate(list(range(25)), 1, 10) == list(range(10))

    def test_out_of_range_page_is_empty(self):
        """A page past the end is empty."""
        assert paginate(list(range(5)), 4, 10) == []
