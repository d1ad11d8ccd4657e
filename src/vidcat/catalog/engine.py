"""Video query engine.

Composes the pipeline stages over a read-only VideoIndex. The engine
holds no mutable state, so one instance serves concurrent queries.
"""

from __future__ import annotations

from vidcat.catalog import stages
from vidcat.catalog.index import VideoIndex
from vidcat.models.domain import QueryResult, QuerySpec


class QueryEngine:
    """Answers paginated, filtered, sorted queries over an index."""

    def __init__(self, index: VideoIndex):
        self._index = index

    @property
    def index(self) -> VideoIndex:
        return self._index

    @property
    def tags(self) -> tuple[str, ...]:
        """Sorted unique tags across the catalog."""
        return self._index.sorted_unique_tags

    def query(self, spec: QuerySpec) -> QueryResult:
        """Run a query.

        Args:
            spec: Validated query parameters.

        Returns:
            QueryResult with the requested page and totals for the full
            filtered result set.
        """
        videos = stages.filter_by_tags(self._index, spec.tags)
        videos = stages.filter_by_date(videos, spec.start_date, spec.end_date)
        videos = stages.filter_by_search(videos, spec.search_query)
        videos = stages.sort_videos(videos, spec.sort_by)

        total_videos = len(videos)
        return QueryResult(
            videos=stages.paginate(videos, spec.page, spec.page_size),
            current_page=spec.page,
            page_size=spec.page_size,
            total_pages=stages.count_pages(total_videos, spec.page_size),
            total_videos=total_videos,
            spec=spec,
        )
