"""Domain models for vidcat.

Pure Python dataclasses representing catalog entities and query inputs.
These models are independent of pydantic and FastAPI and are used by the
index and query engine, keeping them free of any HTTP concerns.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Literal


# ============================================================================
# Video Domain
# ============================================================================


@dataclass(frozen=True)
class VideoEntity:
    """Domain model for a video record. Immutable after load."""

    id: str
    title: str
    thumbnail_url: str
    created_at: datetime
    duration: int
    views: int
    tags: tuple[str, ...] = ()


# ============================================================================
# Query Domain
# ============================================================================

SortBy = Literal["date-asc", "date-desc", "alpha-asc", "alpha-desc"]

SORT_OPTIONS: tuple[SortBy, ...] = ("date-asc", "date-desc", "alpha-asc", "alpha-desc")


@dataclass(frozen=True)
class QuerySpec:
    """Validated filter, sort and pagination parameters for one query.

    Attributes:
        tags: Tags a record must all carry. Empty means no tag constraint.
        search_query: Case-insensitive title substring. Empty is a no-op.
        page: 1-based page number.
        page_size: Records per page, at least 1.
        start_date: Inclusive lower bound on the creation day.
        end_date: Inclusive upper bound on the creation day.
        sort_by: Sort order, or None to keep filter order.
    """

    tags: tuple[str, ...] = ()
    search_query: str = ""
    page: int = 1
    page_size: int = 10
    start_date: date | None = None
    end_date: date | None = None
    sort_by: SortBy | None = None


@dataclass
class QueryResult:
    """One page of query results plus metadata about the full result set."""

    videos: list[VideoEntity]
    current_page: int
    page_size: int
    total_pages: int
    total_videos: int
    spec: QuerySpec = field(default_factory=QuerySpec)
