"""Pydantic models for the vidcat snapshot and API.

Field names here are the compatibility boundary with the dashboard.
Snapshot records and API video items share the same snake_case names;
pagination metadata uses the camelCase names the dashboard reads.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator

from vidcat.models.domain import SortBy


class SnapshotVideo(BaseModel):
    """One video record as stored in the snapshot file."""

    id: str
    title: str
    thumbnail_url: str
    created_at: datetime
    duration: int = Field(ge=0)
    views: int = Field(ge=0)
    tags: list[str]

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Naive timestamps in the snapshot are read as UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class SnapshotDocument(BaseModel):
    """Top-level snapshot document."""

    videos: list[SnapshotVideo]


class Video(BaseModel):
    """Video item for API response."""

    id: str
    title: str
    thumbnail_url: str
    created_at: datetime
    duration: int
    views: int
    tags: list[str]


class AppliedFilters(BaseModel):
    """Echo of the filters applied to a query."""

    tags: list[str]
    searchQuery: str
    startDate: str | None = None
    endDate: str | None = None
    sortBy: SortBy | None = None


class PageMetadata(BaseModel):
    """Pagination metadata for API response."""

    currentPage: int
    pageSize: int
    totalPages: int
    totalVideos: int
    appliedFilters: AppliedFilters


class VideoPage(BaseModel):
    """Paginated video listing for API response."""

    videos: list[Video]
    metadata: PageMetadata
