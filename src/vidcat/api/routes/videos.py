"""Videos API endpoint.

GET /videos - Paginated video listing with tag, search, date and sort filters
"""

from __future__ import annotations

from datetime import date, datetime

from fastapi import APIRouter, Depends, Query
from fastapi.exceptions import RequestValidationError

from vidcat.api.app import get_query_engine, get_settings
from vidcat.catalog import QueryEngine
from vidcat.config import Settings
from vidcat.models.domain import QueryResult, QuerySpec, SortBy, VideoEntity
from vidcat.models.types import AppliedFilters, PageMetadata, Video, VideoPage

router = APIRouter()


def _parse_date_param(name: str, raw: str | None) -> date | None:
    """Parse an ISO8601 date or datetime query parameter to its calendar date.

    Raises:
        RequestValidationError: If raw is not ISO8601.
    """
    if raw is None or raw == "":
        return None
    try:
        return datetime.fromisoformat(raw).date()
    except ValueError:
        raise RequestValidationError(
            [
                {
                    "type": "value_error",
                    "loc": ("query", name),
                    "msg": f"{name} must be a valid ISO8601 date",
                    "input": raw,
                }
            ]
        ) from None


def _video_to_item(video: VideoEntity) -> Video:
    """Convert VideoEntity to Video."""
    return Video(
        id=video.id,
        title=video.title,
        thumbnail_url=video.thumbnail_url,
        created_at=video.created_at,
        duration=video.duration,
        views=video.views,
        tags=list(video.tags),
    )


def _build_video_page(result: QueryResult) -> VideoPage:
    """Build VideoPage from a QueryResult.

    Args:
        result: Engine output.

    Returns:
        VideoPage with videos and pagination metadata.
    """
    spec = result.spec
    applied = AppliedFilters(
        tags=list(spec.tags),
        searchQuery=spec.search_query,
        startDate=spec.start_date.isoformat() if spec.start_date else None,
        endDate=spec.end_date.isoformat() if spec.end_date else None,
        sortBy=spec.sort_by,
    )

    return VideoPage(
        videos=[_video_to_item(video) for video in result.videos],
        metadata=PageMetadata(
            currentPage=result.current_page,
            pageSize=result.page_size,
            totalPages=result.total_pages,
            totalVideos=result.total_videos,
            appliedFilters=applied,
        ),
    )


@router.get("/videos", response_model=VideoPage, response_model_exclude_none=True)
def list_videos(
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1, alias="pageSize"),
    tags: list[str] = Query([]),
    search: str = Query(""),
    start_date: str | None = Query(None, alias="startDate"),
    end_date: str | None = Query(None, alias="endDate"),
    sort_by: SortBy | None = Query(None, alias="sortBy"),
    engine: QueryEngine = Depends(get_query_engine),
    settings: Settings = Depends(get_settings),
) -> VideoPage:
    """List videos matching the given filters, one page at a time.

    Args:
        page: 1-based page number.
        page_size: Records per page. Defaults to settings.default_page_size.
        tags: Tags every returned video must carry.
        search: Case-insensitive title substring.
        start_date: Earliest creation day, ISO8601.
        end_date: Latest creation day, ISO8601.
        sort_by: Sort order.
        engine: Query engine (injected).
        settings: Application settings (injected).

    Returns:
        VideoPage with the requested page and metadata.

    Raises:
        RequestValidationError: 400 if a date is not ISO8601.
    """
    spec = QuerySpec(
        tags=tuple(tags),
        search_query=search,
        page=page,
        page_size=page_size if page_size is not None else settings.default_page_size,
        start_date=_parse_date_param("startDate", start_date),
        end_date=_parse_date_param("endDate", end_date),
        sort_by=sort_by,
    )

    return _build_video_page(engine.query(spec))
