"""Query pipeline stages.

Each filter stage is a pure function taking the previous stage's videos
and returning a new list. The engine composes them in a fixed order:
tags -> date -> search -> sort -> paginate.
"""

from __future__ import annotations

import math
import unicodedata
from datetime import date, datetime, time, timezone
from typing import Sequence

from vidcat.catalog.index import VideoIndex
from vidcat.models.domain import SortBy, VideoEntity

START_OF_DAY = time(0, 0, 0, 0, tzinfo=timezone.utc)
END_OF_DAY = time(23, 59, 59, 999000, tzinfo=timezone.utc)


def filter_by_tags(index: VideoIndex, tags: Sequence[str]) -> list[VideoEntity]:
    """Select records carrying every tag (AND semantics).

    Starts from the first tag's bucket and intersects with each following
    bucket, keeping bucket order. No tags selects every record in load order.
    """
    if not tags:
        return index.videos()

    video_ids = list(index.bucket(tags[0]))
    for tag in tags[1:]:
        if not video_ids:
            break
        next_ids = set(index.bucket(tag))
        video_ids = [video_id for video_id in video_ids if video_id in next_ids]

    return [index.records_by_id[video_id] for video_id in video_ids]


def filter_by_date(
    videos: Sequence[VideoEntity],
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[VideoEntity]:
    """Keep records created within [start_date 00:00, end_date 23:59:59.999] UTC.

    Either bound may be omitted.
    """
    if start_date is None and end_date is None:
        return list(videos)

    start = datetime.combine(start_date, START_OF_DAY) if start_date else None
    end = datetime.combine(end_date, END_OF_DAY) if end_date else None

    result = []
    for video in videos:
        if start is not None and video.created_at < start:
            continue
        if end is not None and video.created_at > end:
            continue
        result.append(video)
    return result


def filter_by_search(videos: Sequence[VideoEntity], search_query: str) -> list[VideoEntity]:
    """Keep records whose title contains search_query, ignoring case.

    An empty query keeps everything.
    """
    if not search_query:
        return list(videos)
    query = search_query.lower()
    return [video for video in videos if query in video.title.lower()]


def collation_key(title: str) -> tuple[str, str, str]:
    """Locale-style sort key for titles.

    Compares accent-stripped case-folded text first, then case-folded text,
    then the raw title, so "apple" < "Banana" and "cafe" < "café".
    """
    folded = title.casefold()
    decomposed = unicodedata.normalize("NFKD", folded)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base, folded, title)


def sort_videos(videos: Sequence[VideoEntity], sort_by: SortBy | None) -> list[VideoEntity]:
    """Sort records by date or title.

    Ties on the sort key are ordered by id ascending in every direction.
    None keeps the input order.
    """
    if sort_by is None:
        return list(videos)

    # Stable sorts: the id order survives the primary sort, including reverse
    by_id = sorted(videos, key=lambda video: video.id)
    if sort_by == "date-asc":
        return sorted(by_id, key=lambda video: video.created_at)
    if sort_by == "date-desc":
        return sorted(by_id, key=lambda video: video.created_at, reverse=True)
    if sort_by == "alpha-asc":
        return sorted(by_id, key=lambda video: collation_key(video.title))
    if sort_by == "alpha-desc":
        return sorted(by_id, key=lambda video: collation_key(video.title), reverse=True)
    raise ValueError(f"Unknown sort order: {sort_by}")


def count_pages(total_videos: int, page_size: int) -> int:
    """Number of pages needed for total_videos. Zero when there are none."""
    return math.ceil(total_videos / page_size)


def paginate(videos: Sequence[VideoEntity], page: int, page_size: int) -> list[VideoEntity]:
    """Slice out a 1-based page. Pages past the end are empty."""
    start = (page - 1) * page_size
    return list(videos[start : start + page_size])
