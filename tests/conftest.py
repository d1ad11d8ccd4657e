"""Shared pytest fixtures for vidcat tests."""

import json
from datetime import datetime, timezone

import pytest

from vidcat.catalog import QueryEngine, VideoIndex
from vidcat.models.domain import VideoEntity


def _make_video(
    video_id: str,
    title: str | None = None,
    created_at: str = "2024-01-01T12:00:00Z",
    tags: tuple[str, ...] = (),
    duration: int = 60,
    views: int = 0,
) -> VideoEntity:
    parsed = datetime.fromisoformat(created_at)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return VideoEntity(
        id=video_id,
        title=title if title is not None else f"Video {video_id}",
        thumbnail_url=f"https://example.com/{video_id}.jpg",
        created_at=parsed,
        duration=duration,
        views=views,
        tags=tuple(tags),
    )


@pytest.fixture
def make_video():
    """Factory for VideoEntity records with sensible defaults."""
    return _make_video


@pytest.fixture
def sample_videos():
    """Small catalog covering tags, titles and dates."""
    return [
        _make_video("v1", "Intro to Go", "2024-01-05T09:00:00Z", ("go", "tutorial")),
        _make_video("v2", "Banana Bread", "2024-01-05T23:59:59Z", ("cooking",)),
        _make_video("v3", "apple picking", "2024-01-06T00:00:00Z", ("vlog", "outdoors")),
        _make_video("v4", "Advanced Go", "2024-02-10T15:30:00Z", ("go", "advanced")),
        _make_video("v5", "Go for Beginners", "2024-03-01T08:00:00Z", ("go", "tutorial")),
        _make_video("v6", "Cooking with Kids", "2023-12-31T23:59:59Z", ("cooking", "vlog")),
    ]


@pytest.fixture
def index(sample_videos):
    """Index built from sample_videos."""
    return VideoIndex.from_videos(sample_videos)


@pytest.fixture
def engine(index):
    """Query engine over the sample index."""
    return QueryEngine(index)


@pytest.fixture
def snapshot_document():
    """Valid snapshot document as a dict."""
    return {
        "videos": [
            {
                "id": "a",
                "title": "Intro to Go",
                "thumbnail_url": "https://example.com/a.jpg",
                "created_at": "2024-01-05T09:00:00Z",
                "duration": 120,
                "views": 10,
                "tags": ["go", "tutorial"],
            },
            {
                "id": "b",
                "title": "Banana Bread",
                "thumbnail_url": "https://example.com/b.jpg",
                "created_at": "2024-01-06T10:00:00",
                "duration": 300,
                "views": 5,
                "tags": ["cooking"],
            },
        ]
    }


@pytest.fixture
def snapshot_file(tmp_path, snapshot_document):
    """Snapshot document written to a temp file."""
    path = tmp_path / "videos.json"
    path.write_text(json.dumps(snapshot_document), encoding="utf-8")
    return path
