"""In-memory video index built from a snapshot.

The index owns the authoritative record store and its derived lookups:
- records_by_id: id -> VideoEntity, in load order
- tag_to_ids: tag -> ids carrying that tag, in load order
- sorted_unique_tags: every distinct tag, sorted

An index is built fully in local scope and returned as a frozen object.
It is never mutated afterwards; a reload builds a new index.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

from pydantic import ValidationError

from vidcat.models.domain import VideoEntity
from vidcat.models.types import SnapshotDocument, SnapshotVideo

logger = logging.getLogger(__name__)


class LoadError(Exception):
    """Snapshot could not be read or parsed."""


def _snapshot_to_entity(video: SnapshotVideo) -> VideoEntity:
    """Convert a snapshot record to a domain entity."""
    return VideoEntity(
        id=video.id,
        title=video.title,
        thumbnail_url=video.thumbnail_url,
        created_at=video.created_at,
        duration=video.duration,
        views=video.views,
        tags=tuple(video.tags),
    )


def parse_snapshot(document: str | bytes) -> list[VideoEntity]:
    """Parse snapshot document text into video entities.

    Args:
        document: JSON text of the form {"videos": [...]}.

    Returns:
        Video entities in document order.

    Raises:
        LoadError: If the text is not valid JSON or violates the schema.
    """
    try:
        snapshot = SnapshotDocument.model_validate_json(document)
    except ValidationError as e:
        raise LoadError(f"Invalid snapshot document: {e}") from e
    return [_snapshot_to_entity(video) for video in snapshot.videos]


def read_snapshot(path: Path) -> list[VideoEntity]:
    """Read and parse a snapshot file.

    Raises:
        LoadError: If the file cannot be read or parsed.
    """
    try:
        document = Path(path).read_bytes()
    except OSError as e:
        raise LoadError(f"Cannot read snapshot {path}: {e}") from e
    return parse_snapshot(document)


@dataclass(frozen=True)
class VideoIndex:
    """Read-only index over a set of video records."""

    records_by_id: Mapping[str, VideoEntity] = field(
        default_factory=lambda: MappingProxyType({})
    )
    tag_to_ids: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    sorted_unique_tags: tuple[str, ...] = ()

    @classmethod
    def empty(cls) -> VideoIndex:
        """Return an index with no records."""
        return cls()

    @classmethod
    def from_videos(cls, videos: Iterable[VideoEntity]) -> VideoIndex:
        """Build an index from video records.

        A later record with an already-seen id replaces the earlier one but
        keeps its position. Buckets are derived from the de-duplicated
        records, so every bucketed id resolves.

        Args:
            videos: Records in load order.

        Returns:
            Fully built index.
        """
        records: dict[str, VideoEntity] = {}
        for video in videos:
            if video.id in records:
                logger.warning(f"Duplicate video id {video.id!r} in snapshot, keeping the last")
            records[video.id] = video

        buckets: dict[str, list[str]] = {}
        for video in records.values():
            for tag in video.tags:
                bucket = buckets.setdefault(tag, [])
                # A record listing the same tag twice is bucketed once
                if not bucket or bucket[-1] != video.id:
                    bucket.append(video.id)

        return cls(
            records_by_id=MappingProxyType(records),
            tag_to_ids=MappingProxyType({tag: tuple(ids) for tag, ids in buckets.items()}),
            sorted_unique_tags=tuple(sorted(buckets)),
        )

    def __len__(self) -> int:
        return len(self.records_by_id)

    def videos(self) -> list[VideoEntity]:
        """All records in load order."""
        return list(self.records_by_id.values())

    def bucket(self, tag: str) -> tuple[str, ...]:
        """Ids carrying tag, in load order. Empty for an unknown tag."""
        return self.tag_to_ids.get(tag, ())

    def videos_by_tag(self, tag: str) -> dict[str, VideoEntity]:
        """All records carrying tag, keyed by id.

        An unknown tag yields an empty mapping rather than an error.
        """
        return {video_id: self.records_by_id[video_id] for video_id in self.bucket(tag)}


def load_index(source: Path | str | bytes) -> VideoIndex:
    """Load an index from a snapshot, degrading to empty on failure.

    Load failures are logged and never propagated, so the API stays
    reachable with an empty catalog.

    Args:
        source: Path to a snapshot file, or the snapshot document itself.

    Returns:
        The built index, or the empty index if loading failed.
    """
    try:
        if isinstance(source, Path):
            videos = read_snapshot(source)
        else:
            videos = parse_snapshot(source)
    except LoadError as e:
        logger.error(f"Failed to load video snapshot, serving empty catalog: {e}")
        return VideoIndex.empty()

    index = VideoIndex.from_videos(videos)
    logger.info(
        f"Loaded {len(index)} videos with {len(index.sorted_unique_tags)} unique tags"
    )
    return index
