#!/usr/bin/env python3
"""Smoke test for a video snapshot.

Loads a snapshot into the index and validates the index invariants and
a handful of queries against it.

Usage:
    python scripts/smoke_catalog.py [SNAPSHOT_PATH]

Exit codes:
    0: All checks passed
    1: Some checks failed
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from vidcat.catalog import LoadError, QueryEngine, VideoIndex, read_snapshot  # noqa: E402
from vidcat.models.domain import SORT_OPTIONS, QuerySpec  # noqa: E402

# Constants
DEFAULT_SNAPSHOT_PATH = PROJECT_ROOT / "data" / "videos.json"


def check_buckets_resolve(index: VideoIndex) -> bool:
    """Check that every bucketed id exists in the record store."""
    missing = [
        (tag, video_id)
        for tag, ids in index.tag_to_ids.items()
        for video_id in ids
        if video_id not in index.records_by_id
    ]
    if missing:
        print(f"FAIL: {len(missing)} bucketed ids have no record")
        for tag, video_id in missing[:5]:
            print(f"    {tag}: {video_id}")
        return False
    print(f"OK: All {len(index.tag_to_ids)} tag buckets resolve")
    return True


def check_tag_list(index: VideoIndex) -> bool:
    """Check that the tag list equals the sorted bucket keys."""
    if list(index.sorted_unique_tags) != sorted(index.tag_to_ids):
        print("FAIL: Tag list does not match tag buckets")
        return False
    print(f"OK: Tag list has {len(index.sorted_unique_tags)} tags")
    return True


def check_pagination(engine: QueryEngine) -> bool:
    """Check that paging through all results visits every record once."""
    page_size = 7
    first = engine.query(QuerySpec(page_size=page_size))

    seen: list[str] = []
    for page in range(1, first.total_pages + 2):
        result = engine.query(QuerySpec(page=page, page_size=page_size))
        seen.extend(video.id for video in result.videos)

    if len(seen) != len(engine.index) or len(set(seen)) != len(seen):
        print(f"FAIL: Paged {len(seen)} records, expected {len(engine.index)} unique")
        return False
    print(f"OK: {first.total_pages} pages cover {len(seen)} records")
    return True


def check_sort_orders(engine: QueryEngine) -> bool:
    """Check that every sort order returns the full result set."""
    all_ok = True
    for sort_by in SORT_OPTIONS:
        result = engine.query(QuerySpec(page_size=max(len(engine.index), 1), sort_by=sort_by))
        if result.total_videos != len(engine.index):
            print(f"    FAIL: {sort_by} returned {result.total_videos} records")
            all_ok = False
        else:
            print(f"    OK: {sort_by}")
    return all_ok


def main() -> int:
    """Main entry point."""
    snapshot_path = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_SNAPSHOT_PATH

    print("=" * 60)
    print("vidcat Snapshot Smoke Test")
    print("=" * 60)

    # Check 1: Snapshot loads
    print("\n[1/4] Loading snapshot...")
    try:
        videos = read_snapshot(snapshot_path)
    except LoadError as e:
        print(f"FAIL: {e}")
        print("\n" + "=" * 60)
        print("RESULT: snapshot could not be loaded")
        print("Run 'python scripts/generate_snapshot.py' first!")
        print("=" * 60)
        return 1
    print(f"OK: Read {len(videos)} records from {snapshot_path}")

    index = VideoIndex.from_videos(videos)
    engine = QueryEngine(index)

    checks_passed = 1
    checks_failed = 0

    # Check 2: Index invariants
    print("\n[2/4] Checking index invariants...")
    if check_buckets_resolve(index) and check_tag_list(index):
        checks_passed += 1
    else:
        checks_failed += 1

    # Check 3: Pagination
    print("\n[3/4] Checking pagination...")
    if check_pagination(engine):
        checks_passed += 1
    else:
        checks_failed += 1

    # Check 4: Sort orders
    print("\n[4/4] Checking sort orders...")
    if check_sort_orders(engine):
        checks_passed += 1
    else:
        checks_failed += 1

    # Summary
    print("\n" + "=" * 60)
    if checks_failed == 0:
        print(f"RESULT: ALL PASSED ({checks_passed} checks)")
        print("=" * 60)
        return 0
    else:
        print(f"RESULT: {checks_passed} passed, {checks_failed} failed")
        print("=" * 60)
        return 1


if __name__ == "__main__":
    sys.exit(main())
