#!/usr/bin/env python3
"""Generate a demo video snapshot.

Writes a deterministic snapshot of synthetic video records that can be
served by the API and browsed in the dashboard.

Usage:
    python scripts/generate_snapshot.py [--count N] [--seed S] [--output PATH]

This script:
1. Builds N video records from a fixed seed
2. Validates them against the snapshot schema
3. Writes {"videos": [...]} to the output path
"""

from __future__ import annotations

import argparse
import json
import random
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from vidcat.models.types import SnapshotDocument  # noqa: E402

# Constants
DEFAULT_OUTPUT_PATH = PROJECT_ROOT / "data" / "videos.json"
DEFAULT_COUNT = 200
DEFAULT_SEED = 42

EPOCH = datetime(2023, 1, 1, tzinfo=timezone.utc)
SPAN_DAYS = 730

TAG_POOL = [
    "advanced",
    "behind-the-scenes",
    "company",
    "cooking",
    "editing",
    "go",
    "launch",
    "marketing",
    "outdoors",
    "sports",
    "testimonial",
    "tutorial",
    "vlog",
]

TITLE_SUBJECTS = [
    "Color Grading",
    "Product Launch",
    "Trail Running",
    "Banana Bread",
    "Go Generics",
    "Caption Editing",
    "Team Offsite",
    "Customer Story",
    "Studio Lighting",
    "apple picking",
]

TITLE_FORMATS = [
    "{subject} Basics",
    "Intro to {subject}",
    "{subject}: Behind the Scenes",
    "{subject} in 10 Minutes",
    "Advanced {subject}",
    "{subject} Q&A",
]


def build_videos(count: int, seed: int) -> list[dict]:
    """Build synthetic video records.

    Args:
        count: Number of records.
        seed: Random seed for reproducibility.

    Returns:
        List of snapshot video dicts.
    """
    rng = random.Random(seed)
    videos = []

    for i in range(1, count + 1):
        video_id = f"v-{i:04d}"
        title = rng.choice(TITLE_FORMATS).format(subject=rng.choice(TITLE_SUBJECTS))
        created_at = EPOCH + timedelta(seconds=rng.randrange(SPAN_DAYS * 86400))

        videos.append(
            {
                "id": video_id,
                "title": title,
                "thumbnail_url": f"https://picsum.photos/seed/{video_id}/300/200",
                "created_at": created_at.isoformat().replace("+00:00", "Z"),
                "duration": rng.randint(15, 3600),
                "views": rng.randint(0, 250_000),
                "tags": rng.sample(TAG_POOL, k=rng.randint(1, 3)),
            }
        )

    return videos


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Generate a demo video snapshot")
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT, help="Number of videos")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Random seed")
    parser.add_argument(
        "--output", type=Path, default=DEFAULT_OUTPUT_PATH, help="Snapshot output path"
    )
    args = parser.parse_args()

    document = {"videos": build_videos(args.count, args.seed)}

    # Fail early rather than write a snapshot the server would reject
    SnapshotDocument.model_validate(document)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")
    print(f"Wrote {args.count} videos to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
