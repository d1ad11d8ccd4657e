"""Catalog module: video index and query engine.

Structure:
- catalog/index.py  - snapshot loading and the read-only VideoIndex
- catalog/stages.py - pure filter, sort and pagination stages
- catalog/engine.py - QueryEngine composing the stages
"""

# Re-export commonly used items for convenience
from vidcat.catalog.engine import QueryEngine
from vidcat.catalog.index import (
    LoadError,
    VideoIndex,
    load_index,
    parse_snapshot,
    read_snapshot,
)

__all__ = [
    # Index
    "LoadError",
    "VideoIndex",
    "load_index",
    "parse_snapshot",
    "read_snapshot",
    # Engine
    "QueryEngine",
]
