"""Tags API endpoint.

GET /tags - Sorted list of unique video tags
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from vidcat.api.app import get_query_engine
from vidcat.catalog import QueryEngine

router = APIRouter()


@router.get("/tags", response_model=list[str])
def list_tags(engine: QueryEngine = Depends(get_query_engine)) -> list[str]:
    """Get all unique tags, sorted, for populating filter controls."""
    return list(engine.tags)
