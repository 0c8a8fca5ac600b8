from datetime import datetime, timezone
from typing import List, Set

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Visit(BaseModel):
    """One followed redirect"""
    timestamp: datetime = Field(default_factory=_utcnow, description="When the redirect happened")
    visitor_id: str = Field(..., description="Anonymous per-session visitor id")


class ShortURL(BaseModel):
    """
    Short URL entry.

    Invariants (kept by URLStore and VisitTracker):
    - id never changes once assigned
    - owner_id never changes
    - visit_count == len(visit_log)
    - every id in unique_visitors appears in visit_log
    """
    id: str
    long_url: str
    owner_id: str
    visit_count: int = 0
    unique_visitors: Set[str] = Field(default_factory=set)
    visit_log: List[Visit] = Field(default_factory=list)  # insertion ordered
    created_at: datetime = Field(default_factory=_utcnow)
