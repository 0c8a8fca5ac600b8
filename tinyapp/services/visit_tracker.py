"""
Visit tracking for redirects.

Every followed short link is recorded on its ShortURL entry:
- visit_count is bumped
- the visitor id joins unique_visitors
- a (timestamp, visitor_id) Visit is appended to visit_log

Visitor ids are anonymous per-session ids, unrelated to user accounts.
"""

import threading
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field

from tinyapp.models.url import ShortURL, Visit


class VisitStats(BaseModel):
    """Snapshot of a URL's analytics"""
    short_id: str
    visit_count: int = Field(..., description="Total redirects")
    unique_visitors: int = Field(..., description="Distinct visitor ids")
    visits: List[Visit] = Field(default_factory=list, description="Oldest first")


class VisitTracker:
    """Records redirect events on ShortURL entries"""

    def __init__(self):
        self._lock = threading.Lock()

    def record_visit(
        self,
        entry: ShortURL,
        visitor_id: str,
        now: Optional[datetime] = None
    ) -> Visit:
        """Record one redirect of entry by visitor_id at now (default: current UTC time)"""
        visit = Visit(timestamp=now or datetime.now(timezone.utc), visitor_id=visitor_id)

        # count and log must move together
        with self._lock:
            entry.visit_count += 1
            entry.unique_visitors.add(visitor_id)
            entry.visit_log.append(visit)

        return visit

    def stats(self, entry: ShortURL) -> VisitStats:
        with self._lock:
            return VisitStats(
                short_id=entry.id,
                visit_count=entry.visit_count,
                unique_visitors=len(entry.unique_visitors),
                visits=list(entry.visit_log),
            )
