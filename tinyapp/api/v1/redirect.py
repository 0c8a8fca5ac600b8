from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from tinyapp.dependencies import get_url_store, get_visit_tracker, get_visitor_id
from tinyapp.exceptions import NotFound
from tinyapp.services.url_store import URLStore
from tinyapp.services.visit_tracker import VisitTracker

router = APIRouter(tags=["redirect"])


@router.get("/u/{short_id}")
async def redirect_to_long_url(
    short_id: str,
    visitor_id: str = Depends(get_visitor_id),
    store: URLStore = Depends(get_url_store),
    tracker: VisitTracker = Depends(get_visit_tracker)
):
    """
    Redirect to the original URL.

    Anyone may follow a short link; no login needed.
    The visit is recorded against the session's anonymous visitor id.
    """
    long_url = store.resolve(short_id)
    if long_url is None:
        raise NotFound()

    tracker.record_visit(store.get(short_id), visitor_id)

    return RedirectResponse(url=long_url, status_code=status.HTTP_302_FOUND)
