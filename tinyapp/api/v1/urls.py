from typing import List
from fastapi import APIRouter, Depends, Response, status
from tinyapp.schemas.url import URLCreate, URLResponse, URLUpdate
from tinyapp.dependencies import get_current_user, get_url_store, get_visit_tracker
from tinyapp.models.user import User
from tinyapp.services.url_store import URLStore
from tinyapp.services.visit_tracker import VisitStats, VisitTracker

router = APIRouter(prefix="/urls", tags=["urls"])


@router.get("/", response_model=List[URLResponse])
async def list_urls(
    user: User = Depends(get_current_user),
    store: URLStore = Depends(get_url_store)
):
    """List the logged-in user's short URLs"""
    return store.list_for_owner(user.id)


@router.post("/", response_model=URLResponse, status_code=status.HTTP_201_CREATED)
async def create_short_url(
    url_data: URLCreate,
    user: User = Depends(get_current_user),
    store: URLStore = Depends(get_url_store)
):
    """Create a new short URL"""
    return store.create(user.id, url_data.long_url)


@router.get("/{short_id}", response_model=URLResponse)
async def get_url_info(
    short_id: str,
    user: User = Depends(get_current_user),
    store: URLStore = Depends(get_url_store)
):
    """Get information about one of your short URLs"""
    return store.get_for_owner(short_id, user.id)


@router.put("/{short_id}", response_model=URLResponse)
async def update_url(
    short_id: str,
    url_data: URLUpdate,
    user: User = Depends(get_current_user),
    store: URLStore = Depends(get_url_store)
):
    """Point a short URL at a new long URL"""
    return store.update(short_id, user.id, url_data.long_url)


@router.get("/{short_id}/stats", response_model=VisitStats)
async def get_url_stats(
    short_id: str,
    user: User = Depends(get_current_user),
    store: URLStore = Depends(get_url_store),
    tracker: VisitTracker = Depends(get_visit_tracker)
):
    """Visit analytics for one of your short URLs"""
    return tracker.stats(store.get_for_owner(short_id, user.id))


@router.delete("/{short_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_url(
    short_id: str,
    user: User = Depends(get_current_user),
    store: URLStore = Depends(get_url_store)
):
    """Delete one of your short URLs"""
    store.delete(short_id, user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
