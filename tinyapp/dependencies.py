"""
FastAPI dependencies for dependency injection.

This module provides singleton instances of the user directory, URL store,
auth gate and visit tracker that are injected into routes, plus the
session-derived values (logged-in user id, visitor id) every route needs.

Pattern: Dependency Injection
- Routes never touch the session or the stores directly
- Easy to test (override with fresh instances)
"""

import secrets
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Request

from tinyapp.models.user import User
from tinyapp.services.auth import AuthGate
from tinyapp.services.url_store import URLStore
from tinyapp.services.user_directory import UserDirectory
from tinyapp.services.visit_tracker import VisitTracker


SESSION_USER_KEY = "user_id"
SESSION_VISITOR_KEY = "visitor_id"


@lru_cache()
def get_user_directory() -> UserDirectory:
    """
    Get user directory instance (singleton).

    @lru_cache ensures this is called only once, so all requests share
    the same in-memory accounts.
    """
    directory = UserDirectory()
    print("✅ In-memory user directory initialized")
    return directory


@lru_cache()
def get_url_store() -> URLStore:
    """
    Get URL store instance (singleton).

    Returns:
        URLStore using the short code strategy from settings
    """
    store = URLStore()
    print("✅ In-memory URL store initialized")
    return store


@lru_cache()
def get_visit_tracker() -> VisitTracker:
    """Get visit tracker instance (singleton)."""
    return VisitTracker()


def get_auth_gate(
    users: UserDirectory = Depends(get_user_directory)
) -> AuthGate:
    """Auth gate bound to the (possibly overridden) user directory."""
    return AuthGate(users)


def get_session_user_id(request: Request) -> Optional[str]:
    """User id stored in the session at login, if any."""
    return request.session.get(SESSION_USER_KEY)


def get_visitor_id(request: Request) -> str:
    """
    Anonymous visitor id for this browsing session.

    Assigned on first use and kept in the session cookie, so it is stable
    across requests and survives login/logout.
    """
    visitor_id = request.session.get(SESSION_VISITOR_KEY)
    if not visitor_id:
        visitor_id = secrets.token_urlsafe(8)
        request.session[SESSION_VISITOR_KEY] = visitor_id
    return visitor_id


def get_current_user(
    session_user_id: Optional[str] = Depends(get_session_user_id),
    auth: AuthGate = Depends(get_auth_gate)
) -> User:
    """
    Logged-in user, required.

    Raises:
        Unauthenticated: rendered as 401 by the app's error handler
    """
    return auth.require_authenticated(session_user_id)
