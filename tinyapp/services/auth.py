from typing import Optional

from tinyapp.exceptions import Unauthenticated
from tinyapp.models.user import User
from tinyapp.services.user_directory import UserDirectory


class AuthGate:
    """
    Resolves the caller from the user id stored in their session.

    The session has already been authenticated at login, so this is an id
    lookup only. Ownership is checked by URLStore, not here.
    """

    def __init__(self, users: UserDirectory):
        self.users = users

    def current_user(self, session_user_id: Optional[str]) -> Optional[User]:
        """User for the session, or None if logged out / unknown id"""
        return self.users.get(session_user_id)

    def require_authenticated(self, session_user_id: Optional[str]) -> User:
        """
        Raises:
            Unauthenticated: No logged-in user for this session
        """
        user = self.current_user(session_user_id)
        if user is None:
            raise Unauthenticated()
        return user
