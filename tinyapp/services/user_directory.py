import threading
from typing import Dict, Optional

import bcrypt

from tinyapp.config import settings
from tinyapp.exceptions import EmailAlreadyRegistered, InvalidCredentials
from tinyapp.models.user import User
from tinyapp.services.short_code_factory import ShortCodeFactory
from tinyapp.services.short_code_strategies import ShortCodeStrategy


# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class UserDirectory:
    """
    In-memory registry of user accounts.

    Users are keyed by id and can be looked up by email. Passwords are hashed
    with bcrypt on registration and checked with bcrypt.checkpw on login.

    Lookups by email are a linear scan, which is fine for the number of
    accounts a single process holds.
    """

    def __init__(
        self,
        rounds: int = None,
        min_password_length: int = None,
        strategy: Optional[ShortCodeStrategy] = None
    ):
        """
        Args:
            rounds: bcrypt work factor (defaults to settings.bcrypt_rounds)
            min_password_length: Shortest accepted password
            strategy: Id generator (defaults to the configured strategy)
        """
        self.rounds = rounds or settings.bcrypt_rounds
        self.min_password_length = min_password_length or settings.min_password_length
        self.id_strategy = strategy or ShortCodeFactory.create_strategy()
        self._users: Dict[str, User] = {}
        self._lock = threading.Lock()
        # Checked against when the email is unknown so both login failures cost the same
        self._dummy_hash = bcrypt.hashpw(b"tinyapp-dummy-password", bcrypt.gensalt(self.rounds))

    def __len__(self) -> int:
        return len(self._users)

    def get(self, user_id: Optional[str]) -> Optional[User]:
        """Get user by id"""
        if not user_id:
            return None
        return self._users.get(user_id)

    def find_by_email(self, email: Optional[str]) -> Optional[User]:
        """Find user by exact (case-sensitive) email"""
        for user in list(self._users.values()):
            if user.email == email:
                return user
        return None

    def create(self, email: str, raw_password: str) -> User:
        """
        Register a new user.

        Raises:
            InvalidCredentials: Missing email/password or password too short/long
            EmailAlreadyRegistered: Email is already taken
        """
        if not email or not raw_password:
            raise InvalidCredentials("Email and password are required")
        if len(raw_password) < self.min_password_length:
            raise InvalidCredentials(
                f"Password must be at least {self.min_password_length} characters"
            )
        password = raw_password.encode("utf-8")
        if len(password) > MAX_PASSWORD_BYTES:
            raise InvalidCredentials(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
            )

        # Fail fast before paying for the hash
        if self.find_by_email(email) is not None:
            raise EmailAlreadyRegistered()

        password_hash = bcrypt.hashpw(password, bcrypt.gensalt(self.rounds))

        with self._lock:
            # Re-check: another registration may have won while we were hashing
            if self.find_by_email(email) is not None:
                raise EmailAlreadyRegistered()

            user = User(
                id=self.id_strategy.generate(self._users.keys()),
                email=email,
                password_hash=password_hash.decode("utf-8"),
            )
            self._users[user.id] = user

        return user

    def verify(self, email: Optional[str], raw_password: Optional[str]) -> Optional[User]:
        """
        Check credentials.

        Returns the user on success and None otherwise. An unknown email and a
        wrong password are indistinguishable to the caller.
        """
        password = (raw_password or "").encode("utf-8")
        if len(password) > MAX_PASSWORD_BYTES:
            return None

        user = self.find_by_email(email) if email else None
        if user is None:
            bcrypt.checkpw(password, self._dummy_hash)
            return None

        if not bcrypt.checkpw(password, user.password_hash.encode("utf-8")):
            return None
        return user
