import threading
from typing import Callable, Dict, List, Optional

from tinyapp.exceptions import Forbidden, InvalidURL, NotFound
from tinyapp.models.url import ShortURL
from tinyapp.services.short_code_factory import ShortCodeFactory
from tinyapp.services.short_code_strategies import ShortCodeStrategy
from tinyapp.services.url_validator import is_valid_url


class URLStore:
    """
    In-memory registry of short URLs.

    Maps short id -> ShortURL. All ownership decisions are made here:
    routes pass in the authenticated user's id and the store decides whether
    the entry may be read for management, edited or deleted.

    resolve() is the only lookup used by redirects and needs no owner.
    """

    def __init__(
        self,
        strategy: Optional[ShortCodeStrategy] = None,
        validator: Callable[[str], bool] = is_valid_url
    ):
        """
        Args:
            strategy: Short code generator (defaults to the configured strategy)
            validator: Long URL validator
        """
        self.short_code_strategy = strategy or ShortCodeFactory.create_strategy()
        self.validator = validator
        self._urls: Dict[str, ShortURL] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._urls)

    def __contains__(self, short_id: str) -> bool:
        return short_id in self._urls

    def create(self, owner_id: str, long_url: str) -> ShortURL:
        """
        Create a new short URL owned by owner_id.

        Raises:
            InvalidURL: long_url is not a well-formed absolute URL
            GenerationExhausted: No free short id left
        """
        if not self.validator(long_url):
            raise InvalidURL()

        with self._lock:
            short_id = self.short_code_strategy.generate(self._urls.keys())
            url = ShortURL(id=short_id, long_url=long_url, owner_id=owner_id)
            self._urls[short_id] = url

        return url

    def get(self, short_id: str) -> Optional[ShortURL]:
        """Get URL by short id (no ownership check)"""
        return self._urls.get(short_id)

    def get_for_owner(self, short_id: str, owner_id: str) -> ShortURL:
        """
        Get URL by short id on behalf of owner_id.

        Raises:
            NotFound: Unknown short id
            Forbidden: Entry belongs to someone else
        """
        url = self._urls.get(short_id)
        if url is None:
            raise NotFound()
        if url.owner_id != owner_id:
            raise Forbidden()
        return url

    def list_for_owner(self, owner_id: str) -> List[ShortURL]:
        """All URLs owned by owner_id, in creation order"""
        return [url for url in list(self._urls.values()) if url.owner_id == owner_id]

    def update(self, short_id: str, owner_id: str, new_long_url: str) -> ShortURL:
        """
        Point an existing short id at a new long URL.
        Visit analytics are kept.

        Raises:
            NotFound, Forbidden, InvalidURL
        """
        with self._lock:
            url = self.get_for_owner(short_id, owner_id)
            if not self.validator(new_long_url):
                raise InvalidURL()
            url.long_url = new_long_url
        return url

    def delete(self, short_id: str, owner_id: str) -> None:
        """
        Remove a short URL.

        Raises:
            NotFound, Forbidden
        """
        with self._lock:
            self.get_for_owner(short_id, owner_id)
            del self._urls[short_id]

    def resolve(self, short_id: str) -> Optional[str]:
        """Long URL for a redirect, or None"""
        url = self._urls.get(short_id)
        if url is None:
            return None
        return url.long_url
