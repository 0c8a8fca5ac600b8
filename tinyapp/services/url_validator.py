"""
Long URL validation.

A candidate is accepted when it parses as an absolute URL with a scheme and a
host. Optionally the scheme is restricted to an allow-list (http/https by
default, see Settings.allowed_url_schemes). Nothing here touches the network.
"""

from typing import Any, Iterable, Optional

from pydantic import AnyUrl, TypeAdapter, ValidationError

from tinyapp.config import settings


_url_adapter = TypeAdapter(AnyUrl)

# Characters the URL parser strips from inside a URL
UNSAFE_CHARACTERS = ("\t", "\r", "\n")


class URLValidator:
    """
    Structural URL validator.

    Args:
        allowed_schemes: Accepted schemes (case-insensitive).
                         Empty or None accepts any scheme.
        max_length: Longest accepted URL in characters
    """

    def __init__(
        self,
        allowed_schemes: Optional[Iterable[str]] = None,
        max_length: int = 2048
    ):
        self.allowed_schemes = frozenset(s.lower() for s in allowed_schemes or ())
        self.max_length = max_length

    def is_valid(self, candidate: Any) -> bool:
        if not isinstance(candidate, str) or not candidate.strip():
            return False
        if len(candidate) > self.max_length:
            return False
        # The parser would silently drop these, so what we store would differ from what we checked
        if candidate != candidate.strip() or any(c in candidate for c in UNSAFE_CHARACTERS):
            return False

        try:
            url = _url_adapter.validate_python(candidate)
        except ValidationError:
            return False

        # Absolute URL needs an authority, e.g. rejects "mailto:" and "javascript:"
        if not url.host:
            return False

        if self.allowed_schemes and url.scheme.lower() not in self.allowed_schemes:
            return False

        return True

    __call__ = is_valid


default_validator = URLValidator(
    allowed_schemes=settings.allowed_url_schemes,
    max_length=settings.max_url_length
)


def is_valid_url(candidate: Any) -> bool:
    """Validate with the configured policy"""
    return default_validator.is_valid(candidate)
