"""
Domain models for TinyApp.

These are plain in-memory records; they live exactly as long as the process.
Only the services in tinyapp.services create or mutate them.
"""

from .user import User
from .url import ShortURL, Visit

__all__ = ["User", "ShortURL", "Visit"]
