"""
Short code generation strategies for TinyApp.
Uses Strategy Pattern to allow different randomness sources.
"""

import string
import secrets
from abc import ABC, abstractmethod
from typing import AbstractSet, Any, Optional

from tinyapp.exceptions import GenerationExhausted


# 62 symbols: A-Z, a-z, 0-9
ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits


class ShortCodeStrategy(ABC):
    """Abstract base class for short code generation strategies"""

    @abstractmethod
    def generate(self, existing_keys: AbstractSet[str]) -> str:
        """
        Generate a short code.

        Args:
            existing_keys: Collision domain - codes already in use

        Returns:
            A short code string not present in existing_keys

        Raises:
            GenerationExhausted: If no free code could be found
        """
        pass


class RandomShortCodeStrategy(ShortCodeStrategy):
    """
    Random generation strategy with collision checking.
    Draws every character uniformly from the alphabet and rejects
    draws that are already taken.

    The randomness source is injected: anything with a ``choice(seq)``
    method works (``secrets.SystemRandom()``, ``random.Random(seed)``...).
    Defaults to the OS CSPRNG so short links are not guessable.
    """

    def __init__(
        self,
        length: int = 6,
        max_retries: int = 10,
        rng: Optional[Any] = None
    ):
        self.length = length
        self.max_retries = max_retries
        self.characters = ALPHABET
        self.rng = rng if rng is not None else secrets.SystemRandom()

    def generate(self, existing_keys: AbstractSet[str]) -> str:
        """Generate random short code with collision checking"""
        for attempt in range(self.max_retries):
            short_code = self._generate_random_string()

            # Check if code already exists
            if short_code not in existing_keys:
                return short_code

        # If all retries failed
        print(
            f"⚠️  Short code space exhausted: {self.max_retries} collisions "
            f"with {len(existing_keys)} keys in use"
        )
        raise GenerationExhausted(
            f"Could not generate unique short code after {self.max_retries} attempts"
        )

    def _generate_random_string(self) -> str:
        """Generate a random string of specified length"""
        return ''.join(self.rng.choice(self.characters) for _ in range(self.length))


def generate(
    existing_keys: AbstractSet[str],
    length: int = 6,
    max_retries: int = 10
) -> str:
    """Generate a collision-free code with the default (secure) randomness."""
    strategy = RandomShortCodeStrategy(length=length, max_retries=max_retries)
    return strategy.generate(existing_keys)
