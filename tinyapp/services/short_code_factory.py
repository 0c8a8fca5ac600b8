"""
Factory for creating short code generation strategies.
Uses caching to avoid creating multiple instances.
"""

import random
import secrets
from enum import Enum
from tinyapp.services.short_code_strategies import (
    ShortCodeStrategy,
    RandomShortCodeStrategy
)
from tinyapp.config import settings


class ShortCodeStrategyType(Enum):
    """Available short code generation strategies"""
    SECURE = "secure"
    RANDOM = "random"


class ShortCodeFactory:
    """Factory for creating short code generation strategies with caching"""

    _instances = {}  # Cache for strategy instances

    @classmethod
    def create_strategy(
        cls,
        strategy_type: ShortCodeStrategyType = None
    ) -> ShortCodeStrategy:
        """
        Create or return cached short code generation strategy.
        Uses singleton pattern to avoid creating multiple instances.

        Args:
            strategy_type: Type of strategy to create.
                          If None, uses value from settings.

        Returns:
            A cached instance of a ShortCodeStrategy

        Raises:
            ValueError: If strategy_type is unknown
        """
        # Use default from settings if not specified
        if strategy_type is None:
            strategy_type = ShortCodeStrategyType(settings.short_code_strategy)

        # Return cached instance if exists
        if strategy_type in cls._instances:
            return cls._instances[strategy_type]

        # Create new instance and cache it
        if strategy_type == ShortCodeStrategyType.SECURE:
            rng = secrets.SystemRandom()
        elif strategy_type == ShortCodeStrategyType.RANDOM:
            # Not suitable for unguessable links; handy for reproducible local runs
            rng = random.Random(settings.short_code_seed)
        else:
            raise ValueError(f"Unknown strategy type: {strategy_type}")

        instance = RandomShortCodeStrategy(
            length=settings.short_url_length,
            max_retries=settings.max_retries,
            rng=rng
        )

        # Cache the instance
        cls._instances[strategy_type] = instance
        return instance

    @classmethod
    def clear_instances(cls):
        """Clear cached instances (for testing)"""
        cls._instances = {}
