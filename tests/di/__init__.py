"""Mock providers for testing."""

from .mail import MockMailProvider
from .persistence import MockPersistenceProvider
from .token_store import MockRedisProvider
from .container import build_test_container

__all__ = [
    "MockMailProvider",
    "MockPersistenceProvider",
    "MockRedisProvider",
    "build_test_container",
]
