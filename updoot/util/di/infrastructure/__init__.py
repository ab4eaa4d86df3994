"""Infrastructure providers."""

# Import bases
from .mail import MailProvider
from .persistence import PersistenceProvider
from .redis_store import RedisProvider

# Import implementations (needed for __subclasses__())
from .mail import ProdMailProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .redis_store import ProdRedisProvider  # noqa: F401

__all__ = [
    "MailProvider",
    "PersistenceProvider",
    "ProdMailProvider",
    "ProdPersistenceProvider",
    "ProdRedisProvider",
    "RedisProvider",
]
