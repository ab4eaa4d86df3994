"""Password hashing domain service."""

import asyncio

import bcrypt

from .base import Service


class PasswordService(Service):
    """Hashes and verifies passwords with bcrypt.

    bcrypt blocks for the whole cost factor, so both run in a worker thread.
    """

    def __init__(self, rounds: int = 12) -> None:
        """Initialize password service.

        Args:
            rounds: bcrypt cost factor
        """
        self.rounds = rounds

    async def hash(self, password: str) -> str:
        """Hash a password with a fresh salt."""
        return await asyncio.to_thread(self._hash_sync, password)

    async def verify(self, password: str, password_hash: str) -> bool:
        """Check a password against a stored hash."""
        return await asyncio.to_thread(self._verify_sync, password, password_hash)

    def _hash_sync(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def _verify_sync(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except ValueError:
            # Malformed hash in storage
            return False
