"""Argon2 password hashing used for stored account secrets."""

from __future__ import annotations

import asyncio

from argon2 import PasswordHasher
from argon2.exceptions import VerifyMismatchError


class Argon2SecretHasher:
    """Salted argon2id hashing; verification runs off the event loop."""

    def __init__(self, hasher: PasswordHasher | None = None) -> None:
        self._hasher = hasher or PasswordHasher()

    def hash(self, secret: str) -> str:
        if not secret:
            raise ValueError("password must not be empty")
        return self._hasher.hash(secret)

    async def verify(self, secret: str, stored_hash: str) -> bool:
        """Return ``True`` when ``secret`` matches ``stored_hash``.

        Mismatches yield ``False``. A malformed ``stored_hash`` raises
        ``argon2.exceptions.InvalidHashError``.
        """
        if not secret or not stored_hash:
            return False
        return await asyncio.to_thread(self._verify_sync, secret, stored_hash)

    def _verify_sync(self, secret: str, stored_hash: str) -> bool:
        try:
            return self._hasher.verify(stored_hash, secret)
        except VerifyMismatchError:
            return False
