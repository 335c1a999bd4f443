"""Collaborator interfaces required by the authentication gate."""

from __future__ import annotations

from typing import Protocol

from .account import Account


class CredentialStore(Protocol):
    """Account lookup by identity."""

    async def find_by_identity(self, identity: str) -> Account | None:
        """Return the account for a normalised identity, or ``None`` when absent.

        Absence is a normal result and must not raise.
        """
        ...


class SecretHasher(Protocol):
    """Slow, salted password hash verification."""

    async def verify(self, secret: str, stored_hash: str) -> bool:
        """Return ``True`` when ``secret`` matches ``stored_hash``."""
        ...
