from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Account:
    """Stored account state consulted at login.

    Verification and approval flags are owned by external workflows; the
    login gate only reads them.
    """

    account_id: str
    email: str
    password_hash: str | None
    is_verified: bool = False
    is_approved: bool = False
    name: str | None = None
    role: str = "user"
    image: str | None = None

    def summary(self) -> "AccountSummary":
        """Project the non-secret fields returned to callers after login."""
        return AccountSummary(
            account_id=self.account_id,
            email=self.email,
            role=self.role,
            name=self.name,
            image=self.image,
        )


@dataclass(slots=True, frozen=True)
class AccountSummary:
    """Public view of an account; never carries the password hash."""

    account_id: str
    email: str
    role: str
    name: str | None = None
    image: str | None = None


def normalize_identity(identity: str, *, case_insensitive: bool = True) -> str:
    """Trim an identity and, under the case-insensitive policy, lower-case it."""
    identity = identity.strip()
    return identity.lower() if case_insensitive else identity
