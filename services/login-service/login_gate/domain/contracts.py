"""Domain-level request contracts shared by multiple layers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class CreateAccountInput:
    """Validated inputs required to seed an account with a hashed password."""

    email: str
    password_hash: str
    name: str | None = None
    role: str = "user"
    image: str | None = None
    is_verified: bool = False
    is_approved: bool = False
