"""Account-related DTOs shared across services."""

from __future__ import annotations

from pydantic import BaseModel, EmailStr


class AccountSummary(BaseModel):
    id: str
    email: EmailStr
    role: str
    name: str | None = None
    image: str | None = None
