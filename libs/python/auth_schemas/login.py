"""Shared Pydantic models for the login contract."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, EmailStr, Field

from .account import AccountSummary


class LoginCode(str, Enum):
    email_not_verified = "EMAIL_NOT_VERIFIED"
    approval_pending = "APPROVAL_PENDING"
    internal_error = "INTERNAL_ERROR"


class LoginRemediation(str, Enum):
    resend_verification = "RESEND_VERIFICATION"
    view_approval_status = "VIEW_APPROVAL_STATUS"


class LoginCredentials(BaseModel):
    """Shape a login attempt must satisfy before any account lookup."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginRequest(BaseModel):
    """Raw login body; strict validation is applied by the gate itself."""

    email: Any = None
    password: Any = None


class LoginResponse(BaseModel):
    success: bool
    message: str | None = None
    code: LoginCode | None = None
    email: str | None = None
    remediation: LoginRemediation | None = None
    redirect_url: str | None = None
    user: AccountSummary | None = None
