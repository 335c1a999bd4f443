"""Shared schema exports."""

from .account import AccountSummary
from .login import LoginCode, LoginCredentials, LoginRemediation, LoginRequest, LoginResponse

__all__ = [
    "AccountSummary",
    "LoginCode",
    "LoginCredentials",
    "LoginRemediation",
    "LoginRequest",
    "LoginResponse",
]
