"""Outcomes produced by the authentication gate."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .account import AccountSummary


class DenialReason(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    EMAIL_NOT_VERIFIED = "EMAIL_NOT_VERIFIED"
    APPROVAL_PENDING = "APPROVAL_PENDING"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class Remediation(str, Enum):
    NONE = "NONE"
    RESEND_VERIFICATION = "RESEND_VERIFICATION"
    VIEW_APPROVAL_STATUS = "VIEW_APPROVAL_STATUS"


# Reasons safe to expose as a machine-readable code to callers.
PUBLIC_CODES = frozenset(
    {
        DenialReason.EMAIL_NOT_VERIFIED,
        DenialReason.APPROVAL_PENDING,
        DenialReason.INTERNAL_ERROR,
    }
)


@dataclass(slots=True, frozen=True)
class Granted:
    """Login succeeded; ``summary`` holds the public account fields."""

    summary: AccountSummary

    @property
    def success(self) -> bool:
        return True


@dataclass(slots=True, frozen=True)
class Denied:
    """Login refused with the reason and the follow-up a caller should offer."""

    reason: DenialReason
    message: str
    remediation: Remediation = Remediation.NONE
    email: str | None = None

    @property
    def success(self) -> bool:
        return False

    @property
    def code(self) -> str | None:
        """Caller-facing code, withheld for reasons that would aid enumeration."""
        return self.reason.value if self.reason in PUBLIC_CODES else None


AuthResult = Union[Granted, Denied]
