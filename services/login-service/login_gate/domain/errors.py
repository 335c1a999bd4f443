"""Authentication failure taxonomy.

The gate raises these internally while walking its checks and converts each
into a :class:`~login_gate.domain.results.Denied` before returning, so none of
them escape :meth:`AuthenticationGate.authenticate`.
"""

from __future__ import annotations

from .results import Denied, DenialReason, Remediation


class AuthenticationError(Exception):
    """Base class for login denials."""

    reason: DenialReason = DenialReason.INTERNAL_ERROR
    remediation: Remediation = Remediation.NONE
    message: str = "An unexpected error occurred"

    def __init__(self, *, email: str | None = None, account_id: str | None = None) -> None:
        super().__init__(self.reason.value)
        self.email = email
        # Logged only; never part of the caller-facing result.
        self.account_id = account_id

    def to_result(self) -> Denied:
        return Denied(
            reason=self.reason,
            message=self.message,
            remediation=self.remediation,
            email=self.email,
        )


class InvalidInput(AuthenticationError):
    reason = DenialReason.INVALID_INPUT
    message = "Invalid email or password format"


class InvalidCredentials(AuthenticationError):
    """Unknown identity, missing hash, or wrong secret; deliberately indistinguishable."""

    reason = DenialReason.INVALID_CREDENTIALS
    message = "Invalid Credentials"


class EmailNotVerified(AuthenticationError):
    reason = DenialReason.EMAIL_NOT_VERIFIED
    remediation = Remediation.RESEND_VERIFICATION
    message = "Please verify your email before logging in"


class ApprovalPending(AuthenticationError):
    reason = DenialReason.APPROVAL_PENDING
    remediation = Remediation.VIEW_APPROVAL_STATUS
    message = "Your account is pending approval"


class InternalError(AuthenticationError):
    reason = DenialReason.INTERNAL_ERROR
    message = "An unexpected error occurred"
