"""HTTP route definitions for the login service."""

from __future__ import annotations

import asyncio
import logging

from auth_schemas import AccountSummary, LoginRequest, LoginResponse
from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from prometheus_client import Counter

from ..config import get_settings
from ..domain.gate import AuthenticationGate
from ..domain.results import AuthResult, Denied, DenialReason, Remediation
from ..security.rate_limiter import RateLimiter, build_rate_limiter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1")

LOGIN_ATTEMPTS = Counter(
    "login_attempts_total",
    "Login attempts processed by the authentication gate, by outcome.",
    ["outcome"],
)

_STATUS_BY_REASON = {
    DenialReason.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    DenialReason.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    DenialReason.EMAIL_NOT_VERIFIED: status.HTTP_403_FORBIDDEN,
    DenialReason.APPROVAL_PENDING: status.HTTP_403_FORBIDDEN,
    DenialReason.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

settings = get_settings()

rate_limiter: RateLimiter | None = build_rate_limiter(settings)


async def read_login_request(request: Request) -> LoginRequest:
    """Parse the login body leniently so every shape reaches the gate.

    Missing, non-JSON and non-object bodies become an empty request, which the
    gate reports as ``INVALID_INPUT`` instead of FastAPI's 422.
    """
    try:
        body = await request.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        body = {}
    return LoginRequest(email=body.get("email"), password=body.get("password"))


def get_gate(request: Request) -> AuthenticationGate:
    """Resolve the `AuthenticationGate` stored on the FastAPI application state."""
    gate: AuthenticationGate = request.app.state.login_gate
    return gate


@router.post(
    "/auth/login",
    response_model=LoginResponse,
    response_model_exclude_none=True,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": LoginRequest.model_json_schema()}},
        }
    },
)
async def login(
    request: Request,
    response: Response,
    payload: LoginRequest = Depends(read_login_request),
    gate: AuthenticationGate = Depends(get_gate),
) -> LoginResponse:
    """Check credentials and account state, returning the caller-facing result."""
    if rate_limiter is not None:
        client_host = request.client.host if request.client else "unknown"
        allowed = await asyncio.to_thread(rate_limiter.allow, f"login:{client_host}")
        if not allowed:
            raise HTTPException(status_code=status.HTTP_429_TOO_MANY_REQUESTS, detail="rate limited")

    result = await gate.authenticate(payload.email, payload.password)
    if isinstance(result, Denied):
        LOGIN_ATTEMPTS.labels(outcome=result.reason.value.lower()).inc()
        response.status_code = _STATUS_BY_REASON[result.reason]
    else:
        LOGIN_ATTEMPTS.labels(outcome="granted").inc()
    return to_response(result)


def to_response(result: AuthResult) -> LoginResponse:
    """Translate a gate outcome into the caller-facing login payload."""
    if not isinstance(result, Denied):
        summary = result.summary
        return LoginResponse(
            success=True,
            user=AccountSummary(
                id=summary.account_id,
                email=summary.email,
                role=summary.role,
                name=summary.name,
                image=summary.image,
            ),
        )

    redirect_url = None
    if result.remediation is Remediation.VIEW_APPROVAL_STATUS:
        redirect_url = settings.approval_status_url
    return LoginResponse(
        success=False,
        message=result.message,
        code=result.code,
        email=result.email,
        remediation=None if result.remediation is Remediation.NONE else result.remediation.value,
        redirect_url=redirect_url,
    )
