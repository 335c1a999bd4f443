"""Authentication gate deciding whether a login attempt may be granted."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, TypeVar

from auth_schemas import LoginCredentials
from pydantic import ValidationError

from .account import Account, normalize_identity
from .errors import (
    ApprovalPending,
    AuthenticationError,
    EmailNotVerified,
    InternalError,
    InvalidCredentials,
    InvalidInput,
)
from .ports import CredentialStore, SecretHasher
from .results import AuthResult, Granted

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AuthenticationGate:
    """Credential and account-state checks performed at login.

    The gate holds no per-call state, so a single instance can serve
    concurrent requests. Each call performs at most one store lookup and one
    hash verification, and never mutates the account.
    """

    def __init__(
        self,
        store: CredentialStore,
        hasher: SecretHasher,
        *,
        timeout: float | None = None,
        case_insensitive: bool = True,
    ) -> None:
        """Store collaborators and the identity/timeout policy."""
        self._store = store
        self._hasher = hasher
        self._timeout = timeout
        self._case_insensitive = case_insensitive

    async def authenticate(self, identity: Any, secret: Any) -> AuthResult:
        """Return ``Granted`` or ``Denied`` for the supplied identity and secret.

        Parameters
        ----------
        identity:
            Login handle (email address) as submitted by the caller.
        secret:
            Plain-text password as submitted by the caller.

        Returns
        -------
        AuthResult
            Never raises; store or hasher faults are reported as
            ``INTERNAL_ERROR``.
        """
        try:
            account = await self._check(identity, secret)
        except AuthenticationError as exc:
            if exc.account_id is None:
                logger.info("login denied: %s", exc.reason.value)
            else:
                logger.info("login denied: %s for account %s", exc.reason.value, exc.account_id)
            return exc.to_result()
        except Exception:
            logger.exception("login aborted by collaborator failure")
            return InternalError().to_result()

        logger.debug("login granted for account %s", account.account_id)
        return Granted(summary=account.summary())

    async def _check(self, identity: Any, secret: Any) -> Account:
        try:
            credentials = LoginCredentials(email=identity, password=secret)
        except ValidationError as exc:
            raise InvalidInput() from exc

        lookup_key = normalize_identity(
            credentials.email, case_insensitive=self._case_insensitive
        )
        account = await self._bounded(self._store.find_by_identity(lookup_key))
        if account is None:
            raise InvalidCredentials()
        if not account.password_hash:
            raise InvalidCredentials(account_id=account.account_id)

        matches = await self._bounded(
            self._hasher.verify(credentials.password, account.password_hash)
        )
        if not matches:
            raise InvalidCredentials(account_id=account.account_id)

        if not account.is_verified:
            raise EmailNotVerified(email=account.email, account_id=account.account_id)
        if not account.is_approved:
            raise ApprovalPending(account_id=account.account_id)
        return account

    async def _bounded(self, call: Awaitable[T]) -> T:
        if self._timeout is None:
            return await call
        return await asyncio.wait_for(call, timeout=self._timeout)
