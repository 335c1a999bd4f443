from __future__ import annotations

import pytest

from login_gate.domain.account import Account, normalize_identity


class FakeCredentialStore:
    """In-memory account lookup mimicking the Postgres repository."""

    def __init__(self, *accounts: Account, error: Exception | None = None) -> None:
        self._accounts = {normalize_identity(a.email): a for a in accounts}
        self.error = error
        self.lookups: list[str] = []

    def add(self, account: Account) -> None:
        self._accounts[normalize_identity(account.email)] = account

    async def find_by_identity(self, identity: str) -> Account | None:
        self.lookups.append(identity)
        if self.error is not None:
            raise self.error
        return self._accounts.get(identity)


class FakeSecretHasher:
    """Deterministic stand-in for argon2: ``hash(s) == "fake$" + s``."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls = 0

    @staticmethod
    def hash(secret: str) -> str:
        return f"fake${secret}"

    async def verify(self, secret: str, stored_hash: str) -> bool:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return stored_hash == self.hash(secret)


def make_account(
    email: str = "contact.singhastra@gmail.com",
    password: str | None = "CorrectPass1!",
    *,
    is_verified: bool = True,
    is_approved: bool = True,
) -> Account:
    return Account(
        account_id="acc-1",
        email=email,
        password_hash=FakeSecretHasher.hash(password) if password is not None else None,
        is_verified=is_verified,
        is_approved=is_approved,
        name="Astra Singh",
        role="institution_admin",
        image="https://cdn.example.com/avatars/acc-1.png",
    )


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def hasher() -> FakeSecretHasher:
    return FakeSecretHasher()


@pytest.fixture
def store() -> FakeCredentialStore:
    return FakeCredentialStore(make_account())
