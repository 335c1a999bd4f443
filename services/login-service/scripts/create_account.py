#!/usr/bin/env python3
"""Seed a login account with an argon2-hashed password."""

from __future__ import annotations

import asyncio
from getpass import getpass

from psycopg_pool import AsyncConnectionPool

from login_gate.config import get_settings
from login_gate.domain.contracts import CreateAccountInput
from login_gate.repository import AccountRepository
from login_gate.security.passwords import Argon2SecretHasher


def _ask_flag(prompt: str) -> bool:
    return input(prompt).strip().lower() not in ("n", "no")


async def _create(payload: CreateAccountInput) -> str:
    settings = get_settings()
    async with AsyncConnectionPool(settings.database_url, open=False) as pool:
        repository = AccountRepository(pool, case_insensitive=settings.identity_case_insensitive)
        account = await repository.create_account(payload)
    return account.account_id


def main() -> None:
    email = input("Email: ").strip()
    name = input("Name: ").strip() or None
    role = input("Role [user]: ").strip().lower() or "user"
    verified = _ask_flag("Email verified? [Y/n]: ")
    approved = _ask_flag("Approved? [Y/n]: ")

    pw1 = getpass("Password: ")
    pw2 = getpass("Repeat password: ")
    if pw1 != pw2:
        raise SystemExit("Passwords do not match")

    payload = CreateAccountInput(
        email=email,
        password_hash=Argon2SecretHasher().hash(pw1),
        name=name,
        role=role,
        is_verified=verified,
        is_approved=approved,
    )
    account_id = asyncio.run(_create(payload))
    print(f"OK -> {account_id}")


if __name__ == "__main__":
    main()
