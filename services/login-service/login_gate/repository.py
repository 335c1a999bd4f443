"""Database repository for login account data."""

from __future__ import annotations

import hashlib
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from psycopg.rows import tuple_row
from psycopg_pool import AsyncConnectionPool

from .domain.account import Account, normalize_identity
from .domain.contracts import CreateAccountInput

_ACCOUNT_COLUMNS = "account_id, email, password_hash, is_verified, is_approved, name, role, image"


@dataclass(slots=True)
class AccountRecord:
    """Row projection used when mapping database tuples to domain aggregates."""

    account_id: str
    email: str
    password_hash: str | None
    is_verified: bool
    is_approved: bool
    name: str | None
    role: str
    image: str | None


class AccountRepository:
    """Postgres-backed account lookup keyed by the normalised email digest."""

    def __init__(self, pool: AsyncConnectionPool, *, case_insensitive: bool = True) -> None:
        """Store the connection pool used for all database interactions."""
        self._pool = pool
        self._case_insensitive = case_insensitive

    def _hash_email(self, email: str) -> bytes:
        """Normalise an email address and return its SHA-256 digest."""
        normalised = normalize_identity(email, case_insensitive=self._case_insensitive)
        return hashlib.sha256(normalised.encode("utf-8")).digest()

    async def find_by_identity(self, identity: str) -> Account | None:
        """Fetch the account registered under ``identity`` or return ``None``."""
        async with self._pool.connection() as conn:
            async with conn.cursor(row_factory=tuple_row) as cur:
                await cur.execute(
                    f"""
                    SELECT {_ACCOUNT_COLUMNS}
                    FROM accounts
                    WHERE email_hash = %s
                    """,
                    (self._hash_email(identity),),
                )
                row = await cur.fetchone()
                if not row:
                    return None
        return self._map_record(row)

    async def create_account(self, payload: CreateAccountInput) -> Account:
        """Insert an account row and return the stored aggregate."""
        account_id = str(uuid.uuid4())
        now = datetime.now(timezone.utc)
        async with self._pool.connection() as conn:
            async with conn.cursor(row_factory=tuple_row) as cur:
                await cur.execute(
                    f"""
                    INSERT INTO accounts (
                        account_id, email_hash, email, password_hash, is_verified,
                        is_approved, name, role, image, created_at, updated_at
                    )
                    VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
                    RETURNING {_ACCOUNT_COLUMNS}
                    """,
                    (
                        account_id,
                        self._hash_email(payload.email),
                        payload.email,
                        payload.password_hash,
                        payload.is_verified,
                        payload.is_approved,
                        payload.name,
                        payload.role,
                        payload.image,
                        now,
                        now,
                    ),
                )
                row = await cur.fetchone()
            await conn.commit()
        return self._map_record(row)

    def _map_record(self, row: tuple) -> Account:
        """Convert a raw database tuple into the domain ``Account`` dataclass."""
        record = AccountRecord(*row)
        return Account(
            account_id=str(record.account_id),
            email=record.email,
            password_hash=record.password_hash,
            is_verified=bool(record.is_verified),
            is_approved=bool(record.is_approved),
            name=record.name,
            role=record.role,
            image=record.image,
        )
