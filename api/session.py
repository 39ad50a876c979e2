"""Table sessions with a Redis backend and in-memory fallback."""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from datetime import datetime, timedelta
from typing import Any, AsyncIterator
from uuid import uuid4

import redis.asyncio as redis
from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer
from redis.exceptions import RedisError

from advisor.table import TableState
from config import config

logger = logging.getLogger(__name__)

# Seconds a Redis table lock is held or waited for at most
LOCK_TIMEOUT = 10


class SessionSigner:
    """Sign and verify session IDs using itsdangerous."""

    def __init__(self, secret_key: str | None = None) -> None:
        self._serializer = URLSafeTimedSerializer(
            secret_key or config.security.secret_key, salt="table-session"
        )

    def sign(self, session_id: str) -> str:
        """Create a signed token from a session ID."""
        return self._serializer.dumps(session_id)

    def unsign(self, token: str, max_age: int | None = None) -> str | None:
        """
        Verify and extract the session ID from a signed token.

        Args:
            token: The signed token to verify
            max_age: Maximum token age in seconds, or None to check only the
                signature. Table sessions pass None: their lifetime is the
                store TTL, which every save refreshes.

        Returns:
            The session ID if valid, None otherwise
        """
        try:
            return self._serializer.loads(token, max_age=max_age)
        except (BadSignature, SignatureExpired):
            return None


_session_signer: SessionSigner | None = None


def get_session_signer() -> SessionSigner:
    """Get or create the session signer."""
    global _session_signer
    if _session_signer is None:
        _session_signer = SessionSigner()
    return _session_signer


class SessionStore(ABC):
    """Abstract store for serialized table state."""

    @abstractmethod
    async def get(self, session_id: str) -> dict[str, Any] | None:
        ...

    @abstractmethod
    async def set(self, session_id: str, data: dict[str, Any], ttl: int | None = None) -> None:
        ...

    @abstractmethod
    async def delete(self, session_id: str) -> None:
        ...

    async def exists(self, session_id: str) -> bool:
        return await self.get(session_id) is not None

    @abstractmethod
    def lock(self, session_id: str) -> AbstractAsyncContextManager[Any]:
        """Return a lock that serializes writers of one session."""


class InMemorySessionStore(SessionStore):
    """In-memory session store for local development and tests."""

    def __init__(self) -> None:
        self._sessions: dict[str, tuple[dict[str, Any], datetime]] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    async def get(self, session_id: str) -> dict[str, Any] | None:
        entry = self._sessions.get(session_id)
        if entry is None:
            return None

        data, expiry = entry
        if expiry < datetime.now():
            await self.delete(session_id)
            return None
        return data

    async def set(
        self,
        session_id: str,
        data: dict[str, Any],
        ttl: int | None = None,
    ) -> None:
        expiry = datetime.now() + timedelta(seconds=ttl or config.session_ttl)
        self._sessions[session_id] = (data, expiry)

    async def delete(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def lock(self, session_id: str) -> AbstractAsyncContextManager[Any]:
        return self._locks.setdefault(session_id, asyncio.Lock())

    async def cleanup_expired(self) -> int:
        """Remove expired sessions."""
        now = datetime.now()
        expired = [sid for sid, (_, expiry) in self._sessions.items() if expiry < now]
        for sid in expired:
            del self._sessions[sid]
            lock = self._locks.get(sid)
            if lock is not None and not lock.locked():
                del self._locks[sid]
        return len(expired)


class RedisSessionStore(SessionStore):
    """Redis-backed session store."""

    def __init__(self, redis_client: redis.Redis) -> None:
        self._redis = redis_client
        self._prefix = "advisor:table:"

    def _key(self, session_id: str) -> str:
        return f"{self._prefix}{session_id}"

    async def get(self, session_id: str) -> dict[str, Any] | None:
        data = await self._redis.get(self._key(session_id))
        if data is None:
            return None
        return json.loads(data)

    async def set(
        self,
        session_id: str,
        data: dict[str, Any],
        ttl: int | None = None,
    ) -> None:
        await self._redis.setex(
            self._key(session_id),
            ttl or config.session_ttl,
            json.dumps(data),
        )

    async def delete(self, session_id: str) -> None:
        await self._redis.delete(self._key(session_id))

    async def exists(self, session_id: str) -> bool:
        return await self._redis.exists(self._key(session_id)) > 0

    def lock(self, session_id: str) -> AbstractAsyncContextManager[Any]:
        return self._redis.lock(
            f"{self._key(session_id)}:lock",
            timeout=LOCK_TIMEOUT,
            blocking_timeout=LOCK_TIMEOUT,
        )


_session_store: SessionStore | None = None


async def get_session_store() -> SessionStore:
    """Get or create the session store, preferring Redis when reachable."""
    global _session_store

    if _session_store is not None:
        return _session_store

    redis_client = redis.from_url(config.redis.url)
    try:
        await redis_client.ping()
    except (RedisError, OSError) as exc:
        logger.warning("Redis unavailable at %s (%s); using in-memory sessions", config.redis.url, exc)
        await redis_client.aclose()
        _session_store = InMemorySessionStore()
    else:
        logger.info("Using Redis session store at %s", config.redis.url)
        _session_store = RedisSessionStore(redis_client)
    return _session_store


def set_session_store(store: SessionStore | None) -> None:
    """Replace the global store (None re-detects on next use)."""
    global _session_store
    _session_store = store


def new_session_token() -> str:
    """Create a new signed session token."""
    return get_session_signer().sign(str(uuid4()))


def extract_session_id(token: str) -> str | None:
    """Extract the raw session ID from a signed token, None if invalid."""
    return get_session_signer().unsign(token)


@asynccontextmanager
async def table_lock(token: str) -> AsyncIterator[None]:
    """Hold the session's lock so load, change and save run as one step."""
    store = await get_session_store()
    async with store.lock(token):
        yield


async def save_table(token: str, table: TableState) -> None:
    """Store the table state for a session."""
    store = await get_session_store()
    await store.set(token, table.to_dict())


async def load_table(token: str) -> TableState | None:
    """Load the table state for a session, None if missing or tampered with."""
    if extract_session_id(token) is None:
        logger.info("Rejected invalid or expired session token")
        return None
    store = await get_session_store()
    data = await store.get(token)
    if data is None:
        return None
    return TableState.from_dict(data)


async def create_table_session(table: TableState) -> str:
    """Start a new session holding the given table state."""
    token = new_session_token()
    await save_table(token, table)
    logger.info("Created table session (%d decks, %d players)", table.setup.decks, table.setup.players)
    return token


async def delete_session(token: str) -> None:
    store = await get_session_store()
    await store.delete(token)
