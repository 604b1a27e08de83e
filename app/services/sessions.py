"""In-memory session store: opaque token -> account id. Sessions do not survive a restart."""

import asyncio
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from app.core.security import generate_session_token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionRecord:
    """One authenticated browser."""

    account_id: int
    created_at: datetime


class SessionStore:
    """
    Thread-safe mapping of session token to SessionRecord.

    Owned by the application (app.state.session_store) and shared by all request
    threads. Every read and write of the mapping happens under one lock; nothing
    slow (password hashing, DB access) runs while it is held.

    ttl_seconds=None keeps sessions until logout or restart. With a TTL, expired
    tokens resolve to None and are dropped lazily; purge_loop() sweeps the rest.
    """

    def __init__(self, ttl_seconds: int | None = None) -> None:
        self._ttl = timedelta(seconds=ttl_seconds) if ttl_seconds else None
        self._sessions: dict[str, SessionRecord] = {}
        self._lock = threading.Lock()

    def create(self, account_id: int) -> str:
        """Issue a new token for account_id and return it."""
        record = SessionRecord(account_id=account_id, created_at=datetime.now(timezone.utc))
        with self._lock:
            token = generate_session_token()
            while token in self._sessions:
                token = generate_session_token()
            self._sessions[token] = record
        return token

    def resolve(self, token: str | None) -> int | None:
        """Return the account id for a live token, or None if unknown, destroyed or expired."""
        if not token:
            return None
        with self._lock:
            record = self._sessions.get(token)
            if record is None:
                return None
            if self._is_expired(record, datetime.now(timezone.utc)):
                del self._sessions[token]
                return None
            return record.account_id

    def destroy(self, token: str | None) -> None:
        """Remove a session. Unknown or empty tokens are a no-op."""
        if not token:
            return
        with self._lock:
            self._sessions.pop(token, None)

    def purge_expired(self) -> int:
        """Drop expired sessions; returns how many were removed. No-op without a TTL."""
        if self._ttl is None:
            return 0
        now = datetime.now(timezone.utc)
        with self._lock:
            expired = [t for t, r in self._sessions.items() if self._is_expired(r, now)]
            for token in expired:
                del self._sessions[token]
        if expired:
            logger.info("Purged expired sessions: count=%s", len(expired))
        return len(expired)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def _is_expired(self, record: SessionRecord, now: datetime) -> bool:
        return self._ttl is not None and now - record.created_at >= self._ttl


async def purge_loop(store: SessionStore, interval_seconds: float) -> None:
    """
    Sweep expired sessions every interval_seconds until cancelled.

    Started by the app lifespan when SESSION_TTL_SECONDS is set, so tokens that
    are never presented again do not accumulate.
    """
    while True:
        await asyncio.sleep(interval_seconds)
        store.purge_expired()
