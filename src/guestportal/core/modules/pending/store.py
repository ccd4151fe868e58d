"""In-memory store of pending guest logins."""

import threading
from collections.abc import Callable
from datetime import datetime, timedelta
from uuid import uuid4

import structlog

from guestportal.core.modules.pending.models import CacheToken, PendingLogin
from guestportal.utils import now

logger = structlog.get_logger(__name__)


class PendingLoginStore:
    """Maps opaque cache tokens to pending guest logins.

    Every operation runs under a single lock. Callers must never hold the lock
    across network I/O, so none of the methods await or call out.

    An entry can be checked out by exactly one login submission at a time. A
    checked-out entry is invisible to further checkouts until it is either
    consumed or released, which keeps double submissions from authorizing the
    same guest twice.
    """

    def __init__(self, clock: Callable[[], datetime] = now) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: dict[CacheToken, PendingLogin] = {}
        self._checked_out: set[CacheToken] = set()

    def create(self, device_id: str, ap_id: str) -> CacheToken:
        """Store a new pending login and return its token."""
        with self._lock:
            token = CacheToken(str(uuid4()))
            while token in self._entries:
                token = CacheToken(str(uuid4()))
            self._entries[token] = PendingLogin(token=token, device_id=device_id, ap_id=ap_id, created_at=self._clock())
        return token

    def resolve(self, token: str) -> PendingLogin | None:
        """Look up a pending login without removing it."""
        with self._lock:
            return self._entries.get(CacheToken(token))

    def checkout(self, token: str) -> PendingLogin | None:
        """Look up a pending login and mark it as being processed.

        Returns None if the token is unknown, expired, consumed, or already
        checked out by another submission.
        """
        with self._lock:
            key = CacheToken(token)
            entry = self._entries.get(key)
            if entry is None or key in self._checked_out:
                return None
            self._checked_out.add(key)
            return entry

    def release(self, token: str) -> None:
        """Make a checked-out entry available again without removing it."""
        with self._lock:
            self._checked_out.discard(CacheToken(token))

    def consume(self, token: str) -> bool:
        """Remove a pending login. Returns False if it was already gone."""
        with self._lock:
            key = CacheToken(token)
            self._checked_out.discard(key)
            return self._entries.pop(key, None) is not None

    def sweep_expired(self, max_age: timedelta) -> int:
        """Remove every entry older than max_age and return how many were removed."""
        with self._lock:
            threshold = self._clock() - max_age
            expired = [token for token, entry in self._entries.items() if entry.created_at < threshold]
            for token in expired:
                del self._entries[token]
                self._checked_out.discard(token)
                logger.debug("pending_login_purged", token=token)
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, token: object) -> bool:
        with self._lock:
            return token in self._entries
