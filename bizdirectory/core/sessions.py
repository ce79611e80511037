"""
In-memory admin session registry.

Maps opaque bearer tokens to the admin who logged in with them. Entries live
only in process memory: a restart logs every admin out. Each session expires
after a fixed time to live, and expired entries are purged whenever a new
session is issued, so the map cannot grow without bound.
"""
import logging
import secrets
import time
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Dict, Optional

from bizdirectory.core.config import SESSION_TTL_MINUTES

logger = logging.getLogger(__name__)

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


@dataclass(frozen=True)
class AdminIdentity:
    admin_id: int
    username: str
    issued_at: datetime
    expires_at: Optional[datetime] = None


def _to_base36(number: int) -> str:
    digits = ""
    while True:
        number, remainder = divmod(number, 36)
        digits = _BASE36[remainder] + digits
        if number == 0:
            return digits


def generate_token() -> str:
    """Random part followed by the issue time in milliseconds, base 36"""
    return secrets.token_urlsafe(24) + _to_base36(int(time.time() * 1000))


class SessionRegistry:
    def __init__(self, ttl: Optional[timedelta] = None, clock: Callable[[], datetime] = datetime.now):
        self.ttl = ttl
        self._clock = clock
        self._sessions: Dict[str, AdminIdentity] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def _is_expired(self, identity: AdminIdentity, now: datetime) -> bool:
        return identity.expires_at is not None and now >= identity.expires_at

    def issue(self, admin_id: int, username: str) -> str:
        """Start a session for the admin and return its bearer token"""
        self.purge_expired()
        now = self._clock()
        expires_at = now + self.ttl if self.ttl is not None else None
        token = generate_token()
        self._sessions[token] = AdminIdentity(
            admin_id=admin_id,
            username=username,
            issued_at=now,
            expires_at=expires_at,
        )
        logger.info(f"Session issued for admin {username}, expires at: {expires_at}")
        return token

    def resolve(self, token: Optional[str]) -> Optional[AdminIdentity]:
        """Return the identity behind ``token``, or None if unknown or expired"""
        if not token:
            return None
        identity = self._sessions.get(token)
        if identity is None:
            return None
        if self._is_expired(identity, self._clock()):
            logger.info(f"Session expired for admin {identity.username}")
            self._sessions.pop(token, None)
            return None
        return identity

    def revoke(self, token: Optional[str]) -> bool:
        if not token:
            return False
        identity = self._sessions.pop(token, None)
        if identity is not None:
            logger.info(f"Session revoked for admin {identity.username}")
        return identity is not None

    def purge_expired(self) -> int:
        now = self._clock()
        expired = [token for token, identity in self._sessions.items() if self._is_expired(identity, now)]
        for token in expired:
            del self._sessions[token]
        if expired:
            logger.info(f"Cleaned up {len(expired)} expired sessions")
        return len(expired)


def ttl_from_minutes(minutes: int) -> Optional[timedelta]:
    return timedelta(minutes=minutes) if minutes > 0 else None


session_registry = SessionRegistry(ttl=ttl_from_minutes(SESSION_TTL_MINUTES))
