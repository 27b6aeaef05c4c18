"""
Applicant context handed from resume creation to the later cover-letter call.

Each context lives under its own session id with an expiry, so concurrent
applicants never read or overwrite each other's work history.
"""
import asyncio
import logging
import time
from typing import Dict, Optional, Tuple

from redis.exceptions import RedisError

from ..core.config import settings
from ..core.errors import ContextNotFoundError, ContextStoreError
from ..schemas.resume import ApplicantContext
from ..utils.identifiers import make_session_id

logger = logging.getLogger(__name__)

KEY_PREFIX = "applicant_context"


class InMemoryContextStore:
    """Process-local store; suitable for a single worker and for tests."""

    def __init__(self, ttl_seconds: int = settings.context_ttl_seconds, clock=time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[float, ApplicantContext]] = {}
        self._lock = asyncio.Lock()

    async def save(self, context: ApplicantContext) -> str:
        session_id = make_session_id()
        async with self._lock:
            self._purge_expired()
            self._entries[session_id] = (self._clock() + self.ttl_seconds, context.model_copy(deep=True))
        return session_id

    async def load(self, session_id: Optional[str]) -> ApplicantContext:
        async with self._lock:
            self._purge_expired()
            entry = self._entries.get(session_id) if session_id else None
        if entry is None:
            raise ContextNotFoundError()
        return entry[1].model_copy(deep=True)

    def _purge_expired(self):
        now = self._clock()
        expired = [key for key, (expires_at, _) in self._entries.items() if expires_at <= now]
        for key in expired:
            del self._entries[key]


class RedisContextStore:
    """Contexts serialized as JSON under `applicant_context:<session_id>` with SETEX."""

    def __init__(self, redis_client, ttl_seconds: int = settings.context_ttl_seconds):
        self.redis_client = redis_client
        self.ttl_seconds = ttl_seconds

    @staticmethod
    def make_key(session_id: str) -> str:
        return f"{KEY_PREFIX}:{session_id}"

    async def save(self, context: ApplicantContext) -> str:
        session_id = make_session_id()
        try:
            await self.redis_client.setex(
                self.make_key(session_id),
                self.ttl_seconds,
                context.model_dump_json(),
            )
        except RedisError as e:
            logger.error(f"Redis SETEX failed for applicant context: {str(e)}")
            raise ContextStoreError() from e
        return session_id

    async def load(self, session_id: Optional[str]) -> ApplicantContext:
        if not session_id:
            raise ContextNotFoundError()
        try:
            data = await self.redis_client.get(self.make_key(session_id))
        except RedisError as e:
            logger.error(f"Redis GET failed for applicant context: {str(e)}")
            raise ContextStoreError() from e
        if not data:
            raise ContextNotFoundError()
        return ApplicantContext.model_validate_json(data)
