import redis.asyncio as redis

from .config import settings


def get_redis_client(url: str | None = None) -> redis.Redis:
    # reusable Redis client; connections are opened lazily on first command
    return redis.Redis.from_url(
        url or settings.redis_url,
        decode_responses=True,  # returns strings instead of bytes
    )
