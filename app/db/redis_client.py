# app/db/redis_client.py
import logging

import redis.asyncio as redis

from app.core import config

logger = logging.getLogger(__name__)

# One pooled client for the app's lifetime; holds password-reset tokens only
redis_client = redis.from_url(config.REDIS_URL, decode_responses=True)


async def get_redis():
    """
    Dependency handing the shared client to endpoints.
    Usage: `redis: Redis = Depends(get_redis)`
    """
    yield redis_client


async def close_redis() -> None:
    """Release pooled connections on shutdown."""
    await redis_client.aclose()
    logger.info("Redis connection pool closed")
