"""
Redis cache for rendered stock summaries, keyed "stock:<sku>".

A summary cache is an optimization only: when Redis is unreachable, returns an
error or holds an undecodable value, lookups count as misses and writes are skipped.
"""

from typing import Optional, Any, Dict
import json
import logging
from redis import asyncio as aioredis
from redis.asyncio import Redis
from redis.exceptions import RedisError
from stock_display.core.config import settings, Settings

logger = logging.getLogger(__name__)

KEY_PREFIX = "stock"


class RedisCache:
    """
    Shared async Redis connection pool (singleton) for stock summaries.
    """

    _instance: Optional['RedisCache'] = None
    _redis_client: Optional[Redis] = None

    def __new__(cls, config: Optional[Settings] = None):
        if cls._instance is None:
            cls._instance = super(RedisCache, cls).__new__(cls)
        return cls._instance

    def __init__(self, config: Optional[Settings] = None):
        if hasattr(self, 'url'):
            return
        config = config or settings
        self.url = f"redis://{config.redis_host}:{config.redis_port}/{config.redis_db}"
        self.password = config.redis_password
        self.ttl = config.stock_cache_ttl
        logger.info(f"Stock summary cache configured: {self.url}, TTL={self.ttl}s")

    @property
    def connected(self) -> bool:
        return self._redis_client is not None

    @staticmethod
    def stock_key(sku: str) -> str:
        return f"{KEY_PREFIX}:{sku}"

    async def connect(self) -> None:
        """
        Open the connection pool and ping the server.

        Raises:
            RedisError: If the server cannot be reached; the pool is closed first
        """
        if self._redis_client is not None:
            return

        client = aioredis.from_url(
            self.url,
            password=self.password,
            encoding="utf-8",
            decode_responses=True,
            max_connections=10
        )
        try:
            await client.ping()
        except RedisError as e:
            logger.error(f"Failed to connect to Redis at {self.url}: {str(e)}")
            await client.aclose()
            raise

        self._redis_client = client
        logger.info("Redis connection established")

    async def disconnect(self) -> None:
        if self._redis_client is None:
            return
        client, self._redis_client = self._redis_client, None
        await client.aclose()
        logger.info("Redis connection closed")

    async def get_summary(self, sku: str) -> Optional[Dict[str, Any]]:
        """
        Cached summary payload for a SKU, or None on miss, error or undecodable value.
        """
        if self._redis_client is None:
            return None

        key = self.stock_key(sku)
        try:
            raw = await self._redis_client.get(key)
        except RedisError as e:
            logger.error(f"Redis GET failed for '{key}': {str(e)}")
            return None

        if not raw:
            logger.debug(f"Cache MISS: {key}")
            return None

        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"Undecodable cache entry '{key}': {str(e)}")
            return None

        if not isinstance(payload, dict):
            logger.error(f"Cache entry '{key}' is not a JSON object")
            return None

        logger.debug(f"Cache HIT: {key}")
        return payload

    async def store_summary(self, sku: str, payload: Dict[str, Any]) -> bool:
        """
        Store a summary payload with the configured TTL.

        Returns:
            True if written; False when disconnected, TTL <= 0, or on error
        """
        if self._redis_client is None or self.ttl <= 0:
            return False

        key = self.stock_key(sku)
        try:
            await self._redis_client.setex(key, self.ttl, json.dumps(payload))
        except RedisError as e:
            logger.error(f"Redis SETEX failed for '{key}': {str(e)}")
            return False
        except (TypeError, ValueError) as e:
            logger.error(f"Summary for '{key}' is not JSON serializable: {str(e)}")
            return False

        logger.debug(f"Cache SET: {key} (TTL={self.ttl}s)")
        return True


cache = RedisCache()
