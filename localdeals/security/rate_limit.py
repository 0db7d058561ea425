"""Rate limiting for write endpoints."""

import time
from typing import Optional

import redis.asyncio as redis


class RateLimiter:
    """Redis-based sliding-window rate limiter."""

    def __init__(
        self,
        redis_url: str,
        max_requests: int = 10,
        window_seconds: int = 60,
    ):
        """Initialize rate limiter."""
        self.redis_url = redis_url
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._client: redis.Redis | None = None

    async def connect(self) -> None:
        """Create the Redis client (connections are opened lazily)."""
        self._client = redis.from_url(self.redis_url, encoding="utf-8")

    async def disconnect(self) -> None:
        """Close Redis connection."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def _key(self, client_id: str, action: str) -> str:
        return f"localdeals:ratelimit:{action}:{client_id}"

    async def check_rate_limit(self, client_id: str, action: str) -> tuple[bool, Optional[int]]:
        """Check if a client has exceeded the rate limit for an action.

        Returns:
            (is_allowed, retry_after_seconds)
        """
        if not self._client:
            raise RuntimeError("Redis client not connected")

        key = self._key(client_id, action)
        now = time.time()

        # Drop entries that fell out of the window
        await self._client.zremrangebyscore(key, 0, now - self.window_seconds)

        count = await self._client.zcard(key)

        if count >= self.max_requests:
            oldest = await self._client.zrange(key, 0, 0, withscores=True)
            if oldest:
                retry_after = int(oldest[0][1] + self.window_seconds - now)
                return False, max(retry_after, 1)
            return False, self.window_seconds

        await self._client.zadd(key, {str(now): now})
        await self._client.expire(key, self.window_seconds)

        return True, None

    async def reset_limit(self, client_id: str, action: str) -> None:
        """Reset rate limit for a client action."""
        if not self._client:
            raise RuntimeError("Redis client not connected")

        await self._client.delete(self._key(client_id, action))
