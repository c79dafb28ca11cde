"""Redis client backing the identity provider registry.

Supports deployment-neutral configuration:
- Standalone Redis (development)
- Redis Sentinel (production HA)
"""

import logging
from typing import List, Optional, Tuple
from redis import Redis, Sentinel
from redis.exceptions import RedisError

from ..config.settings import Settings

logger = logging.getLogger(__name__)


class RedisClient:
    """Deployment-neutral Redis client with fail-soft operations."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.client: Optional[Redis] = None
        self._initialize_client()

    def _initialize_client(self) -> None:
        """Initialize Redis client based on settings."""
        mode = self.settings.redis_mode

        try:
            if mode == "sentinel":
                self._init_sentinel()
            else:
                self._init_standalone()

            if self.client:
                self.client.ping()
                logger.info(f"Redis client initialized in {mode} mode")
        except RedisError as e:
            logger.warning(
                f"Redis connection failed ({mode} mode): {e}. "
                "SSO hints will not resolve until Redis is reachable."
            )
            self.client = None

    def _init_standalone(self) -> None:
        self.client = Redis(
            host=self.settings.redis_host,
            port=self.settings.redis_port,
            password=self.settings.redis_password,
            db=self.settings.redis_db,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
        )

    def _init_sentinel(self) -> None:
        sentinel = Sentinel(
            parse_sentinel_hosts(self.settings.redis_sentinel_hosts),
            socket_timeout=5,
            password=self.settings.redis_password,
        )

        self.client = sentinel.master_for(
            self.settings.redis_master_set,
            db=self.settings.redis_db,
            decode_responses=True,
            socket_timeout=5,
        )

    def get(self, key: str) -> Optional[str]:
        """Get value from Redis with error handling."""
        if not self.client:
            return None

        try:
            return self.client.get(key)
        except RedisError as e:
            logger.warning(f"Redis GET error for key {key}: {e}")
            return None

    def set(self, key: str, value: str, ex: Optional[int] = None) -> bool:
        """Set value in Redis with error handling."""
        if not self.client:
            return False

        try:
            self.client.set(key, value, ex=ex)
            return True
        except RedisError as e:
            logger.warning(f"Redis SET error for key {key}: {e}")
            return False

    def delete(self, key: str) -> bool:
        """Delete key from Redis with error handling."""
        if not self.client:
            return False

        try:
            self.client.delete(key)
            return True
        except RedisError as e:
            logger.warning(f"Redis DEL error for key {key}: {e}")
            return False

    def ping(self) -> bool:
        """Round-trip check against the server."""
        if not self.client:
            return False

        try:
            return bool(self.client.ping())
        except RedisError as e:
            logger.warning(f"Redis PING error: {e}")
            return False

    def is_available(self) -> bool:
        """Check if Redis is configured and connected."""
        return self.client is not None


def parse_sentinel_hosts(value: str) -> List[Tuple[str, int]]:
    """Parse "host:port,host:port" into sentinel address tuples."""
    hosts = []
    for entry in value.split(","):
        entry = entry.strip()
        if not entry:
            continue
        host, _, port = entry.partition(":")
        hosts.append((host, int(port or 26379)))
    return hosts
