"""Identity provider registry backed by the auth server's admin REST API"""

import logging
from threading import Lock
from typing import Dict, Optional
from urllib.parse import quote

import httpx
from cachetools import TTLCache

from ..core.identity_provider import IDPRecord, IIdentityProviderRegistry

logger = logging.getLogger(__name__)


class AdminApiIdentityProviderRegistry(IIdentityProviderRegistry):
    """
    Registry that reads identity provider instances over HTTP.

    Features:
    - Bearer token authentication
    - Per (realm, alias) caching of lookups, including misses, bounded to
      cache_size entries
    - 404 reported as "not registered"
    - Other HTTP failures raised as ValueError (the resolver fails open)
    """

    def __init__(
        self,
        api_url: str,
        token: Optional[str] = None,
        cache_ttl: int = 60,
        cache_size: int = 1024,
        timeout: float = 5.0,
    ):
        """
        Initialize the admin API registry.

        Args:
            api_url: Base URL of the auth server (e.g., http://keycloak:8080)
            token: Bearer token with permission to view identity providers
            cache_ttl: Lookup cache TTL in seconds (default: 60)
            cache_size: Maximum number of cached lookups (default: 1024)
            timeout: HTTP timeout in seconds
        """
        self.api_url = api_url.rstrip("/")
        self.token = token
        self.cache_ttl = cache_ttl
        self.cache_size = cache_size
        self.timeout = timeout
        # Aliases come from a client cookie, so the cache must stay bounded
        self._cache: TTLCache = TTLCache(maxsize=cache_size, ttl=cache_ttl)
        self._lock = Lock()

        logger.info(
            f"Initialized AdminApiIdentityProviderRegistry for {self.api_url} "
            f"(cache TTL: {cache_ttl}s, size: {cache_size})"
        )

    def _instance_url(self, realm: str, alias: str) -> str:
        return (
            f"{self.api_url}/admin/realms/{quote(realm, safe='')}"
            f"/identity-provider/instances/{quote(alias, safe='')}"
        )

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def lookup_by_alias(self, realm: str, alias: str) -> Optional[IDPRecord]:
        """
        Fetch an identity provider instance, served from cache when fresh.

        Raises:
            ValueError: If the admin API is unreachable or returns an error
        """
        key = (realm, alias)

        with self._lock:
            try:
                return self._cache[key]
            except KeyError:
                pass

        record = self._fetch(realm, alias)

        with self._lock:
            self._cache[key] = record

        return record

    def _fetch(self, realm: str, alias: str) -> Optional[IDPRecord]:
        url = self._instance_url(realm, alias)
        try:
            response = httpx.get(url, headers=self._headers(), timeout=self.timeout)
            if response.status_code == 404:
                logger.debug(f"Identity provider {alias} not found in realm {realm}")
                return None
            response.raise_for_status()
            data = response.json()

        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch identity provider from {url}: {str(e)}")
            raise ValueError(f"Cannot fetch identity provider: {str(e)}")

        try:
            return IDPRecord.from_dict(data)
        except (ValueError, AttributeError) as e:
            raise ValueError(f"Invalid identity provider payload: {str(e)}")

    def cache_len(self) -> int:
        """Number of lookups currently cached"""
        with self._lock:
            return len(self._cache)

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()

    def get_backend_name(self) -> str:
        return "admin-api"
