"""Local identity provider registry backends (in-memory and Redis)"""

import json
import logging
from threading import Lock
from typing import Dict, List, Optional, Tuple
from urllib.parse import quote

from ..core.identity_provider import IDPRecord, IIdentityProviderRegistry
from .redis_client import RedisClient

logger = logging.getLogger(__name__)


class InMemoryIdentityProviderRegistry(IIdentityProviderRegistry):
    """
    Process-local registry.

    Intended for development, tests and single-pod deployments where the
    provider list is supplied through configuration.
    """

    def __init__(self, records: Optional[Dict[str, List[IDPRecord]]] = None):
        """
        Args:
            records: Initial providers keyed by realm
        """
        self._records: Dict[Tuple[str, str], IDPRecord] = {}
        self._lock = Lock()

        for realm, realm_records in (records or {}).items():
            for record in realm_records:
                self.save(realm, record)

    @classmethod
    def from_seed(cls, seed: str) -> "InMemoryIdentityProviderRegistry":
        """
        Build a registry from a seed string.

        Format: comma-separated ``realm:alias`` entries, with an optional
        ``:disabled`` suffix, e.g. ``myrealm:google,myrealm:legacy-idp:disabled``.

        Raises:
            ValueError: If an entry is malformed
        """
        registry = cls()
        for entry in seed.split(","):
            entry = entry.strip()
            if not entry:
                continue

            parts = entry.split(":")
            if len(parts) not in (2, 3) or not parts[0] or not parts[1]:
                raise ValueError(f"Invalid identity provider seed entry: {entry!r}")
            if len(parts) == 3 and parts[2] not in ("enabled", "disabled"):
                raise ValueError(f"Invalid identity provider state in seed entry: {entry!r}")

            enabled = len(parts) == 2 or parts[2] == "enabled"
            registry.save(parts[0], IDPRecord(alias=parts[1], enabled=enabled))

        return registry

    def save(self, realm: str, record: IDPRecord) -> None:
        with self._lock:
            self._records[(realm, record.alias)] = record

    def remove(self, realm: str, alias: str) -> None:
        with self._lock:
            self._records.pop((realm, alias), None)

    def lookup_by_alias(self, realm: str, alias: str) -> Optional[IDPRecord]:
        return self._records.get((realm, alias))

    def get_backend_name(self) -> str:
        return "memory"


class RedisIdentityProviderRegistry(IIdentityProviderRegistry):
    """
    Registry stored in Redis, shared across pods.

    Records are JSON documents under ``sso-hint:idp:{realm}:{alias}`` with
    both segments percent-encoded, so ":" inside a name cannot collide.
    Redis errors and malformed documents read as "not registered".
    """

    KEY_PREFIX = "sso-hint:idp"

    def __init__(self, redis_client: RedisClient):
        self.redis = redis_client

        if not self.redis.is_available():
            logger.warning("Redis unavailable, identity provider lookups will miss")

    def _key(self, realm: str, alias: str) -> str:
        return f"{self.KEY_PREFIX}:{quote(realm, safe='')}:{quote(alias, safe='')}"

    def save(self, realm: str, record: IDPRecord) -> bool:
        return self.redis.set(self._key(realm, record.alias), json.dumps(record.to_dict()))

    def remove(self, realm: str, alias: str) -> bool:
        return self.redis.delete(self._key(realm, alias))

    def lookup_by_alias(self, realm: str, alias: str) -> Optional[IDPRecord]:
        raw = self.redis.get(self._key(realm, alias))
        if raw is None:
            return None

        try:
            record = IDPRecord.from_dict(json.loads(raw))
        except (ValueError, TypeError, AttributeError) as e:
            logger.warning(f"Ignoring malformed identity provider record {alias} in {realm}: {e}")
            return None

        # Stored alias must match exactly
        if record.alias != alias:
            return None

        return record

    def get_backend_name(self) -> str:
        return "redis"

    def is_available(self) -> bool:
        return self.redis.ping()
