"""Identity provider records, registry interface and alias resolution"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IDPRecord:
    """Identity provider as stored in the registry"""

    alias: str
    enabled: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {"alias": self.alias, "enabled": self.enabled}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IDPRecord":
        """
        Build a record from stored JSON.

        Raises:
            ValueError: If the alias is missing
        """
        alias = data.get("alias")
        if not alias:
            raise ValueError("Identity provider record has no alias")
        return cls(alias=alias, enabled=data.get("enabled", True) is True)


class IIdentityProviderRegistry(ABC):
    """
    Interface for identity provider storage backends.

    Implementations must:
    1. Look up providers by exact (case-sensitive) alias within a realm
    2. Return None when no provider is registered under the alias
    """

    @abstractmethod
    def lookup_by_alias(self, realm: str, alias: str) -> Optional[IDPRecord]:
        """
        Find an identity provider by alias.

        Args:
            realm: Realm the provider belongs to
            alias: Provider alias, used verbatim

        Returns:
            The stored IDPRecord, or None if not registered
        """
        pass

    @abstractmethod
    def get_backend_name(self) -> str:
        """Return the name of this registry backend"""
        pass

    def is_available(self) -> bool:
        """Whether the backend can currently serve lookups"""
        return True


class IdentityProviderResolver:
    """
    Resolves a hint alias to an enabled identity provider.

    Disabled providers are reported exactly like missing ones, and any
    registry fault is treated as "not found" so the login flow is never
    blocked by a lookup.
    """

    def __init__(self, registry: IIdentityProviderRegistry):
        self.registry = registry

    def resolve(self, realm: str, alias: str) -> Optional[IDPRecord]:
        try:
            record = self.registry.lookup_by_alias(realm, alias)
        except Exception as e:
            logger.warning(
                f"Identity provider lookup failed for '{alias}' in realm {realm} "
                f"({self.registry.get_backend_name()}): {e}. Treating as not found."
            )
            return None  # Fail open

        if record is None:
            logger.debug(f"No identity provider '{alias}' in realm {realm}")
            return None

        if not record.enabled:
            logger.debug(f"Identity provider '{alias}' in realm {realm} is disabled")
            return None

        return record
