"""Health checks for Kubernetes liveness and readiness probes.

Readiness validates that the identity provider registry backend can serve
lookups. The hint step fails open when it cannot, so an unavailable
backend degrades the service instead of taking it out of rotation.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List

from .identity_provider import IIdentityProviderRegistry

logger = logging.getLogger(__name__)


class HealthStatus(Enum):
    """Overall health status."""
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


@dataclass
class ComponentHealth:
    """Health status for a single component."""
    name: str
    status: HealthStatus
    message: str
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass
class AggregatedHealth:
    """Aggregated health check result."""
    status: HealthStatus
    components: List[ComponentHealth]
    ready: bool
    timestamp: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "status": self.status.value,
            "ready": self.ready,
            "timestamp": self.timestamp,
            "components": [
                {
                    "name": c.name,
                    "status": c.status.value,
                    "message": c.message,
                    "details": c.details,
                }
                for c in self.components
            ],
        }


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class HealthChecker:
    """Liveness and readiness checks for the SSO hint service."""

    def __init__(self, registry: IIdentityProviderRegistry):
        self.registry = registry

    async def check_liveness(self) -> AggregatedHealth:
        """Liveness probe: the process is running if this executes."""
        return AggregatedHealth(
            status=HealthStatus.HEALTHY,
            ready=True,
            timestamp=_now(),
            components=[
                ComponentHealth(
                    name="service_process",
                    status=HealthStatus.HEALTHY,
                    message="Service process is running",
                )
            ],
        )

    async def check_readiness(self) -> AggregatedHealth:
        """
        Readiness probe.

        The service stays ready with a degraded registry because hint
        lookups fail open to "no hint".

        Returns:
            AggregatedHealth with readiness status
        """
        registry_health = self._check_registry()

        return AggregatedHealth(
            status=registry_health.status,
            ready=True,
            timestamp=_now(),
            components=[registry_health],
        )

    def _check_registry(self) -> ComponentHealth:
        backend = self.registry.get_backend_name()
        try:
            available = self.registry.is_available()
        except Exception as e:
            logger.warning(f"Registry health check failed ({backend}): {e}")
            available = False

        if available:
            return ComponentHealth(
                name="idp_registry",
                status=HealthStatus.HEALTHY,
                message="Identity provider registry available",
                details={"backend": backend},
            )

        logger.warning(f"Identity provider registry unavailable ({backend})")
        return ComponentHealth(
            name="idp_registry",
            status=HealthStatus.DEGRADED,
            message="Identity provider registry unavailable, SSO hints disabled",
            details={"backend": backend},
        )
