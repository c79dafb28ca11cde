"""Infrastructure layer - Registry backends, protocol collaborators and Redis client"""

from .access_code import JWTAccessCodeGenerator
from .admin_api_registry import AdminApiIdentityProviderRegistry
from .client_data import OIDCClientDataEncoder
from .idp_registry import InMemoryIdentityProviderRegistry, RedisIdentityProviderRegistry
from .redis_client import RedisClient

__all__ = [
    "JWTAccessCodeGenerator",
    "AdminApiIdentityProviderRegistry",
    "OIDCClientDataEncoder",
    "InMemoryIdentityProviderRegistry",
    "RedisIdentityProviderRegistry",
    "RedisClient",
]
