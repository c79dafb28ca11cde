"""Tests for settings and application wiring."""

from unittest.mock import patch

import pytest

from sso_hint.config.settings import Settings
from sso_hint.infrastructure import (
    AdminApiIdentityProviderRegistry,
    InMemoryIdentityProviderRegistry,
    RedisIdentityProviderRegistry,
)
from sso_hint.main import _create_registry, create_app


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SSO_COOKIE_NAME", raising=False)
        settings = Settings(_env_file=None)

        assert settings.sso_cookie_name == "cosmo_idp_hint"
        assert settings.idp_registry_backend == "memory"
        assert settings.step_config == {"sso-cookie-name": "cosmo_idp_hint"}

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("SSO_COOKIE_NAME", "last_idp")
        monkeypatch.setenv("IDP_REGISTRY_BACKEND", "redis")

        settings = Settings(_env_file=None)

        assert settings.sso_cookie_name == "last_idp"
        assert settings.idp_registry_backend == "redis"


class TestCreateRegistry:
    def test_memory_backend_seeded(self):
        registry = _create_registry(
            Settings(_env_file=None, idp_registry_backend="memory", idp_registry_seed="myrealm:google")
        )

        assert isinstance(registry, InMemoryIdentityProviderRegistry)
        assert registry.lookup_by_alias("myrealm", "google") is not None

    def test_redis_backend(self):
        with patch("sso_hint.main.RedisClient") as redis_client:
            registry = _create_registry(Settings(_env_file=None, idp_registry_backend="redis"))

        assert isinstance(registry, RedisIdentityProviderRegistry)
        redis_client.assert_called_once()

    def test_admin_api_backend(self):
        registry = _create_registry(
            Settings(
                _env_file=None,
                idp_registry_backend="admin-api",
                admin_api_url="http://keycloak:8080",
                idp_cache_ttl=30,
            )
        )

        assert isinstance(registry, AdminApiIdentityProviderRegistry)
        assert registry.cache_ttl == 30

    def test_admin_api_requires_url(self):
        with pytest.raises(ValueError):
            _create_registry(Settings(_env_file=None, idp_registry_backend="admin-api"))


def test_create_app_wires_state():
    app = create_app(settings=Settings(_env_file=None, idp_registry_seed="myrealm:google"))

    assert app.state.controller.requires_user() is False
    assert app.state.settings.idp_registry_seed == "myrealm:google"
