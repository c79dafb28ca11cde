"""Tests for the in-memory and Redis registry backends."""

import json
from unittest.mock import Mock

import pytest

from sso_hint.core.identity_provider import IDPRecord
from sso_hint.infrastructure.idp_registry import (
    InMemoryIdentityProviderRegistry,
    RedisIdentityProviderRegistry,
)


class TestInMemoryRegistry:
    def test_lookup(self, registry):
        assert registry.lookup_by_alias("myrealm", "google") == IDPRecord(alias="google", enabled=True)
        assert registry.lookup_by_alias("myrealm", "github") is None
        assert registry.lookup_by_alias("otherrealm", "google") is None

    def test_save_and_remove(self):
        registry = InMemoryIdentityProviderRegistry()
        registry.save("r", IDPRecord(alias="okta"))

        assert registry.lookup_by_alias("r", "okta") is not None

        registry.remove("r", "okta")
        assert registry.lookup_by_alias("r", "okta") is None

    def test_from_seed(self):
        registry = InMemoryIdentityProviderRegistry.from_seed(
            "myrealm:google, myrealm:legacy-idp:disabled,other:okta:enabled"
        )

        assert registry.lookup_by_alias("myrealm", "google").enabled is True
        assert registry.lookup_by_alias("myrealm", "legacy-idp").enabled is False
        assert registry.lookup_by_alias("other", "okta").enabled is True

    def test_empty_seed(self):
        registry = InMemoryIdentityProviderRegistry.from_seed("")

        assert registry.lookup_by_alias("myrealm", "google") is None

    @pytest.mark.parametrize("seed", ["google", "myrealm:", "myrealm:google:maybe", "a:b:c:d"])
    def test_invalid_seed(self, seed):
        with pytest.raises(ValueError):
            InMemoryIdentityProviderRegistry.from_seed(seed)

    def test_backend_name(self, registry):
        assert registry.get_backend_name() == "memory"
        assert registry.is_available() is True


class TestRedisRegistry:
    def _client(self, stored=None):
        client = Mock()
        client.is_available.return_value = True
        client.get.return_value = stored
        return client

    def test_lookup_reads_json_record(self):
        client = self._client(json.dumps({"alias": "google", "enabled": True}))
        registry = RedisIdentityProviderRegistry(client)

        assert registry.lookup_by_alias("myrealm", "google") == IDPRecord(alias="google", enabled=True)
        client.get.assert_called_once_with("sso-hint:idp:myrealm:google")

    def test_missing_key(self):
        registry = RedisIdentityProviderRegistry(self._client(None))

        assert registry.lookup_by_alias("myrealm", "google") is None

    @pytest.mark.parametrize("stored", ["not json", "[1, 2]", json.dumps({"enabled": True})])
    def test_malformed_record(self, stored):
        registry = RedisIdentityProviderRegistry(self._client(stored))

        assert registry.lookup_by_alias("myrealm", "google") is None

    def test_alias_mismatch(self):
        registry = RedisIdentityProviderRegistry(
            self._client(json.dumps({"alias": "Google", "enabled": True}))
        )

        assert registry.lookup_by_alias("myrealm", "google") is None

    def test_save(self):
        client = self._client()
        client.set.return_value = True
        registry = RedisIdentityProviderRegistry(client)

        assert registry.save("myrealm", IDPRecord(alias="google", enabled=False)) is True
        key, value = client.set.call_args.args
        assert key == "sso-hint:idp:myrealm:google"
        assert json.loads(value) == {"alias": "google", "enabled": False}

    def test_colon_in_names_does_not_collide(self):
        client = self._client()
        registry = RedisIdentityProviderRegistry(client)

        registry.save("a:b", IDPRecord(alias="c"))
        registry.save("a", IDPRecord(alias="b:c"))

        first_key = client.set.call_args_list[0].args[0]
        second_key = client.set.call_args_list[1].args[0]
        assert first_key == "sso-hint:idp:a%3Ab:c"
        assert second_key == "sso-hint:idp:a:b%3Ac"
        assert first_key != second_key

    def test_lookup_uses_encoded_key(self):
        client = self._client(json.dumps({"alias": "b:c", "enabled": True}))
        registry = RedisIdentityProviderRegistry(client)

        assert registry.lookup_by_alias("a", "b:c") == IDPRecord(alias="b:c", enabled=True)
        client.get.assert_called_once_with("sso-hint:idp:a:b%3Ac")

    def test_availability_uses_ping(self):
        client = self._client()
        client.ping.return_value = False

        assert RedisIdentityProviderRegistry(client).is_available() is False
