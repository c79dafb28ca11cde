"""Tests for the OpenID Connect client data encoder."""

import pytest

from sso_hint.core.auth_context import AuthSession
from sso_hint.infrastructure.client_data import OIDCClientDataEncoder


def _session(**client_notes):
    return AuthSession(client_id="myapp", tab_id="abc", client_notes=client_notes)


class TestOIDCClientDataEncoder:
    def test_roundtrip_fields(self):
        session = _session(
            redirect_uri="https://app.example.com/callback?x=1",
            response_type="code",
            response_mode="query",
            state="s-123",
        )

        token = OIDCClientDataEncoder().encode(session)

        assert OIDCClientDataEncoder.decode(token) == {
            "ru": "https://app.example.com/callback?x=1",
            "rt": "code",
            "rm": "query",
            "st": "s-123",
        }

    def test_token_is_url_safe_without_padding(self):
        token = OIDCClientDataEncoder().encode(_session(redirect_uri="https://a.example/?q=~~~", state="x"))

        assert "=" not in token
        assert "+" not in token
        assert "/" not in token

    def test_missing_notes_omitted(self):
        token = OIDCClientDataEncoder().encode(_session(response_type="code"))

        assert OIDCClientDataEncoder.decode(token) == {"rt": "code"}

    def test_encoding_is_deterministic(self):
        session = _session(redirect_uri="https://app.example.com", response_type="code")

        assert OIDCClientDataEncoder().encode(session) == OIDCClientDataEncoder().encode(session)

    @pytest.mark.parametrize("token", ["!!!", "WzFd"])
    def test_decode_rejects_invalid(self, token):
        with pytest.raises(ValueError):
            OIDCClientDataEncoder.decode(token)
