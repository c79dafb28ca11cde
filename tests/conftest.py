"""Shared fixtures for the SSO hint test suite."""

from typing import Dict, Optional

import pytest

from sso_hint.core.auth_context import LOGIN_HINT_NOTE, AuthContext, AuthSession
from sso_hint.core.cookies import CookieRecord
from sso_hint.core.identity_provider import IDPRecord
from sso_hint.core.login_url import IAccessCodeGenerator, IClientDataEncoder
from sso_hint.core.sso_hint_controller import SSOHintController
from sso_hint.infrastructure.idp_registry import InMemoryIdentityProviderRegistry

REALM = "myrealm"
BASE_URI = "https://auth.example.com"


class FixedClientDataEncoder(IClientDataEncoder):
    """Returns a constant token so composed URLs are predictable."""

    def __init__(self, token: str = "tok123"):
        self.token = token

    def encode(self, session: AuthSession) -> str:
        return self.token


class FixedAccessCodeGenerator(IAccessCodeGenerator):
    """Returns a constant session code."""

    def __init__(self, code: str = "xyz"):
        self.code = code

    def generate(self, session: AuthSession) -> str:
        return self.code


def make_context(
    cookies: Optional[Dict[str, str]] = None,
    login_hint: Optional[str] = None,
    config: Optional[Dict[str, str]] = None,
    realm: str = REALM,
    base_uri: str = BASE_URI,
) -> AuthContext:
    notes = {LOGIN_HINT_NOTE: login_hint} if login_hint is not None else {}
    return AuthContext(
        cookies={name: CookieRecord(name=name, value=value) for name, value in (cookies or {}).items()},
        realm=realm,
        base_uri=base_uri,
        session=AuthSession(client_id="myapp", tab_id="abc", notes=notes),
        config=config,
    )


@pytest.fixture
def registry() -> InMemoryIdentityProviderRegistry:
    return InMemoryIdentityProviderRegistry(
        {
            REALM: [
                IDPRecord(alias="google", enabled=True),
                IDPRecord(alias="legacy-idp", enabled=False),
            ],
        }
    )


@pytest.fixture
def controller(registry) -> SSOHintController:
    return SSOHintController(
        registry=registry,
        client_data_encoder=FixedClientDataEncoder(),
        access_code_generator=FixedAccessCodeGenerator(),
    )
