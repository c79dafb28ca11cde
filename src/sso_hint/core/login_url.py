"""Broker login URL composition and the protocol capabilities it consumes"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from urllib.parse import quote

from .auth_context import AuthSession


class IClientDataEncoder(ABC):
    """Protocol-specific encoder for the in-flight exchange context"""

    @abstractmethod
    def encode(self, session: AuthSession) -> str:
        """
        Serialize the session's protocol state into an opaque token.

        Args:
            session: Current authentication session

        Returns:
            URL-safe opaque token
        """
        pass


class IAccessCodeGenerator(ABC):
    """Generator for short-lived codes identifying an authentication attempt"""

    @abstractmethod
    def generate(self, session: AuthSession) -> str:
        """Issue a new access code for the session"""
        pass


def compose_login_url(
    base_uri: str,
    realm: str,
    idp_alias: str,
    client_id: str,
    tab_id: str,
    client_data: str,
    session_code: str,
    login_hint: Optional[str] = None,
) -> str:
    """
    Build the broker login URL for an identity provider.

    Shape:
        {base_uri}/realms/{realm}/broker/{idp_alias}/login
            ?client_id=..&tab_id=..&client_data=..&session_code=..[&login_hint=..]

    Query parameter order is fixed. login_hint is only appended when it is
    non-blank after trimming.

    Args:
        base_uri: Public base URI of the authentication server
        realm: Realm identifier
        idp_alias: Identity provider alias
        client_id: Client identifier of the authentication session
        tab_id: Browser tab identifier of the authentication session
        client_data: Opaque protocol state token
        session_code: Access code for the current flow
        login_hint: Optional user identifier to forward to the provider

    Returns:
        Fully composed login URL
    """
    segments = ["realms", realm, "broker", idp_alias, "login"]
    path = "/".join(quote(segment, safe="") for segment in segments)

    params: List[Tuple[str, str]] = [
        ("client_id", client_id),
        ("tab_id", tab_id),
        ("client_data", client_data),
        ("session_code", session_code),
    ]
    if login_hint is not None and login_hint.strip():
        params.append(("login_hint", login_hint))

    query = "&".join(f"{name}={quote(value, safe='')}" for name, value in params)

    return f"{base_uri.rstrip('/')}/{path}?{query}"
