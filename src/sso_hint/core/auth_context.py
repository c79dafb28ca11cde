"""Authentication context passed into the SSO hint step"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from .cookies import CookieRecord

# Session note holding a previously captured user identifier
LOGIN_HINT_NOTE = "login_hint"


@dataclass(frozen=True)
class AuthSession:
    """Current authentication session for one login attempt"""

    client_id: str
    tab_id: str
    protocol: str = "openid-connect"
    notes: Mapping[str, str] = field(default_factory=dict)
    client_notes: Mapping[str, str] = field(default_factory=dict)

    def get_note(self, name: str) -> Optional[str]:
        return self.notes.get(name)

    def get_client_note(self, name: str) -> Optional[str]:
        return self.client_notes.get(name)


@dataclass(frozen=True)
class AuthContext:
    """
    Read-only view of an inbound authentication request.

    Attributes:
        cookies: Inbound cookies keyed by name
        realm: Active realm identifier
        base_uri: Public base URI of the authentication server
        session: Current authentication session
        config: Step configuration (may be None when the realm has none)
    """

    cookies: Mapping[str, CookieRecord]
    realm: str
    base_uri: str
    session: AuthSession
    config: Optional[Mapping[str, str]] = None


class IFlowCallbacks(ABC):
    """Host side effects available to an authentication step"""

    @abstractmethod
    def set_attribute(self, name: str, value: str) -> None:
        """Attach a presentation attribute for the login page renderer"""
        pass

    @abstractmethod
    def success(self) -> None:
        """Signal that the step completed and the flow may continue"""
        pass


class AttributeCollector(IFlowCallbacks):
    """Flow callbacks that record attributes for an HTTP response"""

    def __init__(self):
        self.attributes: Dict[str, str] = {}
        self.completed = False

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = value

    def success(self) -> None:
        self.completed = True
