"""Core domain models and the SSO hint step"""

from .auth_context import AttributeCollector, AuthContext, AuthSession, IFlowCallbacks
from .cookies import CookieRecord, extract_cookie
from .identity_provider import IDPRecord, IdentityProviderResolver, IIdentityProviderRegistry
from .login_url import IAccessCodeGenerator, IClientDataEncoder, compose_login_url
from .sso_hint_controller import HintOutcome, SSOHint, SSOHintController
from .step_config import DEFAULT_COOKIE_NAME, resolve_cookie_name

__all__ = [
    "AttributeCollector",
    "AuthContext",
    "AuthSession",
    "IFlowCallbacks",
    "CookieRecord",
    "extract_cookie",
    "IDPRecord",
    "IdentityProviderResolver",
    "IIdentityProviderRegistry",
    "IAccessCodeGenerator",
    "IClientDataEncoder",
    "compose_login_url",
    "HintOutcome",
    "SSOHint",
    "SSOHintController",
    "DEFAULT_COOKIE_NAME",
    "resolve_cookie_name",
]
