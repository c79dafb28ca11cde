"""SSO hint authentication step.

Runs once per interactive login attempt:
- Reads the identity provider hint cookie
- Resolves the alias to an enabled identity provider
- Composes a broker login URL the login page can offer as a shortcut

The step is advisory only. Every outcome completes successfully; only a
resolved hint attaches the ssoLoginUrl attribute.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .auth_context import LOGIN_HINT_NOTE, AuthContext, IFlowCallbacks
from .cookies import extract_cookie
from .identity_provider import IdentityProviderResolver, IIdentityProviderRegistry
from .login_url import IAccessCodeGenerator, IClientDataEncoder, compose_login_url
from .step_config import resolve_cookie_name

logger = logging.getLogger(__name__)

SSO_LOGIN_URL_ATTRIBUTE = "ssoLoginUrl"


class HintOutcome(Enum):
    """Terminal branch taken by an evaluation."""
    NO_COOKIE = "no_cookie"
    BLANK_COOKIE = "blank_cookie"
    UNKNOWN_OR_DISABLED_IDP = "unknown_or_disabled_idp"
    RESOLVED = "resolved"


@dataclass(frozen=True)
class SSOHint:
    """Result of evaluating a request. login_url is set only when RESOLVED."""
    outcome: HintOutcome
    login_url: Optional[str] = None

    @property
    def has_hint(self) -> bool:
        return self.login_url is not None


class SSOHintController:
    """
    Orchestrates the SSO hint decision for one authentication request.

    The controller keeps no per-request state, so one instance is shared by
    all concurrent requests.

    Example:
        controller = SSOHintController(registry, encoder, code_generator)
        hint = controller.evaluate(context)
        if hint.has_hint:
            render(sso_login_url=hint.login_url)
    """

    def __init__(
        self,
        registry: IIdentityProviderRegistry,
        client_data_encoder: IClientDataEncoder,
        access_code_generator: IAccessCodeGenerator,
    ):
        """
        Initialize the controller with its host capabilities.

        Args:
            registry: Identity provider registry backend
            client_data_encoder: Encoder for the active protocol's client state
            access_code_generator: Generator for the flow's session code
        """
        self.idp_resolver = IdentityProviderResolver(registry)
        self.client_data_encoder = client_data_encoder
        self.access_code_generator = access_code_generator

        logger.info(
            f"Initialized SSOHintController with registry backend: "
            f"{registry.get_backend_name()}"
        )

    def evaluate(self, context: AuthContext) -> SSOHint:
        """
        Decide whether a login shortcut can be offered.

        Args:
            context: Inbound authentication request

        Returns:
            SSOHint carrying the outcome and, when resolved, the login URL
        """
        cookie_name = resolve_cookie_name(context.config)

        if cookie_name not in context.cookies:
            logger.debug(f"No {cookie_name} cookie on request for realm {context.realm}")
            return SSOHint(outcome=HintOutcome.NO_COOKIE)

        alias = extract_cookie(context.cookies, cookie_name)
        if alias is None:
            logger.debug(f"Blank {cookie_name} cookie on request for realm {context.realm}")
            return SSOHint(outcome=HintOutcome.BLANK_COOKIE)

        idp = self.idp_resolver.resolve(context.realm, alias)
        if idp is None:
            return SSOHint(outcome=HintOutcome.UNKNOWN_OR_DISABLED_IDP)

        session = context.session
        login_url = compose_login_url(
            base_uri=context.base_uri,
            realm=context.realm,
            idp_alias=idp.alias,
            client_id=session.client_id,
            tab_id=session.tab_id,
            client_data=self.client_data_encoder.encode(session),
            session_code=self.access_code_generator.generate(session),
            login_hint=session.get_note(LOGIN_HINT_NOTE),
        )

        logger.info(f"Offering SSO shortcut via '{idp.alias}' in realm {context.realm}")
        return SSOHint(outcome=HintOutcome.RESOLVED, login_url=login_url)

    def authenticate(self, context: AuthContext, flow: IFlowCallbacks) -> SSOHint:
        """
        Run the step against the host flow.

        Attaches ssoLoginUrl when a hint resolved, then always signals success.
        """
        hint = self.evaluate(context)
        if hint.has_hint:
            flow.set_attribute(SSO_LOGIN_URL_ATTRIBUTE, hint.login_url)
        flow.success()
        return hint

    def requires_user(self) -> bool:
        return False

    def configured_for(self, realm: str, user_id: Optional[str] = None) -> bool:
        return True

    def set_required_actions(self, realm: str, user_id: Optional[str] = None) -> None:
        # No required actions
        return None
