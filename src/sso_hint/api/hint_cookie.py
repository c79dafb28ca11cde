"""Writing and clearing the identity provider hint cookie"""

import logging
from datetime import datetime, timezone
from fastapi import Response

from ..config.settings import Settings
from ..core.step_config import resolve_cookie_name

logger = logging.getLogger(__name__)


def _one_year_from(now: datetime) -> datetime:
    try:
        return now.replace(year=now.year + 1)
    except ValueError:
        # Feb 29
        return now.replace(year=now.year + 1, day=28)


def set_hint_cookie(response: Response, alias: str, settings: Settings) -> str:
    """
    Remember the identity provider used for an SSO login.

    The cookie is readable by the login page on every subdomain of
    sso_cookie_domain and lives for one year.

    Args:
        response: Outgoing response
        alias: Identity provider alias (must be non-blank)
        settings: Service settings

    Returns:
        Name of the cookie that was written

    Raises:
        ValueError: If alias is blank
    """
    alias = alias.strip()
    if not alias:
        raise ValueError("Identity provider alias must not be blank")

    name = resolve_cookie_name(settings.step_config)
    response.set_cookie(
        key=name,
        value=alias,
        expires=_one_year_from(datetime.now(timezone.utc)),
        path="/",
        domain=settings.sso_cookie_domain,
        secure=settings.sso_cookie_secure,
        samesite="lax",
    )
    logger.info(f"Set {name} cookie for identity provider '{alias}'")
    return name


def clear_hint_cookie(response: Response, settings: Settings) -> str:
    """Expire the hint cookie. Returns the cookie name."""
    name = resolve_cookie_name(settings.step_config)
    response.delete_cookie(
        key=name,
        path="/",
        domain=settings.sso_cookie_domain,
        secure=settings.sso_cookie_secure,
        samesite="lax",
    )
    logger.info(f"Cleared {name} cookie")
    return name
