"""API routes for health checks, SSO hint evaluation and the hint cookie"""

import logging
from typing import Any, Dict, Optional
from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from ..core.auth_context import LOGIN_HINT_NOTE, AttributeCollector, AuthContext, AuthSession
from ..core.cookies import cookies_from_mapping
from ..core.step_config import CONFIG_PROPERTIES
from ..infrastructure.client_data import (
    REDIRECT_URI_NOTE,
    RESPONSE_MODE_NOTE,
    RESPONSE_TYPE_NOTE,
    STATE_NOTE,
)
from .hint_cookie import clear_hint_cookie, set_hint_cookie

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "sso-hint-service"
SERVICE_VERSION = "1.0.0"


@router.get("/health")
async def health_check() -> Dict[str, Any]:
    """
    Basic health check endpoint.

    Lightweight: only verifies the process is responsive. Use /health/live
    and /health/ready for Kubernetes probes.
    """
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


@router.get("/health/live")
async def liveness_probe(request: Request) -> Dict[str, Any]:
    """Kubernetes liveness probe endpoint."""
    health = await request.app.state.health_checker.check_liveness()
    return health.to_dict()


@router.get("/health/ready")
async def readiness_probe(request: Request) -> Response:
    """
    Kubernetes readiness probe endpoint.

    Reports the identity provider registry state. A degraded registry
    keeps the service ready because hint lookups fail open.
    """
    health = await request.app.state.health_checker.check_readiness()

    status_code = status.HTTP_200_OK if health.ready else status.HTTP_503_SERVICE_UNAVAILABLE

    return JSONResponse(
        status_code=status_code,
        content=health.to_dict(),
    )


@router.get("/realms/{realm}/sso-hint")
def resolve_sso_hint(
    request: Request,
    realm: str,
    client_id: str,
    tab_id: str,
    redirect_uri: Optional[str] = None,
    response_type: str = "code",
    response_mode: Optional[str] = None,
    state: Optional[str] = None,
    login_hint: Optional[str] = None,
    protocol: str = "openid-connect",
) -> Dict[str, Any]:
    """
    Run the SSO hint step for the login page being rendered.

    Reads the hint cookie from the request. Always returns 200 with
    status "success"; attributes carries ssoLoginUrl only when the cookie
    names an enabled identity provider.
    """
    settings = request.app.state.settings
    controller = request.app.state.controller

    client_notes = {
        REDIRECT_URI_NOTE: redirect_uri,
        RESPONSE_TYPE_NOTE: response_type,
        RESPONSE_MODE_NOTE: response_mode,
        STATE_NOTE: state,
    }
    session = AuthSession(
        client_id=client_id,
        tab_id=tab_id,
        protocol=protocol,
        notes={LOGIN_HINT_NOTE: login_hint} if login_hint is not None else {},
        client_notes={k: v for k, v in client_notes.items() if v is not None},
    )
    context = AuthContext(
        cookies=cookies_from_mapping(request.cookies),
        realm=realm,
        base_uri=settings.public_base_url or str(request.base_url),
        session=session,
        config=settings.step_config,
    )

    flow = AttributeCollector()
    hint = controller.authenticate(context, flow)

    return {
        "status": "success",
        "outcome": hint.outcome.value,
        "attributes": flow.attributes,
    }


@router.get("/sso-hint/config")
async def config_schema(request: Request) -> Dict[str, Any]:
    """Configuration properties of the SSO hint step with current values"""
    settings = request.app.state.settings
    return {
        "properties": [prop.to_dict() for prop in CONFIG_PROPERTIES],
        "config": settings.step_config,
    }


@router.put("/sso-hint/cookie/{alias}")
async def remember_identity_provider(request: Request, response: Response, alias: str):
    """Set the hint cookie after a successful SSO login via alias"""
    try:
        cookie_name = set_hint_cookie(response, alias, request.app.state.settings)
    except ValueError as e:
        logger.warning(f"Rejected hint cookie write: {str(e)}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "invalid_alias",
                "message": str(e),
            },
        )

    return {"cookie": cookie_name, "alias": alias.strip()}


@router.delete("/sso-hint/cookie")
async def forget_identity_provider(request: Request, response: Response) -> Dict[str, Any]:
    """Clear the hint cookie"""
    cookie_name = clear_hint_cookie(response, request.app.state.settings)
    return {"cookie": cookie_name, "cleared": True}
