"""Signed session code generator"""

import time
import uuid
import logging
from typing import Any, Dict

from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTError

from ..core.auth_context import AuthSession
from ..core.login_url import IAccessCodeGenerator

logger = logging.getLogger(__name__)


class JWTAccessCodeGenerator(IAccessCodeGenerator):
    """
    Issues short-lived HS256 codes bound to one authentication attempt.

    Claims:
    - cid: client identifier
    - tab: browser tab identifier
    - iat / exp: issue and expiry time
    - jti: unique code identifier
    """

    ALGORITHM = "HS256"

    def __init__(self, secret: str, ttl: int = 300):
        """
        Args:
            secret: HMAC signing key
            ttl: Code lifetime in seconds (default: 300 = 5 minutes)
        """
        if not secret:
            raise ValueError("Access code secret must not be empty")
        self.secret = secret
        self.ttl = ttl

    def generate(self, session: AuthSession) -> str:
        now = int(time.time())
        claims = {
            "cid": session.client_id,
            "tab": session.tab_id,
            "iat": now,
            "exp": now + self.ttl,
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(claims, self.secret, algorithm=self.ALGORITHM)

    def verify(self, code: str) -> Dict[str, Any]:
        """
        Validate a session code and return its claims.

        Raises:
            ValueError: If the code is expired or its signature is invalid
        """
        try:
            return jwt.decode(code, self.secret, algorithms=[self.ALGORITHM])
        except ExpiredSignatureError:
            logger.warning("Session code validation failed: code has expired")
            raise ValueError("Session code has expired")
        except JWTError as e:
            logger.warning(f"Session code validation failed: {str(e)}")
            raise ValueError(f"Invalid session code: {str(e)}")
