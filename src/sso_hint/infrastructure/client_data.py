"""OpenID Connect client data encoder"""

import json
from typing import Any, Dict, Optional

from jose.utils import base64url_decode, base64url_encode

from ..core.auth_context import AuthSession
from ..core.login_url import IClientDataEncoder

# Client notes carrying the original authorization request
REDIRECT_URI_NOTE = "redirect_uri"
RESPONSE_TYPE_NOTE = "response_type"
RESPONSE_MODE_NOTE = "response_mode"
STATE_NOTE = "state"


class OIDCClientDataEncoder(IClientDataEncoder):
    """
    Encodes the pending authorization request so the broker can resume it.

    Token format: unpadded base64url of compact JSON with keys
    ru (redirect_uri), rt (response_type), rm (response_mode), st (state).
    Notes missing from the session are omitted.
    """

    FIELDS = (
        ("ru", REDIRECT_URI_NOTE),
        ("rt", RESPONSE_TYPE_NOTE),
        ("rm", RESPONSE_MODE_NOTE),
        ("st", STATE_NOTE),
    )

    def encode(self, session: AuthSession) -> str:
        payload: Dict[str, Any] = {}
        for key, note in self.FIELDS:
            value = session.get_client_note(note)
            if value is not None:
                payload[key] = value

        raw = json.dumps(payload, separators=(",", ":"))
        return base64url_encode(raw.encode("utf-8")).decode("ascii")

    @staticmethod
    def decode(token: str) -> Dict[str, Optional[str]]:
        """
        Decode a client data token back into its fields.

        Raises:
            ValueError: If the token is not valid base64url JSON
        """
        try:
            data = json.loads(base64url_decode(token.encode("ascii")))
        except (ValueError, UnicodeError) as e:
            raise ValueError(f"Invalid client data: {str(e)}")
        if not isinstance(data, dict):
            raise ValueError("Invalid client data: expected a JSON object")
        return data
