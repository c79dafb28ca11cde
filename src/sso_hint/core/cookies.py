"""Inbound cookie model and hint cookie extraction"""

from dataclasses import dataclass
from typing import Dict, Mapping, Optional


@dataclass(frozen=True)
class CookieRecord:
    """A single inbound cookie"""

    name: str
    value: str


def cookies_from_mapping(raw: Mapping[str, str]) -> Dict[str, CookieRecord]:
    """
    Build cookie records from a parsed name -> value mapping.

    Args:
        raw: Cookies as parsed by the web framework (e.g. request.cookies)

    Returns:
        Dict of CookieRecord keyed by cookie name
    """
    return {name: CookieRecord(name=name, value=value) for name, value in raw.items()}


def extract_cookie(cookies: Mapping[str, CookieRecord], name: str) -> Optional[str]:
    """
    Read a cookie value and normalize it.

    Args:
        cookies: Inbound cookies keyed by name
        name: Cookie name to look for

    Returns:
        Trimmed cookie value, or None if the cookie is missing or blank
    """
    cookie = cookies.get(name)
    if cookie is None:
        return None

    value = (cookie.value or "").strip()
    if not value:
        return None

    return value
