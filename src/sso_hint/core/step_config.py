"""Step configuration: cookie name option and its schema"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

DEFAULT_COOKIE_NAME = "cosmo_idp_hint"
SSO_COOKIE_NAME_OPTION = "sso-cookie-name"


@dataclass(frozen=True)
class ConfigProperty:
    """A single configurable option exposed to the realm admin UI"""

    name: str
    label: str
    help_text: str
    type: str = "string"
    default_value: Optional[str] = None
    required: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "label": self.label,
            "helpText": self.help_text,
            "type": self.type,
            "defaultValue": self.default_value,
            "required": self.required,
        }


CONFIG_PROPERTIES: List[ConfigProperty] = [
    ConfigProperty(
        name=SSO_COOKIE_NAME_OPTION,
        label="Cookie Name",
        help_text="Name of the cookie holding the alias of the last used identity provider",
        default_value=DEFAULT_COOKIE_NAME,
        required=True,
    ),
]


def resolve_cookie_name(config: Optional[Mapping[str, str]]) -> str:
    """
    Determine which cookie carries the identity provider hint.

    Blank or missing configuration falls back to DEFAULT_COOKIE_NAME.

    Args:
        config: Step configuration, or None when the realm has none

    Returns:
        Cookie name to read
    """
    if not config:
        return DEFAULT_COOKIE_NAME

    configured = config.get(SSO_COOKIE_NAME_OPTION)
    if configured is None or not configured.strip():
        return DEFAULT_COOKIE_NAME

    return configured.strip()
