"""Explicit client-side context: who is calling, and what the previous screen passed along."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from storefront.config import AppConfig, settings


@dataclass(frozen=True)
class ClientSession:
    """
    Connection details for talking to the booking API.

    The auth token is carried here and handed to whoever needs it rather
    than looked up from ambient storage.
    """

    base_url: str
    auth_token: Optional[str] = None

    @classmethod
    def from_config(cls, config: AppConfig = settings, auth_token: Optional[str] = None) -> "ClientSession":
        return cls(base_url=config.client.api_base_url, auth_token=auth_token)

    @property
    def is_signed_in(self) -> bool:
        return bool(self.auth_token)

    def headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.auth_token:
            headers["Authorization"] = f"Bearer {self.auth_token}"
        return headers


@dataclass(frozen=True)
class NavigationContext:
    """Values a prior screen hands to the booking form, e.g. from a repair card."""

    repair_type: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_mapping(cls, state: Optional[Mapping[str, Any]]) -> "NavigationContext":
        """Build from a camelCase mapping such as ``{"repairType": "TV Repair"}``."""
        if not state:
            return cls()
        return cls(
            repair_type=state.get("repairType") or None,
            description=state.get("description") or None,
        )
