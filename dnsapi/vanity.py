"""Enabling and disabling vanity name servers for a domain."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any

from .core import Client, Response, versioned


@dataclass
class VanityNameServer:
    """A single vanity name server."""

    id: int = 0
    name: str = ""
    ipv4: str = ""
    ipv6: str = ""
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VanityNameServer:
        return cls(**{f.name: data.get(f.name) or f.default for f in fields(cls)})


def vanity_name_server_path(account_id: str | int, domain_identifier: str) -> str:
    return f"/{account_id}/vanity/{domain_identifier}"


@dataclass
class VanityNameServersService:
    """Calls for the vanity name server endpoints."""

    client: Client

    def enable_vanity_name_servers(self, account_id: str | int, domain_identifier: str) -> Response:
        """Turn vanity name servers on and return the servers now in use."""
        raw = self.client.put(versioned(vanity_name_server_path(account_id, domain_identifier)))
        return replace(raw, data=list(map(VanityNameServer.from_dict, raw.data or [])))

    def disable_vanity_name_servers(self, account_id: str | int, domain_identifier: str) -> Response:
        """Turn vanity name servers off."""
        raw = self.client.delete(versioned(vanity_name_server_path(account_id, domain_identifier)))
        return replace(raw, data=None, pagination=None)