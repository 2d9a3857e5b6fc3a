"""Top-level domains supported for registration, and their extended attributes."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any

from .core import Client, ListOptions, Response, versioned


@dataclass
class Tld:
    """A top-level domain."""

    tld: str = ""
    tld_type: int = 0
    whois_privacy: bool = False
    auto_renew_only: bool = False
    minimum_registration: int = 0
    registration_enabled: bool = False
    renewal_enabled: bool = False
    transfer_enabled: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Tld:
        return cls(**{f.name: data.get(f.name) or f.default for f in fields(cls)})


@dataclass
class TldExtendedAttributeOption:
    """One value that an extended attribute may take."""

    title: str = ""
    value: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TldExtendedAttributeOption:
        return cls(*(data.get(key) or "" for key in ("title", "value", "description")))


@dataclass
class TldExtendedAttribute:
    """An extended attribute supported or required by a TLD."""

    name: str = ""
    description: str = ""
    required: bool = False
    options: list[TldExtendedAttributeOption] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TldExtendedAttribute:
        return cls(
            name=data.get("name") or "",
            description=data.get("description") or "",
            required=bool(data.get("required")),
            options=[TldExtendedAttributeOption.from_dict(item) for item in data.get("options") or []],
        )


@dataclass
class TldsService:
    """Calls for the TLD endpoints."""

    client: Client

    def list_tlds(self, options: ListOptions | None = None) -> Response:
        raw = self.client.get(versioned("/tlds"), options.to_query() if options else None)
        return replace(raw, data=list(map(Tld.from_dict, raw.data or [])))

    def get_tld(self, tld: str) -> Response:
        raw = self.client.get(versioned(f"/tlds/{tld}"))
        return replace(raw, data=Tld.from_dict(raw.data) if raw.data else None)

    def get_tld_extended_attributes(self, tld: str) -> Response:
        raw = self.client.get(versioned(f"/tlds/{tld}/extended_attributes"))
        return replace(raw, data=list(map(TldExtendedAttribute.from_dict, raw.data or [])))