"""Zones, zone files, zone records and zone distribution checks."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from .core import Client, ListOptions, Response, versioned


@dataclass
class Zone:
    """A DNS zone."""

    id: int = 0
    account_id: int = 0
    name: str = ""
    reverse: bool = False
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Zone:
        return cls(
            id=data.get("id") or 0,
            account_id=data.get("account_id") or 0,
            name=data.get("name") or "",
            reverse=bool(data.get("reverse")),
            created_at=data.get("created_at") or "",
            updated_at=data.get("updated_at") or "",
        )


@dataclass
class ZoneFile:
    """The text of a zone file."""

    zone: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ZoneFile:
        return cls(zone=data.get("zone") or "")


@dataclass
class ZoneDistribution:
    """Whether a zone or record is fully distributed across the name servers."""

    distributed: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ZoneDistribution:
        return cls(distributed=bool(data.get("distributed")))


@dataclass
class ZoneRecord:
    """A record in a zone."""

    id: int = 0
    zone_id: str = ""
    parent_id: int = 0
    type: str = ""
    name: str = ""
    content: str = ""
    ttl: int = 0
    priority: int = 0
    system_record: bool = False
    regions: list[str] = field(default_factory=list)
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ZoneRecord:
        return cls(
            id=data.get("id") or 0,
            zone_id=data.get("zone_id") or "",
            parent_id=data.get("parent_id") or 0,
            type=data.get("type") or "",
            name=data.get("name") or "",
            content=data.get("content") or "",
            ttl=data.get("ttl") or 0,
            priority=data.get("priority") or 0,
            system_record=bool(data.get("system_record")),
            regions=list(data.get("regions") or []),
            created_at=data.get("created_at") or "",
            updated_at=data.get("updated_at") or "",
        )


@dataclass
class ZoneRecordAttributes:
    """Attributes sent to create or update a zone record.

    ``name`` is ``None`` when it is not to be sent; an empty string is sent as is,
    which addresses the zone apex.
    """

    zone_id: str = ""
    type: str = ""
    name: str | None = None
    content: str = ""
    ttl: int = 0
    priority: int = 0
    regions: list[str] = field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        """Return the request body, leaving out unset fields."""
        payload: dict[str, Any] = {}
        if self.zone_id:
            payload["zone_id"] = self.zone_id
        if self.type:
            payload["type"] = self.type
        if self.name is not None:
            payload["name"] = self.name
        if self.content:
            payload["content"] = self.content
        if self.ttl:
            payload["ttl"] = self.ttl
        if self.priority:
            payload["priority"] = self.priority
        if self.regions:
            payload["regions"] = list(self.regions)
        return payload


@dataclass
class ZoneListOptions(ListOptions):
    """Options for listing zones."""

    name_like: str | None = None

    def to_query(self) -> dict[str, str]:
        query = super().to_query()
        if self.name_like is not None:
            query["name_like"] = self.name_like
        return query


@dataclass
class ZoneRecordListOptions(ListOptions):
    """Options for listing the records of a zone."""

    name: str | None = None
    name_like: str | None = None
    type: str | None = None

    def to_query(self) -> dict[str, str]:
        query = super().to_query()
        extra = {"name": self.name, "name_like": self.name_like, "type": self.type}
        query.update({key: value for key, value in extra.items() if value is not None})
        return query


def zone_record_path(account_id: str | int, zone_name: str, record_id: int = 0) -> str:
    path = f"/{account_id}/zones/{zone_name}/records"
    if record_id:
        path += f"/{record_id}"
    return path


def _query(options: ListOptions | None) -> dict[str, str] | None:
    return options.to_query() if options is not None else None


class ZonesService:
    """Calls for the zone and zone record endpoints."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def list_zones(self, account_id: str | int, options: ZoneListOptions | None = None) -> Response:
        raw = self.client.get(versioned(f"/{account_id}/zones"), _query(options))
        return replace(raw, data=[Zone.from_dict(item) for item in raw.data or []])

    def get_zone(self, account_id: str | int, zone_name: str) -> Response:
        raw = self.client.get(versioned(f"/{account_id}/zones/{zone_name}"))
        return replace(raw, data=Zone.from_dict(raw.data) if raw.data else None)

    def get_zone_file(self, account_id: str | int, zone_name: str) -> Response:
        raw = self.client.get(versioned(f"/{account_id}/zones/{zone_name}/file"))
        return replace(raw, data=ZoneFile.from_dict(raw.data) if raw.data else None)

    def check_zone_distribution(self, account_id: str | int, zone_name: str) -> Response:
        raw = self.client.get(versioned(f"/{account_id}/zones/{zone_name}/distribution"))
        return replace(raw, data=ZoneDistribution.from_dict(raw.data) if raw.data is not None else None)

    def check_zone_record_distribution(
        self, account_id: str | int, zone_name: str, record_id: int
    ) -> Response:
        path = versioned(f"/{account_id}/zones/{zone_name}/records/{record_id}/distribution")
        raw = self.client.get(path)
        return replace(raw, data=ZoneDistribution.from_dict(raw.data) if raw.data is not None else None)

    def list_records(
        self,
        account_id: str | int,
        zone_name: str,
        options: ZoneRecordListOptions | None = None,
    ) -> Response:
        raw = self.client.get(versioned(zone_record_path(account_id, zone_name)), _query(options))
        return replace(raw, data=[ZoneRecord.from_dict(item) for item in raw.data or []])

    def create_record(
        self,
        account_id: str | int,
        zone_name: str,
        record_attributes: ZoneRecordAttributes,
    ) -> Response:
        path = versioned(zone_record_path(account_id, zone_name))
        raw = self.client.post(path, record_attributes.to_payload())
        return replace(raw, data=ZoneRecord.from_dict(raw.data) if raw.data else None)

    def get_record(self, account_id: str | int, zone_name: str, record_id: int) -> Response:
        raw = self.client.get(versioned(zone_record_path(account_id, zone_name, record_id)))
        return replace(raw, data=ZoneRecord.from_dict(raw.data) if raw.data else None)

    def update_record(
        self,
        account_id: str | int,
        zone_name: str,
        record_id: int,
        record_attributes: ZoneRecordAttributes,
    ) -> Response:
        path = versioned(zone_record_path(account_id, zone_name, record_id))
        raw = self.client.patch(path, record_attributes.to_payload())
        return replace(raw, data=ZoneRecord.from_dict(raw.data) if raw.data else None)

    def delete_record(self, account_id: str | int, zone_name: str, record_id: int) -> Response:
        raw = self.client.delete(versioned(zone_record_path(account_id, zone_name, record_id)))
        return replace(raw, data=None, pagination=None)