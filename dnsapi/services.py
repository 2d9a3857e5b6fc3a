"""One-click services: listing, fetching, and applying them to domains."""

from __future__ import annotations

from dataclasses import MISSING, dataclass, field, fields, replace
from typing import Any

from .core import Client, ListOptions, Response, versioned


def _scalar_fields(cls: type, data: dict[str, Any]) -> dict[str, Any]:
    """Read every plain field of ``cls`` from ``data``, falling back to its default."""
    return {f.name: data.get(f.name) or f.default for f in fields(cls) if f.default is not MISSING}


@dataclass
class ServiceSetting:
    """A single setting of a one-click service."""

    name: str = ""
    label: str = ""
    append: str = ""
    description: str = ""
    example: str = ""
    password: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ServiceSetting:
        return cls(**_scalar_fields(cls, data))


@dataclass
class Service:
    """A one-click service."""

    id: int = 0
    sid: str = ""
    name: str = ""
    description: str = ""
    setup_description: str = ""
    requires_setup: bool = False
    default_subdomain: str = ""
    created_at: str = ""
    updated_at: str = ""
    settings: list[ServiceSetting] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Service:
        settings = [ServiceSetting.from_dict(item) for item in data.get("settings") or []]
        return cls(**_scalar_fields(cls, data), settings=settings)


@dataclass
class DomainServiceSettings:
    """Optional settings used when applying a service to a domain."""

    settings: dict[str, str] = field(default_factory=dict)

    def to_payload(self) -> dict[str, Any]:
        return {"settings": dict(self.settings)} if self.settings else {}


def service_path(service_identifier: str | int = "") -> str:
    return f"/services/{service_identifier}" if service_identifier else "/services"


def domain_services_path(
    account_id: str | int, domain_identifier: str, service_identifier: str | int = ""
) -> str:
    path = f"/{account_id}/domains/{domain_identifier}/services"
    return f"{path}/{service_identifier}" if service_identifier else path


@dataclass
class ServicesService:
    """Calls for the one-click services endpoints."""

    client: Client

    def _services(self, path: str, options: ListOptions | None) -> Response:
        raw = self.client.get(versioned(path), options.to_query() if options else None)
        return replace(raw, data=[Service.from_dict(item) for item in raw.data or []])

    def list_services(self, options: ListOptions | None = None) -> Response:
        return self._services(service_path(), options)

    def get_service(self, service_identifier: str | int) -> Response:
        raw = self.client.get(versioned(service_path(service_identifier)))
        return replace(raw, data=Service.from_dict(raw.data) if raw.data else None)

    def applied_services(
        self,
        account_id: str | int,
        domain_identifier: str,
        options: ListOptions | None = None,
    ) -> Response:
        return self._services(domain_services_path(account_id, domain_identifier), options)

    def apply_service(
        self,
        account_id: str | int,
        service_identifier: str | int,
        domain_identifier: str,
        settings: DomainServiceSettings | None = None,
    ) -> Response:
        path = versioned(domain_services_path(account_id, domain_identifier, service_identifier))
        raw = self.client.post(path, settings.to_payload() if settings is not None else None)
        return replace(raw, data=None, pagination=None)

    def unapply_service(
        self,
        account_id: str | int,
        service_identifier: str | int,
        domain_identifier: str,
    ) -> Response:
        path = versioned(domain_services_path(account_id, domain_identifier, service_identifier))
        return replace(self.client.delete(path), data=None, pagination=None)