"""Parsing of the event payloads that DNSimple delivers to webhooks."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Union

from .core import User
from .webhooks import Webhook
from .zones import Zone, ZoneRecord


def _object(data: dict[str, Any], key: str) -> dict[str, Any] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ValueError(f"event field {key!r} must be an object, got {type(value).__name__}")
    return value


def _string(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"event field {key!r} must be a string, got {type(value).__name__}")
    return value


def _integer(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"event field {key!r} must be an integer, got {type(value).__name__}")
    return value


def _boolean(data: dict[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"event field {key!r} must be a boolean, got {type(value).__name__}")
    return value


@dataclass
class Actor:
    """The entity that triggered an event: a user, support staff or the system."""

    id: str = ""
    entity: str = ""
    pretty: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Actor:
        return cls(
            id=_string(data, "id"),
            entity=_string(data, "entity"),
            pretty=_string(data, "pretty"),
        )


@dataclass
class EventAccount:
    """The account an event belongs to, with its display label and identifier."""

    id: int = 0
    display: str = ""
    identifier: str = ""
    attributes: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EventAccount:
        return cls(
            id=_integer(data, "id"),
            display=_string(data, "display"),
            identifier=_string(data, "identifier"),
            attributes=dict(data),
        )


class GenericEventData(dict):
    """Data of an event without a dedicated type: the raw ``data`` object."""

    @classmethod
    def _from_data(cls, data: dict[str, Any]) -> GenericEventData:
        return cls(data)


@dataclass
class AccountEventData:
    """Data of an account event."""

    account: dict[str, Any] | None = None

    @classmethod
    def _from_data(cls, data: dict[str, Any]) -> AccountEventData:
        return cls(account=_object(data, "account"))


@dataclass
class AccountMembershipEventData:
    """Data of an account invitation or membership event."""

    account: dict[str, Any] | None = None
    account_invitation: dict[str, Any] | None = None
    user: User | None = None

    @classmethod
    def _from_data(cls, data: dict[str, Any]) -> AccountMembershipEventData:
        user = _object(data, "user")
        return cls(
            account=_object(data, "account"),
            account_invitation=_object(data, "account_invitation"),
            user=User.from_dict(user) if user is not None else None,
        )


@dataclass
class CertificateEventData:
    """Data of a certificate event."""

    certificate: dict[str, Any] | None = None

    @classmethod
    def _from_data(cls, data: dict[str, Any]) -> CertificateEventData:
        return cls(certificate=_object(data, "certificate"))


@dataclass
class ContactEventData:
    """Data of a contact event."""

    contact: dict[str, Any] | None = None

    @classmethod
    def _from_data(cls, data: dict[str, Any]) -> ContactEventData:
        return cls(contact=_object(data, "contact"))


@dataclass
class DNSSECEventData:
    """Data of a DNSSEC event."""

    delegation_signer_record: dict[str, Any] | None = None

    @classmethod
    def _from_data(cls, data: dict[str, Any]) -> DNSSECEventData:
        return cls(delegation_signer_record=_object(data, "delegation_signer_record"))


@dataclass
class DomainEventData:
    """Data of a domain event."""

    auto: bool = False
    domain: dict[str, Any] | None = None
    registrant: dict[str, Any] | None = None
    delegation: Any = None

    @classmethod
    def _from_data(cls, data: dict[str, Any]) -> DomainEventData:
        return cls(
            auto=_boolean(data, "auto"),
            domain=_object(data, "domain"),
            registrant=_object(data, "registrant"),
            delegation=data.get("name_servers"),
        )


@dataclass
class EmailForwardEventData:
    """Data of an email forward event."""

    email_forward: dict[str, Any] | None = None

    @classmethod
    def _from_data(cls, data: dict[str, Any]) -> EmailForwardEventData:
        return cls(email_forward=_object(data, "email_forward"))


@dataclass
class WebhookEventData:
    """Data of a webhook event."""

    webhook: Webhook | None = None

    @classmethod
    def _from_data(cls, data: dict[str, Any]) -> WebhookEventData:
        webhook = _object(data, "webhook")
        return cls(webhook=Webhook.from_dict(webhook) if webhook is not None else None)


@dataclass
class WhoisPrivacyEventData:
    """Data of a WHOIS privacy event."""

    domain: dict[str, Any] | None = None
    whois_privacy: dict[str, Any] | None = None

    @classmethod
    def _from_data(cls, data: dict[str, Any]) -> WhoisPrivacyEventData:
        return cls(domain=_object(data, "domain"), whois_privacy=_object(data, "whois_privacy"))


@dataclass
class ZoneEventData:
    """Data of a zone event."""

    zone: Zone | None = None

    @classmethod
    def _from_data(cls, data: dict[str, Any]) -> ZoneEventData:
        zone = _object(data, "zone")
        return cls(zone=Zone.from_dict(zone) if zone is not None else None)


@dataclass
class ZoneRecordEventData:
    """Data of a zone record event."""

    zone_record: ZoneRecord | None = None

    @classmethod
    def _from_data(cls, data: dict[str, Any]) -> ZoneRecordEventData:
        record = _object(data, "zone_record")
        return cls(zone_record=ZoneRecord.from_dict(record) if record is not None else None)


EventData = Union[
    GenericEventData,
    AccountEventData,
    AccountMembershipEventData,
    CertificateEventData,
    ContactEventData,
    DNSSECEventData,
    DomainEventData,
    EmailForwardEventData,
    WebhookEventData,
    WhoisPrivacyEventData,
    ZoneEventData,
    ZoneRecordEventData,
]

_DATA_TYPES: dict[type, tuple[str, ...]] = {
    AccountEventData: ("account.billing_settings_update", "account.update"),
    AccountMembershipEventData: (
        "account.user_invitation_accept",
        "account.user_invitation_revoke",
        "account.user_invite",
        "account.user_remove",
    ),
    CertificateEventData: ("certificate.issue", "certificate.remove_private_key"),
    ContactEventData: ("contact.create", "contact.delete", "contact.update"),
    DNSSECEventData: (
        "dnssec.create",
        "dnssec.delete",
        "dnssec.rotation_complete",
        "dnssec.rotation_start",
    ),
    DomainEventData: (
        "domain.auto_renewal_disable",
        "domain.auto_renewal_enable",
        "domain.create",
        "domain.delete",
        "domain.register",
        "domain.renew",
        "domain.delegation_change",
        "domain.registrant_change",
        "domain.resolution_disable",
        "domain.resolution_enable",
        "domain.transfer",
    ),
    EmailForwardEventData: ("email_forward.create", "email_forward.delete", "email_forward.update"),
    WebhookEventData: ("webhook.create", "webhook.delete"),
    WhoisPrivacyEventData: (
        "whois_privacy.disable",
        "whois_privacy.enable",
        "whois_privacy.purchase",
        "whois_privacy.renew",
    ),
    ZoneEventData: ("zone.create", "zone.delete"),
    ZoneRecordEventData: ("zone_record.create", "zone_record.delete", "zone_record.update"),
}

_TYPE_BY_NAME: dict[str, Any] = {
    name: data_type for data_type, names in _DATA_TYPES.items() for name in names
}


def event_data_for(name: str, data: Any) -> EventData:
    """Build the data container matching the event name; unknown names give generic data."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"event data must be an object, got {type(data).__name__}")
    data_type = _TYPE_BY_NAME.get(name, GenericEventData)
    return data_type._from_data(data)


@dataclass
class Event:
    """A webhook event with its typed data and the original payload."""

    api_version: str = ""
    request_id: str = ""
    name: str = ""
    actor: Actor | None = None
    account: EventAccount | None = None
    data: Any = None
    payload: bytes = b""


def parse_event(payload: bytes | str) -> Event:
    """Decode a webhook payload into an Event; raise ValueError if it is malformed."""
    raw = payload.encode("utf-8") if isinstance(payload, str) else bytes(payload)
    document = json.loads(raw)
    if document is None:
        document = {}
    if not isinstance(document, dict):
        raise ValueError(f"event payload must be an object, got {type(document).__name__}")

    actor = _object(document, "actor")
    account = _object(document, "account")
    name = _string(document, "name")
    return Event(
        api_version=_string(document, "api_version"),
        request_id=_string(document, "request_identifier"),
        name=name,
        actor=Actor.from_dict(actor) if actor is not None else None,
        account=EventAccount.from_dict(account) if account is not None else None,
        data=event_data_for(name, document.get("data")),
        payload=raw,
    )