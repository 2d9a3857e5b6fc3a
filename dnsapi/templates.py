"""Templates, template records, and applying templates to domains."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any

from .core import Client, ListOptions, Response, versioned


def _decode(cls: type, data: dict[str, Any]) -> Any:
    return cls(**{f.name: data.get(f.name) or f.default for f in fields(cls)})


def _encode(obj: Any) -> dict[str, Any]:
    return {key: value for key, value in asdict(obj).items() if value}


@dataclass
class Template:
    """A DNS template."""

    id: int = 0
    sid: str = ""
    account_id: int = 0
    name: str = ""
    description: str = ""
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Template:
        """Build a template from its JSON object."""
        return _decode(cls, data)

    def to_payload(self) -> dict[str, Any]:
        """Return the request body, leaving out fields that are empty."""
        return _encode(self)


@dataclass
class TemplateRecord:
    """A DNS record belonging to a template."""

    id: int = 0
    template_id: int = 0
    name: str = ""
    content: str = ""
    ttl: int = 0
    type: str = ""
    priority: int = 0
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TemplateRecord:
        """Build a template record from its JSON object."""
        return _decode(cls, data)

    def to_payload(self) -> dict[str, Any]:
        """Return the request body; the name is always sent, even when empty."""
        return {**_encode(self), "name": self.name}


def template_path(account_id: str | int, template_identifier: str | int = "") -> str:
    path = f"/{account_id}/templates"
    return f"{path}/{template_identifier}" if template_identifier else path


def template_record_path(
    account_id: str | int, template_identifier: str | int, template_record_id: int = 0
) -> str:
    path = template_path(account_id, template_identifier) + "/records"
    return f"{path}/{template_record_id}" if template_record_id else path


def _one(raw: Response, model: type[Any]) -> Response:
    return replace(raw, data=model.from_dict(raw.data) if raw.data else None)


def _many(raw: Response, model: type[Any]) -> Response:
    return replace(raw, data=[model.from_dict(item) for item in raw.data or []])


def _bare(raw: Response) -> Response:
    return replace(raw, data=None, pagination=None)


@dataclass
class TemplatesService:
    """Calls for the template endpoints."""

    client: Client

    def list_templates(self, account_id: str | int, options: ListOptions | None = None) -> Response:
        query = options.to_query() if options else None
        return _many(self.client.get(versioned(template_path(account_id)), query), Template)

    def create_template(self, account_id: str | int, template_attributes: Template) -> Response:
        path = versioned(template_path(account_id))
        return _one(self.client.post(path, template_attributes.to_payload()), Template)

    def get_template(self, account_id: str | int, template_identifier: str | int) -> Response:
        return _one(self.client.get(versioned(template_path(account_id, template_identifier))), Template)

    def update_template(
        self,
        account_id: str | int,
        template_identifier: str | int,
        template_attributes: Template,
    ) -> Response:
        path = versioned(template_path(account_id, template_identifier))
        return _one(self.client.patch(path, template_attributes.to_payload()), Template)

    def delete_template(self, account_id: str | int, template_identifier: str | int) -> Response:
        return _bare(self.client.delete(versioned(template_path(account_id, template_identifier))))

    def apply_template(
        self,
        account_id: str | int,
        template_identifier: str | int,
        domain_identifier: str,
    ) -> Response:
        path = versioned(f"/{account_id}/domains/{domain_identifier}/templates/{template_identifier}")
        return _bare(self.client.post(path))

    def list_template_records(
        self,
        account_id: str | int,
        template_identifier: str | int,
        options: ListOptions | None = None,
    ) -> Response:
        path = versioned(template_record_path(account_id, template_identifier))
        return _many(self.client.get(path, options.to_query() if options else None), TemplateRecord)

    def create_template_record(
        self,
        account_id: str | int,
        template_identifier: str | int,
        record_attributes: TemplateRecord,
    ) -> Response:
        path = versioned(template_record_path(account_id, template_identifier))
        return _one(self.client.post(path, record_attributes.to_payload()), TemplateRecord)

    def get_template_record(
        self,
        account_id: str | int,
        template_identifier: str | int,
        template_record_id: int,
    ) -> Response:
        path = versioned(template_record_path(account_id, template_identifier, template_record_id))
        return _one(self.client.get(path), TemplateRecord)

    def delete_template_record(
        self,
        account_id: str | int,
        template_identifier: str | int,
        template_record_id: int,
    ) -> Response:
        path = versioned(template_record_path(account_id, template_identifier, template_record_id))
        return _bare(self.client.delete(path))