"""Account webhooks: listing, creating, fetching and deleting them."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from .core import Client, ListOptions, Response, versioned


@dataclass
class Webhook:
    """A webhook registered on an account."""

    id: int = 0
    url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Webhook:
        return cls(id=data.get("id") or 0, url=data.get("url") or "")

    def to_payload(self) -> dict[str, Any]:
        """Return the request body, leaving out fields that are empty."""
        payload: dict[str, Any] = {}
        if self.id:
            payload["id"] = self.id
        if self.url:
            payload["url"] = self.url
        return payload


def webhook_path(account_id: str | int, webhook_id: int = 0) -> str:
    path = f"/{account_id}/webhooks"
    if webhook_id:
        path = f"{path}/{webhook_id}"
    return path


class WebhooksService:
    """Calls for the webhook endpoints."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def list_webhooks(self, account_id: str | int, options: ListOptions | None = None) -> Response:
        """List the webhooks of an account; the endpoint takes no paging options."""
        raw = self.client.get(versioned(webhook_path(account_id)))
        return replace(raw, data=[Webhook.from_dict(item) for item in raw.data or []])

    def create_webhook(self, account_id: str | int, webhook_attributes: Webhook) -> Response:
        raw = self.client.post(versioned(webhook_path(account_id)), webhook_attributes.to_payload())
        return replace(raw, data=Webhook.from_dict(raw.data) if raw.data else None)

    def get_webhook(self, account_id: str | int, webhook_id: int) -> Response:
        raw = self.client.get(versioned(webhook_path(account_id, webhook_id)))
        return replace(raw, data=Webhook.from_dict(raw.data) if raw.data else None)

    def delete_webhook(self, account_id: str | int, webhook_id: int) -> Response:
        raw = self.client.delete(versioned(webhook_path(account_id, webhook_id)))
        return replace(raw, data=None, pagination=None)