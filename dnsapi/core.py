"""HTTP client, shared response types and errors for the DNSimple v2 API."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

import httpx

API_VERSION = "v2"
DEFAULT_BASE_URL = "https://api.dnsimple.com"
USER_AGENT = "dnsapi/0.1.0"


def versioned(path: str) -> str:
    """Prefix an API path with the API version segment."""
    return f"/{API_VERSION}/{path.lstrip('/')}"


@dataclass
class Pagination:
    """Pagination details attached to a collection response."""

    current_page: int = 0
    per_page: int = 0
    total_entries: int = 0
    total_pages: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Pagination:
        return cls(
            current_page=data.get("current_page") or 0,
            per_page=data.get("per_page") or 0,
            total_entries=data.get("total_entries") or 0,
            total_pages=data.get("total_pages") or 0,
        )


@dataclass
class ListOptions:
    """Common paging and sorting options for list calls."""

    page: int | None = None
    per_page: int | None = None
    sort: str | None = None

    def to_query(self) -> dict[str, str]:
        """Return the query parameters for the options that are set."""
        pairs = {"page": self.page, "per_page": self.per_page, "sort": self.sort}
        return {key: str(value) for key, value in pairs.items() if value is not None}


@dataclass
class Response:
    """The outcome of an API call: decoded data, pagination and the raw HTTP response."""

    http_response: httpx.Response | None = None
    data: Any = None
    pagination: Pagination | None = None

    def _header_int(self, name: str) -> int:
        if self.http_response is None:
            return 0
        try:
            return int(self.http_response.headers.get(name, "0"))
        except ValueError:
            return 0

    @property
    def rate_limit(self) -> int:
        return self._header_int("X-RateLimit-Limit")

    @property
    def rate_limit_remaining(self) -> int:
        return self._header_int("X-RateLimit-Remaining")

    @property
    def rate_limit_reset(self) -> datetime:
        return datetime.fromtimestamp(self._header_int("X-RateLimit-Reset"), timezone.utc)


class DNSimpleError(Exception):
    """Raised when the API answers with a status outside the 2xx range."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        errors: Any = None,
        http_response: httpx.Response | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors
        self.http_response = http_response


@dataclass
class User:
    """A DNSimple user."""

    id: int = 0
    email: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> User:
        return cls(id=data.get("id") or 0, email=data.get("email") or "")


class Client:
    """A synchronous client for the DNSimple v2 API."""

    def __init__(
        self,
        token: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.user_agent = USER_AGENT
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else httpx.Client()

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        payload: Any = None,
    ) -> Response:
        url = self.base_url + path
        kwargs: dict[str, Any] = {"headers": self._headers()}
        if params:
            kwargs["params"] = params
        if payload is not None:
            kwargs["json"] = payload
        http_response = self._http.request(method, url, **kwargs)

        body: Any = None
        if http_response.content:
            try:
                body = http_response.json()
            except ValueError:
                body = None

        if not 200 <= http_response.status_code <= 299:
            message = None
            errors = None
            if isinstance(body, dict):
                message = body.get("message")
                errors = body.get("errors")
            if not message:
                message = f"{method} {url}: {http_response.status_code}"
            raise DNSimpleError(
                message,
                status_code=http_response.status_code,
                errors=errors,
                http_response=http_response,
            )

        data = None
        pagination = None
        if isinstance(body, dict):
            data = body.get("data")
            if body.get("pagination"):
                pagination = Pagination.from_dict(body["pagination"])
        return Response(http_response=http_response, data=data, pagination=pagination)

    def get(self, path: str, params: dict[str, str] | None = None) -> Response:
        return self._request("GET", path, params=params)

    def post(self, path: str, payload: Any = None) -> Response:
        return self._request("POST", path, payload=payload)

    def put(self, path: str, payload: Any = None) -> Response:
        return self._request("PUT", path, payload=payload)

    def patch(self, path: str, payload: Any = None) -> Response:
        return self._request("PATCH", path, payload=payload)

    def delete(self, path: str) -> Response:
        return self._request("DELETE", path)

    def close(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()