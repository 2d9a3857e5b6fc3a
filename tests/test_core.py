import json
from datetime import datetime, timezone

import httpx
import pytest

from dnsapi.core import (
    Client,
    DNSimpleError,
    ListOptions,
    Pagination,
    Response,
    User,
    versioned,
)


def _client(status=200, body=None, headers=None):
    """Build a client whose every request gets the same canned answer."""
    seen = []

    def answer(request):
        seen.append(request)
        extra = {} if body is None else {"json": body}
        return httpx.Response(status, headers=headers or {}, **extra)

    http = httpx.Client(transport=httpx.MockTransport(answer))
    return Client(token="token", base_url="https://api.example.com", http_client=http), seen


@pytest.mark.parametrize(
    "path, expected",
    [("/services", "/v2/services"), ("/1010/templates", "/v2/1010/templates")],
)
def test_versioned_prefixes_version(path, expected):
    assert versioned(path) == expected


@pytest.mark.parametrize(
    "options, expected",
    [
        (ListOptions(page=2, per_page=20), {"page": "2", "per_page": "20"}),
        (ListOptions(page=2, sort="name,expiration:desc"), {"page": "2", "sort": "name,expiration:desc"}),
        (ListOptions(), {}),
    ],
)
def test_list_options_to_query(options, expected):
    assert options.to_query() == expected


def test_pagination_from_dict():
    data = {"current_page": 1, "per_page": 30, "total_entries": 2, "total_pages": 1}
    assert Pagination.from_dict(data) == Pagination(
        current_page=1, per_page=30, total_entries=2, total_pages=1
    )


def test_user_from_dict():
    assert User.from_dict({"id": 1, "email": "user@example.com"}) == User(id=1, email="user@example.com")
    assert User.from_dict({"id": None, "email": None}) == User()


def test_get_sends_headers_and_decodes():
    page = {"current_page": 1, "per_page": 30, "total_entries": 1, "total_pages": 1}
    client, seen = _client(body={"data": [{"id": 1}], "pagination": page})
    resp = client.get("/v2/things", {"page": "2"})
    assert resp.data == [{"id": 1}]
    assert resp.pagination == Pagination(1, 30, 1, 1)
    request = seen[0]
    assert request.url.path == "/v2/things"
    assert request.headers["Authorization"] == "Bearer token"
    assert request.headers["Accept"] == "application/json"
    assert request.headers["User-Agent"] == client.user_agent
    assert dict(request.url.params) == {"page": "2"}


@pytest.mark.parametrize("method", ["post", "put", "patch"])
def test_writes_send_json_body(method):
    client, seen = _client(status=201, body={"data": {"name": "Beta"}})
    resp = getattr(client, method)("/v2/things", {"name": "Beta"})
    assert resp.data == {"name": "Beta"}
    assert seen[0].method == method.upper()
    assert json.loads(seen[0].content) == {"name": "Beta"}


def test_delete_without_body():
    client, seen = _client(status=204)
    resp = client.delete("/v2/things/1")
    assert seen[0].method == "DELETE"
    assert resp.data is None
    assert resp.pagination is None
    assert resp.http_response.status_code == 204


def test_error_carries_message_and_status():
    client, _ = _client(status=400, body={"message": "Validation failed", "errors": {"name": ["bad"]}})
    with pytest.raises(DNSimpleError) as info:
        client.get("/v2/broken")
    assert info.value.message == "Validation failed"
    assert info.value.status_code == 400
    assert info.value.errors == {"name": ["bad"]}


def test_error_without_body_uses_status():
    client, _ = _client(status=500)
    with pytest.raises(DNSimpleError) as info:
        client.get("/v2/broken")
    assert info.value.status_code == 500
    assert "500" in str(info.value)


def test_rate_limit_headers():
    limits = {"X-RateLimit-Limit": "2400", "X-RateLimit-Remaining": "2399", "X-RateLimit-Reset": "0"}
    client, _ = _client(body={"data": []}, headers=limits)
    resp = client.get("/v2/things")
    assert resp.rate_limit == 2400
    assert resp.rate_limit_remaining == 2399
    assert resp.rate_limit_reset == datetime.fromtimestamp(0, timezone.utc)


def test_empty_response_rate_limits_are_zero():
    resp = Response()
    assert (resp.rate_limit, resp.rate_limit_remaining) == (0, 0)


def test_context_manager_closes_owned_client():
    with Client(token="token") as client:
        pass
    with pytest.raises(RuntimeError):
        client.get("/v2/things")