import httpx
import pytest

from dnsapi.core import Client, DNSimpleError
from dnsapi.vanity import VanityNameServer, VanityNameServersService, vanity_name_server_path

STAMP = "2016-07-11T09:40:19Z"

ENABLE_BODY = {
    "data": [
        {"id": n, "name": f"ns{n}.example.com", "ipv4": "127.0.0.1", "ipv6": "::1",
         "created_at": STAMP, "updated_at": STAMP}
        for n in (1, 2)
    ]
}


def _service(status, body):
    seen = []

    def answer(request):
        seen.append(request)
        return httpx.Response(status) if body is None else httpx.Response(status, json=body)

    http = httpx.Client(transport=httpx.MockTransport(answer))
    client = Client(token="token", base_url="https://api.example.com", http_client=http)
    return VanityNameServersService(client), seen


def test_vanity_name_server_path():
    assert vanity_name_server_path("1010", "example.com") == "/1010/vanity/example.com"


def test_enable_vanity_name_servers():
    service, seen = _service(200, ENABLE_BODY)
    response = service.enable_vanity_name_servers("1010", "example.com")
    assert (seen[0].method, seen[0].url.path) == ("PUT", "/v2/1010/vanity/example.com")
    assert response.data[0] == VanityNameServer(
        id=1, name="ns1.example.com", ipv4="127.0.0.1", ipv6="::1", created_at=STAMP, updated_at=STAMP
    )
    assert [server.name for server in response.data] == ["ns1.example.com", "ns2.example.com"]


def test_disable_vanity_name_servers():
    service, seen = _service(204, None)
    response = service.disable_vanity_name_servers("1010", "example.com")
    assert (seen[0].method, seen[0].url.path) == ("DELETE", "/v2/1010/vanity/example.com")
    assert response.http_response.status_code == 204
    assert response.data is None


def test_enable_error_raises():
    service, _ = _service(400, {"message": "Invalid request"})
    with pytest.raises(DNSimpleError) as info:
        service.enable_vanity_name_servers("1010", "example.com")
    assert info.value.status_code == 400