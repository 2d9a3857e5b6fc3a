import httpx
import pytest

from dnsapi.core import Client, DNSimpleError, ListOptions, Pagination
from dnsapi.tlds import Tld, TldExtendedAttribute, TldsService


def _service(status, body, seen):
    def handler(request):
        seen.append(request)
        return httpx.Response(status, json=body)

    http = httpx.Client(transport=httpx.MockTransport(handler))
    return TldsService(Client(token="token", base_url="https://api.example.com", http_client=http))


LIST_BODY = {
    "data": [
        {
            "tld": "ac",
            "tld_type": 2,
            "whois_privacy": False,
            "auto_renew_only": True,
            "idn": False,
            "minimum_registration": 1,
            "registration_enabled": True,
            "renewal_enabled": True,
            "transfer_enabled": False,
        },
        {
            "tld": "academy",
            "tld_type": 3,
            "whois_privacy": True,
            "auto_renew_only": False,
            "minimum_registration": 1,
            "registration_enabled": True,
            "renewal_enabled": True,
            "transfer_enabled": True,
        },
    ],
    "pagination": {"current_page": 1, "per_page": 2, "total_entries": 195, "total_pages": 98},
}


def test_list_tlds():
    seen = []
    response = _service(200, LIST_BODY, seen).list_tlds()
    assert seen[0].method == "GET"
    assert seen[0].url.path == "/v2/tlds"
    assert response.pagination == Pagination(current_page=1, per_page=2, total_pages=98, total_entries=195)
    tlds = response.data
    assert len(tlds) == 2
    assert tlds[0].tld == "ac"
    assert tlds[0].minimum_registration == 1
    assert tlds[0].registration_enabled is True
    assert tlds[0].renewal_enabled is True
    assert tlds[0].transfer_enabled is False


def test_list_tlds_with_options():
    seen = []
    _service(200, LIST_BODY, seen).list_tlds(ListOptions(page=2, per_page=20))
    assert dict(seen[0].url.params) == {"page": "2", "per_page": "20"}


def test_list_tlds_without_options_sends_no_query():
    seen = []
    _service(200, LIST_BODY, seen).list_tlds()
    assert dict(seen[0].url.params) == {}


def test_get_tld():
    seen = []
    body = {
        "data": {
            "tld": "com",
            "tld_type": 1,
            "whois_privacy": True,
            "auto_renew_only": False,
            "minimum_registration": 1,
            "registration_enabled": True,
            "renewal_enabled": True,
            "transfer_enabled": True,
        }
    }
    response = _service(200, body, seen).get_tld("com")
    assert seen[0].url.path == "/v2/tlds/com"
    assert seen[0].method == "GET"
    assert response.data.tld == "com"
    assert response.data.minimum_registration == 1
    assert response.data == Tld(
        tld="com",
        tld_type=1,
        whois_privacy=True,
        auto_renew_only=False,
        minimum_registration=1,
        registration_enabled=True,
        renewal_enabled=True,
        transfer_enabled=True,
    )


def test_get_tld_extended_attributes():
    seen = []
    body = {
        "data": [
            {
                "name": "uk_legal_type",
                "description": "Legal type of registrant contact",
                "required": False,
                "options": [
                    {"title": "UK Individual", "value": "IND", "description": "UK Individual"},
                    {"title": "Non-UK Individual", "value": "FIND", "description": "Non-UK Individual"},
                ],
            },
            {"name": "uk_company_number", "description": "Company number", "required": False, "options": []},
            {"name": "uk_trading_name", "description": "Trading name", "required": False, "options": []},
            {"name": "uk_locality", "description": "Locality", "required": False, "options": []},
        ]
    }
    response = _service(200, body, seen).get_tld_extended_attributes("com")
    assert seen[0].url.path == "/v2/tlds/com/extended_attributes"
    attributes = response.data
    assert len(attributes) == 4
    assert attributes[0].name == "uk_legal_type"
    assert [option.value for option in attributes[0].options] == ["IND", "FIND"]
    assert attributes[1].options == []


def test_extended_attribute_from_dict_defaults():
    attribute = TldExtendedAttribute.from_dict({"name": "x"})
    assert attribute == TldExtendedAttribute(name="x", description="", required=False, options=[])


def test_get_tld_error():
    seen = []
    with pytest.raises(DNSimpleError) as info:
        _service(404, {"message": "TLD `foo` not found"}, seen).get_tld("foo")
    assert info.value.status_code == 404
    assert info.value.message == "TLD `foo` not found"