# dnsapi

A Python client for part of the DNSimple v2 HTTP API. It covers zones and
zone records, zone distribution checks, record templates, one-click
services, TLDs, vanity name servers and webhooks. It also parses the event
payloads that DNSimple sends to webhook endpoints.

## Installation

```
pip install dnsapi
```

The only runtime dependency is `httpx`.

## Usage

Create a `dnsapi.core.Client` with an API token, then pass it to the service
you need. The client is a context manager. When the block ends, it closes the
HTTP connection it created. If you pass your own `httpx.Client` as
`http_client`, that client is left open. Use `base_url` to point the client
at another API host, such as a sandbox.

```python
from dnsapi.core import Client
from dnsapi.zones import ZonesService, ZoneRecordAttributes, ZoneRecordListOptions

with Client(token="token") as client:
    zones = ZonesService(client)

    response = zones.list_zones("1010", None)
    for zone in response.data:
        print(zone.id, zone.name)

    records = zones.list_records(
        "1010",
        "example.com",
        ZoneRecordListOptions(type="A", page=1, per_page=20),
    )
    print(records.pagination)

    created = zones.create_record(
        "1010",
        "example.com",
        ZoneRecordAttributes(name="www", type="A", content="127.0.0.1"),
    )
    print(created.data.id)
```

### Responses and errors

Every call returns a `dnsapi.core.Response` with these attributes:

- `data`: a model for single-object calls, or a list of models for list calls. Delete, apply and unapply calls leave it as `None`.
- `pagination`: a `Pagination`, set when the API sends paging details.
- `http_response`: the underlying `httpx.Response`.

The `rate_limit`, `rate_limit_remaining` and `rate_limit_reset` properties
read the `X-RateLimit-*` headers.

When the API answers with a status outside the 2xx range, the call raises
`dnsapi.core.DNSimpleError`. The error carries `message`, `status_code`,
`errors` and `http_response`.

### Options and record attributes

- Paging options: `ListOptions` has `page`, `per_page` and `sort`.
- Zone filters: `ZoneListOptions` adds `name_like`.
- Record filters: `ZoneRecordListOptions` adds `name`, `name_like` and `type`.
- Record attributes: in `ZoneRecordAttributes`, a `name` of `None` is not sent at all. An empty string is sent as is, and addresses the zone apex.

### Other services

- `dnsapi.templates.TemplatesService`: list, create, get, update and delete templates. It also lists, creates, gets and deletes template records, and applies a template to a domain.
- `dnsapi.services.ServicesService`: list and get one-click services, list the services applied to a domain, and apply or unapply a service. Use `DomainServiceSettings` for the settings of an apply call.
- `dnsapi.tlds.TldsService`: list TLDs, get one TLD, and read a TLD's extended attributes.
- `dnsapi.vanity.VanityNameServersService`: enable or disable vanity name servers for a domain.
- `dnsapi.webhooks.WebhooksService`: list, create, get and delete webhooks. `list_webhooks` accepts an options argument but sends no paging parameters.

The `dnsapi.zones.ZonesService` calls not shown above are:

- `get_zone`, `get_zone_file`, `get_record`, `update_record` and `delete_record`.
- `check_zone_distribution` and `check_zone_record_distribution`.

### Parsing webhook events

```python
from dnsapi.events import parse_event, WebhookEventData

event = parse_event(request_body)  # bytes or str
print(event.name, event.account.display)
if isinstance(event.data, WebhookEventData):
    print(event.data.webhook.url)
```

`parse_event` chooses the data class from the event name, through
`event_data_for`. Names it does not know produce `GenericEventData`, a dict
holding the raw `data` object. Malformed payloads raise `ValueError`. The
original payload is kept as `event.payload`, in bytes.

## What is not covered

This package has no command-line tool. It has no calls for these parts of
the API:

- domains
- registrar operations
- accounts and identity
- contacts
- certificates
- DNSSEC
- email forwards
- WHOIS privacy

In webhook events, the objects for those parts are kept as plain
dictionaries, not as typed models.

## Running the tests

```
pip install -e ".[test]"
pytest
```