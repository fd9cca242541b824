#!/usr/bin/env python3
"""
Tests for the DNS providers and the DNS client facade.
"""

import json
import unittest

import httpx

from cf_dns.core.exceptions import ConfigError, ProviderError
from cf_dns.providers.base_provider import DNSRecord
from cf_dns.providers.cloudflare_provider import CloudflareProvider
from cf_dns.providers.dns_client import DNSClient
from cf_dns.providers.mock_provider import MockDNSProvider


def _record(record_id, record_type="A", name="www.example.com", content="1.2.3.4"):
    return {
        "id": record_id,
        "type": record_type,
        "name": name,
        "content": content,
        "ttl": 1,
        "proxied": False,
    }


def _ok(result, **extra):
    return httpx.Response(200, json={"success": True, "errors": [], "result": result, **extra})


class TestCloudflareProvider(unittest.TestCase):
    """Test the Cloudflare provider against a mocked transport."""

    def setUp(self):
        self.requests = []
        self.responses = []

    def _handler(self, request):
        self.requests.append(request)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def _provider(self):
        return CloudflareProvider(
            "admin@example.com",
            "secret-key",
            {"base_url": "https://cf.test/client/v4"},
            transport=httpx.MockTransport(self._handler),
        )

    def test_auth_headers(self):
        """Test the auth headers are sent."""
        self.responses.append(_ok([{"id": "zone-1", "name": "example.com"}]))
        self._provider().zone_id_by_name("example.com")

        request = self.requests[0]
        self.assertEqual(request.headers["X-Auth-Email"], "admin@example.com")
        self.assertEqual(request.headers["X-Auth-Key"], "secret-key")

    def test_zone_id_by_name(self):
        """Test zone lookup by name."""
        self.responses.append(_ok([{"id": "zone-1", "name": "example.com"}]))
        zone_id = self._provider().zone_id_by_name("example.com")

        self.assertEqual(zone_id, "zone-1")
        self.assertEqual(self.requests[0].url.path, "/client/v4/zones")
        self.assertEqual(self.requests[0].url.params["name"], "example.com")

    def test_zone_not_found(self):
        """Test an empty zone lookup result."""
        self.responses.append(_ok([]))
        with self.assertRaises(ProviderError) as ctx:
            self._provider().zone_id_by_name("missing.com")
        self.assertEqual(str(ctx.exception), "Zone could not be found")

    def test_list_records_paginates(self):
        """Test list follows every result page."""
        self.responses.append(
            _ok([_record("r1")], result_info={"page": 1, "total_pages": 2})
        )
        self.responses.append(
            _ok([_record("r2", "TXT", content="hi")], result_info={"page": 2, "total_pages": 2})
        )

        records = self._provider().list_records("zone-1", record_type="A", name="www")

        self.assertEqual([r.id for r in records], ["r1", "r2"])
        self.assertIsInstance(records[0], DNSRecord)
        self.assertEqual(records[1].content, "hi")
        self.assertEqual(
            [r.url.params["page"] for r in self.requests], ["1", "2"]
        )
        self.assertEqual(self.requests[0].url.path, "/client/v4/zones/zone-1/dns_records")
        self.assertEqual(self.requests[0].url.params["type"], "A")
        self.assertEqual(self.requests[0].url.params["name"], "www")

    def test_list_records_without_filters(self):
        """Test list without type or name filters."""
        self.responses.append(_ok([]))
        self.assertEqual(self._provider().list_records("zone-1"), [])
        self.assertNotIn("type", self.requests[0].url.params)
        self.assertNotIn("name", self.requests[0].url.params)

    def test_create_record(self):
        """Test the create request payload."""
        self.responses.append(_ok(_record("r1", "TXT", "foo", "a b c")))
        record = self._provider().create_record("zone-1", "TXT", "foo", "a b c")

        request = self.requests[0]
        self.assertEqual(request.method, "POST")
        self.assertEqual(
            json.loads(request.content),
            {"type": "TXT", "name": "foo", "content": "a b c", "ttl": 1, "proxied": False},
        )
        self.assertEqual(record.id, "r1")

    def test_update_record(self):
        """Test the update request."""
        self.responses.append(_ok(_record("r1", content="5.6.7.8")))
        self._provider().update_record(
            "zone-1", "r1", "A", "www.example.com", "5.6.7.8", ttl=300
        )

        request = self.requests[0]
        self.assertEqual(request.method, "PUT")
        self.assertEqual(request.url.path, "/client/v4/zones/zone-1/dns_records/r1")
        payload = json.loads(request.content)
        self.assertEqual(payload["ttl"], 300)
        self.assertNotIn("proxied", payload)

    def test_delete_record(self):
        """Test the delete request."""
        self.responses.append(_ok({"id": "r1"}))
        self._provider().delete_record("zone-1", "r1")

        self.assertEqual(self.requests[0].method, "DELETE")
        self.assertEqual(self.requests[0].url.path, "/client/v4/zones/zone-1/dns_records/r1")

    def test_api_error_text(self):
        """Test API errors are formatted with their codes."""
        self.responses.append(
            httpx.Response(
                400,
                json={
                    "success": False,
                    "errors": [{"code": 81057, "message": "Record already exists."}],
                    "result": None,
                },
            )
        )
        with self.assertRaises(ProviderError) as ctx:
            self._provider().create_record("zone-1", "A", "www", "1.2.3.4")
        self.assertEqual(
            str(ctx.exception), "HTTP status 400: Record already exists. (81057)"
        )

    def test_non_json_response(self):
        """Test a non-JSON response body."""
        self.responses.append(httpx.Response(502, text="Bad Gateway"))
        with self.assertRaises(ProviderError) as ctx:
            self._provider().list_records("zone-1")
        self.assertEqual(str(ctx.exception), "HTTP status 502: Bad Gateway")

    def test_non_object_json_response(self):
        """Test a JSON body that is not an object is a provider error."""
        self.responses.append(httpx.Response(502, json=["bad gateway"]))
        with self.assertRaises(ProviderError) as ctx:
            self._provider().list_records("zone-1")
        self.assertEqual(str(ctx.exception), 'HTTP status 502: ["bad gateway"]')

    def test_non_object_json_on_success_status(self):
        """Test a bare JSON string with status 200 is a provider error."""
        self.responses.append(httpx.Response(200, json="ok"))
        with self.assertRaises(ProviderError) as ctx:
            self._provider().zone_id_by_name("example.com")
        self.assertEqual(str(ctx.exception), 'HTTP status 200: "ok"')

    def test_malformed_errors_list(self):
        """Test an error envelope whose errors field is not a list."""
        self.responses.append(
            httpx.Response(403, json={"success": False, "errors": 9109})
        )
        with self.assertRaises(ProviderError) as ctx:
            self._provider().zone_id_by_name("example.com")
        self.assertEqual(str(ctx.exception), "HTTP status 403")

    def test_zone_without_id(self):
        """Test a zone entry missing its id is a provider error."""
        for result in [[{"name": "example.com"}], ["example.com"], {"id": "zone-1"}]:
            with self.subTest(result=result):
                self.responses.append(_ok(result))
                with self.assertRaises(ProviderError):
                    self._provider().zone_id_by_name("example.com")

    def test_malformed_record_in_list(self):
        """Test a record entry missing required fields is a provider error."""
        for result in [[{"type": "A", "name": "www"}], ["www"], 42]:
            with self.subTest(result=result):
                self.responses.append(_ok(result))
                with self.assertRaises(ProviderError) as ctx:
                    self._provider().list_records("zone-1")
                self.assertIn("Malformed DNS record", str(ctx.exception))

    def test_malformed_paging_info(self):
        """Test unusable result_info is a provider error."""
        self.responses.append(_ok([_record("r1")], result_info=["page", 1]))
        with self.assertRaises(ProviderError):
            self._provider().list_records("zone-1")

    def test_create_without_result(self):
        """Test a successful create with no result record is a provider error."""
        self.responses.append(_ok(None))
        with self.assertRaises(ProviderError):
            self._provider().create_record("zone-1", "A", "www", "1.2.3.4")

    def test_update_with_malformed_result(self):
        """Test a successful update returning a record without id."""
        self.responses.append(_ok({"type": "A", "name": "www", "content": "5.6.7.8"}))
        with self.assertRaises(ProviderError):
            self._provider().update_record("zone-1", "r1", "A", "www", "5.6.7.8")

    def test_transport_error(self):
        """Test a connection failure."""
        self.responses.append(httpx.ConnectError("connection refused"))
        with self.assertRaises(ProviderError) as ctx:
            self._provider().zone_id_by_name("example.com")
        self.assertIn("connection refused", str(ctx.exception))


class TestMockDNSProvider(unittest.TestCase):
    """Test the mock DNS provider."""

    def setUp(self):
        self.provider = MockDNSProvider()
        self.zone_id = self.provider.zone_id_by_name("example.com")

    def test_zone_ids_are_stable(self):
        """Test zone ids are stable per name."""
        self.assertEqual(self.provider.zone_id_by_name("example.com"), self.zone_id)
        self.assertNotEqual(self.provider.zone_id_by_name("other.com"), self.zone_id)

    def test_known_zones(self):
        """Test the configured zone list."""
        provider = MockDNSProvider({"zones": ["example.com"]})
        provider.zone_id_by_name("example.com")
        with self.assertRaises(ProviderError):
            provider.zone_id_by_name("other.com")

    def test_create_and_filter(self):
        """Test creating records and filtering them."""
        self.provider.create_record(self.zone_id, "A", "www", "1.2.3.4")
        self.provider.create_record(self.zone_id, "TXT", "www", "hello")

        self.assertEqual(len(self.provider.list_records(self.zone_id)), 2)
        self.assertEqual(len(self.provider.list_records(self.zone_id, "TXT")), 1)
        self.assertEqual(len(self.provider.list_records(self.zone_id, "A", "www")), 1)
        self.assertEqual(self.provider.list_records(self.zone_id, "A", "mail"), [])

    def test_returned_records_are_copies(self):
        """Test returned records do not alias the store."""
        self.provider.create_record(self.zone_id, "A", "www", "1.2.3.4")
        self.provider.list_records(self.zone_id)[0].content = "changed"
        self.assertEqual(self.provider.list_records(self.zone_id)[0].content, "1.2.3.4")

    def test_update_and_delete(self):
        """Test updating then deleting a record."""
        record = self.provider.create_record(self.zone_id, "A", "www", "1.2.3.4")
        self.provider.update_record(self.zone_id, record.id, "A", "www", "5.6.7.8")
        self.assertEqual(self.provider.list_records(self.zone_id)[0].content, "5.6.7.8")

        self.provider.delete_record(self.zone_id, record.id)
        self.assertEqual(self.provider.list_records(self.zone_id), [])

        with self.assertRaises(ProviderError):
            self.provider.delete_record(self.zone_id, record.id)

    def test_unknown_zone_id(self):
        """Test an unknown zone id."""
        with self.assertRaises(ProviderError):
            self.provider.list_records("nope")


class TestDNSClient(unittest.TestCase):
    """Test provider selection."""

    def test_cloudflare_is_default(self):
        """Test Cloudflare is the default provider."""
        client = DNSClient({}, email="a@example.com", api_key="k")
        self.assertIsInstance(client.provider, CloudflareProvider)
        client.close()

    def test_mock_provider(self):
        """Test selecting the mock provider."""
        client = DNSClient({"default_provider": "mock", "dns_providers": {"mock": {}}})
        self.assertIsInstance(client.provider, MockDNSProvider)

    def test_unknown_provider(self):
        """Test an unknown provider name is a configuration error."""
        with self.assertRaises(ConfigError) as ctx:
            DNSClient({"default_provider": "route53"})
        self.assertEqual(str(ctx.exception), "Unknown DNS provider 'route53'")

    def test_delegates_to_provider(self):
        """Test the client delegates to its provider."""
        client = DNSClient({"default_provider": "mock"})
        zone_id = client.zone_id_by_name("example.com")
        client.create_record(zone_id, "A", "www", "1.2.3.4")
        self.assertEqual(len(client.list_records(zone_id, "A", "www")), 1)


if __name__ == "__main__":
    unittest.main()
