"""
Cloudflare DNS provider implementation.

This module talks to the Cloudflare v4 REST API with httpx, authenticating
with an account email and global API key.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from .base_provider import AUTOMATIC_TTL, DNSProvider, DNSRecord
from ..core.exceptions import ProviderError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.cloudflare.com/client/v4"
DEFAULT_TIMEOUT = 10.0
PAGE_SIZE = 100


class CloudflareProvider(DNSProvider):
    """Cloudflare DNS provider using the v4 REST API."""

    def __init__(
        self,
        email: str,
        api_key: str,
        config: Optional[Dict] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize the provider and its HTTP client."""
        config = config or {}
        self.base_url = config.get("base_url", DEFAULT_BASE_URL).rstrip("/")
        self.timeout = config.get("timeout", DEFAULT_TIMEOUT)
        self._http = httpx.Client(
            base_url=self.base_url,
            headers={
                "X-Auth-Email": email,
                "X-Auth-Key": api_key,
                "Content-Type": "application/json",
            },
            timeout=self.timeout,
            transport=transport,
        )
        logger.info(f"Cloudflare provider initialized for {self.base_url}")

    def close(self) -> None:
        self._http.close()

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        """Send a request and return the decoded response envelope."""
        logger.debug(f"Cloudflare {method} {path} {kwargs.get('params', '')}")
        try:
            resp = self._http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"Cloudflare {method} {path} failed: {e}")
            raise ProviderError(str(e)) from e

        try:
            body = resp.json()
        except ValueError:
            raise ProviderError(
                f"HTTP status {resp.status_code}: {resp.text or 'empty response'}"
            )

        if not isinstance(body, dict):
            raise ProviderError(f"HTTP status {resp.status_code}: {resp.text}")
        if resp.status_code >= 400 or not body.get("success", False):
            raise ProviderError(self._error_text(resp.status_code, body))
        return body

    @staticmethod
    def _error_text(status_code: int, body: Dict[str, Any]) -> str:
        messages = []
        errors = body.get("errors")
        for error in errors if isinstance(errors, list) else []:
            if not isinstance(error, dict):
                continue
            message = error.get("message", "")
            if "code" in error:
                message = f"{message} ({error['code']})"
            messages.append(message)

        if messages:
            return f"HTTP status {status_code}: " + ", ".join(messages)
        return f"HTTP status {status_code}"

    @staticmethod
    def _decode_records(results) -> List[DNSRecord]:
        try:
            return [DNSRecord.from_api(r) for r in results]
        except (AttributeError, KeyError, TypeError) as e:
            raise ProviderError(f"Malformed DNS record in response: {e!r}") from e

    def zone_id_by_name(self, zone_name: str) -> str:
        body = self._request("GET", "/zones", params={"name": zone_name})
        zones = body.get("result") or []
        if not zones:
            raise ProviderError("Zone could not be found")
        try:
            zone_id = zones[0]["id"]
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderError(f"Malformed zone in response: {e!r}") from e
        logger.info(f"Resolved zone {zone_name} to {zone_id}")
        return zone_id

    def list_records(
        self, zone_id: str, record_type: str = "", name: str = ""
    ) -> List[DNSRecord]:
        params: Dict[str, Any] = {"per_page": PAGE_SIZE}
        if record_type:
            params["type"] = record_type
        if name:
            params["name"] = name

        records = []
        page = 1
        while True:
            params["page"] = page
            body = self._request("GET", f"/zones/{zone_id}/dns_records", params=params)
            records.extend(self._decode_records(body.get("result") or []))

            try:
                total_pages = int((body.get("result_info") or {}).get("total_pages", 1))
            except (AttributeError, TypeError, ValueError) as e:
                raise ProviderError(f"Malformed paging info in response: {e!r}") from e
            if page >= total_pages:
                break
            page += 1

        logger.info(f"Retrieved {len(records)} records from zone {zone_id}")
        return records

    def create_record(
        self,
        zone_id: str,
        record_type: str,
        name: str,
        content: str,
        ttl: int = AUTOMATIC_TTL,
        proxied: bool = False,
    ) -> DNSRecord:
        payload = {
            "type": record_type,
            "name": name,
            "content": content,
            "ttl": ttl,
            "proxied": proxied,
        }
        body = self._request("POST", f"/zones/{zone_id}/dns_records", json=payload)
        logger.info(f"Created {record_type} record {name} -> {content}")
        return self._decode_records([body.get("result")])[0]

    def update_record(
        self,
        zone_id: str,
        record_id: str,
        record_type: str,
        name: str,
        content: str,
        ttl: int = AUTOMATIC_TTL,
        proxied: Optional[bool] = None,
    ) -> DNSRecord:
        payload: Dict[str, Any] = {
            "type": record_type,
            "name": name,
            "content": content,
            "ttl": ttl,
        }
        if proxied is not None:
            payload["proxied"] = proxied
        body = self._request(
            "PUT", f"/zones/{zone_id}/dns_records/{record_id}", json=payload
        )
        logger.info(f"Updated {record_type} record {name} -> {content}")
        return self._decode_records([body.get("result")])[0]

    def delete_record(self, zone_id: str, record_id: str) -> None:
        self._request("DELETE", f"/zones/{zone_id}/dns_records/{record_id}")
        logger.info(f"Deleted record {record_id} from zone {zone_id}")
