"""
DNS Client - Unified interface for DNS provider APIs

This module provides a common interface over the configured DNS provider,
currently Cloudflare or the in-memory mock provider.
"""

import logging
from typing import Dict, List, Optional

from .base_provider import AUTOMATIC_TTL, DNSProvider, DNSRecord
from ..core.exceptions import ConfigError
from .cloudflare_provider import CloudflareProvider
from .mock_provider import MockDNSProvider

logger = logging.getLogger(__name__)

PROVIDERS = ("cloudflare", "mock")


class DNSClient:
    """Unified DNS client that supports multiple providers."""

    def __init__(self, config: Dict, email: str = "", api_key: str = ""):
        """Initialize DNS client with configuration and credentials."""
        self.config = config
        self.email = email
        self.api_key = api_key
        self.provider = self._get_provider()

    def _get_provider(self) -> DNSProvider:
        """Get DNS provider based on configuration.

        Raises:
            ConfigError: The configured provider is not one of PROVIDERS
        """
        provider_name = self.config.get("default_provider", "cloudflare")
        provider_config = self.config.get("dns_providers", {}).get(provider_name) or {}

        if provider_name == "cloudflare":
            return CloudflareProvider(self.email, self.api_key, provider_config)
        elif provider_name == "mock":
            return MockDNSProvider(provider_config)
        else:
            raise ConfigError(f"Unknown DNS provider '{provider_name}'")

    def zone_id_by_name(self, zone_name: str) -> str:
        """Resolve a zone name to its identifier."""
        return self.provider.zone_id_by_name(zone_name)

    def list_records(
        self, zone_id: str, record_type: str = "", name: str = ""
    ) -> List[DNSRecord]:
        """List DNS records in a zone."""
        return self.provider.list_records(zone_id, record_type, name)

    def create_record(
        self,
        zone_id: str,
        record_type: str,
        name: str,
        content: str,
        ttl: int = AUTOMATIC_TTL,
        proxied: bool = False,
    ) -> DNSRecord:
        """Create a new DNS record."""
        return self.provider.create_record(
            zone_id, record_type, name, content, ttl=ttl, proxied=proxied
        )

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
        """Update an existing DNS record."""
        return self.provider.update_record(
            zone_id, record_id, record_type, name, content, ttl=ttl, proxied=proxied
        )

    def delete_record(self, zone_id: str, record_id: str) -> None:
        """Delete a DNS record."""
        self.provider.delete_record(zone_id, record_id)

    def close(self) -> None:
        self.provider.close()
