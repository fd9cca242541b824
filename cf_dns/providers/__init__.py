"""
DNS provider implementations.

This package contains the Cloudflare provider and an in-memory mock
provider behind a common client interface.
"""

from .base_provider import DNSProvider, DNSRecord
from .cloudflare_provider import CloudflareProvider
from .dns_client import DNSClient
from .mock_provider import MockDNSProvider

__all__ = [
    "CloudflareProvider",
    "DNSClient",
    "DNSProvider",
    "DNSRecord",
    "MockDNSProvider",
]
