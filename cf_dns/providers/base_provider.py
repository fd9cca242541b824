"""
Base DNS provider interface.

This module defines the record type and the abstract base class that all
DNS providers must implement.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

# Cloudflare treats a TTL of 1 as "automatic".
AUTOMATIC_TTL = 1


@dataclass
class DNSRecord:
    """A DNS record as returned by a provider."""

    id: str
    type: str
    name: str
    content: str
    ttl: int = AUTOMATIC_TTL
    proxied: bool = False

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "DNSRecord":
        return cls(
            id=data["id"],
            type=data["type"],
            name=data["name"],
            content=data.get("content", ""),
            ttl=data.get("ttl", AUTOMATIC_TTL),
            proxied=bool(data.get("proxied", False)),
        )


class DNSProvider(ABC):
    """Abstract base class for DNS providers."""

    @abstractmethod
    def zone_id_by_name(self, zone_name: str) -> str:
        """Resolve a zone name to the provider's zone identifier."""
        pass

    @abstractmethod
    def list_records(
        self, zone_id: str, record_type: str = "", name: str = ""
    ) -> List[DNSRecord]:
        """List records in a zone, optionally filtered by type and name."""
        pass

    @abstractmethod
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
        pass

    @abstractmethod
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
        pass

    @abstractmethod
    def delete_record(self, zone_id: str, record_id: str) -> None:
        """Delete a DNS record."""
        pass

    def close(self) -> None:
        """Release any resources held by the provider."""
